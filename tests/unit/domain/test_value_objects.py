"""Tests for catalog value objects and the exception hierarchy."""
import pytest
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.domain.catalog.value_objects import (
    ExampleDescriptor,
    ExampleOutput,
    PatternCategory,
)
from pattern_catalog.domain.core.exceptions import (
    DomainException,
    ExecutionError,
    InvalidStateError,
    InvalidStateTransitionError,
    PatternNotFoundError,
    RegistrationConflictError,
    ResourceNotFoundError,
    ValidationError,
)
from pattern_catalog.patterns.creational.builder import Hamburger


def _noop(console, options):
    return None


class TestPatternCategory:
    """Test category parsing."""

    def test_parse_accepts_enum_member(self):
        assert PatternCategory.parse(PatternCategory.STRUCTURAL) is PatternCategory.STRUCTURAL

    def test_parse_accepts_value_case_insensitively(self):
        assert PatternCategory.parse("Creational") is PatternCategory.CREATIONAL
        assert PatternCategory.parse("behavioral") is PatternCategory.BEHAVIORAL

    def test_parse_rejects_unknown_category(self):
        with pytest.raises(ValidationError) as exc:
            PatternCategory.parse("Architectural")
        assert "Creational" in exc.value.details["allowed"]


class TestExampleDescriptor:
    """Test descriptor construction and immutability."""

    def test_category_coerced_from_string(self):
        descriptor = ExampleDescriptor(name="Builder", category="Creational", run=_noop)
        assert descriptor.category is PatternCategory.CREATIONAL

    def test_descriptor_is_immutable(self):
        descriptor = ExampleDescriptor(name="Builder", category="Creational", run=_noop)
        with pytest.raises(PydanticValidationError):
            descriptor.name = "Other"

    def test_invalid_name_rejected(self):
        with pytest.raises(PydanticValidationError):
            ExampleDescriptor(name="not a name", category="Creational", run=_noop)

    def test_summary_omits_callable(self):
        descriptor = ExampleDescriptor(
            name="Builder", category="Creational", description="Burgers", run=_noop
        )
        assert descriptor.summary() == {
            "name": "Builder",
            "category": "Creational",
            "description": "Burgers",
        }


class TestExampleOutput:
    """Test output serialization."""

    def test_to_dict_serializes_models(self):
        output = ExampleOutput(text="done", value=[Hamburger(patties=2)])
        data = output.to_dict()
        assert data["text"] == "done"
        assert data["value"][0]["patties"] == 2
        assert data["value"][0]["name"] == "Hamburger"

    def test_defaults(self):
        output = ExampleOutput()
        assert output.text == ""
        assert output.value is None


class TestExceptions:
    """Test exception hierarchy."""

    def test_all_errors_are_domain_exceptions(self):
        for error in (
            PatternNotFoundError("X"),
            RegistrationConflictError("X"),
            InvalidStateError("BUILT", "set_cheese"),
            ExecutionError("X", "boom"),
            ValidationError("bad"),
        ):
            assert isinstance(error, DomainException)

    def test_pattern_not_found_is_resource_not_found(self):
        error = PatternNotFoundError("Observer")
        assert isinstance(error, ResourceNotFoundError)
        assert error.resource_type == "Pattern"
        assert "Observer" in str(error)

    def test_invalid_state_error(self):
        error = InvalidStateError("BUILT", "set_cheese")
        assert isinstance(error, InvalidStateTransitionError)
        assert error.current_state == "BUILT"
        assert error.operation == "set_cheese"
        assert "set_cheese" in str(error)

    def test_execution_error_carries_pattern_name(self):
        error = ExecutionError("Builder", "boom")
        assert error.pattern_name == "Builder"
        assert str(error) == "Example 'Builder' failed: boom"
