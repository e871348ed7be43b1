"""Tests for the Delegation pattern example."""
import gc

import pytest

from pattern_catalog.application.runner import ConsoleCapture
from pattern_catalog.domain.core.exceptions import ValidationError
from pattern_catalog.patterns.structural import delegation
from pattern_catalog.patterns.structural.delegation import (
    NO_DELEGATE,
    DelegateExample,
    DelegateProtocol,
    RecordingDelegate,
)


class TestDelegateExample:
    """Test optional, non-owning dispatch."""

    def test_no_delegate_returns_sentinel(self):
        subject = DelegateExample()

        assert subject.invoke_one() is NO_DELEGATE
        assert subject.invoke_two() is NO_DELEGATE
        assert subject.delegate is None

    def test_dispatch_to_bound_delegate(self):
        delegate = RecordingDelegate("first")
        subject = DelegateExample()
        subject.set_delegate(delegate)

        assert subject.invoke_one() == "first.method_one"
        assert subject.invoke_two() == "first.method_two"
        assert delegate.calls == ["method_one", "method_two"]

    def test_set_delegate_replaces_binding(self):
        first = RecordingDelegate("first")
        second = RecordingDelegate("second")
        subject = DelegateExample(first)
        subject.set_delegate(second)

        assert subject.invoke_one() == "second.method_one"
        assert first.calls == []

    def test_set_none_clears_binding(self):
        delegate = RecordingDelegate()
        subject = DelegateExample(delegate)
        subject.set_delegate(None)

        assert subject.invoke_one() is NO_DELEGATE
        assert delegate.calls == []

    def test_subject_does_not_keep_delegate_alive(self):
        delegate = RecordingDelegate()
        subject = DelegateExample(delegate)

        del delegate
        gc.collect()

        assert subject.delegate is None
        assert subject.invoke_two() is NO_DELEGATE

    def test_rejects_objects_without_capability_set(self):
        with pytest.raises(ValidationError):
            DelegateExample().set_delegate(object())

    def test_duck_typed_delegate(self):
        class Printer:
            def method_one(self):
                return "one"

            def method_two(self):
                return "two"

        printer = Printer()
        subject = DelegateExample(printer)

        assert isinstance(printer, DelegateProtocol)
        assert subject.invoke_two() == "two"

    def test_rejects_delegate_without_weakref_support(self):
        class Slotted:
            __slots__ = ()

            def method_one(self):
                return "one"

            def method_two(self):
                return "two"

        with pytest.raises(ValidationError):
            DelegateExample().set_delegate(Slotted())

    def test_custom_delegate(self):
        class Counter(DelegateProtocol):
            def __init__(self):
                self.count = 0

            def method_one(self):
                self.count += 1
                return self.count

            def method_two(self):
                return None

        counter = Counter()
        subject = DelegateExample(counter)
        subject.invoke_one()

        assert subject.invoke_one() == 2

    def test_sentinel(self):
        assert repr(NO_DELEGATE) == "NO_DELEGATE"
        assert not NO_DELEGATE


class TestDelegationRun:
    """Test the catalog entry point."""

    def test_run_reports_each_phase(self):
        console = ConsoleCapture()
        results = delegation.run(console, {"label": "printer"})

        assert results == {
            "unbound": ["NO_DELEGATE", "NO_DELEGATE"],
            "bound": ["printer.method_one", "printer.method_two"],
            "released": ["NO_DELEGATE", "NO_DELEGATE"],
        }
        assert console.lines[1] == "With delegate: printer.method_one, printer.method_two"
