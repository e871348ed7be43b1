# src/pattern_catalog/domain/core/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class PatternNotFoundError(ResourceNotFoundError):
    """Raised when a pattern name is not registered in the catalog."""
    def __init__(self, name: str):
        super().__init__("Pattern", name)
        self.name = name


class RegistrationConflictError(DomainException):
    """Raised when a pattern name is registered twice."""
    def __init__(self, name: str):
        super().__init__(f"Pattern '{name}' is already registered")
        self.name = name


class InvalidStateTransitionError(DomainException):
    """Raised when attempting an invalid state transition."""
    def __init__(self, current_state: str, attempted_state: str):
        super().__init__(
            f"Cannot transition from {current_state} to {attempted_state}"
        )
        self.current_state = current_state
        self.attempted_state = attempted_state


class InvalidStateError(InvalidStateTransitionError):
    """Raised when an operation is not valid in the current state."""
    def __init__(self, current_state: str, operation: str):
        DomainException.__init__(
            self, f"Operation '{operation}' is not allowed in state {current_state}"
        )
        self.current_state = current_state
        self.attempted_state = current_state
        self.operation = operation


class ExecutionError(DomainException):
    """Raised when the logic behind a pattern example fails."""
    def __init__(self, pattern_name: str, message: str):
        super().__init__(f"Example '{pattern_name}' failed: {message}")
        self.pattern_name = pattern_name


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
