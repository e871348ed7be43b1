"""Core domain primitives shared across the catalog."""

from .exceptions import (
    DomainException,
    ValidationError,
    ResourceNotFoundError,
    PatternNotFoundError,
    RegistrationConflictError,
    InvalidStateTransitionError,
    InvalidStateError,
    ExecutionError,
    ConfigurationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ResourceNotFoundError",
    "PatternNotFoundError",
    "RegistrationConflictError",
    "InvalidStateTransitionError",
    "InvalidStateError",
    "ExecutionError",
    "ConfigurationError",
]
