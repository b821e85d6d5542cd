"""
Custom exceptions for the academia model.

Domain rule violations derive from UniversityError and are expected to be
handled by callers. UnhandledVariantError marks a programming defect and is
kept outside that hierarchy.
"""

from typing import Optional, Any, Dict, NoReturn


class UniversityError(Exception):
    """Base exception for all domain-rule violations."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(UniversityError):
    """Raised when a value is outside its allowed range."""
    pass


class DuplicateEntityError(UniversityError):
    """Raised when an entity is already present in a collection."""
    pass


class ResourceNotFoundError(UniversityError):
    """Raised when a requested entity is not found."""
    pass


class EnrollmentError(UniversityError):
    """Raised when a student cannot be enrolled."""
    pass


class ConfigurationError(UniversityError):
    """Raised when configuration is invalid."""
    pass


class UnhandledVariantError(Exception):
    """Raised when a value outside a closed enumeration reaches a dispatch."""

    def __init__(self, kind: str, value: Any):
        super().__init__(f"Unhandled {kind}: {value!r}")
        self.kind = kind
        self.value = value


def assert_never(value: Any, kind: str = "value") -> NoReturn:
    """Fail on a value no branch of an exhaustive dispatch accepted."""
    raise UnhandledVariantError(kind, value)
