"""
Custom exceptions for the Registrar package.
"""

from typing import Optional, Any, Dict

from .enums import FailureKind


class RegistrarException(Exception):
    """Base exception for all Registrar-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(RegistrarException):
    """Raised when data validation fails."""
    pass


class ConfigurationError(RegistrarException):
    """Raised when configuration is invalid."""
    pass


class LifecycleError(RegistrarException):
    """Raised when the live-instance bookkeeping would be corrupted."""
    pass


class GraduationError(RegistrarException):
    """Raised when a student is not eligible to graduate.

    Carries the failure record produced by the graduation checks so that
    handlers can discriminate on ``kind`` and read the kind-specific payload.
    """

    def __init__(self, failure, message: Optional[str] = None):
        super().__init__(message or str(failure), error_code=failure.kind.value,
                         details=failure.to_dict())
        self.failure = failure

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind


class LowGpaError(GraduationError):
    """Raised when the gpa is below the graduation minimum."""

    @property
    def gpa(self) -> float:
        return self.failure.value


class MissingCreditsError(GraduationError):
    """Raised when the student is short on credits."""

    @property
    def count(self) -> int:
        return self.failure.count


class MissingCourseError(GraduationError):
    """Raised when a required course was never completed."""

    @property
    def course(self):
        return self.failure.course


class GraduationMessageError(GraduationError):
    """Raised with a free-text diagnostic from a graduation rule."""

    @property
    def text(self) -> str:
        return self.failure.text


class StudentFaultError(GraduationError):
    """Raised when eligibility cannot be confirmed; carries a numeric code."""

    @property
    def code(self) -> int:
        return self.failure.code
