"""
Enumerations and constants for the Registrar package.
"""

from enum import Enum


class FailureKind(Enum):
    """Categories of graduation validation failure, in evaluation order."""
    LOW_GPA = "low_gpa"
    MISSING_CREDITS = "missing_credits"
    MISSING_COURSE = "missing_course"
    GENERIC_MESSAGE = "generic_message"
    STUDENT_FAULT = "student_fault"


class StudentIdPolicy(Enum):
    """How default-constructed students receive their id."""
    PLACEHOLDER = "placeholder"  # fixed placeholder such as "None"
    GENERATED = "generated"      # "<live count + offset>Id"


class LogFormat(Enum):
    """Log renderers supported by the logging setup."""
    CONSOLE = "console"
    JSON = "json"


# Kind-specific process exit statuses used by the graduation handler.
EXIT_STATUS_BY_KIND = {
    FailureKind.LOW_GPA: 1,
    FailureKind.MISSING_CREDITS: 2,
    FailureKind.MISSING_COURSE: 3,
    FailureKind.GENERIC_MESSAGE: 4,
    FailureKind.STUDENT_FAULT: 5,
}

EXIT_STATUS_UNRECOGNIZED = 6
EXIT_STATUS_UNCAUGHT = 1

DEFAULT_CREDENTIAL_TITLE = "Dr."
DEFAULT_PLACEHOLDER_ID = "None"
DEFAULT_FAULT_CODE = 5
