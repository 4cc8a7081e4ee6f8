"""
Graduation failure kinds.

Each kind is an immutable value record with a kind-specific payload. The
payloads are deliberately heterogeneous (a float, an int, a course record,
free text, a numeric code) so callers discriminate on ``kind`` rather than
on a single error code.
"""

from dataclasses import dataclass, asdict
from typing import Any, ClassVar, Dict, Union

from .enums import FailureKind


@dataclass(frozen=True)
class CourseRecord:
    """A course identified by title and catalogue number."""
    title: str
    number: int = 0

    def __str__(self) -> str:
        return f"{self.title} ({self.number})" if self.number else self.title


@dataclass(frozen=True)
class LowGpa:
    value: float
    kind: ClassVar[FailureKind] = FailureKind.LOW_GPA

    def __str__(self) -> str:
        return f"Too low gpa: {self.value}"

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'value': self.value}


@dataclass(frozen=True)
class MissingCredits:
    count: int
    kind: ClassVar[FailureKind] = FailureKind.MISSING_CREDITS

    def __str__(self) -> str:
        return f"Missing {self.count} credits"

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'count': self.count}


@dataclass(frozen=True)
class MissingCourse:
    course: Union[CourseRecord, str]
    kind: ClassVar[FailureKind] = FailureKind.MISSING_COURSE

    def __str__(self) -> str:
        return f"Missing course: {self.course}"

    def to_dict(self) -> Dict[str, Any]:
        course = asdict(self.course) if isinstance(self.course, CourseRecord) else self.course
        return {'kind': self.kind.value, 'course': course}


@dataclass(frozen=True)
class GenericMessage:
    text: str
    kind: ClassVar[FailureKind] = FailureKind.GENERIC_MESSAGE

    def __str__(self) -> str:
        return self.text

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'text': self.text}


@dataclass(frozen=True)
class StudentFault:
    code: int
    kind: ClassVar[FailureKind] = FailureKind.STUDENT_FAULT

    def __str__(self) -> str:
        return f"Error: {self.code}"

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'code': self.code}


GraduationFailure = Union[LowGpa, MissingCredits, MissingCourse, GenericMessage, StudentFault]
