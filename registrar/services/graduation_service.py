"""
Graduation validation.

The checks run in a fixed order and the first one that fails decides the
outcome:

1. gpa below the minimum          -> LowGpa
2. credits short of the required  -> MissingCredits
3. a required course not taken    -> MissingCourse
4. a graduation rule objects      -> GenericMessage
5. eligibility not confirmed      -> StudentFault

``evaluate`` returns the failure (or None when the student is eligible);
``attempt_graduation`` raises the matching ``GraduationError`` subclass and
leaves handling to the caller.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, List, Mapping, Optional, Type

import structlog

from ..config import GraduationRequirements
from ..core.entities import Student
from ..core.enums import FailureKind
from ..core.exceptions import (
    GraduationError, GraduationMessageError, LowGpaError, MissingCourseError,
    MissingCreditsError, StudentFaultError,
)
from ..core.failures import (
    CourseRecord, GenericMessage, GraduationFailure, LowGpa, MissingCourse,
    MissingCredits, StudentFault,
)
from ..core.interfaces import GraduationRule

logger = structlog.get_logger(__name__)


@dataclass
class Transcript:
    """Credits and completed courses on record for one student."""
    student_id: str
    credits_earned: int = 0
    completed_courses: FrozenSet[CourseRecord] = field(default_factory=frozenset)
    
    def has_completed(self, course: CourseRecord) -> bool:
        return course in self.completed_courses


class PrerequisiteRule(GraduationRule):
    """Rule that fails when the prerequisite callback reports False."""
    
    MESSAGE = "Student does not meet prerequisites"
    
    def __init__(self, meets_prerequisites: Callable[[Student], bool]):
        self._meets_prerequisites = meets_prerequisites
    
    def check(self, student: Student) -> Optional[str]:
        if self._meets_prerequisites(student):
            return None
        return self.MESSAGE
    
    def get_rule_name(self) -> str:
        return "PrerequisiteRule"


_ERROR_BY_KIND: Dict[FailureKind, Type[GraduationError]] = {
    FailureKind.LOW_GPA: LowGpaError,
    FailureKind.MISSING_CREDITS: MissingCreditsError,
    FailureKind.MISSING_COURSE: MissingCourseError,
    FailureKind.GENERIC_MESSAGE: GraduationMessageError,
    FailureKind.STUDENT_FAULT: StudentFaultError,
}


def error_for(failure: GraduationFailure) -> GraduationError:
    """Build the exception that carries ``failure``."""
    return _ERROR_BY_KIND[failure.kind](failure)


class GraduationService:
    """Classifies why a student cannot graduate."""
    
    def __init__(self, requirements: Optional[GraduationRequirements] = None,
                 transcripts: Optional[Mapping[str, Transcript]] = None,
                 rules: Optional[List[GraduationRule]] = None,
                 confirm: Optional[Callable[[Student], bool]] = None):
        self._requirements = requirements or GraduationRequirements()
        self._required_courses = self._requirements.course_records()
        self._transcripts: Dict[str, Transcript] = dict(transcripts or {})
        self._rules: List[GraduationRule] = list(rules or [])
        self._confirm = confirm
    
    @property
    def requirements(self) -> GraduationRequirements:
        return self._requirements
    
    def add_transcript(self, transcript: Transcript) -> None:
        self._transcripts[transcript.student_id] = transcript
    
    def add_rule(self, rule: GraduationRule) -> None:
        self._rules.append(rule)
    
    def remove_rule(self, rule_name: str) -> None:
        self._rules = [r for r in self._rules if r.get_rule_name() != rule_name]
    
    def evaluate(self, student: Student) -> Optional[GraduationFailure]:
        """Return the first failing check's result, or None if eligible."""
        checks = (
            self._check_gpa,
            self._check_credits,
            self._check_courses,
            self._check_rules,
            self._check_confirmation,
        )
        for check in checks:
            failure = check(student)
            if failure is not None:
                return failure
        return None
    
    def attempt_graduation(self, student: Student) -> None:
        """Raise the ``GraduationError`` for the first failing check.

        Returns None when the student is eligible.
        """
        failure = self.evaluate(student)
        if failure is None:
            logger.info("graduation_confirmed", student_id=student.student_id)
            return
        logger.info("graduation_failed", student_id=student.student_id,
                    kind=failure.kind.value, reason=str(failure))
        raise error_for(failure)
    
    def _check_gpa(self, student: Student) -> Optional[GraduationFailure]:
        if student.gpa < self._requirements.min_gpa:
            return LowGpa(student.gpa)
        return None
    
    def _check_credits(self, student: Student) -> Optional[GraduationFailure]:
        transcript = self._transcripts.get(student.student_id)
        if transcript is None:
            return None
        missing = self._requirements.required_credits - transcript.credits_earned
        if missing > 0:
            return MissingCredits(missing)
        return None
    
    def _check_courses(self, student: Student) -> Optional[GraduationFailure]:
        transcript = self._transcripts.get(student.student_id)
        if transcript is None:
            return None
        for course in self._required_courses:
            if not transcript.has_completed(course):
                return MissingCourse(course)
        return None
    
    def _check_rules(self, student: Student) -> Optional[GraduationFailure]:
        for rule in self._rules:
            message = rule.check(student)
            if message:
                return GenericMessage(message)
        return None
    
    def _check_confirmation(self, student: Student) -> Optional[GraduationFailure]:
        # Without a confirmation policy eligibility can never be confirmed.
        if self._confirm is not None and self._confirm(student):
            return None
        return StudentFault(self._requirements.fault_code)


def attempt_graduation(student: Student, service: Optional[GraduationService] = None) -> None:
    """Run the graduation checks with ``service`` or a default one."""
    (service or GraduationService()).attempt_graduation(student)
