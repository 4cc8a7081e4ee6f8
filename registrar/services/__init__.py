"""
Services module: student factory and graduation checks.
"""

from .graduation_service import (
    GraduationService, PrerequisiteRule, Transcript, attempt_graduation, error_for
)
from .registry import StudentRegistry

__all__ = [
    "GraduationService",
    "PrerequisiteRule",
    "Transcript",
    "attempt_graduation",
    "error_for",
    "StudentRegistry",
]
