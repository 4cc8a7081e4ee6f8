"""
Student factory that owns its live-instance counter.
"""

from typing import Iterable, Optional

from ..config import RegistrarConfig
from ..core.collection import StudentBody
from ..core.entities import Student
from ..core.enums import StudentIdPolicy
from ..core.lifecycle import LiveInstanceCounter


class StudentRegistry:
    """Creates students bound to one counter so a scope can track its own population."""
    
    def __init__(self, config: Optional[RegistrarConfig] = None,
                 counter: Optional[LiveInstanceCounter] = None):
        self._config = config or RegistrarConfig()
        self._counter = counter if counter is not None else LiveInstanceCounter("registry")
    
    @property
    def counter(self) -> LiveInstanceCounter:
        return self._counter
    
    @property
    def live_count(self) -> int:
        return self._counter.value
    
    def _next_default_id(self) -> str:
        if self._config.id_policy == StudentIdPolicy.GENERATED:
            return f"{self._counter.value + self._config.id_offset}Id"
        return self._config.placeholder_id
    
    def create(self) -> Student:
        """Default construction: blank fields, id per the configured policy."""
        return Student(student_id=self._next_default_id(), counter=self._counter)
    
    def create_student(self, first_name: str, last_name: str, middle_initial: str,
                       title: str, gpa: float, current_course: str,
                       student_id: str) -> Student:
        """Parameterized construction. Nothing is validated."""
        return Student(first_name, last_name, middle_initial, title, gpa,
                       current_course, student_id, counter=self._counter)
    
    def duplicate(self, student: Student) -> Student:
        """Field-wise copy bound to this registry's counter."""
        if student.counter is self._counter:
            return student.copy()
        return Student(counter=self._counter).assign_from(student)
    
    def new_body(self, students: Optional[Iterable[Student]] = None) -> StudentBody:
        """A collection whose stored copies count against this registry."""
        return StudentBody(students, counter=self._counter)
    
    def __repr__(self) -> str:
        return f"StudentRegistry(live_count={self._counter.value})"
