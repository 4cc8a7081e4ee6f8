"""
Owning, value-copying container of students.
"""

from typing import Callable, Iterable, Iterator, List, Optional

import structlog

from .entities import Student
from .exceptions import ValidationError
from .lifecycle import LiveInstanceCounter
from .ordering import gpa_key

logger = structlog.get_logger(__name__)


class StudentBody:
    """Ordered sequence that owns independent copies of the students put in it.

    ``insert`` never aliases the caller's instance; the stored copy is a new
    live student. Students leave the body through ``remove_at``, ``pop`` or
    ``clear``, which release them. Iteration yields the stored students
    themselves so they can be changed in place.

    The body has no internal synchronization.
    """
    
    def __init__(self, students: Optional[Iterable[Student]] = None,
                 counter: Optional[LiveInstanceCounter] = None):
        self._items: List[Student] = []
        self._counter = counter
        if students is not None:
            self.extend(students)
    
    def insert(self, student: Student) -> Student:
        """Store a copy of ``student`` and return the stored copy."""
        if not isinstance(student, Student):
            raise ValidationError(f"Cannot insert {type(student).__name__} into StudentBody")
        if self._counter is not None and student.counter is not self._counter:
            stored = Student(counter=self._counter).assign_from(student)
        else:
            stored = student.copy()
        self._items.append(stored)
        return stored
    
    def extend(self, students: Iterable[Student]) -> None:
        for student in students:
            self.insert(student)
    
    def sort_stable(self, key: Callable[[Student], float] = gpa_key, reverse: bool = False) -> None:
        """Sort in place by ``key`` (gpa by default); ties keep insertion order."""
        self._items.sort(key=key, reverse=reverse)
        logger.debug("roster_sorted", size=len(self._items))
    
    def remove_at(self, index: int) -> None:
        self.pop(index).release()
    
    def pop(self, index: int = -1) -> Student:
        """Remove and return the student at ``index``.

        Ownership passes to the caller; the student stays live until the
        caller releases it.
        """
        return self._items.pop(index)
    
    def clear(self) -> None:
        while self._items:
            self._items.pop().release()
    
    def gpas(self) -> List[float]:
        return [student.gpa for student in self._items]
    
    def __iter__(self) -> Iterator[Student]:
        return iter(self._items)
    
    def __len__(self) -> int:
        return len(self._items)
    
    def __getitem__(self, index: int) -> Student:
        return self._items[index]
    
    def __repr__(self) -> str:
        return f"StudentBody(size={len(self._items)})"
