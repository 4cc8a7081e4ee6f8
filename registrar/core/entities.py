"""
Core entities: the Person capability set and its Student specialization.
"""

import weakref
from typing import Any, Dict, Optional

import structlog

from .enums import DEFAULT_CREDENTIAL_TITLE, DEFAULT_PLACEHOLDER_ID
from .exceptions import ValidationError
from .interfaces import Describable, OutputSink
from .lifecycle import LiveInstanceCounter
from .ordering import gpa_less
from .sinks import ConsoleSink

logger = structlog.get_logger(__name__)

_console = ConsoleSink()


class Person(Describable):
    """A person identified by name parts and a salutation.

    All fields default to empty strings. The title can only be changed from
    within the class hierarchy through ``_promote_title``.
    """
    
    def __init__(self, first_name: str = "", last_name: str = "",
                 middle_initial: str = "", title: str = ""):
        self._first_name = first_name
        self._last_name = last_name
        self._middle_initial = middle_initial
        self._title = title  # Mr., Ms., Mrs., Miss, Dr., etc.
    
    @property
    def first_name(self) -> str:
        return self._first_name
    
    @property
    def last_name(self) -> str:
        return self._last_name
    
    @property
    def middle_initial(self) -> str:
        return self._middle_initial
    
    @property
    def title(self) -> str:
        return self._title
    
    @property
    def display_name(self) -> str:
        """Title, first name, initial and last name; empty parts are skipped."""
        initial = f"{self._middle_initial}." if self._middle_initial else ""
        parts = (self._title, self._first_name, initial, self._last_name)
        return " ".join(part for part in parts if part)
    
    def _promote_title(self, new_title: str) -> None:
        """Replace the title. Reserved for the class and its subclasses."""
        self._title = str(new_title)
    
    def _emit(self, text: str, sink: Optional[OutputSink]) -> str:
        (sink or _console).write_line(text)
        return text
    
    def describe(self, sink: Optional[OutputSink] = None) -> str:
        return self._emit(self.display_name, sink)
    
    def kind(self) -> str:
        return "Person"
    
    def greet(self, msg: str, sink: Optional[OutputSink] = None) -> str:
        return self._emit(msg, sink)
    
    def assign_from(self, other: 'Person') -> 'Person':
        """Overwrite this person's fields with ``other``'s. Returns self."""
        if other is not self:
            self._first_name = other.first_name
            self._last_name = other.last_name
            self._middle_initial = other.middle_initial
            self._title = other.title
        return self
    
    def copy(self) -> 'Person':
        return Person(self._first_name, self._last_name, self._middle_initial, self._title)
    
    def __copy__(self) -> 'Person':
        return self.copy()
    
    def __deepcopy__(self, memo) -> 'Person':
        return self.copy()
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert person to dictionary."""
        return {
            'first_name': self._first_name,
            'last_name': self._last_name,
            'middle_initial': self._middle_initial,
            'title': self._title,
        }
    
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()
    
    __hash__ = None
    
    def __str__(self) -> str:
        return self.display_name
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(first_name={self._first_name!r}, last_name={self._last_name!r})"


def _release_slot(counter: LiveInstanceCounter) -> None:
    remaining = counter.decrement()
    logger.debug("student_released", counter=counter.name, live_count=remaining)


class Student(Person):
    """Student with academic fields and live-instance accounting.

    Every constructed student (default, parameterized, or duplicated) is
    counted on the counter it is bound to until it is released, either
    explicitly, by leaving a ``with`` block, by removal from a
    ``StudentBody``, or by garbage collection. Each student is released at
    most once.

    The student id is mutable: default construction uses a placeholder id
    and assignment overwrites it.
    """
    
    population = LiveInstanceCounter("students")
    credential_title = DEFAULT_CREDENTIAL_TITLE
    
    def __init__(self, first_name: str = "", last_name: str = "", middle_initial: str = "",
                 title: str = "", gpa: float = 0.0, current_course: str = "",
                 student_id: str = DEFAULT_PLACEHOLDER_ID, *,
                 counter: Optional[LiveInstanceCounter] = None):
        super().__init__(first_name, last_name, middle_initial, title)
        self._gpa = gpa
        self._current_course = current_course
        self._student_id = student_id
        self._counter = counter if counter is not None else Student.population
        live_count = self._counter.increment()
        self._finalizer = weakref.finalize(self, _release_slot, self._counter)
        self._finalizer.atexit = False
        logger.debug("student_constructed", student_id=student_id, live_count=live_count)
    
    @classmethod
    def live_instance_count(cls) -> int:
        """Number of live students bound to the class-wide counter."""
        return cls.population.value
    
    @property
    def counter(self) -> LiveInstanceCounter:
        return self._counter
    
    @property
    def released(self) -> bool:
        return not self._finalizer.alive
    
    def release(self) -> None:
        """Give this student's slot back to its counter. Idempotent."""
        self._finalizer()
    
    def __enter__(self) -> 'Student':
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()
    
    @property
    def gpa(self) -> float:
        return self._gpa
    
    @property
    def current_course(self) -> str:
        return self._current_course
    
    @property
    def student_id(self) -> str:
        return self._student_id
    
    def set_current_course(self, course: str) -> None:
        self._current_course = course
    
    def set_gpa(self, gpa: float) -> None:
        """Set the gpa as given. Values outside [0.0, 4.0] are kept, not clamped."""
        if not 0.0 <= gpa <= 4.0:
            logger.warning("gpa_out_of_range", student_id=self._student_id, gpa=gpa)
        self._gpa = gpa
    
    def set_student_id(self, student_id: str) -> None:
        self._student_id = student_id
    
    def promote_credential(self) -> None:
        """Public route to the protected title mutator."""
        self._promote_title(self.credential_title)
    
    earn_phd = promote_credential
    
    def describe(self, sink: Optional[OutputSink] = None) -> str:
        # Base fields only through Person's public properties.
        line = (f"{self.display_name} with id: {self._student_id} "
                f"GPA: {self._gpa:.3g} Course: {self._current_course}")
        return self._emit(line, sink)
    
    def kind(self) -> str:
        return "Student"
    
    def assign_from(self, other: 'Student') -> 'Student':
        """Overwrite base and academic fields with ``other``'s. Returns self.

        The live count is unaffected: no student is created or released.
        """
        if other is self:
            return self
        if not isinstance(other, Student):
            raise ValidationError(f"Cannot assign {type(other).__name__} to Student")
        super().assign_from(other)
        self._gpa = other.gpa
        self._current_course = other.current_course
        self._student_id = other.student_id
        return self
    
    def copy(self) -> 'Student':
        """Field-wise independent duplicate bound to the same counter."""
        return Student(self.first_name, self.last_name, self.middle_initial, self.title,
                       self._gpa, self._current_course, self._student_id,
                       counter=self._counter)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'gpa': self._gpa,
            'current_course': self._current_course,
            'student_id': self._student_id,
        })
        return base_dict
    
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return gpa_less(self, other)
    
    def __repr__(self) -> str:
        return f"Student(student_id={self._student_id!r}, gpa={self._gpa!r})"
