"""
Core interfaces and abstract base classes for the Registrar package.
"""

from abc import ABC, abstractmethod
from typing import Optional


class OutputSink(ABC):
    """Line-oriented text writer that describe() and greet() write to."""
    
    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write one line of text."""
        pass


class Describable(ABC):
    """Public capability set shared by every person-like entity.

    Dispatch on these operations is resolved by the runtime type of the
    instance, so a handle typed as ``Describable`` holding a ``Student``
    reports ``"Student"`` from ``kind()``.
    """
    
    @abstractmethod
    def describe(self, sink: Optional[OutputSink] = None) -> str:
        """Write a one-line description to the sink and return it."""
        pass
    
    @abstractmethod
    def kind(self) -> str:
        """Label of the concrete runtime type."""
        pass
    
    @abstractmethod
    def greet(self, msg: str, sink: Optional[OutputSink] = None) -> str:
        """Write the message unchanged to the sink and return it."""
        pass


class GraduationRule(ABC):
    """A catch-all graduation check producing a free-text diagnostic."""
    
    @abstractmethod
    def check(self, student: 'Student') -> Optional[str]:
        """Return a diagnostic message if the student fails the rule."""
        pass
    
    @abstractmethod
    def get_rule_name(self) -> str:
        """Get the name of this rule."""
        pass
