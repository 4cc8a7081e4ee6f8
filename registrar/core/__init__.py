"""
Core module containing the entity model, ordering, and failure taxonomy.
"""

from .entities import *
from .collection import *
from .failures import *
from .interfaces import *
from .exceptions import *
from .enums import *
from .lifecycle import *
from .ordering import *
from .sinks import *

__all__ = [
    # Entities
    "Person",
    "Student",
    "StudentBody",
    "LiveInstanceCounter",
    
    # Ordering
    "gpa_less",
    "gpa_key",
    
    # Interfaces and sinks
    "Describable",
    "OutputSink",
    "GraduationRule",
    "ConsoleSink",
    "BufferSink",
    
    # Failure kinds
    "CourseRecord",
    "LowGpa",
    "MissingCredits",
    "MissingCourse",
    "GenericMessage",
    "StudentFault",
    "GraduationFailure",
    
    # Enums
    "FailureKind",
    "StudentIdPolicy",
    "LogFormat",
    
    # Exceptions
    "RegistrarException",
    "ValidationError",
    "ConfigurationError",
    "LifecycleError",
    "GraduationError",
    "LowGpaError",
    "MissingCreditsError",
    "MissingCourseError",
    "GraduationMessageError",
    "StudentFaultError",
]
