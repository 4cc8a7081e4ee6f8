"""
Registrar: a student roster with live-instance accounting, gpa ordering and
graduation checks.

Students specialize a generic Person. Every student is counted from
construction until release, rosters keep their own copies and sort stably by
gpa, and graduation attempts fail with one of five distinct failure kinds.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "Student roster with lifecycle accounting and graduation checks"

from .logging_config import configure_default_logging

configure_default_logging()
