"""
Ordering relation over students.

Students are ordered by gpa alone. Equal gpas are not distinguished, so any
sort over this relation must be stable to keep ties in their input order;
``list.sort`` and ``sorted`` both are.
"""


def gpa_less(a, b) -> bool:
    """Strict weak order: ``a`` sorts before ``b`` when its gpa is lower."""
    return a.gpa < b.gpa


def gpa_key(student) -> float:
    """Sort key equivalent to ``gpa_less``."""
    return student.gpa
