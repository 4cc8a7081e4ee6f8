"""Global fixtures for Registrar tests."""

import gc

import pytest

from registrar.core import BufferSink, LiveInstanceCounter
from registrar.logging_config import configure_logging
from registrar.services import StudentRegistry


ROSTER = [
    ("Jul", "Li", "M", "Ms.", 3.8, "C++", "117PSU"),
    ("Hana", "Sato", "U", "Dr.", 3.8, "C++", "178PSU"),
    ("Sara", "Kato", "B", "Dr.", 3.9, "C++", "272PSU"),
    ("Giselle", "LeBrun", "R", "Ms.", 3.4, "C++", "299TU"),
]


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Keep structlog output on stderr and above debug."""
    configure_logging("WARNING")


@pytest.fixture
def counter():
    """A fresh counter so tests never depend on the class-wide population."""
    gc.collect()
    return LiveInstanceCounter("test")


@pytest.fixture
def registry(counter):
    return StudentRegistry(counter=counter)


@pytest.fixture
def sink():
    return BufferSink()


@pytest.fixture
def roster_fields():
    return list(ROSTER)
