#!/usr/bin/env python3
"""
Demo scenario for the Registrar package.
"""

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from registrar.core import Person, Student, ConsoleSink
from registrar.core.exceptions import GraduationError
from registrar.logging_config import configure_logging
from registrar.services import GraduationService, StudentRegistry


def run_demo():
    """Run a walk-through of the Registrar package."""
    print("=" * 60)
    print("REGISTRAR - DEMO")
    print("=" * 60)
    
    configure_logging("WARNING")
    registry = StudentRegistry()
    
    print("\n1. Polymorphic dispatch...")
    demonstrate_dispatch(registry)
    
    print("\n2. Live-instance counting...")
    demonstrate_lifecycle(registry)
    
    print("\n3. Sorting a roster by gpa...")
    demonstrate_sorting(registry)
    
    print("\n4. Graduation checks...")
    demonstrate_graduation(registry)
    
    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)


def demonstrate_dispatch(registry):
    """The same calls resolve by runtime type."""
    people = [
        Person("Juliet", "Martinez", "M", "Ms."),
        registry.create_student("Jo", "Li", "U", "Ms.", 3.9, "C++", "178PSU"),
    ]
    for person in people:
        print(f"  {person.kind()}:")
        person.describe()
        person.greet("  Hello!")
    
    student = people[1]
    student.set_current_course("Doctoral Thesis")
    student.promote_credential()
    student.describe()
    student.release()


def demonstrate_lifecycle(registry):
    """Every construction path counts; every release path uncounts once."""
    print(f"  Live students: {registry.live_count}")
    blank = registry.create()
    named = registry.create_student("Zack", "Moon", "R", "Mr.", 3.85, "C++", "1378")
    twin = registry.duplicate(named)
    print(f"  After default, parameterized and copy: {registry.live_count}")
    
    twin.set_current_course("Advanced C++ Programming")
    print(f"  Original course: {named.current_course}, copy course: {twin.current_course}")
    
    for student in (blank, named, twin):
        student.release()
    print(f"  After releasing all three: {registry.live_count}")


def demonstrate_sorting(registry):
    """Stable sort keeps the two 3.8 students in insertion order."""
    body = registry.new_body()
    roster = [
        ("Jul", "Li", "M", "Ms.", 3.8, "C++", "117PSU"),
        ("Hana", "Sato", "U", "Dr.", 3.8, "C++", "178PSU"),
        ("Sara", "Kato", "B", "Dr.", 3.9, "C++", "272PSU"),
        ("Giselle", "LeBrun", "R", "Ms.", 3.4, "C++", "299TU"),
    ]
    for fields in roster:
        with registry.create_student(*fields) as student:
            body.insert(student)
    
    body.sort_stable()
    for student in body:
        student.describe(ConsoleSink())
    print(f"  Live students held by the roster: {registry.live_count}")
    body.clear()


def demonstrate_graduation(registry):
    """Each failure kind is handled on its own terms."""
    service = GraduationService()
    for gpa in (1.5, 3.1):
        with registry.create_student("Ling", "Mau", "I", "Ms.", gpa, "C++", "55UD") as student:
            try:
                service.attempt_graduation(student)
            except GraduationError as err:
                print(f"  gpa {gpa}: {err.kind.value} -> {err.failure}")


if __name__ == "__main__":
    run_demo()
