"""Tests for Person/Student dispatch, assignment and copying."""

import copy

import pytest

from registrar.core import Describable, Person, Student, ValidationError


def test_kind_dispatches_on_runtime_type(counter):
    people = [Person("Juliet", "Martinez", "M", "Ms."),
              Student("Jo", "Li", "U", "Ms.", 3.9, "C++", "178PSU", counter=counter)]

    assert [p.kind() for p in people] == ["Person", "Student"]


def test_base_typed_handle_holding_student_reports_student(counter):
    handle: Person = Student("Jo", "Li", "U", "Ms.", 3.9, "C++", "178PSU", counter=counter)

    assert isinstance(handle, Describable)
    assert handle.kind() == "Student"
    assert Person().kind() == "Person"


def test_person_describe_writes_line(sink):
    person = Person("Juliet", "Martinez", "M", "Ms.")

    line = person.describe(sink)

    assert line == "Ms. Juliet M. Martinez"
    assert sink.lines == ["Ms. Juliet M. Martinez"]


def test_describe_skips_blank_parts(sink):
    Person("Ada", "Byron").describe(sink)

    assert sink.lines == ["Ada Byron"]


def test_student_describe_appends_academic_fields(counter, sink):
    student = Student("Jo", "Li", "U", "Ms.", 3.9, "C++", "178PSU", counter=counter)

    student.describe(sink)

    assert sink.lines == ["Ms. Jo U. Li with id: 178PSU GPA: 3.9 Course: C++"]


def test_greet_is_inherited_and_unchanged(counter, sink):
    student = Student("Jo", "Li", "U", "Ms.", 3.9, "C++", "178PSU", counter=counter)

    student.greet("Hello there!", sink)

    assert "greet" not in Student.__dict__
    assert sink.lines == ["Hello there!"]


def test_default_fields_are_blank(counter):
    student = Student(counter=counter)

    assert (student.first_name, student.last_name, student.middle_initial, student.title) == ("", "", "", "")
    assert student.gpa == 0.0
    assert student.current_course == ""
    assert student.student_id == "None"


def test_promote_credential_sets_fixed_title(counter):
    student = Student("Ling", "Mau", "I", "Ms.", 3.1, "C++", "55UD", counter=counter)
    assert student.title == "Ms."

    student.promote_credential()

    assert student.title == "Dr."


def test_title_has_no_public_setter():
    person = Person("Ada", "Byron", "", "Ms.")

    with pytest.raises(AttributeError):
        person.title = "Dr."


def test_set_gpa_does_not_clamp(counter):
    student = Student(counter=counter)

    student.set_gpa(4.7)

    assert student.gpa == 4.7


def test_parameterized_construction_accepts_out_of_range_gpa(counter):
    student = Student("A", "B", "", "", -1.0, "", "X", counter=counter)

    assert student.gpa == -1.0


def test_person_self_assignment_is_noop():
    person = Person("Ada", "Byron", "K", "Ms.")
    before = person.to_dict()

    assert person.assign_from(person) is person
    assert person.to_dict() == before


def test_student_self_assignment_is_noop(counter):
    student = Student("Jo", "Li", "U", "Ms.", 3.9, "C++", "178PSU", counter=counter)
    before = student.to_dict()

    student.assign_from(student)

    assert student.to_dict() == before
    assert counter.value == 1


def test_student_assignment_overwrites_every_field(counter):
    target = Student(counter=counter)
    source = Student("Jo", "Li", "U", "Ms.", 3.9, "C++", "178PSU", counter=counter)

    target.assign_from(source)

    assert target == source
    assert target is not source
    assert counter.value == 2


def test_student_assignment_rejects_plain_person(counter):
    student = Student(counter=counter)

    with pytest.raises(ValidationError):
        student.assign_from(Person("Ada", "Byron"))


def test_copy_is_independent(counter):
    original = Student("Zack", "Moon", "R", "Mr.", 3.85, "C++", "1378", counter=counter)

    duplicate = original.copy()
    duplicate.set_current_course("Advanced C++ Programming")

    assert original.current_course == "C++"
    assert duplicate.current_course == "Advanced C++ Programming"


def test_copy_module_routes_through_duplication(counter):
    original = Student("Zack", "Moon", "R", "Mr.", 3.85, "C++", "1378", counter=counter)

    shallow = copy.copy(original)
    deep = copy.deepcopy(original)

    assert shallow == original == deep
    assert counter.value == 3


def test_person_copy_is_independent():
    original = Person("Ada", "Byron", "K", "Ms.")

    duplicate = copy.copy(original)
    duplicate.assign_from(Person("Grace", "Hopper"))

    assert original.first_name == "Ada"
    assert duplicate.first_name == "Grace"


def test_equality_is_by_value_and_type(counter):
    student = Student("Ada", "Byron", "K", "Ms.", counter=counter)

    assert Person("Ada", "Byron", "K", "Ms.") == Person("Ada", "Byron", "K", "Ms.")
    assert Person("Ada", "Byron", "K", "Ms.") != student
