"""Tests for the gpa ordering relation and the owning StudentBody."""

import pytest

from registrar.core import Student, StudentBody, gpa_key, gpa_less


def _body(counter, roster_fields):
    body = StudentBody(counter=counter)
    for fields in roster_fields:
        with Student(*fields, counter=counter) as student:
            body.insert(student)
    return body


def test_gpa_less_is_strict(counter):
    low = Student(gpa=3.4, counter=counter)
    high = Student(gpa=3.8, counter=counter)
    tie = Student(gpa=3.8, counter=counter)

    assert gpa_less(low, high)
    assert not gpa_less(high, low)
    assert not gpa_less(high, tie) and not gpa_less(tie, high)
    assert gpa_key(high) == 3.8


def test_sort_is_stable_on_ties(counter, roster_fields):
    body = _body(counter, roster_fields)

    body.sort_stable()

    assert body.gpas() == [3.4, 3.8, 3.8, 3.9]
    assert [s.first_name for s in body] == ["Giselle", "Jul", "Hana", "Sara"]


def test_builtin_sort_uses_gpa_order(counter, roster_fields):
    students = [Student(*fields, counter=counter) for fields in roster_fields]

    ordered = sorted(students)

    assert [s.student_id for s in ordered] == ["299TU", "117PSU", "178PSU", "272PSU"]


def test_insert_stores_independent_copy(counter):
    body = StudentBody(counter=counter)
    original = Student("Jo", "Li", "U", "Ms.", 3.9, "C++", "178PSU", counter=counter)

    stored = body.insert(original)
    original.set_current_course("Doctoral Thesis")

    assert stored is not original
    assert body[0].current_course == "C++"
    assert counter.value == 2


def test_traversal_allows_in_place_mutation(counter, roster_fields):
    body = _body(counter, roster_fields)

    for student in body:
        student.promote_credential()

    assert [s.title for s in body] == ["Dr."] * 4
    assert len(body) == 4


def test_body_holds_its_own_live_students(counter, roster_fields):
    body = _body(counter, roster_fields)

    assert counter.value == 4

    body.remove_at(0)
    assert counter.value == 3
    assert len(body) == 3

    body.clear()
    assert counter.value == 0
    assert len(body) == 0


def test_pop_hands_ownership_to_caller(counter, roster_fields):
    body = _body(counter, roster_fields)

    student = body.pop()

    assert counter.value == 4
    assert student.first_name == "Giselle"
    student.release()
    assert counter.value == 3


def test_insert_rebinds_to_body_counter(counter):
    from registrar.core import LiveInstanceCounter

    outside = LiveInstanceCounter("outside")
    body = StudentBody(counter=counter)
    with Student("Jo", "Li", "U", "Ms.", 3.9, "C++", "178PSU", counter=outside) as student:
        stored = body.insert(student)

    assert stored.counter is counter
    assert stored.student_id == "178PSU"
    assert counter.value == 1
    assert outside.value == 0


def test_sort_reverse(counter, roster_fields):
    body = _body(counter, roster_fields)

    body.sort_stable(reverse=True)

    assert body.gpas() == [3.9, 3.8, 3.8, 3.4]
    assert [s.first_name for s in body][1:3] == ["Jul", "Hana"]


def test_insert_rejects_non_students(counter):
    from registrar.core import Person, ValidationError

    body = StudentBody(counter=counter)

    with pytest.raises(ValidationError):
        body.insert(Person("Ada", "Byron", "K", "Ms."))
    assert len(body) == 0
    assert counter.value == 0
