# tests/test_student.py

import pytest

from models.student import Student
from models.values import (
    Attendance,
    Email,
    Grade,
    Name,
    Participation,
    Phone,
    Tag,
)


def test_student_properties(sample_student):
    assert str(sample_student.name) == "Alex Yeoh"
    assert str(sample_student.id) == "A1234567B"
    assert str(sample_student.telegram) == "@alexyeoh"
    assert sample_student.attendance.count == 3
    assert sample_student.tags == frozenset({Tag("friends"), Tag("quiet")})


def test_create_fills_academic_defaults(other_student):
    assert other_student.attendance == Attendance("0")
    assert other_student.participation == Participation("0")
    assert other_student.grade == Grade("PENDING...")
    assert other_student.tags == frozenset()


def test_constructor_rejects_missing_fields(sample_student):
    with pytest.raises(TypeError) as exc_info:
        Student(
            name=sample_student.name,
            id=sample_student.id,
            phone=None,
            email=sample_student.email,
            telegram=sample_student.telegram,
            tutorial_module=sample_student.tutorial_module,
            tutorial_name=sample_student.tutorial_name,
            attendance=sample_student.attendance,
            participation=sample_student.participation,
            grade=None,
            tags=sample_student.tags,
        )

    assert "phone" in str(exc_info.value)
    assert "grade" in str(exc_info.value)


def test_same_name_is_same_identity_but_not_equal(sample_student):
    twin = sample_student.replace(
        phone=Phone("91234567"),
        email=Email("someone.else@example.com"),
    )

    assert sample_student.is_same_identity(twin)
    assert twin.is_same_identity(sample_student)
    assert sample_student != twin


def test_different_name_is_not_same_identity(sample_student, other_student):
    assert not sample_student.is_same_identity(other_student)
    assert not sample_student.is_same_identity(None)


def test_full_equality_and_hash(sample_student):
    copy = sample_student.replace()

    assert copy is not sample_student
    assert copy == sample_student
    assert hash(copy) == hash(sample_student)
    assert sample_student.replace(tags=set()) != sample_student


def test_replace_returns_new_student(sample_student):
    edited = sample_student.replace(name=Name("Alex Tan"))

    assert edited.name == Name("Alex Tan")
    assert sample_student.name == Name("Alex Yeoh")
    assert edited.id == sample_student.id


def test_replace_rejects_unknown_fields(sample_student):
    with pytest.raises(TypeError):
        sample_student.replace(nickname=Name("Al"))


def test_student_to_str(sample_student):
    assert sample_student.__str__() == (
        "Alex Yeoh; ID: A1234567B; Phone: 87438807; Email: alexyeoh@example.com; "
        "Telegram: @alexyeoh; Module: CS2103T; Tutorial: T23; Attendance: 3; "
        "Participation: 120; Grade: B+; Tags: [friends][quiet]"
    )


def test_student_to_str_is_stable_across_equal_instances(sample_student):
    rebuilt = sample_student.replace(tags=[Tag("quiet"), Tag("friends")])

    assert str(rebuilt) == str(sample_student)


def test_tags_must_be_tag_values(sample_student):
    with pytest.raises(TypeError, match="Tag"):
        sample_student.replace(tags=["friends"])

    with pytest.raises(TypeError):
        Student.create(
            name=sample_student.name,
            id=sample_student.id,
            phone=sample_student.phone,
            email=sample_student.email,
            telegram=sample_student.telegram,
            tutorial_module=sample_student.tutorial_module,
            tutorial_name=sample_student.tutorial_name,
            tags=[Tag("friends"), "quiet"],
        )
