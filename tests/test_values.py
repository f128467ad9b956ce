# tests/test_values.py

import datetime

import pytest

from core.exceptions import ValidationError
from models.values import (
    Attendance,
    Email,
    Grade,
    Name,
    Participation,
    Phone,
    StudentId,
    Tag,
    TeachingAssistantName,
    Telegram,
    TutorialDay,
    TutorialModule,
    TutorialName,
    TutorialTimeslot,
    TutorialVenue,
)

# --- canonical forms ---


@pytest.mark.parametrize(
    "value_type, raw, canonical",
    [
        (StudentId, "a1234567b", "A1234567B"),
        (Name, "Alex Yeoh", "Alex Yeoh"),
        (Phone, "911", "911"),
        (Email, "alex.yeoh+ta@comp.nus.edu.sg", "alex.yeoh+ta@comp.nus.edu.sg"),
        (Telegram, "alex_yeoh", "@alex_yeoh"),
        (Telegram, "@alex_yeoh", "@alex_yeoh"),
        (TutorialModule, "cs2103t", "CS2103T"),
        (TutorialVenue, "COM1 Level 2", "COM1 Level 2"),
        (TutorialTimeslot, "09:00-10:30", "09:00-10:30"),
        (TutorialDay, "wednesday", "Wednesday"),
        (Attendance, "007", "7"),
        (Participation, "999", "999"),
        (Grade, "a-", "A-"),
        (Grade, "pending...", "PENDING..."),
        (Tag, "friends", "friends"),
    ],
)
def test_value_is_canonical_and_reparses_equal(value_type, raw, canonical):
    value = value_type(raw)

    assert str(value) == canonical
    assert value_type(str(value)) == value
    assert str(value_type(str(value))) == canonical


def test_parse_trims_surrounding_whitespace():
    assert StudentId.parse("  a1234567b \n") == StudentId("A1234567B")
    assert Name.parse(" Alex Yeoh ") == Name("Alex Yeoh")


# --- invalid inputs ---


@pytest.mark.parametrize(
    "value_type, raw",
    [
        (StudentId, "A123456B"),
        (StudentId, "12345678B"),
        (StudentId, "A1234567"),
        (Name, ""),
        (Name, " Alex"),
        (Name, "Alex*"),
        (TeachingAssistantName, "peter^"),
        (Phone, "91"),
        (Phone, "9011p041"),
        (Email, "alexyeoh"),
        (Email, "@example.com"),
        (Email, "alex@example.c"),
        (Email, "alex..yeoh@example.com"),
        (Email, "alex@-example.com"),
        (Telegram, "abc"),
        (Telegram, "1alexyeoh"),
        (Telegram, "alex-yeoh"),
        (TutorialModule, "C2103"),
        (TutorialModule, "CS210"),
        (TutorialVenue, ""),
        (TutorialVenue, " COM1"),
        (TutorialTimeslot, "9:00-10:00"),
        (TutorialTimeslot, "10:00-09:00"),
        (TutorialTimeslot, "10:00-10:00"),
        (TutorialTimeslot, "24:00-25:00"),
        (TutorialDay, "Mon"),
        (TutorialDay, "Funday"),
        (Attendance, "-1"),
        (Attendance, "100"),
        (Attendance, "1.5"),
        (Participation, "1000"),
        (Grade, "E"),
        (Grade, "PENDING"),
        (Tag, "best friend"),
        (Tag, "a" * 31),
    ],
)
def test_invalid_input_raises_constraint_message(value_type, raw):
    with pytest.raises(ValidationError) as exc_info:
        value_type(raw)

    assert exc_info.value.message == value_type.MESSAGE_CONSTRAINTS
    assert not value_type.is_valid(raw)


def test_none_is_a_programming_error():
    with pytest.raises(TypeError):
        Name(None)

    with pytest.raises(TypeError):
        Phone.parse(None)


@pytest.mark.parametrize("value_type", [Attendance, Participation])
def test_overlong_count_is_invalid(value_type):
    with pytest.raises(ValidationError) as exc_info:
        value_type.parse("1" * 5000)

    assert exc_info.value.message == value_type.MESSAGE_CONSTRAINTS
    assert value_type.parse("0" * 5000 + "7").count == 7


def test_non_string_input_is_invalid():
    assert not Attendance.is_valid(3)

    with pytest.raises(ValidationError):
        Attendance(3)


# --- equality and immutability ---


def test_equality_and_hash_are_structural():
    assert StudentId("a1234567b") == StudentId("A1234567B")
    assert hash(StudentId("a1234567b")) == hash(StudentId("A1234567B"))
    assert len({Tag("friends"), Tag("friends"), Tag("colleagues")}) == 2


def test_different_value_types_are_never_equal():
    assert TutorialName("T23") != Name("T23")
    assert TeachingAssistantName("Alex") != TutorialName("Alex")
    assert Attendance("3") != Participation("3")


def test_values_are_immutable():
    name = Name("Alex Yeoh")

    with pytest.raises(AttributeError):
        name._value = "Bernice Yu"

    with pytest.raises(AttributeError):
        name.extra = "field"

    assert name.value == "Alex Yeoh"


# --- type-specific accessors ---


def test_timeslot_exposes_start_and_end():
    timeslot = TutorialTimeslot("09:00-10:30")

    assert timeslot.start == datetime.time(9, 0)
    assert timeslot.end == datetime.time(10, 30)


def test_counts_and_pending_grade():
    assert Attendance("12").count == 12
    assert Participation("0").count == 0
    assert Grade(Grade.PENDING).is_pending
    assert not Grade("A+").is_pending
