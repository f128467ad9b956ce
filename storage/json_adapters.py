# storage/json_adapters.py

"""
Converts roster records to and from JSON-compatible dictionaries.

Freezing flattens a record into a `dict` of strings, with tags as a sorted list of tag
names. Records are valid by construction, so freezing never re-validates.

Thawing rebuilds a record from such a dictionary and trusts nothing in it. Each field
is checked in the fixed order of its field table: first for presence
(`MissingFieldError`), then for validity (`InvalidFieldError` carrying the value type's
constraint message). The first failing field in that order is the one reported. Tags are
thawed last and collapse into a set. A record is only constructed once every field has
thawed, so a corrupt dictionary never yields a partially populated record.

Numeric fields (attendance, participation) are persisted as strings like every other
field. Scalar fields have no defaults on thaw; a missing `tagged` list means no tags.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from core.exceptions import InvalidFieldError, MissingFieldError
from models.student import Student
from models.teaching_assistant import TeachingAssistant
from models.tutorial import Tutorial
from models.values import (
    Attendance,
    ConstrainedValue,
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

# (persisted key, record attribute, value type), in thaw order
FieldTable = tuple[tuple[str, str, type[ConstrainedValue]], ...]

STUDENT_FIELDS: FieldTable = (
    ("name", "name", Name),
    ("id", "id", StudentId),
    ("phone", "phone", Phone),
    ("email", "email", Email),
    ("telegram", "telegram", Telegram),
    ("tutorialModule", "tutorial_module", TutorialModule),
    ("tutorialName", "tutorial_name", TutorialName),
    ("attendance", "attendance", Attendance),
    ("participation", "participation", Participation),
    ("grade", "grade", Grade),
)

TUTORIAL_FIELDS: FieldTable = (
    ("name", "name", TutorialName),
    ("module", "module", TutorialModule),
    ("venue", "venue", TutorialVenue),
    ("timeslot", "timeslot", TutorialTimeslot),
    ("day", "day", TutorialDay),
)

TEACHING_ASSISTANT_FIELDS: FieldTable = (
    ("name", "name", TeachingAssistantName),
    ("module", "module", TutorialModule),
    ("phone", "phone", Phone),
    ("email", "email", Email),
    ("telegram", "telegram", Telegram),
)

TAGS_KEY = "tagged"
TAGS_LIST_MESSAGE = "Tags should be stored as a list of tag names."


# === freeze ===


def freeze_student(student: Student) -> dict[str, Any]:
    data = _freeze_fields(student, STUDENT_FIELDS)
    data[TAGS_KEY] = _freeze_tags(student.tags)
    return data


def freeze_tutorial(tutorial: Tutorial) -> dict[str, Any]:
    return _freeze_fields(tutorial, TUTORIAL_FIELDS)


def freeze_teaching_assistant(teaching_assistant: TeachingAssistant) -> dict[str, Any]:
    data = _freeze_fields(teaching_assistant, TEACHING_ASSISTANT_FIELDS)
    data[TAGS_KEY] = _freeze_tags(teaching_assistant.tags)
    return data


def _freeze_fields(record: Any, fields: FieldTable) -> dict[str, Any]:
    return {key: getattr(record, attr).value for key, attr, _ in fields}


def _freeze_tags(tags: Iterable[Tag]) -> list[str]:
    return sorted(tag.value for tag in tags)


# === thaw ===


def thaw_student(data: Mapping[str, Any]) -> Student:
    """
    Rebuilds a `Student` from a frozen dictionary.

    Args:
        data (Mapping[str, Any]): A dictionary produced by `freeze_student()` or read from disk.

    Returns:
        The reconstructed `Student`.

    Raises:
        TypeError: If `data` is not a mapping.
        MissingFieldError: If a required field is absent or null.
        InvalidFieldError: If a field is present but fails validation.
    """
    # tags are checked only once every scalar field has passed
    fields = _thaw_fields(data, "Student", STUDENT_FIELDS)
    return Student(**fields, tags=_thaw_tags(data))


def thaw_tutorial(data: Mapping[str, Any]) -> Tutorial:
    """
    Rebuilds a `Tutorial` from a frozen dictionary.

    Raises:
        TypeError: If `data` is not a mapping.
        MissingFieldError: If a required field is absent or null.
        InvalidFieldError: If a field is present but fails validation.
    """
    return Tutorial(**_thaw_fields(data, "Tutorial", TUTORIAL_FIELDS))


def thaw_teaching_assistant(data: Mapping[str, Any]) -> TeachingAssistant:
    fields = _thaw_fields(data, "TeachingAssistant", TEACHING_ASSISTANT_FIELDS)
    return TeachingAssistant(**fields, tags=_thaw_tags(data))


def _thaw_fields(
    data: Mapping[str, Any], entity: str, fields: FieldTable
) -> dict[str, ConstrainedValue]:
    if not isinstance(data, Mapping):
        raise TypeError(
            f"{entity} record must be a JSON object, not {type(data).__name__}."
        )

    thawed = {}
    for key, attr, value_type in fields:
        thawed[attr] = _thaw_field(data, entity, key, value_type)

    return thawed


def _thaw_field(
    data: Mapping[str, Any],
    entity: str,
    key: str,
    value_type: type[ConstrainedValue],
) -> ConstrainedValue:
    raw = data.get(key)

    if raw is None:
        raise MissingFieldError(entity, key)

    if not value_type.is_valid(raw):
        raise InvalidFieldError(key, value_type.MESSAGE_CONSTRAINTS)

    return value_type(raw)


def _thaw_tags(data: Mapping[str, Any]) -> frozenset[Tag]:
    raw_tags = data.get(TAGS_KEY)

    if raw_tags is None:
        return frozenset()

    if not isinstance(raw_tags, list):
        raise InvalidFieldError(TAGS_KEY, TAGS_LIST_MESSAGE)

    tags = set()
    for raw_tag in raw_tags:
        if not Tag.is_valid(raw_tag):
            raise InvalidFieldError(TAGS_KEY, Tag.MESSAGE_CONSTRAINTS)
        tags.add(Tag(raw_tag))

    return frozenset(tags)
