# models/student.py

"""
Represents a student on a teaching assistant's roster.

A `Student` is built from already-validated value types (see `models.values`) and never
changes after construction. Editing a student means building a new one, usually with
`replace()`, and swapping it into the `Roster`.

Three notions of equality are exposed:
- `is_same_identity()`: weak equality on the name alone, used for duplicate detection
- `==`: full structural equality over every field, tags included
- `hash()`: consistent with `==`
"""

from __future__ import annotations

from typing import Any, Iterable

import core.formatters as formatters
from core.utils import require_all_instances, require_all_present
from models.values import (
    Attendance,
    Email,
    Grade,
    Name,
    Participation,
    Phone,
    StudentId,
    Tag,
    Telegram,
    TutorialModule,
    TutorialName,
)


class Student:

    def __init__(
        self,
        name: Name,
        id: StudentId,
        phone: Phone,
        email: Email,
        telegram: Telegram,
        tutorial_module: TutorialModule,
        tutorial_name: TutorialName,
        attendance: Attendance,
        participation: Participation,
        grade: Grade,
        tags: Iterable[Tag],
    ):
        require_all_present(
            "Student",
            name=name,
            id=id,
            phone=phone,
            email=email,
            telegram=telegram,
            tutorial_module=tutorial_module,
            tutorial_name=tutorial_name,
            attendance=attendance,
            participation=participation,
            grade=grade,
            tags=tags,
        )
        self._name = name
        self._id = id
        self._phone = phone
        self._email = email
        self._telegram = telegram
        self._tutorial_module = tutorial_module
        self._tutorial_name = tutorial_name
        self._attendance = attendance
        self._participation = participation
        self._grade = grade
        self._tags: frozenset[Tag] = require_all_instances("Student", "tags", tags, Tag)

    # === public classmethods ===

    @classmethod
    def create(
        cls,
        name: Name,
        id: StudentId,
        phone: Phone,
        email: Email,
        telegram: Telegram,
        tutorial_module: TutorialModule,
        tutorial_name: TutorialName,
        attendance: Attendance | None = None,
        participation: Participation | None = None,
        grade: Grade | None = None,
        tags: Iterable[Tag] = (),
    ) -> Student:
        """
        Builds a new `Student`, filling the optional academic fields with their defaults.

        Attendance and participation default to zero and the grade defaults to pending.
        Every other field is required.
        """
        return cls(
            name=name,
            id=id,
            phone=phone,
            email=email,
            telegram=telegram,
            tutorial_module=tutorial_module,
            tutorial_name=tutorial_name,
            attendance=attendance if attendance is not None else Attendance("0"),
            participation=(
                participation if participation is not None else Participation("0")
            ),
            grade=grade if grade is not None else Grade(Grade.PENDING),
            tags=tags,
        )

    # === properties ===

    @property
    def name(self) -> Name:
        return self._name

    @property
    def id(self) -> StudentId:
        return self._id

    @property
    def phone(self) -> Phone:
        return self._phone

    @property
    def email(self) -> Email:
        return self._email

    @property
    def telegram(self) -> Telegram:
        return self._telegram

    @property
    def tutorial_module(self) -> TutorialModule:
        return self._tutorial_module

    @property
    def tutorial_name(self) -> TutorialName:
        return self._tutorial_name

    @property
    def attendance(self) -> Attendance:
        return self._attendance

    @property
    def participation(self) -> Participation:
        return self._participation

    @property
    def grade(self) -> Grade:
        return self._grade

    @property
    def tags(self) -> frozenset[Tag]:
        return self._tags

    # === derived records ===

    def replace(self, **changes: Any) -> Student:
        """
        Returns a new `Student` with the given fields swapped in and all others kept.

        Raises:
            TypeError: If a keyword does not name a `Student` field.
        """
        fields = self._fields()
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown Student fields: {', '.join(sorted(unknown))}.")

        fields.update(changes)
        return Student(**fields)

    # === equality ===

    def is_same_identity(self, other: Student | None) -> bool:
        """
        Returns True if both students have the same name.

        This is deliberately weaker than `==`: two students with the same name but
        different contact details are treated as the same record.
        """
        if other is self:
            return True

        return other is not None and other.name == self._name

    def _fields(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "id": self._id,
            "phone": self._phone,
            "email": self._email,
            "telegram": self._telegram,
            "tutorial_module": self._tutorial_module,
            "tutorial_name": self._tutorial_name,
            "attendance": self._attendance,
            "participation": self._participation,
            "grade": self._grade,
            "tags": self._tags,
        }

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented

        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(tuple(self._fields().values()))

    def __repr__(self) -> str:
        return f"Student({self._name}, {self._id}, {self._tutorial_module}, {self._tutorial_name})"

    def __str__(self) -> str:
        return formatters.format_labeled_fields(
            self._name,
            [
                ("ID", self._id),
                ("Phone", self._phone),
                ("Email", self._email),
                ("Telegram", self._telegram),
                ("Module", self._tutorial_module),
                ("Tutorial", self._tutorial_name),
                ("Attendance", self._attendance),
                ("Participation", self._participation),
                ("Grade", self._grade),
                ("Tags", formatters.format_tags(self._tags)),
            ],
        )
