# models/values.py

"""
Immutable, self-validating value types used by every roster record.

Each field type is a `ConstrainedValue` subclass that declares only its format rule:
- `VALIDATION_REGEX`: the pattern the whole input must match
- `VALIDATION_FLAGS`: optional `re` flags for the pattern
- `MESSAGE_CONSTRAINTS`: the fixed, user-displayable description of the rule
- `_satisfies_rule()`: optional extra check beyond the pattern (bounds, ordering)
- `_normalize()`: optional mapping of valid input to its canonical form

Construction is the only way to obtain a value, and it always validates. Invalid input
raises `ValidationError` with the type's `MESSAGE_CONSTRAINTS`. Values never change after
construction, compare equal only to values of the same type with the same canonical
text, and render as that canonical text.
"""

from __future__ import annotations

import datetime
import re
from typing import Any

from core.exceptions import ValidationError


class ConstrainedValue:
    MESSAGE_CONSTRAINTS: str = ""
    VALIDATION_REGEX: str = ""
    VALIDATION_FLAGS: int = 0

    def __init__(self, value: str):
        if value is None:
            raise TypeError(f"{type(self).__name__} requires a value.")

        if not type(self).is_valid(value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

        object.__setattr__(self, "_value", type(self)._normalize(value))

    # === public classmethods ===

    @classmethod
    def parse(cls, raw: str):
        """
        Builds a value from raw user input, ignoring surrounding whitespace.

        Args:
            raw (str): The untrimmed input string.

        Returns:
            A valid instance of the calling type.

        Raises:
            TypeError: If `raw` is None.
            ValidationError: If the trimmed input does not satisfy the format rule.
        """
        if raw is None:
            raise TypeError(f"{cls.__name__} requires a value.")

        return cls(raw.strip() if isinstance(raw, str) else raw)

    @classmethod
    def is_valid(cls, test: Any) -> bool:
        if not isinstance(test, str):
            return False

        if re.fullmatch(cls.VALIDATION_REGEX, test, cls.VALIDATION_FLAGS) is None:
            return False

        return cls._satisfies_rule(test)

    # === hooks ===

    @classmethod
    def _satisfies_rule(cls, value: str) -> bool:
        return True

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value

    # === properties ===

    @property
    def value(self) -> str:
        return self._value

    # === dunder methods ===

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return self._value


# === identity ===


class StudentId(ConstrainedValue):
    MESSAGE_CONSTRAINTS = (
        "ID should follow the format AXXXXXXXY, where X is a digit and A and Y are letters."
    )
    VALIDATION_REGEX = r"[A-Za-z][0-9]{7}[A-Za-z]"

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.upper()


# === display names ===


class DisplayName(ConstrainedValue):
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank."
    )
    # the first character must not be a space, otherwise " " would be a valid name
    VALIDATION_REGEX = r"[A-Za-z0-9][A-Za-z0-9 ]*"


class Name(DisplayName):
    pass


class TutorialName(DisplayName):
    pass


class TeachingAssistantName(DisplayName):
    pass


# === contact details ===


class Phone(ConstrainedValue):
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long."
    )
    VALIDATION_REGEX = r"[0-9]{3,}"


class Email(ConstrainedValue):
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain. "
        "The local-part should only contain alphanumeric characters and the special "
        "characters +_.-, and may not start or end with a special character or have two "
        "in a row. The domain is made up of labels separated by periods; each label starts "
        "and ends with an alphanumeric character, may contain hyphens, and the last label "
        "is at least 2 characters long."
    )
    _LOCAL_PART = r"[A-Za-z0-9]+(?:[+_.\-][A-Za-z0-9]+)*"
    _DOMAIN_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?"
    _DOMAIN_LAST_LABEL = r"[A-Za-z0-9][A-Za-z0-9\-]*[A-Za-z0-9]"
    VALIDATION_REGEX = rf"{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)*{_DOMAIN_LAST_LABEL}"


class Telegram(ConstrainedValue):
    MESSAGE_CONSTRAINTS = (
        "Telegram handles should start with a letter and contain 5 to 32 letters, "
        "digits or underscores, optionally preceded by '@'."
    )
    VALIDATION_REGEX = r"@?[A-Za-z][A-Za-z0-9_]{4,31}"

    @classmethod
    def _normalize(cls, value: str) -> str:
        return "@" + value.lstrip("@")


# === tutorial details ===


class TutorialModule(ConstrainedValue):
    MESSAGE_CONSTRAINTS = (
        "Module codes should consist of 2 to 4 letters, followed by 4 digits "
        "and an optional suffix of up to 2 letters, e.g. CS2103T."
    )
    VALIDATION_REGEX = r"[A-Za-z]{2,4}[0-9]{4}[A-Za-z]{0,2}"

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.upper()


class TutorialVenue(ConstrainedValue):
    MESSAGE_CONSTRAINTS = "Venue can take any value, and it should not be blank."
    VALIDATION_REGEX = r"\S.*"


class TutorialTimeslot(ConstrainedValue):
    MESSAGE_CONSTRAINTS = (
        "Timeslot should be of the format HH:MM-HH:MM using the 24-hour clock, "
        "and the start time should be before the end time."
    )
    _TIME = r"(?:[01][0-9]|2[0-3]):[0-5][0-9]"
    VALIDATION_REGEX = rf"{_TIME}-{_TIME}"

    @classmethod
    def _satisfies_rule(cls, value: str) -> bool:
        # zero-padded HH:MM strings order the same way as the times they denote
        start, end = value.split("-")
        return start < end

    @property
    def start(self) -> datetime.time:
        return datetime.datetime.strptime(self._value.split("-")[0], "%H:%M").time()

    @property
    def end(self) -> datetime.time:
        return datetime.datetime.strptime(self._value.split("-")[1], "%H:%M").time()


class TutorialDay(ConstrainedValue):
    DAYS = (
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    )
    MESSAGE_CONSTRAINTS = "Day should be one of " + ", ".join(DAYS) + "."
    VALIDATION_REGEX = "|".join(DAYS)
    VALIDATION_FLAGS = re.IGNORECASE

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.capitalize()


# === academic records ===


class BoundedCount(ConstrainedValue):
    MAXIMUM: int = 0
    VALIDATION_REGEX = r"[0-9]+"

    @classmethod
    def _satisfies_rule(cls, value: str) -> bool:
        # compare digit counts first so int() never sees an arbitrarily long string
        digits = cls._normalize(value)
        return len(digits) <= len(str(cls.MAXIMUM)) and int(digits) <= cls.MAXIMUM

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.lstrip("0") or "0"

    @property
    def count(self) -> int:
        return int(self._value)


class Attendance(BoundedCount):
    MAXIMUM = 99
    MESSAGE_CONSTRAINTS = f"Attendance should be a non-negative integer no greater than {MAXIMUM}."


class Participation(BoundedCount):
    MAXIMUM = 999
    MESSAGE_CONSTRAINTS = (
        f"Participation should be a non-negative integer no greater than {MAXIMUM}."
    )


class Grade(ConstrainedValue):
    PENDING = "PENDING..."
    GRADES = ("A+", "A", "A-", "B+", "B", "B-", "C+", "C", "D+", "D", "F")
    MESSAGE_CONSTRAINTS = "Grade should be one of " + ", ".join(GRADES) + f", or {PENDING}"
    VALIDATION_REGEX = "|".join(re.escape(g) for g in (*GRADES, PENDING))
    VALIDATION_FLAGS = re.IGNORECASE

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.upper()

    @property
    def is_pending(self) -> bool:
        return self._value == Grade.PENDING


class Tag(ConstrainedValue):
    MESSAGE_CONSTRAINTS = "Tag names should be alphanumeric and at most 30 characters long."
    VALIDATION_REGEX = r"[A-Za-z0-9]{1,30}"
