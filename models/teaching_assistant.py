# models/teaching_assistant.py

"""
Represents a fellow teaching assistant for a module, kept for contact purposes.
"""

from __future__ import annotations

from typing import Any, Iterable

import core.formatters as formatters
from core.utils import require_all_instances, require_all_present
from models.values import (
    Email,
    Phone,
    Tag,
    TeachingAssistantName,
    Telegram,
    TutorialModule,
)


class TeachingAssistant:

    def __init__(
        self,
        name: TeachingAssistantName,
        module: TutorialModule,
        phone: Phone,
        email: Email,
        telegram: Telegram,
        tags: Iterable[Tag] = (),
    ):
        require_all_present(
            "TeachingAssistant",
            name=name,
            module=module,
            phone=phone,
            email=email,
            telegram=telegram,
            tags=tags,
        )
        self._name = name
        self._module = module
        self._phone = phone
        self._email = email
        self._telegram = telegram
        self._tags: frozenset[Tag] = require_all_instances(
            "TeachingAssistant", "tags", tags, Tag
        )

    # === properties ===

    @property
    def name(self) -> TeachingAssistantName:
        return self._name

    @property
    def module(self) -> TutorialModule:
        return self._module

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
    def tags(self) -> frozenset[Tag]:
        return self._tags

    # === derived records ===

    def replace(self, **changes: Any) -> TeachingAssistant:
        fields = self._fields()
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(
                f"Unknown TeachingAssistant fields: {', '.join(sorted(unknown))}."
            )

        fields.update(changes)
        return TeachingAssistant(**fields)

    # === equality ===

    def is_same_identity(self, other: TeachingAssistant | None) -> bool:
        if other is self:
            return True

        return other is not None and other.name == self._name

    def _fields(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "module": self._module,
            "phone": self._phone,
            "email": self._email,
            "telegram": self._telegram,
            "tags": self._tags,
        }

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TeachingAssistant):
            return NotImplemented

        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(tuple(self._fields().values()))

    def __repr__(self) -> str:
        return f"TeachingAssistant({self._name}, {self._module})"

    def __str__(self) -> str:
        return formatters.format_labeled_fields(
            self._name,
            [
                ("Module", self._module),
                ("Phone", self._phone),
                ("Email", self._email),
                ("Telegram", self._telegram),
                ("Tags", formatters.format_tags(self._tags)),
            ],
        )
