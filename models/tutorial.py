# models/tutorial.py

"""
Represents a tutorial slot taught by the teaching assistant.

Like `Student`, a `Tutorial` is immutable; edits produce a new instance via `replace()`.

Besides full equality (`==`) and weak identity (`is_same_identity()`, name only), a
tutorial defines `is_clash()`: two tutorials clash when they share a venue and a
timeslot, regardless of name, module or day. The `Roster` rejects clashing tutorials.
"""

from __future__ import annotations

from typing import Any

import core.formatters as formatters
from core.utils import require_all_present
from models.values import (
    TutorialDay,
    TutorialModule,
    TutorialName,
    TutorialTimeslot,
    TutorialVenue,
)


class Tutorial:

    def __init__(
        self,
        name: TutorialName,
        module: TutorialModule,
        venue: TutorialVenue,
        timeslot: TutorialTimeslot,
        day: TutorialDay,
    ):
        require_all_present(
            "Tutorial",
            name=name,
            module=module,
            venue=venue,
            timeslot=timeslot,
            day=day,
        )
        self._name = name
        self._module = module
        self._venue = venue
        self._timeslot = timeslot
        self._day = day

    # === properties ===

    @property
    def name(self) -> TutorialName:
        return self._name

    @property
    def module(self) -> TutorialModule:
        return self._module

    @property
    def venue(self) -> TutorialVenue:
        return self._venue

    @property
    def timeslot(self) -> TutorialTimeslot:
        return self._timeslot

    @property
    def day(self) -> TutorialDay:
        return self._day

    # === derived records ===

    def replace(self, **changes: Any) -> Tutorial:
        fields = self._fields()
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown Tutorial fields: {', '.join(sorted(unknown))}.")

        fields.update(changes)
        return Tutorial(**fields)

    # === equality ===

    def is_same_identity(self, other: Tutorial | None) -> bool:
        """
        Returns True if both tutorials have the same name.
        """
        if other is self:
            return True

        return other is not None and other.name == self._name

    def is_clash(self, other: Tutorial | None) -> bool:
        """
        Returns True if both tutorials are held at the same venue in the same timeslot.

        A tutorial always clashes with itself.
        """
        if other is self:
            return True

        return (
            other is not None
            and other.venue == self._venue
            and other.timeslot == self._timeslot
        )

    def _fields(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "module": self._module,
            "venue": self._venue,
            "timeslot": self._timeslot,
            "day": self._day,
        }

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tutorial):
            return NotImplemented

        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(tuple(self._fields().values()))

    def __repr__(self) -> str:
        return f"Tutorial({self._name}, {self._module}, {self._venue}, {self._timeslot}, {self._day})"

    def __str__(self) -> str:
        return formatters.format_labeled_fields(
            self._name,
            [
                ("Module", self._module),
                ("Venue", self._venue),
                ("Timeslot", self._timeslot),
                ("Day", self._day),
            ],
        )
