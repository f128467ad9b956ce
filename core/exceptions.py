# core/exceptions.py

"""
Error taxonomy for the roster.

Every error derives from `RosterError`, which is a `ValueError` so that callers handling
plain validation failures keep working. Each error carries a user-displayable `message`.
"""


class RosterError(ValueError):
    """Base exception for all roster-related errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RosterError):
    """Raised when raw input does not satisfy a value type's format rule."""

    pass


class MissingFieldError(RosterError):
    """Raised when a required field is absent from a persisted record."""

    MESSAGE_FORMAT = "{entity}'s {field} field is missing!"

    def __init__(self, entity: str, field: str):
        super().__init__(self.MESSAGE_FORMAT.format(entity=entity, field=field))
        self.entity = entity
        self.field = field


class InvalidFieldError(RosterError):
    """Raised when a persisted field is present but fails re-validation."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class DuplicateRecordError(RosterError):
    """Raised when a new or edited record has the same identity as an existing one."""

    pass


class ScheduleClashError(RosterError):
    """Raised when a new or edited tutorial shares venue and timeslot with another."""

    pass


class RecordNotFoundError(RosterError):
    """Raised when the target of an edit or removal is not in the roster."""

    pass
