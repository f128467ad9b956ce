# models/roster.py

"""
The Roster is the central data object and the "source of truth" for all records.

It holds every Student, Tutorial and TeachingAssistant and enforces the cross-record rules on
every insert and edit:
- no two students share a name
- no two tutorials share a name, and no two tutorials share both venue and timeslot
- no two teaching assistants share a name

An edit replaces one record with a new one. The checks then run against every other
record, so a record can be edited back to itself. A failed insert, edit or removal leaves
the roster untouched.

Loading is all-or-nothing. Every record is thawed and inserted into a staging roster,
and the contents are swapped in only when the whole document has been accepted.
`load()` and `save()` cross the storage boundary and report through `Response` objects.
The in-memory manipulators raise the errors in `core.exceptions` directly.

A student's tutorial module and name are not checked against the roster's tutorials.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable

from core.exceptions import (
    DuplicateRecordError,
    InvalidFieldError,
    MissingFieldError,
    RecordNotFoundError,
    RosterError,
    ScheduleClashError,
)
from core.response import ErrorCode, Response
from models.student import Student
from models.teaching_assistant import TeachingAssistant
from models.tutorial import Tutorial
from models.types import RecordType
from storage.json_adapters import (
    freeze_student,
    freeze_teaching_assistant,
    freeze_tutorial,
    thaw_student,
    thaw_teaching_assistant,
    thaw_tutorial,
)

STUDENTS_KEY = "students"
TUTORIALS_KEY = "tutorials"
TEACHING_ASSISTANTS_KEY = "teachingAssistants"


class Roster:

    def __init__(self, logger: logging.Logger | None = None):
        self._students: list[Student] = []
        self._tutorials: list[Tutorial] = []
        self._teaching_assistants: list[TeachingAssistant] = []
        self._unsaved_changes: bool = False
        self._logger = logger or logging.getLogger(__name__)

    # === properties ===

    # --- core data structures ---

    @property
    def students(self) -> tuple[Student, ...]:
        return tuple(self._students)

    @property
    def tutorials(self) -> tuple[Tutorial, ...]:
        return tuple(self._tutorials)

    @property
    def teaching_assistants(self) -> tuple[TeachingAssistant, ...]:
        return tuple(self._teaching_assistants)

    # --- status markers ---

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    # === public classmethods ===

    @classmethod
    def load(cls, file_path: str, logger: logging.Logger | None = None) -> Response:
        """
        Loads previously serialized data from disk and returns a `Roster` instance.

        Args:
            file_path (str): The path of the roster JSON file.
            logger (logging.Logger | None): Optional logger for the new roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every record was read, thawed and accepted.
                    - False if the file is missing or malformed, or if any record fails.
                - detail (str | None):
                    - On failure, a human-readable description of the first error.
                    - On success, a summary of the loaded record counts.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the file does not exist.
                    - `ErrorCode.INVALID_INPUT` if the JSON cannot be parsed or is wrongly structured.
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if MissingFieldError raised.
                    - `ErrorCode.INVALID_FIELD_VALUE` if InvalidFieldError raised.
                    - `ErrorCode.DUPLICATE_RECORD` if DuplicateRecordError raised.
                    - `ErrorCode.SCHEDULE_CLASH` if ScheduleClashError raised.
                    - `ErrorCode.INTERNAL_ERROR` for I/O and unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the file does not exist
                    - 400 on other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "roster" (Roster): The newly loaded `Roster` object.
                    - On failure:
                        - None

        Notes:
            - Loading is fail-fast: malformed records are never skipped or repaired.
        """
        roster = cls(logger)

        try:
            with open(file_path, "r") as f:
                data = json.load(f)

            roster.import_data(data)

        except FileNotFoundError as e:
            return roster._fail_load(
                f"Roster file not found: {e}", ErrorCode.NOT_FOUND, 404
            )

        except json.JSONDecodeError as e:
            return roster._fail_load(
                f"Failed to parse JSON data: {e}", ErrorCode.INVALID_INPUT
            )

        except MissingFieldError as e:
            return roster._fail_load(
                f"Missing required field: {e}", ErrorCode.MISSING_REQUIRED_FIELD
            )

        except InvalidFieldError as e:
            return roster._fail_load(
                f"Invalid field value for '{e.field}': {e}",
                ErrorCode.INVALID_FIELD_VALUE,
            )

        except DuplicateRecordError as e:
            return roster._fail_load(
                f"Unique record validation failed: {e}", ErrorCode.DUPLICATE_RECORD
            )

        except ScheduleClashError as e:
            return roster._fail_load(
                f"Schedule validation failed: {e}", ErrorCode.SCHEDULE_CLASH
            )

        except TypeError as e:
            return roster._fail_load(
                f"Malformed roster data: {e}", ErrorCode.INVALID_INPUT
            )

        except OSError as e:
            return roster._fail_load(
                f"Failed to read data from disk: {e}", ErrorCode.INTERNAL_ERROR
            )

        except Exception as e:
            return roster._fail_load(f"Unexpected error: {e}", ErrorCode.INTERNAL_ERROR)

        else:
            detail = (
                f"Loaded {len(roster._students)} students, "
                f"{len(roster._tutorials)} tutorials and "
                f"{len(roster._teaching_assistants)} teaching assistants."
            )
            roster._logger.info("%s (%s)", detail, file_path)

            return Response.succeed(
                detail=detail,
                data={
                    "roster": roster,
                },
            )

    # === persistence and import ===

    def save(self, file_path: str) -> Response:
        """
        Serializes and saves the roster to disk in JSON format.

        Args:
            file_path (str): The path of the roster JSON file. Its directory must exist.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the roster was written to disk.
                    - False for serialization or I/O failures.
                - detail (str | None):
                    - On success, "Roster successfully saved to disk."
                    - On failure, a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if the data is not JSON serializable.
                    - `ErrorCode.INTERNAL_ERROR` if OSError raised or for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - This intentionally overwrites existing data.
            - `has_unsaved_changes` is cleared only on success.
        """
        try:
            with open(file_path, "w") as f:
                json.dump(self.to_dict(), f, indent=2)

        except TypeError as e:
            self._logger.error("Failed to serialize roster: %s", e)
            return Response.fail(
                detail=f"Object not JSON serializable: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            self._logger.error("Failed to write roster to %s: %s", file_path, e)
            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        except Exception as e:
            self._logger.error("Unexpected error while saving roster: %s", e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._unsaved_changes = False
            self._logger.info("Roster saved to %s", file_path)

            return Response.succeed(detail="Roster successfully saved to disk.")

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            STUDENTS_KEY: [freeze_student(s) for s in self._students],
            TUTORIALS_KEY: [freeze_tutorial(t) for t in self._tutorials],
            TEACHING_ASSISTANTS_KEY: [
                freeze_teaching_assistant(ta) for ta in self._teaching_assistants
            ],
        }

    def import_data(self, data: Mapping[str, Any]) -> None:
        """
        Replaces the roster contents with the records in a frozen roster document.

        Args:
            data (Mapping[str, Any]): A dictionary shaped like the output of `to_dict()`.
                A missing record list is treated as empty.

        Raises:
            TypeError: If the document or one of its record lists is wrongly structured.
            MissingFieldError: If any record lacks a required field.
            InvalidFieldError: If any record holds an invalid field value.
            DuplicateRecordError: If two records share an identity.
            ScheduleClashError: If two tutorials share venue and timeslot.

        Notes:
            - All-or-nothing: on any error the roster keeps its previous contents.
            - Clears `has_unsaved_changes` on success, since the contents match the source.
        """
        if not isinstance(data, Mapping):
            raise TypeError(
                f"Roster data must be a JSON object, not {type(data).__name__}."
            )

        staging = Roster(self._logger)

        staging._import_records(data, STUDENTS_KEY, thaw_student, staging.add_student)
        staging._import_records(
            data, TUTORIALS_KEY, thaw_tutorial, staging.add_tutorial
        )
        staging._import_records(
            data,
            TEACHING_ASSISTANTS_KEY,
            thaw_teaching_assistant,
            staging.add_teaching_assistant,
        )

        self._students = staging._students
        self._tutorials = staging._tutorials
        self._teaching_assistants = staging._teaching_assistants
        self._unsaved_changes = False

    def _import_records(
        self,
        data: Mapping[str, Any],
        key: str,
        thaw_fn: Callable[[Mapping[str, Any]], RecordType],
        add_fn: Callable[[RecordType], None],
    ) -> None:
        """
        Thaws and inserts one list of records, failing fast on the first bad record.

        Args:
            data (Mapping[str, Any]): The whole roster document.
            key (str): The document key of the record list (e.g., "students").
            thaw_fn (Callable): Rebuilds a record from its dictionary.
            add_fn (Callable): Inserts a record, enforcing the cross-record rules.
        """
        raw_records = data.get(key, [])

        if not isinstance(raw_records, list):
            raise TypeError(f"Roster '{key}' must be a list of records.")

        for position, raw_record in enumerate(raw_records):
            try:
                add_fn(thaw_fn(raw_record))

            except (RosterError, TypeError) as e:
                self._logger.warning(
                    "Rejected %s record #%d: %s", key, position, e
                )
                raise

    # === data accessors ===

    def has_student(self, student: Student) -> bool:
        return any(s.is_same_identity(student) for s in self._students)

    def has_tutorial(self, tutorial: Tutorial) -> bool:
        return any(t.is_same_identity(tutorial) for t in self._tutorials)

    def has_teaching_assistant(self, teaching_assistant: TeachingAssistant) -> bool:
        return any(
            ta.is_same_identity(teaching_assistant) for ta in self._teaching_assistants
        )

    def filter_students(
        self, predicate: Callable[[Student], bool] | None = None
    ) -> list[Student]:
        if predicate:
            return list(filter(predicate, self._students))
        else:
            return list(self._students)

    def students_in_tutorial(self, tutorial: Tutorial) -> list[Student]:
        """
        Returns the students whose tutorial module and name both match the given tutorial.
        """
        return self.filter_students(
            lambda s: s.tutorial_module == tutorial.module
            and s.tutorial_name == tutorial.name
        )

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        """
        Marks the roster as having unsaved changes.
        """
        self._unsaved_changes = True

    # --- generalized record operations ---

    def _add_record(
        self,
        record: RecordType,
        records: list[RecordType],
        validate_fn: Callable[[RecordType, int | None], None],
    ) -> None:
        validate_fn(record, None)

        records.append(record)
        self._mark_dirty()

    def _set_record(
        self,
        target: RecordType,
        edited: RecordType,
        records: list[RecordType],
        validate_fn: Callable[[RecordType, int | None], None],
    ) -> None:
        index = self._index_of(target, records)
        validate_fn(edited, index)

        records[index] = edited
        self._mark_dirty()

    def _remove_record(self, record: RecordType, records: list[RecordType]) -> None:
        del records[self._index_of(record, records)]
        self._mark_dirty()

    # --- student manipulation ---

    def add_student(self, student: Student) -> None:
        """
        Adds a `Student` to the roster.

        Raises:
            DuplicateRecordError: If a student with the same name already exists.
        """
        self._add_record(student, self._students, self._validate_student)

    def set_student(self, target: Student, edited: Student) -> None:
        """
        Replaces `target` with `edited`, keeping its position in the roster.

        Raises:
            RecordNotFoundError: If `target` is not in the roster.
            DuplicateRecordError: If `edited` shares a name with any other student.
        """
        self._set_record(target, edited, self._students, self._validate_student)

    def remove_student(self, student: Student) -> None:
        self._remove_record(student, self._students)

    # --- tutorial manipulation ---

    def add_tutorial(self, tutorial: Tutorial) -> None:
        """
        Adds a `Tutorial` to the roster.

        Raises:
            DuplicateRecordError: If a tutorial with the same name already exists.
            ScheduleClashError: If a tutorial with the same venue and timeslot already exists.
        """
        self._add_record(tutorial, self._tutorials, self._validate_tutorial)

    def set_tutorial(self, target: Tutorial, edited: Tutorial) -> None:
        """
        Replaces `target` with `edited`, keeping its position in the roster.

        Raises:
            RecordNotFoundError: If `target` is not in the roster.
            DuplicateRecordError: If `edited` shares a name with any other tutorial.
            ScheduleClashError: If `edited` shares venue and timeslot with any other tutorial.
        """
        self._set_record(target, edited, self._tutorials, self._validate_tutorial)

    def remove_tutorial(self, tutorial: Tutorial) -> None:
        self._remove_record(tutorial, self._tutorials)

    # --- teaching assistant manipulation ---

    def add_teaching_assistant(self, teaching_assistant: TeachingAssistant) -> None:
        self._add_record(
            teaching_assistant,
            self._teaching_assistants,
            self._validate_teaching_assistant,
        )

    def set_teaching_assistant(
        self, target: TeachingAssistant, edited: TeachingAssistant
    ) -> None:
        self._set_record(
            target,
            edited,
            self._teaching_assistants,
            self._validate_teaching_assistant,
        )

    def remove_teaching_assistant(self, teaching_assistant: TeachingAssistant) -> None:
        self._remove_record(teaching_assistant, self._teaching_assistants)

    # === data validators ===

    def _validate_student(self, student: Student, ignore_index: int | None) -> None:
        self.require_unique_identity(student, self._students, "student", ignore_index)

    def _validate_tutorial(self, tutorial: Tutorial, ignore_index: int | None) -> None:
        self.require_unique_identity(tutorial, self._tutorials, "tutorial", ignore_index)
        self.require_no_schedule_clash(tutorial, ignore_index)

    def _validate_teaching_assistant(
        self, teaching_assistant: TeachingAssistant, ignore_index: int | None
    ) -> None:
        self.require_unique_identity(
            teaching_assistant,
            self._teaching_assistants,
            "teaching assistant",
            ignore_index,
        )

    def require_unique_identity(
        self,
        record: RecordType,
        records: list[RecordType],
        record_name: str,
        ignore_index: int | None = None,
    ) -> None:
        """
        Validates that no other record has the same identity as the given one.

        Args:
            record (RecordType): The new or edited record.
            records (list[RecordType]): The roster list the record belongs in.
            record_name (str): A human-readable name used in the error message.
            ignore_index (int | None): Position of the record being replaced, if editing.

        Raises:
            DuplicateRecordError: If another record has weak identity equality with `record`.
        """
        for index, existing in enumerate(records):
            if index != ignore_index and existing.is_same_identity(record):
                raise DuplicateRecordError(
                    f"A {record_name} named '{record.name}' already exists in the roster."
                )

    def require_no_schedule_clash(
        self, tutorial: Tutorial, ignore_index: int | None = None
    ) -> None:
        """
        Validates that no other tutorial is held at the same venue in the same timeslot.

        Args:
            tutorial (Tutorial): The new or edited tutorial.
            ignore_index (int | None): Position of the tutorial being replaced, if editing.

        Raises:
            ScheduleClashError: If another tutorial clashes with `tutorial`.
        """
        for index, existing in enumerate(self._tutorials):
            if index != ignore_index and existing.is_clash(tutorial):
                raise ScheduleClashError(
                    f"Tutorial '{tutorial.name}' clashes with '{existing.name}' "
                    f"at {tutorial.venue} during {tutorial.timeslot}."
                )

    # === helper methods ===

    def _index_of(self, record: RecordType, records: list[RecordType]) -> int:
        try:
            return records.index(record)

        except ValueError:
            raise RecordNotFoundError(
                f"No matching record could be found in the roster: {record.name}."
            )

    def _fail_load(
        self, detail: str, error: ErrorCode, status_code: int = 400
    ) -> Response:
        self._logger.warning("Roster load failed: %s", detail)

        return Response.fail(detail=detail, error=error, status_code=status_code)
