# models/roster.py

"""
The Roster model is the central data object of the program and the "source of truth" for all student records.

Records are kept in a list in insertion order, which is also their display order. Lookups are linear scans on
roll number; no index is maintained.

The roster owns its records outright: `add_record()` stores a copy of the record it is given, and every record
it hands back is a copy, so roll numbers can only change through the roster and always stay unique.

Provides explicit lifecycle methods: `initialize()` loads records from the bound `RecordStore` once at startup,
and `shutdown()` writes them back once at exit. Both report failure through a `Response` rather than raising,
so a corrupt or unwritable data file never stops the program.

Every manipulator either succeeds completely or leaves the roster exactly as it was.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence

from core.response import ErrorCode, Response
from models.record import Record
from models.record_store import CorruptDataError, RecordStore

logger = logging.getLogger(__name__)


class RecordsView(Sequence):
    """
    Read-only, restartable view over the roster's records in current order.

    Iteration reads the live list, so each pass reflects the roster as it is at that moment.
    Every record handed out is a copy; mutating it never changes the roster.
    """

    def __init__(self, records: list[Record]):
        self._records = records

    def __iter__(self) -> Iterator[Record]:
        return (record.copy() for record in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [record.copy() for record in self._records[index]]
        return self._records[index].copy()

    def __repr__(self) -> str:
        return f"RecordsView({self._records!r})"


class Roster:

    def __init__(self, store: RecordStore):
        self._store: RecordStore = store
        self._records: list[Record] = []
        self._unsaved_changes: bool = False

    # === properties ===

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def records(self) -> RecordsView:
        return RecordsView(self._records)

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    # === lifecycle ===

    def initialize(self) -> Response:
        """
        Loads all records from the bound `RecordStore`, replacing the current contents.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the data file was loaded, or if no data file exists yet.
                    - False if the data file is corrupt or cannot be read.
                - detail (str | None):
                    - On success, a message describing the outcome (fresh start or number of records found).
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | None):
                    - `ErrorCode.CORRUPT_DATA` if any stored record is malformed, or two share a roll number.
                    - `ErrorCode.IO_ERROR` if the file exists but cannot be read.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on corrupt data or unexpected errors
                    - 500 on read failures
                - data (dict): Payload with the following keys:
                    - "count" (int): The number of records now on the roster.

        Notes:
            - On failure the roster is left empty; a partially loaded roster is never kept.
            - On success the roster is marked clean.
        """
        fresh_start = not self._store.exists()

        try:
            loaded = self._store.load()

            seen: set[int] = set()
            for record in loaded:
                if record.roll_number in seen:
                    raise CorruptDataError(
                        f"Roll number {record.roll_number} appears more than once."
                    )
                seen.add(record.roll_number)

        except CorruptDataError as e:
            self._records = []
            logger.warning("Discarding data from %s: %s", self._store.path, e)
            return Response.fail(
                detail=f"Corrupted data in file: {e} Starting with empty database.",
                error=ErrorCode.CORRUPT_DATA,
                data={"count": 0},
            )

        except OSError as e:
            self._records = []
            logger.warning("Could not read %s: %s", self._store.path, e)
            return Response.fail(
                detail=f"Error reading from file: {e} Starting with empty database.",
                error=ErrorCode.IO_ERROR,
                status_code=500,
                data={"count": 0},
            )

        except Exception as e:
            self._records = []
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
                data={"count": 0},
            )

        else:
            self._records = loaded
            self._unsaved_changes = False

            if fresh_start:
                detail = "No existing data file found. Starting fresh."
            else:
                detail = f"Data loaded successfully. {len(loaded)} records found."

            return Response.succeed(detail=detail, data={"count": len(loaded)})

    def shutdown(self) -> Response:
        """
        Writes every record to the bound `RecordStore`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if all records were written.
                - detail (str | None): A confirmation with the record count, or a description of the failure.
                - error (ErrorCode | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if a record cannot be represented in the file format.
                    - `ErrorCode.IO_ERROR` if the file cannot be written.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 500 on write failures
                    - 400 for other failures
                - data (dict): Payload with the following keys:
                    - On success:
                        - "count" (int): The number of records stored.

        Notes:
            - This method does not mutate the roster. It clears the unsaved-changes flag on success.
        """
        try:
            count = self._store.save(self._records)

        except OSError as e:
            logger.warning("Could not save to %s: %s", self._store.path, e)
            return Response.fail(
                detail=f"Save failed: {e}",
                error=ErrorCode.IO_ERROR,
                status_code=500,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Save failed: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._unsaved_changes = False

            return Response.succeed(
                detail=f"Data saved successfully. {count} records stored.",
                data={"count": count},
            )

    # === data accessors ===

    def find_record(self, roll_number: int) -> Response:
        """
        Finds a `Record` by roll number with a linear scan.

        Args:
            roll_number (int): The roll number to look up.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if a matching record was found.
                - detail (str | None): On failure, a human-readable explanation.
                - error (ErrorCode | None):
                    - `ErrorCode.NOT_FOUND` if no record has that roll number.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Record): A copy of the matched record.
                        - "index" (int): Its position in display order.

        Notes:
            - This method is read-only and does not raise.
        """
        index = self._index_of(roll_number)

        if index is None:
            return Response.fail(
                detail=f"Student not found: no record with roll number {roll_number}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": self._records[index].copy(),
                "index": index,
            },
        )

    def list_records(self) -> Response:
        """
        Returns a restartable view over all records in display order.

        The payload key "records" holds a `RecordsView`; an empty view is a normal result.
        """
        return Response.succeed(data={"records": self.records})

    def statistics(self) -> Response:
        """
        Computes summary statistics over the marks of all records.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): False only when the roster is empty.
                - detail (str | None): On failure, a human-readable explanation.
                - error (ErrorCode | None):
                    - `ErrorCode.EMPTY_COLLECTION` if there are no records.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict): Payload with the following keys:
                    - On success:
                        - "count" (int): The number of records.
                        - "mean" (float): The arithmetic mean of all marks.
                        - "max" (float): The highest marks.
                        - "min" (float): The lowest marks.

        Notes:
            - This method is read-only.
            - "max" and "min" are values only; they do not identify which record holds them.
        """
        if not self._records:
            return Response.fail(
                detail="No students found!",
                error=ErrorCode.EMPTY_COLLECTION,
            )

        marks = [r.marks for r in self._records]

        return Response.succeed(
            data={
                "count": len(marks),
                "mean": math.fsum(marks) / len(marks),
                "max": max(marks),
                "min": min(marks),
            },
        )

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        self._unsaved_changes = True

    def add_record(self, record: Record) -> Response:
        """
        Appends a `Record` to the roster.

        Args:
            record (Record): The record to add.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was added.
                    - False if another record already uses the same roll number.
                - detail (str | None): A confirmation, or a human-readable description of the error.
                - error (ErrorCode | None):
                    - `ErrorCode.DUPLICATE_KEY` if the roll number is taken.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 409 if the roll number is taken
                    - 400 for other failures
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Record): A copy of the stored record.

        Notes:
            - This method mutates roster state and calls `_mark_dirty()` if successful.
            - The roster keeps its own copy; later changes to `record` do not reach the roster.
        """
        try:
            self.require_unique_roll_number(record.roll_number)

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.DUPLICATE_KEY,
                status_code=409,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        stored = record.copy()
        self._records.append(stored)
        self._mark_dirty()

        return Response.succeed(
            detail="Student added successfully!",
            data={
                "record": stored.copy(),
            },
        )

    def update_record(self, roll_number: int, name: str, marks: float) -> Response:
        """
        Replaces the name and marks of the record with the given roll number.

        Args:
            roll_number (int): The roll number of the record to update.
            name (str): The new name.
            marks (float): The new marks.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if both fields were updated.
                - detail (str | None): A confirmation, or a human-readable description of the error.
                - error (ErrorCode | None):
                    - `ErrorCode.NOT_FOUND` if no record has that roll number.
                    - `ErrorCode.INVALID_FIELD_VALUE` if either new value is invalid.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 400 on invalid input
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Record): A copy of the updated record.

        Notes:
            - Both values are validated before either is applied, so a failure leaves the record unchanged.
            - This method calls `_mark_dirty()` if successful.
        """
        find_response = self.find_record(roll_number)

        if not find_response.success:
            return find_response

        record = self._records[find_response.data["index"]]

        try:
            name = Record.validate_name_input(name)
            marks = Record.validate_marks_input(marks)

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        record.name = name
        record.marks = marks
        self._mark_dirty()

        return Response.succeed(
            detail="Student details updated successfully!",
            data={
                "record": record.copy(),
            },
        )

    def remove_record(self, roll_number: int) -> Response:
        """
        Removes the record with the given roll number, keeping the order of the rest.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the record was removed.
                - error (ErrorCode | None): `ErrorCode.NOT_FOUND` if no record has that roll number.
                - status_code (int | None): 200 on success, 404 if not found.
                - data (dict): On success, "record" (Record) holds the removed record.

        Notes:
            - This method calls `_mark_dirty()` if successful.
        """
        find_response = self.find_record(roll_number)

        if not find_response.success:
            return find_response

        record = self._records.pop(find_response.data["index"])
        self._mark_dirty()

        return Response.succeed(
            detail="Student deleted successfully!",
            data={
                "record": record,
            },
        )

    # === data validators ===

    def require_unique_roll_number(self, roll_number: int) -> None:
        """
        Validates that no existing record shares the given roll number.

        Raises:
            ValueError: If a record with the same roll number already exists.
        """
        if self._index_of(roll_number) is not None:
            raise ValueError(f"A student with roll number {roll_number} already exists.")

    # === helper methods ===

    def _index_of(self, roll_number: int) -> int | None:
        for i, record in enumerate(self._records):
            if record.roll_number == roll_number:
                return i
        return None

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __repr__(self) -> str:
        return f"Roster({self._store.path}, {len(self._records)} records)"
