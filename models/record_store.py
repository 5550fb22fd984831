# models/record_store.py

"""
Line-oriented persistence for `Record` objects.

Each record occupies three consecutive lines, in order: name, roll number, marks.
There is no header, no record count, and no separator between records; the end of
the file ends the sequence. A file whose line count is not a multiple of three, or
whose fields cannot be parsed, is treated as corrupt and nothing is returned from it.

Saving writes to a temporary file beside the destination and then replaces the
destination in one step, so a failed save leaves the previous contents in place.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from typing import Iterable

from models.record import Record

logger = logging.getLogger(__name__)

FIELDS_PER_RECORD = 3


class CorruptDataError(ValueError):
    """Raised when a persisted roster cannot be parsed into valid records."""


class RecordStore:

    def __init__(self, path: str):
        self._path: str = path

    # === properties ===

    @property
    def path(self) -> str:
        return self._path

    def exists(self) -> bool:
        return os.path.isfile(self._path)

    # === persistence and import ===

    def load(self) -> list[Record]:
        """
        Reads every record stored at `self.path`.

        Returns:
            The records in file order, or an empty list if the file does not exist.

        Raises:
            CorruptDataError: If any record is incomplete or has an unparsable or invalid field.
            OSError: If the file exists but cannot be read.
        """
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                text = f.read()

        except FileNotFoundError:
            logger.info("No data file at %s, starting with no records", self._path)
            return []

        except UnicodeDecodeError as e:
            raise CorruptDataError(f"Data file is not valid UTF-8 text: {e}") from e

        lines = [line.rstrip("\r") for line in text.split("\n")]

        # final newline
        if lines[-1] == "":
            lines.pop()

        if len(lines) % FIELDS_PER_RECORD != 0:
            logger.warning(
                "Data file %s ends with an incomplete record (%d lines)",
                self._path,
                len(lines),
            )
            raise CorruptDataError(
                f"Incomplete record at end of file: expected {FIELDS_PER_RECORD} fields per record."
            )

        records = [
            self._parse_record(lines[i : i + FIELDS_PER_RECORD], i + 1)
            for i in range(0, len(lines), FIELDS_PER_RECORD)
        ]

        logger.info("Loaded %d records from %s", len(records), self._path)

        return records

    def save(self, records: Iterable[Record]) -> int:
        """
        Writes all records to `self.path`, replacing any prior contents.

        Args:
            records (Iterable[Record]): The records to persist, in display order.

        Returns:
            The number of records written.

        Raises:
            ValueError: If a name contains a line break or cannot be encoded as UTF-8.
            OSError: If the temporary file cannot be created, written, or moved into place.

        Notes:
            - The destination is only replaced after every record has been written, and keeps its permission bits.
            - The temporary file is removed whenever the replace does not happen.
        """
        lines = []
        for record in records:
            lines.extend(self._format_record(record))

        directory = os.path.dirname(os.path.abspath(self._path))

        temp_path = None
        replaced = False

        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=directory,
                prefix=".roster-",
                suffix=".tmp",
                delete=False,
            ) as f:
                temp_path = f.name
                f.writelines(f"{line}\n" for line in lines)

            os.chmod(temp_path, self._target_mode())
            os.replace(temp_path, self._path)
            replaced = True

        finally:
            if not replaced and temp_path is not None and os.path.exists(temp_path):
                os.unlink(temp_path)

        count = len(lines) // FIELDS_PER_RECORD
        logger.info("Saved %d records to %s", count, self._path)

        return count

    # === helper methods ===

    def _target_mode(self) -> int:
        """
        Permission bits for the saved file: those of the existing file, or the umask default for a new one.
        """
        try:
            return stat.S_IMODE(os.stat(self._path).st_mode)

        except FileNotFoundError:
            # the umask can only be read by setting it
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def _parse_record(self, fields: list[str], line_number: int) -> Record:
        name, roll_number, marks = fields

        try:
            return Record(name, int(roll_number.strip()), float(marks.strip()))

        except ValueError as e:
            logger.warning(
                "Corrupt record at %s line %d: %s", self._path, line_number, e
            )
            raise CorruptDataError(
                f"Corrupt record starting at line {line_number}: {e}"
            ) from e

    @staticmethod
    def _format_record(record: Record) -> list[str]:
        if any(c in record.name for c in "\r\n"):
            raise ValueError(
                f"Name for roll number {record.roll_number} contains a line break and cannot be saved."
            )

        return [record.name, str(record.roll_number), format_marks(record.marks)]


def format_marks(marks: float) -> str:
    """
    Renders marks in the shortest text that parses back to the same value.
    """
    return str(int(marks)) if marks.is_integer() else repr(marks)
