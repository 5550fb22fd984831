# models/record.py

"""
Represents a single student on the roster.

Stores the student's name, roll number, and marks. The roll number is the identifying key
within a `Roster`, but uniqueness is enforced by the `Roster`, not here.

Includes functionality for:
- Validating and normalizing each field on construction
- Mutating individual fields via property access, re-validating every change
- Converting to and from plain dictionaries

A `Record` is never left in an invalid state: every setter validates its argument before
assigning it, so a rejected value leaves the previous one in place.
"""

from __future__ import annotations

import math
import numbers

MIN_MARKS = 0.0
MAX_MARKS = 100.0


class Record:

    def __init__(self, name: str, roll_number: int, marks: float):
        self._name: str = Record.validate_name_input(name)
        self._roll_number: int = Record.validate_roll_number_input(roll_number)
        self._marks: float = Record.validate_marks_input(marks)

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = Record.validate_name_input(name)

    @property
    def roll_number(self) -> int:
        return self._roll_number

    @roll_number.setter
    def roll_number(self, roll_number: int) -> None:
        self._roll_number = Record.validate_roll_number_input(roll_number)

    @property
    def marks(self) -> float:
        return self._marks

    @marks.setter
    def marks(self, marks: float) -> None:
        self._marks = Record.validate_marks_input(marks)

    def copy(self) -> Record:
        return Record.from_dict(self.to_dict())

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "roll_number": self._roll_number,
            "marks": self._marks,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Record:
        return cls(
            name=data["name"],
            roll_number=data["roll_number"],
            marks=data["marks"],
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Record({self._name}, {self._roll_number}, {self._marks})"

    def __str__(self) -> str:
        return f"RECORD: name: {self._name}, roll no: {self._roll_number}, marks: {self._marks:g}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # === data validators ===

    @staticmethod
    def validate_name_input(name: str) -> str:
        """
        Validates and normalizes a student name.

        Args:
            name: The input name string.

        Returns:
            The name with surrounding whitespace removed.

        Raises:
            ValueError: If the name is not a string or is empty after stripping.
        """
        if not isinstance(name, str):
            raise ValueError("Invalid input. Name must be text.")
        name = name.strip()
        if not name:
            raise ValueError("Invalid input. Name cannot be empty.")
        return name

    @staticmethod
    def validate_roll_number_input(roll_number: int) -> int:
        """
        Validates a roll number.

        Raises:
            ValueError: If the roll number is not an integer or is negative.
        """
        if isinstance(roll_number, bool) or not isinstance(roll_number, numbers.Integral):
            raise ValueError("Invalid input. Roll number must be a whole number.")
        if roll_number < 0:
            raise ValueError("Invalid input. Roll number cannot be negative.")
        return int(roll_number)

    @staticmethod
    def validate_marks_input(marks: float) -> float:
        """
        Validates marks and coerces them to `float`.

        Raises:
            ValueError: If marks are not numeric or fall outside 0 to 100 inclusive.
        """
        if isinstance(marks, bool) or not isinstance(marks, numbers.Real):
            raise ValueError("Invalid input. Marks must be a number.")
        marks = float(marks)
        if math.isnan(marks) or not MIN_MARKS <= marks <= MAX_MARKS:
            raise ValueError(
                f"Invalid input. Marks must be between {MIN_MARKS:g} and {MAX_MARKS:g}."
            )
        return marks
