# core/response.py

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Not Found ===

    # no record matches the requested roll number
    NOT_FOUND = "NOT_FOUND"

    # === Constraint Violations ===

    # roll number already used by another record
    DUPLICATE_KEY = "DUPLICATE_KEY"

    # === Validation Failures ===

    # field value is out of bounds or incorrectly formatted
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # === State Restrictions ===

    # aggregate requested on a roster with no records
    EMPTY_COLLECTION = "EMPTY_COLLECTION"

    # === Persistence Faults ===
    CORRUPT_DATA = "CORRUPT_DATA"
    IO_ERROR = "IO_ERROR"

    # === Internal Faults ===
    INTERNAL_ERROR = "INTERNAL_ERROR"


class Response:
    """
    Standard Response object for Roster manipulator, lookup, and lifecycle methods.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Optional human-readable explanation.
        error (ErrorCode | None): Optional machine-readable error identifier.
        status_code (int | None): Optional HTTP-style response code.
        data (dict): Optional payload, varies by operation.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | None = None,
        status_code: int | None = None,
        data: dict | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._status_code = status_code
        self._data = data or {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | None:
        return self._error

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def data(self) -> dict:
        return self._data

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        status_code: int | None = 200,
        data: dict | None = None,
    ) -> Response:
        return cls(success=True, detail=detail, status_code=status_code, data=data)

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | None = None,
        status_code: int | None = 400,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=False,
            detail=detail,
            error=error,
            status_code=status_code,
            data=data,
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        error = self._error.value if self._error else None
        return f"Response({self._success}, {error}, {self._status_code})"

    def __str__(self) -> str:
        if self._success:
            return f"Success: {self._detail or ''}"
        else:
            error_str = self._error.value if self._error else ""
            return f"Error: {error_str}"
