from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    PERSISTENCE = "PERSISTENCE"


class EmployeeError(Exception):
    """
    Base error raised by the data access layer.

    Callers branch on ``kind`` rather than on the message text.
    """

    kind: ErrorKind = ErrorKind.PERSISTENCE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(EmployeeError):
    kind = ErrorKind.VALIDATION


class NotFoundError(EmployeeError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "record not exists"):
        super().__init__(message)


class PersistenceError(EmployeeError):
    kind = ErrorKind.PERSISTENCE
