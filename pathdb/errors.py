from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ID = "invalid-id"
    INVALID_VALUE = "invalid-value"
    INVALID_OPTIONS = "invalid-options"
    INVALID_CALLBACK = "invalid-callback"
    NOT_FOUND = "not-found"


class PathDBError(Exception):
    """
    Base error for every validation failure raised by a database.

    File I/O problems are not wrapped: they surface as the OSError that was raised.
    """

    kind: ErrorKind

    def __init__(self, message: str = "Unknown error"):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InvalidIdError(PathDBError, ValueError):
    kind = ErrorKind.INVALID_ID

    def __init__(self, message: str = "Invalid ID provided, it shouldn't contain blank segments"):
        super().__init__(message)


class InvalidValueError(PathDBError, TypeError):
    kind = ErrorKind.INVALID_VALUE

    def __init__(
        self,
        message: str = "The value must be a string, number, boolean, null, MISSING, a mapping or an array",
    ):
        super().__init__(message)


class InvalidOptionsError(PathDBError, ValueError):
    kind = ErrorKind.INVALID_OPTIONS


class InvalidCallbackError(PathDBError, TypeError):
    kind = ErrorKind.INVALID_CALLBACK

    def __init__(self, message: str = "The predicate must be callable"):
        super().__init__(message)


class NotFoundError(PathDBError, KeyError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, id: str):
        self.id = id
        super().__init__(f"No element at id: {id}")
