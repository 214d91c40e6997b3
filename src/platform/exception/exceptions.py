from enum import StrEnum


class ErrorKind(StrEnum):
    """Failure categories callers branch on instead of matching messages."""

    NOT_FOUND = 'not_found'
    INVALID_ARGUMENT = 'invalid_argument'
    CONFLICT = 'conflict'
    OUT_OF_RANGE = 'out_of_range'
    INTERNAL = 'internal'


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    kind = ErrorKind.CONFLICT

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class OutOfRangeError(CustomBaseError):
    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)
