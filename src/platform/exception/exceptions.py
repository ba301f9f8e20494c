from enum import StrEnum


class ErrorCode(StrEnum):
    INTERNAL = 'INTERNAL'
    VALIDATION = 'VALIDATION'
    NOT_FOUND = 'NOT_FOUND'
    EVENT_NOT_FOUND = 'EVENT_NOT_FOUND'
    NO_SEATS_AVAILABLE = 'NO_SEATS_AVAILABLE'
    ALREADY_PROCESSED = 'ALREADY_PROCESSED'
    PROOF_REQUIRED = 'PROOF_REQUIRED'
    AUTHORIZATION_DENIED = 'AUTHORIZATION_DENIED'
    AUTHENTICATION_FAILED = 'AUTHENTICATION_FAILED'
    CONFLICT = 'CONFLICT'
    STORAGE_CONFLICT = 'STORAGE_CONFLICT'


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    code: ErrorCode = ErrorCode.INTERNAL

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    code = ErrorCode.VALIDATION

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ForbiddenError(CustomBaseError):
    code = ErrorCode.AUTHORIZATION_DENIED

    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    code = ErrorCode.NOT_FOUND

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    code = ErrorCode.CONFLICT

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class AuthenticationError(CustomBaseError):
    code = ErrorCode.AUTHENTICATION_FAILED

    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class LoginError(CustomBaseError):
    code = ErrorCode.AUTHENTICATION_FAILED

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class StorageConflictError(ConflictError):
    """The store aborted the unit of work twice in a row; the caller may retry later."""

    code = ErrorCode.STORAGE_CONFLICT
