"""
Typed failures of the inventory and transaction engine.

Absent and not-owned records share one NotFound outcome so that callers
cannot probe for records they do not own.
"""

from src.platform.exception.exceptions import DomainError, ErrorCode, ForbiddenError, NotFoundError


class EventNotFoundError(NotFoundError):
    code = ErrorCode.EVENT_NOT_FOUND

    def __init__(self, message: str = 'Event not found') -> None:
        super().__init__(message)


class TransactionNotFoundError(NotFoundError):
    def __init__(self, message: str = 'Transaction not found') -> None:
        super().__init__(message)


class InvalidStateError(DomainError):
    pass


class NoSeatsAvailableError(InvalidStateError):
    code = ErrorCode.NO_SEATS_AVAILABLE

    def __init__(self, message: str = 'No seats available') -> None:
        super().__init__(message)


class AlreadyProcessedError(InvalidStateError):
    code = ErrorCode.ALREADY_PROCESSED

    def __init__(self, message: str = 'Transaction already processed') -> None:
        super().__init__(message)


class ProofRequiredError(InvalidStateError):
    code = ErrorCode.PROOF_REQUIRED

    def __init__(self, message: str = 'Payment proof is required') -> None:
        super().__init__(message)


class AuthorizationDeniedError(ForbiddenError):
    pass
