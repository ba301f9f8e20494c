from enum import StrEnum


class TransactionStatus(StrEnum):
    WAITING_FOR_PAYMENT = 'WAITING_FOR_PAYMENT'
    WAITING_FOR_CONFIRMATION = 'WAITING_FOR_CONFIRMATION'
    DONE = 'DONE'
    REJECTED = 'REJECTED'

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


class Decision(StrEnum):
    """Organizer verdict on a payment proof"""

    ACCEPT = 'ACCEPT'
    REJECT = 'REJECT'


TERMINAL_STATUSES = frozenset({TransactionStatus.DONE, TransactionStatus.REJECTED})
OPEN_STATUSES = frozenset(
    {TransactionStatus.WAITING_FOR_PAYMENT, TransactionStatus.WAITING_FOR_CONFIRMATION}
)
