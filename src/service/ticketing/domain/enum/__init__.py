"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.transaction_status import Decision, TransactionStatus

__all__ = ['Decision', 'TransactionStatus']
