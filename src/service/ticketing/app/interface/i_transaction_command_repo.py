from abc import ABC, abstractmethod
from typing import Iterable, Optional
from uuid import UUID

from src.service.ticketing.domain.entity.transaction_entity import Transaction
from src.service.ticketing.domain.enum.transaction_status import TransactionStatus


class ITransactionCommandRepo(ABC):
    """Transaction writes inside a unit of work"""

    @abstractmethod
    async def create(self, *, transaction: Transaction) -> Transaction:
        pass

    @abstractmethod
    async def get_for_organizer(
        self, *, transaction_id: UUID, organizer_id: int
    ) -> Optional[Transaction]:
        """Transaction whose event is organized by `organizer_id`"""
        pass

    @abstractmethod
    async def transition_status(
        self,
        *,
        transaction_id: UUID,
        new_status: TransactionStatus,
        expected_statuses: Iterable[TransactionStatus],
        payment_proof_url: Optional[str] = None,
    ) -> Optional[Transaction]:
        """
        Compare-and-set the status.

        Returns None when the row is no longer in one of `expected_statuses`.
        """
        pass
