from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.ticketing.domain.entity.transaction_entity import Transaction


class ITransactionQueryRepo(ABC):
    """Transaction read models, newest first"""

    @abstractmethod
    async def get_owned(self, *, transaction_id: UUID, user_id: int) -> Optional[Transaction]:
        pass

    @abstractmethod
    async def list_by_user_with_event(self, *, user_id: int) -> List[dict]:
        """Caller's transactions with event name, start date and payout account"""
        pass

    @abstractmethod
    async def list_by_organizer_with_details(self, *, organizer_id: int) -> List[dict]:
        """Transactions on the organizer's events with event name and buyer name/email"""
        pass
