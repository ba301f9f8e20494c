from abc import ABC, abstractmethod
from typing import Any, Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity


class IEventCommandRepo(ABC):
    """
    Event writes inside a unit of work.

    The seat counter is only ever changed by single conditional statements at the
    store; callers never read, modify and write it back.
    """

    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def update(
        self, *, event_id: int, organizer_id: int, changes: dict[str, Any]
    ) -> Optional[EventEntity]:
        """Apply `changes` to the organizer's event; None when it is not theirs"""
        pass

    @abstractmethod
    async def decrement_available_seats(self, *, event_id: int) -> Optional[int]:
        """Take one seat if any is left; returns the remaining count or None"""
        pass

    @abstractmethod
    async def increment_available_seats(self, *, event_id: int) -> int:
        """Return one seat to the event; returns the new count"""
        pass
