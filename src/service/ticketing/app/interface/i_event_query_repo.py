from abc import ABC, abstractmethod
from typing import List, Optional


class IEventQueryRepo(ABC):
    """Event read models (with organizer display fields)"""

    @abstractmethod
    async def list_all(self) -> List[dict]:
        pass

    @abstractmethod
    async def get_by_id_with_organizer(self, *, event_id: int) -> Optional[dict]:
        pass

    @abstractmethod
    async def list_by_organizer(self, *, organizer_id: int) -> List[dict]:
        pass
