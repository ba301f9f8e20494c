from abc import ABC, abstractmethod
from uuid import UUID


class IProofStorage(ABC):
    """Object storage for payment proofs"""

    @abstractmethod
    async def upload(
        self, *, user_id: int, transaction_id: UUID, content: bytes, content_type: str
    ) -> str:
        """Store the blob and return a URL it can be retrieved from"""
        pass
