from datetime import datetime, timezone
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_transaction_command_repo import (
    ITransactionCommandRepo,
)
from src.service.ticketing.domain.entity.transaction_entity import Transaction
from src.service.ticketing.domain.enum.transaction_status import TransactionStatus
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.transaction_model import TransactionModel


def to_transaction_entity(db_transaction: TransactionModel) -> Transaction:
    return Transaction(
        id=db_transaction.id,
        event_id=db_transaction.event_id,
        user_id=db_transaction.user_id,
        status=TransactionStatus(db_transaction.status),
        payment_proof_url=db_transaction.payment_proof_url,
        created_at=db_transaction.created_at,
        updated_at=db_transaction.updated_at,
    )


class TransactionCommandRepoImpl(ITransactionCommandRepo):
    """Transaction writes bound to the unit of work's session (no commit here)"""

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, transaction: Transaction) -> Transaction:
        db_transaction = TransactionModel(
            id=transaction.id,
            event_id=transaction.event_id,
            user_id=transaction.user_id,
            status=transaction.status.value,
            payment_proof_url=transaction.payment_proof_url,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )
        self.session.add(db_transaction)
        await self.session.flush()

        return to_transaction_entity(db_transaction)

    @Logger.io
    async def get_for_organizer(
        self, *, transaction_id: UUID, organizer_id: int
    ) -> Optional[Transaction]:
        result = await self.session.execute(
            select(TransactionModel)
            .join(EventModel, TransactionModel.event_id == EventModel.id)
            .where(TransactionModel.id == transaction_id, EventModel.organizer_id == organizer_id)
        )
        db_transaction = result.scalar_one_or_none()
        return to_transaction_entity(db_transaction) if db_transaction else None

    @Logger.io
    async def transition_status(
        self,
        *,
        transaction_id: UUID,
        new_status: TransactionStatus,
        expected_statuses: Iterable[TransactionStatus],
        payment_proof_url: Optional[str] = None,
    ) -> Optional[Transaction]:
        values: dict[str, object] = {
            'status': new_status.value,
            'updated_at': datetime.now(timezone.utc),
        }
        if payment_proof_url is not None:
            values['payment_proof_url'] = payment_proof_url

        result = await self.session.execute(
            sql_update(TransactionModel)
            .where(
                TransactionModel.id == transaction_id,
                TransactionModel.status.in_([status.value for status in expected_statuses]),
            )
            .values(**values)
            .returning(TransactionModel)
        )
        db_transaction = result.scalar_one_or_none()
        return to_transaction_entity(db_transaction) if db_transaction else None
