from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.platform.types.utc_datetime import ensure_utc
from src.service.ticketing.app.interface.i_transaction_query_repo import ITransactionQueryRepo
from src.service.ticketing.domain.entity.transaction_entity import Transaction
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.transaction_model import TransactionModel
from src.service.ticketing.driven_adapter.model.user_model import UserModel
from src.service.ticketing.driven_adapter.repo.transaction_command_repo_impl import (
    to_transaction_entity,
)


class TransactionQueryRepoImpl(ITransactionQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_transaction_dict(db_transaction: TransactionModel) -> dict:
        return {
            'id': db_transaction.id,
            'event_id': db_transaction.event_id,
            'user_id': db_transaction.user_id,
            'status': db_transaction.status,
            'payment_proof_url': db_transaction.payment_proof_url,
            'created_at': ensure_utc(db_transaction.created_at),
            'updated_at': ensure_utc(db_transaction.updated_at),
        }

    @Logger.io
    async def get_owned(self, *, transaction_id: UUID, user_id: int) -> Optional[Transaction]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TransactionModel).where(
                    TransactionModel.id == transaction_id, TransactionModel.user_id == user_id
                )
            )
            db_transaction = result.scalar_one_or_none()
            return to_transaction_entity(db_transaction) if db_transaction else None

    @Logger.io
    async def list_by_user_with_event(self, *, user_id: int) -> List[dict]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(
                    TransactionModel,
                    EventModel.name,
                    EventModel.start_date,
                    EventModel.price,
                    EventModel.bank_account_number,
                )
                .join(EventModel, TransactionModel.event_id == EventModel.id)
                .where(TransactionModel.user_id == user_id)
                .order_by(TransactionModel.created_at.desc(), TransactionModel.id.desc())
            )
            return [
                self._to_transaction_dict(db_transaction)
                | {
                    'event_name': event_name,
                    'event_start_date': ensure_utc(start_date),
                    'event_price': price,
                    'bank_account_number': bank_account_number,
                }
                for db_transaction, event_name, start_date, price, bank_account_number in result.all()
            ]

    @Logger.io
    async def list_by_organizer_with_details(self, *, organizer_id: int) -> List[dict]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TransactionModel, EventModel.name, UserModel.name, UserModel.email)
                .join(EventModel, TransactionModel.event_id == EventModel.id)
                .join(UserModel, TransactionModel.user_id == UserModel.id)
                .where(EventModel.organizer_id == organizer_id)
                .order_by(TransactionModel.created_at.desc(), TransactionModel.id.desc())
            )
            return [
                self._to_transaction_dict(db_transaction)
                | {'event_name': event_name, 'user_name': user_name, 'user_email': user_email}
                for db_transaction, event_name, user_name, user_email in result.all()
            ]
