"""
Integration fixtures: real repositories and units of work on a per-test SQLite file.
"""

from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.decide_transaction_use_case import (
    DecideTransactionUseCase,
)
from src.service.ticketing.app.command.reserve_seat_use_case import ReserveSeatUseCase
from src.service.ticketing.app.command.submit_payment_proof_use_case import (
    SubmitPaymentProofUseCase,
)
from src.service.ticketing.app.query.list_transactions_use_case import ListTransactionsUseCase
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.user_entity import UserEntity, UserRole
from src.service.ticketing.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl
from src.service.ticketing.driven_adapter.repo.transaction_query_repo_impl import (
    TransactionQueryRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.ticketing.driven_adapter.storage.local_proof_storage_impl import (
    LocalProofStorageImpl,
)


@pytest.fixture
def new_uow(session_factory: Any) -> Callable[[], SqlAlchemyUnitOfWork]:
    return lambda: SqlAlchemyUnitOfWork(session_factory=session_factory)


@pytest.fixture
def transaction_query_repo(session_factory: Any) -> TransactionQueryRepoImpl:
    return TransactionQueryRepoImpl(session_factory=session_factory)


@pytest.fixture
def event_query_repo(session_factory: Any) -> EventQueryRepoImpl:
    return EventQueryRepoImpl(session_factory=session_factory)


@pytest.fixture
def reserve_seat(new_uow: Callable[[], SqlAlchemyUnitOfWork]) -> ReserveSeatUseCase:
    return ReserveSeatUseCase(uow=new_uow())


@pytest.fixture
def decide_transaction(new_uow: Callable[[], SqlAlchemyUnitOfWork]) -> DecideTransactionUseCase:
    return DecideTransactionUseCase(uow=new_uow())


@pytest.fixture
def submit_proof(
    new_uow: Callable[[], SqlAlchemyUnitOfWork], transaction_query_repo: TransactionQueryRepoImpl
) -> SubmitPaymentProofUseCase:
    return SubmitPaymentProofUseCase(
        uow=new_uow(),
        transaction_query_repo=transaction_query_repo,
        proof_storage=LocalProofStorageImpl(),
    )


@pytest.fixture
def list_transactions(transaction_query_repo: TransactionQueryRepoImpl) -> ListTransactionsUseCase:
    return ListTransactionsUseCase(transaction_query_repo=transaction_query_repo)


@pytest.fixture
def create_user(session_factory: Any) -> Callable[..., Awaitable[UserEntity]]:
    repo = UserCommandRepoImpl(session_factory=session_factory)

    async def _create(email: str, role: UserRole, name: str = 'Test User') -> UserEntity:
        # Password checks are covered by the API tests
        return await repo.create(
            UserEntity(email=email, name=name, role=role, hashed_password='not-a-real-hash')
        )

    return _create


@pytest.fixture
async def organizer(create_user: Callable[..., Awaitable[UserEntity]]) -> UserEntity:
    return await create_user('organizer@test.com', UserRole.ORGANIZER, 'Test Organizer')


@pytest.fixture
async def customer(create_user: Callable[..., Awaitable[UserEntity]]) -> UserEntity:
    return await create_user('customer@test.com', UserRole.CUSTOMER, 'Test Customer')


@pytest.fixture
def create_event(
    new_uow: Callable[[], SqlAlchemyUnitOfWork], organizer: UserEntity
) -> Callable[..., Awaitable[EventEntity]]:
    async def _create(available_seats: int, name: str = 'Concert Event') -> EventEntity:
        return await CreateEventUseCase(uow=new_uow()).execute(
            organizer_id=organizer.id or 0,
            name=name,
            description='',
            price=150000,
            available_seats=available_seats,
            start_date=datetime(2030, 12, 1, 19, tzinfo=timezone.utc),
            end_date=datetime(2030, 12, 1, 22, tzinfo=timezone.utc),
            bank_account_number='1234567890',
        )

    return _create


@pytest.fixture
def available_seats(
    event_query_repo: EventQueryRepoImpl,
) -> Callable[[int], Awaitable[int]]:
    async def _seats(event_id: int) -> int:
        event = await event_query_repo.get_by_id_with_organizer(event_id=event_id)
        assert event is not None
        return event['available_seats']

    return _seats
