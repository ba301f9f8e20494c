"""
Integration tests for the reservation and payment-proof flow on a real database

Test Focus:
1. Seat counter and transaction row change together (or not at all)
2. Decisions move seats exactly once, even when requests race
3. Ownership scoping: a foreign transaction is indistinguishable from a missing one
"""

import asyncio
from collections.abc import Awaitable, Callable

import pytest

from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
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
from src.service.ticketing.domain.enum.transaction_status import Decision, TransactionStatus
from src.service.ticketing.domain.error.ticketing_error import (
    AlreadyProcessedError,
    EventNotFoundError,
    NoSeatsAvailableError,
    ProofRequiredError,
    TransactionNotFoundError,
)


PROOF = b'\x89PNG\r\n\x1a\nproof'


@pytest.mark.integration
class TestReserveSeat:
    async def test_reserving_the_last_seat(
        self,
        reserve_seat: ReserveSeatUseCase,
        create_event: Callable[..., Awaitable[EventEntity]],
        customer: UserEntity,
        available_seats: Callable[[int], Awaitable[int]],
        list_transactions: ListTransactionsUseCase,
    ) -> None:
        """
        Given: An event with one seat
        When: A customer reserves it, then tries again
        Then: The first succeeds and sells out the event, the second is refused
        """
        # Arrange
        event = await create_event(available_seats=1)

        # Act
        transaction = await reserve_seat.execute(event_id=event.id, user_id=customer.id)

        # Assert
        assert transaction.status == TransactionStatus.WAITING_FOR_PAYMENT
        assert await available_seats(event.id) == 0

        with pytest.raises(NoSeatsAvailableError):
            await reserve_seat.execute(event_id=event.id, user_id=customer.id)

        assert await available_seats(event.id) == 0
        assert len(await list_transactions.list_mine(user_id=customer.id)) == 1

    async def test_unknown_event(
        self, reserve_seat: ReserveSeatUseCase, customer: UserEntity
    ) -> None:
        with pytest.raises(EventNotFoundError):
            await reserve_seat.execute(event_id=999, user_id=customer.id)

    async def test_concurrent_reservations_never_oversell(
        self,
        new_uow: Callable[[], SqlAlchemyUnitOfWork],
        create_event: Callable[..., Awaitable[EventEntity]],
        create_user: Callable[..., Awaitable[UserEntity]],
        available_seats: Callable[[int], Awaitable[int]],
        list_transactions: ListTransactionsUseCase,
        organizer: UserEntity,
    ) -> None:
        """
        Given: An event with 3 seats and 8 customers
        When: All 8 reserve at the same time
        Then: Exactly 3 succeed, 5 get NoSeatsAvailable, the counter ends at 0
        """
        # Arrange
        event = await create_event(available_seats=3)
        customers = [
            await create_user(f'customer{i}@test.com', UserRole.CUSTOMER) for i in range(8)
        ]

        # Act
        results = await asyncio.gather(
            *(
                ReserveSeatUseCase(uow=new_uow()).execute(event_id=event.id, user_id=c.id)
                for c in customers
            ),
            return_exceptions=True,
        )

        # Assert
        succeeded = [r for r in results if not isinstance(r, BaseException)]
        refused = [r for r in results if isinstance(r, NoSeatsAvailableError)]
        assert len(succeeded) == 3
        assert len(refused) == 5
        assert await available_seats(event.id) == 0
        assert len(await list_transactions.list_for_organizer(organizer_id=organizer.id)) == 3


@pytest.mark.integration
class TestPaymentProofAndDecision:
    async def test_upload_then_accept(
        self,
        reserve_seat: ReserveSeatUseCase,
        submit_proof: SubmitPaymentProofUseCase,
        decide_transaction: DecideTransactionUseCase,
        create_event: Callable[..., Awaitable[EventEntity]],
        customer: UserEntity,
        organizer: UserEntity,
        available_seats: Callable[[int], Awaitable[int]],
    ) -> None:
        """
        Given: A reserved seat
        When: The customer uploads a proof and the organizer accepts
        Then: DONE with the proof URL kept; the seat stays sold
        """
        # Arrange
        event = await create_event(available_seats=2)
        transaction = await reserve_seat.execute(event_id=event.id, user_id=customer.id)

        # Act
        uploaded = await submit_proof.execute(
            transaction_id=transaction.id,
            user_id=customer.id,
            content=PROOF,
            content_type='image/png',
        )
        accepted = await decide_transaction.execute(
            transaction_id=transaction.id, organizer_id=organizer.id, decision=Decision.ACCEPT
        )

        # Assert
        assert uploaded.status == TransactionStatus.WAITING_FOR_CONFIRMATION
        assert uploaded.payment_proof_url
        assert accepted.status == TransactionStatus.DONE
        assert accepted.payment_proof_url == uploaded.payment_proof_url
        assert await available_seats(event.id) == 1

    async def test_accept_without_proof_is_refused(
        self,
        reserve_seat: ReserveSeatUseCase,
        decide_transaction: DecideTransactionUseCase,
        create_event: Callable[..., Awaitable[EventEntity]],
        customer: UserEntity,
        organizer: UserEntity,
        list_transactions: ListTransactionsUseCase,
    ) -> None:
        event = await create_event(available_seats=1)
        transaction = await reserve_seat.execute(event_id=event.id, user_id=customer.id)

        with pytest.raises(ProofRequiredError):
            await decide_transaction.execute(
                transaction_id=transaction.id, organizer_id=organizer.id, decision=Decision.ACCEPT
            )

        [mine] = await list_transactions.list_mine(user_id=customer.id)
        assert mine['status'] == TransactionStatus.WAITING_FOR_PAYMENT

    async def test_reject_releases_the_seat_once(
        self,
        reserve_seat: ReserveSeatUseCase,
        decide_transaction: DecideTransactionUseCase,
        submit_proof: SubmitPaymentProofUseCase,
        create_event: Callable[..., Awaitable[EventEntity]],
        customer: UserEntity,
        organizer: UserEntity,
        available_seats: Callable[[int], Awaitable[int]],
    ) -> None:
        """
        Given: A sold-out event and its pending transaction
        When: The organizer rejects it, then rejects it again
        Then: One seat comes back; the second decision is AlreadyProcessed and changes nothing
        """
        # Arrange
        event = await create_event(available_seats=1)
        transaction = await reserve_seat.execute(event_id=event.id, user_id=customer.id)
        assert await available_seats(event.id) == 0

        # Act
        rejected = await decide_transaction.execute(
            transaction_id=transaction.id, organizer_id=organizer.id, decision=Decision.REJECT
        )

        # Assert
        assert rejected.status == TransactionStatus.REJECTED
        assert await available_seats(event.id) == 1

        with pytest.raises(AlreadyProcessedError):
            await decide_transaction.execute(
                transaction_id=transaction.id, organizer_id=organizer.id, decision=Decision.REJECT
            )
        with pytest.raises(AlreadyProcessedError):
            await submit_proof.execute(
                transaction_id=transaction.id, user_id=customer.id, content=PROOF
            )
        assert await available_seats(event.id) == 1

    async def test_concurrent_rejections_release_one_seat(
        self,
        new_uow: Callable[[], SqlAlchemyUnitOfWork],
        reserve_seat: ReserveSeatUseCase,
        create_event: Callable[..., Awaitable[EventEntity]],
        customer: UserEntity,
        organizer: UserEntity,
        available_seats: Callable[[int], Awaitable[int]],
    ) -> None:
        # Arrange
        event = await create_event(available_seats=1)
        transaction = await reserve_seat.execute(event_id=event.id, user_id=customer.id)

        # Act
        results = await asyncio.gather(
            *(
                DecideTransactionUseCase(uow=new_uow()).execute(
                    transaction_id=transaction.id,
                    organizer_id=organizer.id,
                    decision=Decision.REJECT,
                )
                for _ in range(4)
            ),
            return_exceptions=True,
        )

        # Assert
        succeeded = [r for r in results if not isinstance(r, BaseException)]
        already = [r for r in results if isinstance(r, AlreadyProcessedError)]
        assert len(succeeded) == 1
        assert len(already) == 3
        assert await available_seats(event.id) == 1

    async def test_foreign_transaction_is_not_found(
        self,
        reserve_seat: ReserveSeatUseCase,
        submit_proof: SubmitPaymentProofUseCase,
        decide_transaction: DecideTransactionUseCase,
        create_event: Callable[..., Awaitable[EventEntity]],
        create_user: Callable[..., Awaitable[UserEntity]],
        customer: UserEntity,
    ) -> None:
        """
        Given: A transaction of one customer
        When: Another customer uploads to it, or another organizer decides it
        Then: Both see TransactionNotFound
        """
        event = await create_event(available_seats=1)
        transaction = await reserve_seat.execute(event_id=event.id, user_id=customer.id)
        stranger = await create_user('stranger@test.com', UserRole.CUSTOMER)
        other_organizer = await create_user('other@test.com', UserRole.ORGANIZER)

        with pytest.raises(TransactionNotFoundError):
            await submit_proof.execute(
                transaction_id=transaction.id, user_id=stranger.id, content=PROOF
            )
        with pytest.raises(TransactionNotFoundError):
            await decide_transaction.execute(
                transaction_id=transaction.id,
                organizer_id=other_organizer.id,
                decision=Decision.REJECT,
            )

    async def test_reupload_replaces_the_proof(
        self,
        reserve_seat: ReserveSeatUseCase,
        submit_proof: SubmitPaymentProofUseCase,
        create_event: Callable[..., Awaitable[EventEntity]],
        customer: UserEntity,
    ) -> None:
        event = await create_event(available_seats=1)
        transaction = await reserve_seat.execute(event_id=event.id, user_id=customer.id)

        first = await submit_proof.execute(
            transaction_id=transaction.id, user_id=customer.id, content=PROOF, content_type='image/png'
        )
        await asyncio.sleep(0.002)
        second = await submit_proof.execute(
            transaction_id=transaction.id,
            user_id=customer.id,
            content=b'%PDF-1.4 proof',
            content_type='application/pdf',
        )

        assert second.status == TransactionStatus.WAITING_FOR_CONFIRMATION
        assert second.payment_proof_url != first.payment_proof_url
        assert second.payment_proof_url.endswith('.pdf')


@pytest.mark.integration
class TestListTransactions:
    async def test_lists_are_scoped_and_newest_first(
        self,
        reserve_seat: ReserveSeatUseCase,
        create_event: Callable[..., Awaitable[EventEntity]],
        create_user: Callable[..., Awaitable[UserEntity]],
        list_transactions: ListTransactionsUseCase,
        customer: UserEntity,
        organizer: UserEntity,
    ) -> None:
        # Arrange
        first_event = await create_event(available_seats=5, name='First Event')
        second_event = await create_event(available_seats=5, name='Second Event')
        other = await create_user('other_customer@test.com', UserRole.CUSTOMER, 'Other')
        first = await reserve_seat.execute(event_id=first_event.id, user_id=customer.id)
        await asyncio.sleep(0.002)
        second = await reserve_seat.execute(event_id=second_event.id, user_id=customer.id)
        await reserve_seat.execute(event_id=first_event.id, user_id=other.id)

        # Act
        mine = await list_transactions.list_mine(user_id=customer.id)
        for_organizer = await list_transactions.list_for_organizer(organizer_id=organizer.id)

        # Assert
        assert [t['id'] for t in mine] == [second.id, first.id]
        assert mine[0]['event_name'] == 'Second Event'
        assert mine[0]['bank_account_number'] == '1234567890'
        assert mine[0]['event_price'] == 150000
        assert len(for_organizer) == 3
        assert {t['user_name'] for t in for_organizer} == {'Test Customer', 'Other'}
        assert await list_transactions.list_for_organizer(organizer_id=customer.id) == []
