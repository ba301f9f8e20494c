import time
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.conflict_retry import run_with_conflict_retry
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.ticketing.domain.entity.transaction_entity import Transaction
from src.service.ticketing.domain.enum.transaction_status import Decision
from src.service.ticketing.domain.error.ticketing_error import (
    AlreadyProcessedError,
    TransactionNotFoundError,
)


class DecideTransactionUseCase:
    """
    Organizer accepts or rejects a transaction on one of their events.

    ACCEPT: WAITING_FOR_CONFIRMATION -> DONE, inventory untouched.
    REJECT: open -> REJECTED and the held seat goes back to the event, in the
    same unit of work as the status change.

    The status write is conditional on the status still being open, so of two
    concurrent decisions only one applies (and only one seat is released).
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self, *, transaction_id: UUID, organizer_id: int, decision: Decision
    ) -> Transaction:
        started = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.decide_transaction',
            attributes={
                'transaction.id': str(transaction_id),
                'organizer.id': organizer_id,
                'decision': decision.value,
            },
        ):
            try:
                transaction = await run_with_conflict_retry(
                    lambda: self._decide(
                        transaction_id=transaction_id,
                        organizer_id=organizer_id,
                        decision=decision,
                    ),
                    name='Transaction decision',
                )
            except CustomBaseError as e:
                metrics.record_decision(
                    decision=decision.value,
                    result=e.code.value.lower(),
                    duration=time.perf_counter() - started,
                )
                raise

        metrics.record_decision(
            decision=decision.value, result='success', duration=time.perf_counter() - started
        )
        Logger.base.info(
            f'⚖️  [DECIDE] transaction {transaction_id} -> {transaction.status.value} '
            f'by organizer {organizer_id}'
        )
        return transaction

    async def _decide(
        self, *, transaction_id: UUID, organizer_id: int, decision: Decision
    ) -> Transaction:
        async with self.uow:
            transaction = await self.uow.transaction_command_repo.get_for_organizer(
                transaction_id=transaction_id, organizer_id=organizer_id
            )
            if not transaction:
                raise TransactionNotFoundError()

            decided = transaction.decide(decision=decision)
            updated = await self.uow.transaction_command_repo.transition_status(
                transaction_id=transaction_id,
                new_status=decided.status,
                expected_statuses=Transaction.allowed_sources_for(decision),
            )
            if updated is None:
                # A concurrent decision reached a terminal status first
                raise AlreadyProcessedError()

            if decision == Decision.REJECT:
                seats = await self.uow.event_command_repo.increment_available_seats(
                    event_id=updated.event_id
                )
                Logger.base.info(
                    f'🔓 [DECIDE] seat released to event {updated.event_id} ({seats} available)'
                )

            await self.uow.commit()

        return updated
