import time
from typing import Self

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
from src.service.ticketing.domain.error.ticketing_error import (
    EventNotFoundError,
    NoSeatsAvailableError,
)


class ReserveSeatUseCase:
    """
    Reserve one seat of an event for a customer.

    The seat decrement and the new WAITING_FOR_PAYMENT transaction are written in
    one unit of work. The decrement is a single conditional UPDATE
    (available_seats > 0), so concurrent reservations for the last seat cannot
    both succeed, and a failure at any step rolls both writes back.
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
    async def execute(self, *, event_id: int, user_id: int) -> Transaction:
        started = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.reserve_seat', attributes={'event.id': event_id, 'user.id': user_id}
        ):
            try:
                transaction = await run_with_conflict_retry(
                    lambda: self._reserve(event_id=event_id, user_id=user_id),
                    name='Seat reservation',
                )
            except CustomBaseError as e:
                metrics.record_reservation(
                    result=e.code.value.lower(), duration=time.perf_counter() - started
                )
                raise

        metrics.record_reservation(result='success', duration=time.perf_counter() - started)
        Logger.base.info(
            f'🎫 [RESERVE] user {user_id} reserved a seat of event {event_id} '
            f'(transaction {transaction.id})'
        )
        return transaction

    async def _reserve(self, *, event_id: int, user_id: int) -> Transaction:
        async with self.uow:
            event = await self.uow.event_command_repo.get_by_id(event_id=event_id)
            if not event:
                raise EventNotFoundError()
            if event.available_seats <= 0:
                raise NoSeatsAvailableError()

            # Another reservation may have taken the last seat since the read above
            remaining = await self.uow.event_command_repo.decrement_available_seats(
                event_id=event_id
            )
            if remaining is None:
                raise NoSeatsAvailableError()

            transaction = await self.uow.transaction_command_repo.create(
                transaction=Transaction.create(event_id=event_id, user_id=user_id)
            )
            await self.uow.commit()

        return transaction
