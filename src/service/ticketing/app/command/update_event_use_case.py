from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.error.ticketing_error import EventNotFoundError


class UpdateEventUseCase:
    """
    Organizer edits one of their own events.

    Events owned by someone else are reported as not found. Setting
    available_seats replaces the counter in a single UPDATE; it never goes
    below zero.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self, *, event_id: int, organizer_id: int, changes: dict[str, Any]
    ) -> EventEntity:
        async with self.uow:
            event = await self.uow.event_command_repo.get_by_id(event_id=event_id)
            if not event or not event.is_organized_by(organizer_id):
                raise EventNotFoundError()

            # Validates the merged event (dates, non-negative seats and price)
            merged = event.apply_changes(**changes)
            values = {field: getattr(merged, field) for field in changes if hasattr(merged, field)}

            updated = await self.uow.event_command_repo.update(
                event_id=event_id, organizer_id=organizer_id, changes=values
            )
            if not updated:
                raise EventNotFoundError()
            await self.uow.commit()

        Logger.base.info(f'✏️  [UPDATE_EVENT] event {event_id} updated: {sorted(values)}')
        return updated
