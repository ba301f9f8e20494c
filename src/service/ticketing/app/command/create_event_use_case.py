from datetime import datetime
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.event_entity import EventEntity


class CreateEventUseCase:
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
        self,
        *,
        organizer_id: int,
        name: str,
        description: str,
        price: int,
        available_seats: int,
        start_date: datetime,
        end_date: datetime,
        bank_account_number: str,
    ) -> EventEntity:
        event = EventEntity.create(
            name=name,
            description=description,
            price=price,
            available_seats=available_seats,
            start_date=start_date,
            end_date=end_date,
            bank_account_number=bank_account_number,
            organizer_id=organizer_id,
        )

        async with self.uow:
            created = await self.uow.event_command_repo.create(event=event)
            await self.uow.commit()

        Logger.base.info(
            f'🎪 [CREATE_EVENT] organizer {organizer_id} created event {created.id} '
            f'with {created.available_seats} seats'
        )
        return created
