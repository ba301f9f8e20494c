from typing import Any, Optional

from sqlalchemy import select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.driven_adapter.model.event_model import EventModel


UPDATABLE_EVENT_FIELDS = frozenset(
    {
        'name',
        'description',
        'price',
        'available_seats',
        'start_date',
        'end_date',
        'bank_account_number',
    }
)


class EventCommandRepoImpl(IEventCommandRepo):
    """Event writes bound to the unit of work's session (no commit here)"""

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_event: EventModel) -> EventEntity:
        return EventEntity(
            id=db_event.id,
            name=db_event.name,
            description=db_event.description,
            price=db_event.price,
            available_seats=db_event.available_seats,
            start_date=db_event.start_date,
            end_date=db_event.end_date,
            bank_account_number=db_event.bank_account_number,
            organizer_id=db_event.organizer_id,
            created_at=db_event.created_at,
        )

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        db_event = EventModel(
            name=event.name,
            description=event.description,
            price=event.price,
            available_seats=event.available_seats,
            start_date=event.start_date,
            end_date=event.end_date,
            bank_account_number=event.bank_account_number,
            organizer_id=event.organizer_id,
        )
        self.session.add(db_event)
        await self.session.flush()
        await self.session.refresh(db_event)

        return self._to_entity(db_event)

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        result = await self.session.execute(select(EventModel).where(EventModel.id == event_id))
        db_event = result.scalar_one_or_none()
        return self._to_entity(db_event) if db_event else None

    @Logger.io
    async def update(
        self, *, event_id: int, organizer_id: int, changes: dict[str, Any]
    ) -> Optional[EventEntity]:
        values = {k: v for k, v in changes.items() if k in UPDATABLE_EVENT_FIELDS}
        if not values:
            result = await self.session.execute(
                select(EventModel).where(
                    EventModel.id == event_id, EventModel.organizer_id == organizer_id
                )
            )
        else:
            result = await self.session.execute(
                sql_update(EventModel)
                .where(EventModel.id == event_id, EventModel.organizer_id == organizer_id)
                .values(**values)
                .returning(EventModel)
            )
        db_event = result.scalar_one_or_none()
        return self._to_entity(db_event) if db_event else None

    @Logger.io
    async def decrement_available_seats(self, *, event_id: int) -> Optional[int]:
        # Check and decrement in one statement: a row is only touched while a seat is left
        result = await self.session.execute(
            sql_update(EventModel)
            .where(EventModel.id == event_id, EventModel.available_seats > 0)
            .values(available_seats=EventModel.available_seats - 1)
            .returning(EventModel.available_seats)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one_or_none()

    @Logger.io
    async def increment_available_seats(self, *, event_id: int) -> int:
        result = await self.session.execute(
            sql_update(EventModel)
            .where(EventModel.id == event_id)
            .values(available_seats=EventModel.available_seats + 1)
            .returning(EventModel.available_seats)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one()
