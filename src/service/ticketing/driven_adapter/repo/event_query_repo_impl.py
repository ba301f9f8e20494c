from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.platform.types.utc_datetime import ensure_utc
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.user_model import UserModel


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_event_dict(db_event: EventModel, organizer_name: Optional[str] = None) -> dict:
        return {
            'id': db_event.id,
            'name': db_event.name,
            'description': db_event.description,
            'price': db_event.price,
            'available_seats': db_event.available_seats,
            'start_date': ensure_utc(db_event.start_date),
            'end_date': ensure_utc(db_event.end_date),
            'bank_account_number': db_event.bank_account_number,
            'organizer_id': db_event.organizer_id,
            'organizer_name': organizer_name,
            'created_at': ensure_utc(db_event.created_at),
        }

    def _with_organizer(self):
        return select(EventModel, UserModel.name).join(
            UserModel, EventModel.organizer_id == UserModel.id
        )

    @Logger.io
    async def list_all(self) -> List[dict]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._with_organizer().order_by(EventModel.start_date.asc(), EventModel.id.asc())
            )
            return [self._to_event_dict(db_event, name) for db_event, name in result.all()]

    @Logger.io
    async def get_by_id_with_organizer(self, *, event_id: int) -> Optional[dict]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._with_organizer().where(EventModel.id == event_id)
            )
            row = result.one_or_none()
            if row is None:
                return None
            db_event, organizer_name = row
            return self._to_event_dict(db_event, organizer_name)

    @Logger.io
    async def list_by_organizer(self, *, organizer_id: int) -> List[dict]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._with_organizer()
                .where(EventModel.organizer_id == organizer_id)
                .order_by(EventModel.start_date.asc(), EventModel.id.asc())
            )
            return [self._to_event_dict(db_event, name) for db_event, name in result.all()]
