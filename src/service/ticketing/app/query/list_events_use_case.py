from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo


class ListEventsUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def list_all(self) -> List[dict]:
        """All events by start date, with the organizer's name"""
        events = await self.event_query_repo.list_all()

        Logger.base.info(f'📋 [LIST_EVENTS] Found {len(events)} events')
        return events

    @Logger.io
    async def list_by_organizer(self, *, organizer_id: int) -> List[dict]:
        events = await self.event_query_repo.list_by_organizer(organizer_id=organizer_id)

        Logger.base.info(
            f'📋 [LIST_BY_ORGANIZER] Found {len(events)} events for organizer {organizer_id}'
        )
        return events
