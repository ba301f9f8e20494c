from typing import List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.update_event_use_case import UpdateEventUseCase
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from src.service.ticketing.domain.access_control import Operation
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.role_auth import require
from src.service.ticketing.driving_adapter.http_controller.schema.event_schema import (
    EventCreateRequest,
    EventResponse,
    EventUpdateRequest,
    OrganizerEventResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_organizer_event_response(event: EventEntity) -> OrganizerEventResponse:
    return OrganizerEventResponse(
        id=event.id or 0,
        name=event.name,
        description=event.description,
        price=event.price,
        available_seats=event.available_seats,
        start_date=event.start_date,
        end_date=event.end_date,
        organizer_id=event.organizer_id,
        bank_account_number=event.bank_account_number,
        created_at=event.created_at,
    )


@router.post('', status_code=status.HTTP_201_CREATED, response_model=OrganizerEventResponse)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    current_user: UserEntity = Depends(require(Operation.CREATE_EVENT)),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> OrganizerEventResponse:
    with tracer.start_as_current_span('controller.create_event') as span:
        span.set_attribute('organizer_id', current_user.id or 0)

        event = await use_case.execute(
            organizer_id=current_user.id or 0,
            name=request.name,
            description=request.description,
            price=request.price,
            available_seats=request.available_seats,
            start_date=request.start_date,
            end_date=request.end_date,
            bank_account_number=request.bank_account_number,
        )
        return _to_organizer_event_response(event)


@router.get('', response_model=List[EventResponse])
@Logger.io
async def list_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[dict]:
    return await use_case.list_all()


@router.get('/organizer', response_model=List[OrganizerEventResponse])
@Logger.io
async def list_organizer_events(
    current_user: UserEntity = Depends(require(Operation.LIST_ORGANIZER_EVENTS)),
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[dict]:
    return await use_case.list_by_organizer(organizer_id=current_user.id or 0)


@router.get('/{event_id}', response_model=EventResponse)
@Logger.io
async def get_event(
    event_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> dict:
    return await use_case.get_by_id(event_id=event_id)


@router.patch('/{event_id}', response_model=OrganizerEventResponse)
@Logger.io
async def update_event(
    event_id: int,
    request: EventUpdateRequest,
    current_user: UserEntity = Depends(require(Operation.UPDATE_EVENT)),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> OrganizerEventResponse:
    event = await use_case.execute(
        event_id=event_id,
        organizer_id=current_user.id or 0,
        changes=request.model_dump(exclude_unset=True, exclude_none=True),
    )
    return _to_organizer_event_response(event)
