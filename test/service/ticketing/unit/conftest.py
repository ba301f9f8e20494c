"""
Unit test configuration for ticketing service.

Use cases get a FakeUnitOfWork whose repositories are AsyncMocks, so tests can
assert on what was written and whether it was committed.
"""

from datetime import datetime, timezone

import pytest

from src.service.ticketing.domain.entity.event_entity import EventEntity
from test.service.ticketing.unit.fakes import EVENT_ID, ORGANIZER_ID, FakeUnitOfWork


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def event() -> EventEntity:
    return EventEntity(
        id=EVENT_ID,
        name='Concert Event',
        description='Amazing live music performance',
        price=150000,
        available_seats=5,
        start_date=datetime(2030, 12, 1, 19, tzinfo=timezone.utc),
        end_date=datetime(2030, 12, 1, 22, tzinfo=timezone.utc),
        bank_account_number='1234567890',
        organizer_id=ORGANIZER_ID,
    )
