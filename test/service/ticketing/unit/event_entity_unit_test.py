from datetime import datetime, timezone

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.ticketing.domain.entity.event_entity import EventEntity


@pytest.mark.unit
class TestEventEntity:
    def test_naive_dates_are_treated_as_utc(self, event: EventEntity) -> None:
        naive = EventEntity(
            name='Concert Event',
            price=1,
            available_seats=1,
            start_date=datetime(2030, 12, 1, 19),
            end_date=datetime(2030, 12, 1, 22),
            bank_account_number='1234567890',
            organizer_id=2,
        )

        assert naive.start_date == datetime(2030, 12, 1, 19, tzinfo=timezone.utc)

    def test_apply_changes_never_moves_ownership(self, event: EventEntity) -> None:
        updated = event.apply_changes(organizer_id=99, id=42, name='Renamed')

        assert updated.organizer_id == event.organizer_id
        assert updated.id == event.id
        assert updated.name == 'Renamed'

    def test_create_requires_at_least_one_seat(self) -> None:
        with pytest.raises(DomainError):
            EventEntity.create(
                name='Concert Event',
                description='',
                price=1,
                available_seats=0,
                start_date=datetime(2030, 12, 1, 19, tzinfo=timezone.utc),
                end_date=datetime(2030, 12, 1, 22, tzinfo=timezone.utc),
                bank_account_number='1234567890',
                organizer_id=2,
            )

    def test_sold_out_event_is_still_valid(self, event: EventEntity) -> None:
        assert event.apply_changes(available_seats=0).available_seats == 0

    def test_is_organized_by(self, event: EventEntity) -> None:
        assert event.is_organized_by(event.organizer_id)
        assert not event.is_organized_by(event.organizer_id + 1)
