from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types.utc_datetime import ensure_utc


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Event {attribute.name} cannot be empty')


def _validate_non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise DomainError(f'Event {attribute.name} cannot be negative')


@attrs.define
class EventEntity:
    name: str = attrs.field(validator=_validate_non_empty_string)
    price: int = attrs.field(validator=_validate_non_negative)  # smallest currency unit
    available_seats: int = attrs.field(validator=_validate_non_negative)
    start_date: datetime = attrs.field(converter=ensure_utc)
    end_date: datetime = attrs.field(converter=ensure_utc)
    bank_account_number: str = attrs.field(validator=_validate_non_empty_string)
    organizer_id: int
    description: str = ''
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __attrs_post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise DomainError('Event end_date cannot be before start_date')

    @classmethod
    def create(
        cls,
        *,
        name: str,
        description: str,
        price: int,
        available_seats: int,
        start_date: datetime,
        end_date: datetime,
        bank_account_number: str,
        organizer_id: int,
    ) -> 'EventEntity':
        if available_seats < 1:
            raise DomainError('Event must offer at least one seat')

        return cls(
            name=name,
            description=description,
            price=price,
            available_seats=available_seats,
            start_date=start_date,
            end_date=end_date,
            bank_account_number=bank_account_number,
            organizer_id=organizer_id,
        )

    def apply_changes(self, **changes: object) -> 'EventEntity':
        """Return the event with `changes` applied; the owning organizer never changes."""
        changes.pop('organizer_id', None)
        changes.pop('id', None)
        return attrs.evolve(self, **changes)  # type: ignore[arg-type]

    def is_organized_by(self, user_id: int) -> bool:
        return self.organizer_id == user_id
