from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class EventCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ''
    price: int = Field(..., ge=0, description='Price in the smallest currency unit')
    available_seats: int = Field(..., ge=1)
    start_date: datetime
    end_date: datetime
    bank_account_number: str = Field(..., min_length=1, max_length=64)

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Concert Event',
                'description': 'Amazing live music performance',
                'price': 150000,
                'available_seats': 100,
                'start_date': '2026-12-01T19:00:00Z',
                'end_date': '2026-12-01T22:00:00Z',
                'bank_account_number': '1234567890',
            }
        }


class EventUpdateRequest(BaseModel):
    """Only the fields that are sent are changed"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[int] = Field(None, ge=0)
    available_seats: Optional[int] = Field(None, ge=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    bank_account_number: Optional[str] = Field(None, min_length=1, max_length=64)

    class Config:
        json_schema_extra = {'example': {'price': 175000, 'available_seats': 80}}


class EventResponse(BaseModel):
    id: int
    name: str
    description: str
    price: int
    available_seats: int
    start_date: datetime
    end_date: datetime
    organizer_id: int
    organizer_name: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        json_schema_extra = {
            'example': {
                'id': 1,
                'name': 'Concert Event',
                'description': 'Amazing live music performance',
                'price': 150000,
                'available_seats': 99,
                'start_date': '2026-12-01T19:00:00Z',
                'end_date': '2026-12-01T22:00:00Z',
                'organizer_id': 2,
                'organizer_name': 'Taipei Live',
                'created_at': '2026-10-01T08:00:00Z',
            }
        }


class OrganizerEventResponse(EventResponse):
    bank_account_number: str
