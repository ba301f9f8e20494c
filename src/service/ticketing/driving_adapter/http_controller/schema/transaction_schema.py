from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.service.ticketing.domain.enum.transaction_status import Decision, TransactionStatus


class ReserveSeatRequest(BaseModel):
    event_id: int

    class Config:
        json_schema_extra = {'example': {'event_id': 1}}


class DecisionRequest(BaseModel):
    decision: Decision

    class Config:
        json_schema_extra = {'example': {'decision': 'ACCEPT'}}


class TransactionResponse(BaseModel):
    id: UUID
    event_id: int
    user_id: int
    status: TransactionStatus
    payment_proof_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        json_schema_extra = {
            'example': {
                'id': '01920f6e-2b7c-7d3a-9c1e-5f4b2a8d9e10',
                'event_id': 1,
                'user_id': 3,
                'status': 'WAITING_FOR_PAYMENT',
                'payment_proof_url': None,
                'created_at': '2026-10-01T08:00:00Z',
                'updated_at': '2026-10-01T08:00:00Z',
            }
        }


class MyTransactionResponse(TransactionResponse):
    """A customer's transaction with what they need to pay for it"""

    event_name: str
    event_start_date: datetime
    event_price: Optional[int] = None
    bank_account_number: str


class OrganizerTransactionResponse(TransactionResponse):
    event_name: str
    user_name: str
    user_email: str
