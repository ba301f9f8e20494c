from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.ticketing.driven_adapter.model.event_model import EventModel
    from src.service.ticketing.driven_adapter.model.user_model import UserModel


class TransactionModel(Base):
    __tablename__ = 'ticket_transaction'
    __table_args__ = (Index('ix_ticket_transaction_event_created', 'event_id', 'created_at'),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)  # UUID7
    event_id: Mapped[int] = mapped_column(Integer, ForeignKey('event.id'), nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id'), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    payment_proof_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    event: Mapped['EventModel'] = relationship('EventModel', foreign_keys=[event_id])
    user: Mapped['UserModel'] = relationship('UserModel', foreign_keys=[user_id])
