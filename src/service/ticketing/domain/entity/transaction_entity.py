from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from src.platform.logging.loguru_io import Logger
from src.platform.types.utc_datetime import ensure_utc
from src.service.ticketing.domain.enum.transaction_status import Decision, TransactionStatus
from src.service.ticketing.domain.error.ticketing_error import (
    AlreadyProcessedError,
    ProofRequiredError,
)


@attrs.define
class Transaction:
    """
    One customer's purchase of one seat, from reservation to resolution.

        WAITING_FOR_PAYMENT --upload proof--> WAITING_FOR_CONFIRMATION
        WAITING_FOR_PAYMENT | WAITING_FOR_CONFIRMATION --reject--> REJECTED
        WAITING_FOR_CONFIRMATION --accept--> DONE

    DONE and REJECTED are terminal. Only status and payment_proof_url ever change.
    """

    id: UUID
    event_id: int
    user_id: int
    status: TransactionStatus = TransactionStatus.WAITING_FOR_PAYMENT
    payment_proof_url: Optional[str] = None
    created_at: Optional[datetime] = attrs.field(default=None, converter=ensure_utc)
    updated_at: Optional[datetime] = attrs.field(default=None, converter=ensure_utc)

    @classmethod
    @Logger.io
    def create(cls, *, event_id: int, user_id: int) -> 'Transaction':
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid7(),
            event_id=event_id,
            user_id=user_id,
            status=TransactionStatus.WAITING_FOR_PAYMENT,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @Logger.io
    def attach_proof(self, *, proof_url: str) -> 'Transaction':
        """
        Store the payment proof and wait for the organizer.

        Re-upload replaces the previous proof while the transaction is still open.

        Raises:
            ProofRequiredError: When no proof reference is given
            AlreadyProcessedError: When the transaction is DONE or REJECTED
        """
        if not proof_url:
            raise ProofRequiredError()
        self.ensure_open()

        return attrs.evolve(
            self,
            status=TransactionStatus.WAITING_FOR_CONFIRMATION,
            payment_proof_url=proof_url,
            updated_at=datetime.now(timezone.utc),
        )

    @Logger.io
    def decide(self, *, decision: Decision) -> 'Transaction':
        """
        Apply the organizer's decision.

        Raises:
            AlreadyProcessedError: When the transaction is DONE or REJECTED
            ProofRequiredError: When accepting before any proof was uploaded
        """
        self.ensure_open()

        if decision == Decision.ACCEPT:
            if self.status != TransactionStatus.WAITING_FOR_CONFIRMATION:
                raise ProofRequiredError('Cannot accept a transaction without payment proof')
            new_status = TransactionStatus.DONE
        else:
            new_status = TransactionStatus.REJECTED

        return attrs.evolve(self, status=new_status, updated_at=datetime.now(timezone.utc))

    def ensure_open(self) -> None:
        if self.is_terminal:
            raise AlreadyProcessedError(f'Transaction already {self.status.value}')

    @staticmethod
    def allowed_sources_for(decision: Decision) -> frozenset[TransactionStatus]:
        """Statuses a decision may be applied to, for conditional writes at the store."""
        if decision == Decision.ACCEPT:
            return frozenset({TransactionStatus.WAITING_FOR_CONFIRMATION})
        return frozenset(
            {TransactionStatus.WAITING_FOR_PAYMENT, TransactionStatus.WAITING_FOR_CONFIRMATION}
        )
