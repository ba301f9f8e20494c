from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.decide_transaction_use_case import (
    DecideTransactionUseCase,
)
from src.service.ticketing.app.command.reserve_seat_use_case import ReserveSeatUseCase
from src.service.ticketing.app.command.submit_payment_proof_use_case import (
    SubmitPaymentProofUseCase,
)
from src.service.ticketing.app.query.list_transactions_use_case import ListTransactionsUseCase
from src.service.ticketing.domain.access_control import Operation
from src.service.ticketing.domain.entity.transaction_entity import Transaction
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.role_auth import require
from src.service.ticketing.driving_adapter.http_controller.schema.transaction_schema import (
    DecisionRequest,
    MyTransactionResponse,
    OrganizerTransactionResponse,
    ReserveSeatRequest,
    TransactionResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_transaction_response(transaction: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=transaction.id,
        event_id=transaction.event_id,
        user_id=transaction.user_id,
        status=transaction.status,
        payment_proof_url=transaction.payment_proof_url,
        created_at=transaction.created_at,
        updated_at=transaction.updated_at,
    )


@router.post('', status_code=status.HTTP_201_CREATED, response_model=TransactionResponse)
@Logger.io
async def reserve_seat(
    request: ReserveSeatRequest,
    current_user: UserEntity = Depends(require(Operation.RESERVE_SEAT)),
    use_case: ReserveSeatUseCase = Depends(ReserveSeatUseCase.depends),
) -> TransactionResponse:
    with tracer.start_as_current_span('controller.reserve_seat') as span:
        span.set_attribute('event_id', request.event_id)
        span.set_attribute('user_id', current_user.id or 0)

        transaction = await use_case.execute(
            event_id=request.event_id, user_id=current_user.id or 0
        )
        return _to_transaction_response(transaction)


@router.get('/my', response_model=List[MyTransactionResponse])
@Logger.io
async def list_my_transactions(
    current_user: UserEntity = Depends(require(Operation.LIST_MY_TRANSACTIONS)),
    use_case: ListTransactionsUseCase = Depends(ListTransactionsUseCase.depends),
) -> List[dict]:
    return await use_case.list_mine(user_id=current_user.id or 0)


@router.get('/organizer', response_model=List[OrganizerTransactionResponse])
@Logger.io
async def list_organizer_transactions(
    current_user: UserEntity = Depends(require(Operation.LIST_ORGANIZER_TRANSACTIONS)),
    use_case: ListTransactionsUseCase = Depends(ListTransactionsUseCase.depends),
) -> List[dict]:
    return await use_case.list_for_organizer(organizer_id=current_user.id or 0)


@router.patch('/{transaction_id}/upload', response_model=TransactionResponse)
@Logger.io
async def upload_payment_proof(
    transaction_id: UUID,
    proof: Optional[UploadFile] = File(None),
    current_user: UserEntity = Depends(require(Operation.SUBMIT_PROOF)),
    use_case: SubmitPaymentProofUseCase = Depends(SubmitPaymentProofUseCase.depends),
) -> TransactionResponse:
    # One byte past the limit is enough for the use case to reject the upload
    content = await proof.read(settings.PROOF_MAX_BYTES + 1) if proof else None
    transaction = await use_case.execute(
        transaction_id=transaction_id,
        user_id=current_user.id or 0,
        content=content,
        content_type=proof.content_type if proof else None,
    )
    return _to_transaction_response(transaction)


@router.patch('/{transaction_id}/manage', response_model=TransactionResponse)
@Logger.io
async def decide_transaction(
    transaction_id: UUID,
    request: DecisionRequest,
    current_user: UserEntity = Depends(require(Operation.DECIDE_TRANSACTION)),
    use_case: DecideTransactionUseCase = Depends(DecideTransactionUseCase.depends),
) -> TransactionResponse:
    with tracer.start_as_current_span('controller.decide_transaction') as span:
        span.set_attribute('transaction_id', str(transaction_id))
        span.set_attribute('decision', request.decision.value)

        transaction = await use_case.execute(
            transaction_id=transaction_id,
            organizer_id=current_user.id or 0,
            decision=request.decision,
        )
        return _to_transaction_response(transaction)
