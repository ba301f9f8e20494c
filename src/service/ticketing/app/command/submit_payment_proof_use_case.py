from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.conflict_retry import run_with_conflict_retry
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import CustomBaseError, DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.ticketing.app.interface.i_proof_storage import IProofStorage
from src.service.ticketing.app.interface.i_transaction_query_repo import ITransactionQueryRepo
from src.service.ticketing.domain.entity.transaction_entity import Transaction
from src.service.ticketing.domain.enum.transaction_status import OPEN_STATUSES
from src.service.ticketing.domain.error.ticketing_error import (
    AlreadyProcessedError,
    ProofRequiredError,
    TransactionNotFoundError,
)


DEFAULT_CONTENT_TYPE = 'application/octet-stream'


class SubmitPaymentProofUseCase:
    """
    Attach a payment proof to the caller's own transaction.

    Flow:
    1. Reject empty uploads (ProofRequired)
    2. Load the transaction scoped to its owner; missing and foreign look the same (NotFound)
    3. Enforce the size limit
    4. Store the blob, then move the transaction to WAITING_FOR_CONFIRMATION with a
       conditional write that only matches open transactions
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        transaction_query_repo: ITransactionQueryRepo,
        proof_storage: IProofStorage,
    ) -> None:
        self.uow = uow
        self.transaction_query_repo = transaction_query_repo
        self.proof_storage = proof_storage

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        transaction_query_repo: ITransactionQueryRepo = Depends(
            Provide[Container.transaction_query_repo]
        ),
        proof_storage: IProofStorage = Depends(Provide[Container.proof_storage]),
    ) -> Self:
        return cls(
            uow=uow, transaction_query_repo=transaction_query_repo, proof_storage=proof_storage
        )

    @Logger.io
    async def execute(
        self,
        *,
        transaction_id: UUID,
        user_id: int,
        content: Optional[bytes],
        content_type: Optional[str] = None,
    ) -> Transaction:
        try:
            transaction = await self._submit(
                transaction_id=transaction_id,
                user_id=user_id,
                content=content,
                content_type=content_type or DEFAULT_CONTENT_TYPE,
            )
        except CustomBaseError as e:
            metrics.record_proof_upload(result=e.code.value.lower())
            raise

        metrics.record_proof_upload(result='success')
        Logger.base.info(f'🧾 [PROOF] transaction {transaction_id} waiting for confirmation')
        return transaction

    async def _submit(
        self, *, transaction_id: UUID, user_id: int, content: Optional[bytes], content_type: str
    ) -> Transaction:
        if not content:
            raise ProofRequiredError()

        transaction = await self.transaction_query_repo.get_owned(
            transaction_id=transaction_id, user_id=user_id
        )
        if not transaction:
            raise TransactionNotFoundError()
        transaction.ensure_open()

        if len(content) > settings.PROOF_MAX_BYTES:
            raise DomainError(f'Payment proof exceeds {settings.PROOF_MAX_BYTES} bytes')

        proof_url = await self.proof_storage.upload(
            user_id=user_id,
            transaction_id=transaction_id,
            content=content,
            content_type=content_type,
        )
        expected = transaction.attach_proof(proof_url=proof_url)

        try:
            return await run_with_conflict_retry(
                lambda: self._store_proof(transaction=expected),
                name='Payment proof submission',
            )
        except CustomBaseError:
            # The stored blob is no longer referenced by any transaction
            Logger.base.warning(
                f'🗑️  [PROOF] orphaned proof {proof_url} for transaction {transaction_id}'
            )
            raise

    async def _store_proof(self, *, transaction: Transaction) -> Transaction:
        async with self.uow:
            updated = await self.uow.transaction_command_repo.transition_status(
                transaction_id=transaction.id,
                new_status=transaction.status,
                expected_statuses=OPEN_STATUSES,
                payment_proof_url=transaction.payment_proof_url,
            )
            if updated is None:
                # The organizer decided while the proof was being uploaded
                raise AlreadyProcessedError()
            await self.uow.commit()

        return updated
