from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_transaction_query_repo import ITransactionQueryRepo


class ListTransactionsUseCase:
    """Newest first, each row joined with the event (and customer, for organizers)"""

    def __init__(self, transaction_query_repo: ITransactionQueryRepo) -> None:
        self.transaction_query_repo = transaction_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        transaction_query_repo: ITransactionQueryRepo = Depends(
            Provide[Container.transaction_query_repo]
        ),
    ) -> Self:
        return cls(transaction_query_repo=transaction_query_repo)

    @Logger.io
    async def list_mine(self, *, user_id: int) -> List[dict]:
        transactions = await self.transaction_query_repo.list_by_user_with_event(user_id=user_id)

        Logger.base.info(f'📋 [LIST_MINE] user {user_id} has {len(transactions)} transactions')
        return transactions

    @Logger.io
    async def list_for_organizer(self, *, organizer_id: int) -> List[dict]:
        transactions = await self.transaction_query_repo.list_by_organizer_with_details(
            organizer_id=organizer_id
        )

        Logger.base.info(
            f'📋 [LIST_ORGANIZER] organizer {organizer_id} has {len(transactions)} transactions'
        )
        return transactions
