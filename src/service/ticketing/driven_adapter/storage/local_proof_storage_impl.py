"""
Payment proofs on the local filesystem.

Objects are written under settings.PROOF_STORAGE_DIR using the object-store key
layout proofs/{user_id}/{transaction_id}-{epoch_ms}.{ext} and served read-only
by the API under settings.PROOF_PUBLIC_BASE_URL.
"""

import time
from uuid import UUID

import anyio

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_proof_storage import IProofStorage


def _extension_for(content_type: str) -> str:
    # image/png -> png, application/pdf -> pdf
    subtype = content_type.split('/', 1)[-1].split(';', 1)[0].strip().lower()
    ext = ''.join(ch for ch in subtype if ch.isalnum())
    return ext or 'bin'


def build_proof_key(*, user_id: int, transaction_id: UUID, content_type: str) -> str:
    epoch_ms = int(time.time() * 1000)
    return f'proofs/{user_id}/{transaction_id}-{epoch_ms}.{_extension_for(content_type)}'


class LocalProofStorageImpl(IProofStorage):
    @Logger.io
    async def upload(
        self, *, user_id: int, transaction_id: UUID, content: bytes, content_type: str
    ) -> str:
        key = build_proof_key(
            user_id=user_id, transaction_id=transaction_id, content_type=content_type
        )
        # Key starts with proofs/, which is also the mount point of the storage dir
        relative_key = key.split('/', 1)[1]
        target = anyio.Path(settings.PROOF_STORAGE_DIR) / relative_key
        await target.parent.mkdir(parents=True, exist_ok=True)
        await target.write_bytes(content)

        Logger.base.info(f'🧾 [PROOF] Stored {len(content)} bytes for transaction {transaction_id}')
        return f'{settings.PROOF_PUBLIC_BASE_URL.rstrip("/")}/{relative_key}'
