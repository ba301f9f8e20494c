"""
Abort-and-retry-once for transient storage conflicts

A unit of work that the database aborts (PostgreSQL serialization failure or
deadlock, SQLite lock timeout) has already been rolled back as a whole, so
running it again cannot apply any effect twice. The second abort is surfaced
as StorageConflictError instead of waiting any longer.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError

from src.platform.exception.exceptions import StorageConflictError
from src.platform.logging.loguru_io import Logger


_T = TypeVar('_T')

# serialization_failure, deadlock_detected
_RETRYABLE_SQLSTATES = frozenset({'40001', '40P01'})
_SQLITE_LOCK_MESSAGES = ('database is locked', 'database table is locked')


def is_storage_conflict(error: DBAPIError) -> bool:
    sqlstate = getattr(error.orig, 'sqlstate', None) or getattr(error.orig, 'pgcode', None)
    if sqlstate in _RETRYABLE_SQLSTATES:
        return True
    if isinstance(error, OperationalError):
        message = str(error.orig).lower()
        return any(text in message for text in _SQLITE_LOCK_MESSAGES)
    return False


async def run_with_conflict_retry(operation: Callable[[], Awaitable[_T]], *, name: str) -> _T:
    """Run `operation` (a complete unit of work) and run it once more if the store aborts it."""
    try:
        return await operation()
    except DBAPIError as e:
        if not is_storage_conflict(e):
            raise
        Logger.base.warning(f'🔁 [DB] {name} aborted by a storage conflict, retrying once: {e.orig}')

    try:
        return await operation()
    except DBAPIError as e:
        if not is_storage_conflict(e):
            raise
        Logger.base.error(f'⛔ [DB] {name} aborted twice by storage conflicts')
        raise StorageConflictError(f'{name} could not be completed, please retry') from e
