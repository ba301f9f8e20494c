"""
Test Configuration and Fixtures

This module provides:
- Per-test SQLite databases (each test gets its own file under tmp_path)
- A function-scoped TestClient whose lifespan creates the schema
- Registered users and ready-made events for API tests

Architecture:
- Unit tests (test/**/unit/): mock the ports, never touch the database
- Integration tests: real SQLAlchemy repositories on aiosqlite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the logger read the environment at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Never fall back to a PostgreSQL server during tests
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_log_dir / "default.db"}'
    os.environ['PROOF_STORAGE_DIR'] = str(test_log_dir / 'proofs')
    os.environ.setdefault('SECRET_KEY', 'test_secret_key')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.database.orm_db_setting import (  # noqa: E402
    create_db_and_tables,
    dispose_engine,
)
from test.constants import (  # noqa: E402
    ANOTHER_CUSTOMER_EMAIL,
    ANOTHER_CUSTOMER_NAME,
    ANOTHER_ORGANIZER_EMAIL,
    ANOTHER_ORGANIZER_NAME,
    DEFAULT_PASSWORD,
    TEST_CUSTOMER_EMAIL,
    TEST_CUSTOMER_NAME,
    TEST_ORGANIZER_EMAIL,
    TEST_ORGANIZER_NAME,
)
from test.shared.utils import create_user  # noqa: E402


# =============================================================================
# Database Isolation
# =============================================================================
@pytest.fixture
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the app at a fresh SQLite file for one test.

    Proofs stay in the directory the app mounted at import; their names never collide.
    """
    monkeypatch.setattr(settings, 'DATABASE_URL', f'sqlite+aiosqlite:///{tmp_path / "test.db"}')
    return tmp_path


@pytest.fixture
async def database(isolated_settings: Path) -> AsyncGenerator[None, None]:
    """Schema on a per-test SQLite database; the engine is disposed afterwards."""
    await dispose_engine()
    await create_db_and_tables()
    yield
    await dispose_engine()


@pytest.fixture
async def session_factory(database: None) -> Any:
    from src.platform.database.orm_db_setting import Database

    return Database().session


# =============================================================================
# API Fixtures
# =============================================================================
@pytest.fixture
def client(isolated_settings: Path) -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def organizer_user(client: TestClient) -> dict[str, Any]:
    return create_user(
        client, TEST_ORGANIZER_EMAIL, DEFAULT_PASSWORD, TEST_ORGANIZER_NAME, 'ORGANIZER'
    )


@pytest.fixture
def another_organizer_user(client: TestClient) -> dict[str, Any]:
    return create_user(
        client, ANOTHER_ORGANIZER_EMAIL, DEFAULT_PASSWORD, ANOTHER_ORGANIZER_NAME, 'ORGANIZER'
    )


@pytest.fixture
def customer_user(client: TestClient) -> dict[str, Any]:
    return create_user(
        client, TEST_CUSTOMER_EMAIL, DEFAULT_PASSWORD, TEST_CUSTOMER_NAME, 'CUSTOMER'
    )


@pytest.fixture
def another_customer_user(client: TestClient) -> dict[str, Any]:
    return create_user(
        client, ANOTHER_CUSTOMER_EMAIL, DEFAULT_PASSWORD, ANOTHER_CUSTOMER_NAME, 'CUSTOMER'
    )
