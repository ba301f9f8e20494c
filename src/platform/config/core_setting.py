from pathlib import Path
import json
from typing import Annotated, List

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Event Ticketing Platform'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 24 * 60
    ALGORITHM: str = 'HS256'
    AUTH_COOKIE_NAME: str = 'ticketingauth'

    # CORS: comma list or JSON array (NoDecode passes the raw env string to the validator)
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith('['):
            return [str(i).strip() for i in json.loads(v)]
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        if isinstance(v, list):
            return v
        return []

    # PostgreSQL (used when DATABASE_URL is not given)
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'ticketing_platform'

    # Full SQLAlchemy async URL, e.g. sqlite+aiosqlite:///./local.db
    DATABASE_URL: str = ''

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30  # seconds to wait for a free connection
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    # SQLite writers wait this long for the database lock before failing
    SQLITE_BUSY_TIMEOUT_SECONDS: float = 30.0

    @model_validator(mode='after')
    def assemble_database_url(self) -> 'Settings':
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f'postgresql+asyncpg://{self.POSTGRES_USER}:'
                f'{self.POSTGRES_PASSWORD.get_secret_value()}'
                f'@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
            )
        return self

    @property
    def IS_SQLITE(self) -> bool:
        return self.DATABASE_URL.startswith('sqlite')

    # Payment proof storage
    PROOF_STORAGE_DIR: str = str(_PROJECT_ROOT / 'storage')
    PROOF_PUBLIC_BASE_URL: str = '/proofs'
    PROOF_MAX_BYTES: int = 5 * 1024 * 1024


settings = Settings()  # type: ignore
