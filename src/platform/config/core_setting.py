from pathlib import Path
from typing import List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Reservation'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL (used when DATABASE_URL is not set)
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'cinema_reservation'
    POSTGRES_PORT: int = 5432

    # Explicit URL wins, e.g. sqlite+aiosqlite:///./cinema.db for local runs
    DATABASE_URL: Optional[str] = None

    # Connection pool (ignored by SQLite)
    DB_POOL_SIZE: int = 20
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True
    DB_ECHO: bool = False
    # create_all at startup (local SQLite runs); production schemas come from Alembic
    DB_AUTO_CREATE_TABLES: bool = False

    # Reservation rules
    HOLD_TTL_SECONDS: int = 300
    BOOKING_CODE_MAX_ATTEMPTS: int = 5

    # Expiry sweeper
    EXPIRY_SWEEP_INTERVAL_SECONDS: float = 60.0
    SHUTDOWN_GRACE_SECONDS: float = 5.0

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    @property
    def DATABASE_URL_SYNC(self) -> str:
        """Driver-less URL for Alembic's offline mode"""
        return self.DATABASE_URL_ASYNC.replace('+asyncpg', '').replace('+aiosqlite', '')


settings = Settings()  # type: ignore
