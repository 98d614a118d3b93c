"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env (never hardcoded in code paths)
    - get_settings() is cached (lru_cache): single instance per process
    - Settings is frozen: built once at startup, then only read

Design Decisions:
    - Values come from pydantic-settings (environment, then .env), never raw os.environ
    - Components receive Settings through FastAPI dependencies, not module globals
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore", frozen=True,
    )

    env: str = "development"

    # Database
    database_url: str = "postgresql+asyncpg://floormap:floormap@db:5432/floormap"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 25
    database_max_overflow: int = 5

    # Sessions
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    session_ttl_hours: int = 24

    # API
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_max_age: int = 86_400

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
