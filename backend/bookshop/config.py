"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Secrets and connection strings come from environment variables
    - get_settings() is cached (lru_cache) — single instance per process
    - Business constants (cart expiry, deleted-customer placeholder, review
      length) live here and are passed into services explicitly

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://bookshop:bookshop@db:5432/bookshop"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Carts
    cart_expiration_days: int = 30
    cart_sweep_enabled: bool = True
    cart_sweep_interval_seconds: int = 86_400

    # Customers / reviews
    deleted_customer_username: str = "DeletedUser"
    review_text_max_length: int = 500

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
