# invoicebook/config.py
"""
Environment-driven settings.

Values come from environment variables (or a local .env file); get_settings()
caches a single instance per process.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    environment: str = "dev"

    # Database
    database_url: str = "sqlite:///db.sqlite"  # file in project root
    database_pool_size: int = 10
    database_max_overflow: int = 10
    database_echo: bool = False

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        # Hosted Postgres hands out postgres://, SQLAlchemy wants a driver name
        if isinstance(v, str) and v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql+psycopg2://", 1)
        return v

    # Credentials
    bcrypt_rounds: int = 10

    # Pagination
    pagination_default_limit: int = 10
    pagination_max_limit: int = 100

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
