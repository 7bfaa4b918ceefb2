"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Connection parameters are explicit fields, never module-level globals
    - get_settings() is cached (lru_cache): single instance per process
    - create_app() receives a Settings instance; nothing else reads the environment

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - database_url overrides the host/port/name fields entirely and disables the
      fallback dial (ADR: tests and one-off deployments point at a single URL)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_driver: str = "postgresql+asyncpg"
    database_host: str = "localhost"
    database_port: int = 5432
    database_name: str = "gettyio"
    database_user: str = "gettyio"
    database_password: str = "gettyio"
    database_dial_timeout_seconds: float = 60.0
    database_url: str | None = None
    database_pool_size: int = 20
    database_max_overflow: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    # Collections
    collection_name: str = "Customer"
    cliente_collection_name: str = "Cliente"
    reset_collections_on_startup: bool = False

    # HTTP listener
    server_host: str = "0.0.0.0"
    server_port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def primary_database_url(self) -> str:
        """Full dial: host, port and database name."""
        if self.database_url:
            return self.database_url
        return (
            f"{self.database_driver}://{self.database_credentials}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )

    @property
    def fallback_database_url(self) -> str | None:
        """Direct host dial: driver default port and database."""
        if self.database_url:
            return None
        return f"{self.database_driver}://{self.database_credentials}@{self.database_host}"

    @property
    def database_credentials(self) -> str:
        if self.database_password:
            return f"{self.database_user}:{self.database_password}"
        return self.database_user


@lru_cache
def get_settings() -> Settings:
    return Settings()
