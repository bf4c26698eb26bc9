"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Backend-specific requirements (e.g. DATABASE_URL for
postgres) are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SQL_URL_SCHEMES = ("postgresql+asyncpg://", "sqlite+aiosqlite://")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults; validate_backend enforces the
    combinations that matter (postgres needs a URL, production needs postgres).
    """

    # App
    app_name: str = "document-access"
    app_version: str = "1.0.0"
    debug: bool = False
    # "development", "test" or "production"
    environment: str = "development"

    # Database: "memory" (in-process, single worker) or "postgres" (SQLAlchemy)
    database_backend: str = "memory"
    database_url: str = ""
    database_echo: bool = False
    db_command_timeout: int = 60

    # Client backend (access code issuer)
    client_backend_url: str = ""
    client_backend_timeout_seconds: float = 5.0

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def has_database(self) -> bool:
        return self.database_backend == "postgres" and bool(self.database_url)

    @model_validator(mode="after")
    def validate_backend(self) -> "Settings":
        """Validate database backend, URL format and environment.

        - postgres: DATABASE_URL required.
        - production: postgres required (in-memory data is lost on restart).
        - DATABASE_URL, when set, must use an async SQLAlchemy driver.
        """
        if self.environment not in ("development", "test", "production"):
            raise ValueError(
                f"environment must be 'development', 'test' or 'production', got: {self.environment!r}"
            )
        if self.database_backend not in ("memory", "postgres"):
            raise ValueError(
                f"database_backend must be 'memory' or 'postgres', got: {self.database_backend!r}"
            )
        if self.database_backend == "postgres" and not self.database_url:
            raise ValueError(
                "DATABASE_URL is required when database_backend is 'postgres'. "
                "Set in environment or .env file."
            )
        if self.is_production and self.database_backend != "postgres":
            raise ValueError(
                "DATABASE_BACKEND=postgres and DATABASE_URL are required in production"
            )
        if self.database_url and not self.database_url.startswith(_SQL_URL_SCHEMES):
            raise ValueError(
                "DATABASE_URL must be a postgresql+asyncpg:// (or sqlite+aiosqlite:// for local runs) URL"
            )
        if self.client_backend_timeout_seconds <= 0:
            raise ValueError("CLIENT_BACKEND_TIMEOUT_SECONDS must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
