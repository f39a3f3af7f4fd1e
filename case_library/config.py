from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Video Case Library API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///data/case_library.db"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Case store; leave the URL empty to run against the in-memory fallback
    store_endpoint_url: str = ""
    store_request_timeout: float = 30.0
    fallback_delay_seconds: float = 0.5
    store_lock_timeout_seconds: float = 10.0

    # Seeded into an empty admin table on startup
    default_admin_email: str = "admin@example.com"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # store transports + protocol handler

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def uses_remote_store(self) -> bool:
        return bool(self.store_endpoint_url.strip())


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
