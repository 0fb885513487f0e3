import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Advisor Desk API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:8080"]

    # Persistence — "database" (SQLAlchemy) or "json" (flat collection files)
    storage_backend: Literal["database", "json"] = "database"
    database_url: str = "sqlite:///./data/advisordesk.db"
    data_dir: str = "data"

    # Sessions / tokens
    jwt_secret: str = "change-me-in-production"
    jwt_issuer: str = "advisordesk"
    jwt_algorithm: str = "HS256"
    session_ttl_minutes: int = 8 * 60

    # Seeded main admin
    main_admin_name: str = "Sayanth"
    main_admin_email: str = "sayanth@example.com"
    main_admin_password: str = "change-me-now"

    # Notifications — empty URL keeps the log-only publisher
    notification_webhook_url: str = ""
    notification_timeout: float = 5.0

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_audit: str = "INFO"            # authentication & access decisions

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Warn loudly when the bundled secrets are still in use outside development."""
        if self.app_env != "development" and self.jwt_secret == "change-me-in-production":
            _config_logger.warning("JWT_SECRET is not configured; tokens are forgeable")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
