"""Unit tests for application settings configuration."""

from pathlib import Path

from advisordesk.config import Settings
from advisordesk.infrastructure.database.session import _get_async_url


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "json")
    monkeypatch.setenv("SESSION_TTL_MINUTES", "15")
    monkeypatch.setenv("MAIN_ADMIN_EMAIL", "root@example.com")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "json"
    assert settings.session_ttl_minutes == 15
    assert settings.main_admin_email == "root@example.com"
    assert settings.main_admin_name == "Sayanth"


def test_async_url_rewriting():
    assert _get_async_url("sqlite:///./data/x.db") == "sqlite+aiosqlite:///./data/x.db"
    assert _get_async_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert _get_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"
