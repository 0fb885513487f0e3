"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from datetime import timedelta
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from advisordesk.config import get_settings
from advisordesk.application.interfaces import Repositories
from advisordesk.application.services import IdentityService, SubscriptionService, seed_defaults
from advisordesk.infrastructure.database import Base, engine
from advisordesk.infrastructure.database.session import async_session_factory
from advisordesk.infrastructure.dependencies import (
    build_sqlalchemy_repositories,
    get_json_store,
    get_password_hasher,
    get_session_store,
    get_token_issuer,
)
from advisordesk.infrastructure.json_store import build_json_repositories
from advisordesk.infrastructure.logging.log_config import setup_logging
from advisordesk.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _seed(repos: Repositories) -> None:
    settings = get_settings()
    identity = IdentityService(
        repos.users,
        get_session_store(),
        get_password_hasher(),
        get_token_issuer(),
        session_ttl=timedelta(minutes=settings.session_ttl_minutes),
    )
    subscriptions = SubscriptionService(repos.subscriptions, repos.clients)
    await seed_defaults(
        identity,
        subscriptions,
        admin_name=settings.main_admin_name,
        admin_email=settings.main_admin_email,
        admin_password=settings.main_admin_password,
    )


async def _seed_defaults() -> None:
    """Provision the main admin and the default subscription.

    Idempotent — safe to call on every startup.
    """
    settings = get_settings()
    try:
        if settings.storage_backend == "json":
            await _seed(build_json_repositories(get_json_store()))
            return

        async with async_session_factory() as session:
            await _seed(build_sqlalchemy_repositories(session))
            await session.commit()
    except Exception:
        logger.exception("Could not seed default records")


def _ensure_sqlite_directory(database_url: str) -> None:
    """aiosqlite does not create missing parent directories."""
    if database_url.startswith("sqlite:///"):
        db_path = Path(database_url.removeprefix("sqlite:///"))
        db_path.parent.mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, seed defaults."""
    settings = get_settings()
    setup_logging()

    if settings.storage_backend == "database":
        _ensure_sqlite_directory(settings.database_url)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    else:
        Path(settings.data_dir).mkdir(parents=True, exist_ok=True)

    await _seed_defaults()
    logger.info("%s ready (storage=%s)", settings.app_title, settings.storage_backend)

    yield

    if settings.storage_backend == "database":
        await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "advisordesk.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
