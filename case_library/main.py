"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from case_library.config import get_settings
from case_library.infrastructure.database import Base, engine
from case_library.infrastructure.database.session import (
    async_session_factory,
    ensure_sqlite_directory,
)
from case_library.infrastructure.dependencies import (
    build_store_protocol_handler,
    get_store_transport,
)
from case_library.infrastructure.logging.log_config import setup_logging
from case_library.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _seed_default_admin() -> None:
    """Ensure the admin list is never empty on a fresh database.

    Inserts ``DEFAULT_ADMIN_EMAIL`` when the ``admin_users`` table has no
    rows. Idempotent — safe to call on every startup.
    """
    settings = get_settings()
    try:
        async with async_session_factory() as session:
            handler = build_store_protocol_handler(session)
            seeded = await handler.ensure_default_admin(settings.default_admin_email)
            if not seeded:
                logger.debug("Admin list already populated")
    except Exception as exc:
        logger.warning("Could not seed default admin: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, seed the admin list, pick the store."""
    settings = get_settings()
    setup_logging()

    # 1. Create all database tables
    ensure_sqlite_directory(settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Seed the default admin (first-run setup)
    await _seed_default_admin()

    # 3. Resolve the sync client's transport once
    transport = get_store_transport()
    logger.info("Case store transport: %s", transport.mode)

    yield

    # Shutdown
    await transport.aclose()
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
        "case_library.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
