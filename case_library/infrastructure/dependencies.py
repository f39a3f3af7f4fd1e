"""FastAPI dependency injection — wires infrastructure to application layer."""

import asyncio
from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from case_library.config import get_settings
from case_library.application.interfaces import StoreTransport
from case_library.application.services import (
    AuthorizationService,
    CaseIdGenerator,
    CaseStoreClient,
    StoreProtocolHandler,
)
from case_library.infrastructure.database.session import get_db_session
from case_library.infrastructure.database.repositories import (
    SQLAlchemyAdminRepository,
    SQLAlchemyCaseRepository,
)
from case_library.infrastructure.store import build_store_transport


@lru_cache
def get_store_lock() -> asyncio.Lock:
    """Process-wide lock serialising store protocol requests."""
    return asyncio.Lock()


@lru_cache
def get_case_id_generator() -> CaseIdGenerator:
    return CaseIdGenerator()


@lru_cache
def get_store_transport() -> StoreTransport:
    """Transport used by the sync client, chosen once from settings."""
    return build_store_transport(get_settings())


def build_store_protocol_handler(session: AsyncSession) -> StoreProtocolHandler:
    """Protocol handler bound to one database session."""
    settings = get_settings()
    return StoreProtocolHandler(
        SQLAlchemyCaseRepository(session),
        SQLAlchemyAdminRepository(session),
        lock=get_store_lock(),
        lock_timeout=settings.store_lock_timeout_seconds,
        id_generator=get_case_id_generator(),
        commit=session.commit,
        rollback=session.rollback,
    )


async def get_store_protocol_handler(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[StoreProtocolHandler, None]:
    """Provides the database-backed store protocol handler."""
    yield build_store_protocol_handler(session)


async def get_case_store_client() -> AsyncGenerator[CaseStoreClient, None]:
    """Provides a CaseStoreClient over the configured transport."""
    yield CaseStoreClient(get_store_transport())


async def get_authorization_service(
    client: CaseStoreClient = Depends(get_case_store_client),
) -> AsyncGenerator[AuthorizationService, None]:
    """Provides an AuthorizationService backed by the sync client."""
    yield AuthorizationService(client)
