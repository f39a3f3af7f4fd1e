"""Fallback store transport — runs the protocol in-process.

Used when no store endpoint is configured so the catalog still works
without a deployed backend. Requests go through the same protocol handler
as the HTTP store endpoint, only against in-memory repositories and after
an artificial delay that stands in for the network round-trip.
"""

import asyncio
import logging
from datetime import datetime, timezone

from case_library.application.interfaces import StoreTransport
from case_library.application.schemas.store_protocol import (
    StoreEnvelope,
    StoreRequest,
    encode_request,
)
from case_library.application.services.store_protocol_handler import (
    DEFAULT_ADDED_BY,
    StoreProtocolHandler,
)
from case_library.domain.entities import AdminUser, VideoCase
from case_library.infrastructure.memory import InMemoryAdminRepository, InMemoryCaseRepository

logger = logging.getLogger(__name__)


class LocalStoreTransport(StoreTransport):
    """Simulates the remote store against an in-process protocol handler."""

    def __init__(self, handler: StoreProtocolHandler, *, delay_seconds: float = 0.5):
        self._handler = handler
        self._delay_seconds = delay_seconds

    @classmethod
    def in_memory(
        cls,
        cases: list[VideoCase] | None = None,
        admin_emails: list[str] | None = None,
        *,
        delay_seconds: float = 0.5,
        lock_timeout: float = 10.0,
    ) -> "LocalStoreTransport":
        """Build a fallback store pre-loaded with ``cases`` and ``admin_emails``."""
        now = datetime.now(timezone.utc)
        admins = [
            AdminUser(email=email, added_by=DEFAULT_ADDED_BY, added_at=now)
            for email in admin_emails or []
        ]
        handler = StoreProtocolHandler(
            InMemoryCaseRepository(cases),
            InMemoryAdminRepository(admins),
            lock=asyncio.Lock(),
            lock_timeout=lock_timeout,
        )
        return cls(handler, delay_seconds=delay_seconds)

    @property
    def mode(self) -> str:
        return "local"

    async def send(self, request: StoreRequest) -> StoreEnvelope:
        body = encode_request(request)
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)
        envelope = await self._handler.handle(body)
        logger.debug("Local store '%s' → success=%s", body["action"], envelope.success)
        return envelope
