"""Chooses the store transport at construction time from settings."""

import logging

from case_library.application.interfaces import StoreTransport
from case_library.config import Settings
from case_library.infrastructure.store.demo_data import DEMO_CASES
from case_library.infrastructure.store.http_store_transport import HttpStoreTransport
from case_library.infrastructure.store.local_store_transport import LocalStoreTransport

logger = logging.getLogger(__name__)


def build_store_transport(settings: Settings) -> StoreTransport:
    """Remote transport when an endpoint URL is configured, fallback otherwise."""
    if settings.uses_remote_store:
        logger.info("Using remote case store at %s", settings.store_endpoint_url)
        return HttpStoreTransport(
            settings.store_endpoint_url.strip(),
            timeout=settings.store_request_timeout,
        )

    logger.warning(
        "STORE_ENDPOINT_URL is not configured; the catalog uses the in-memory "
        "fallback store, separate from the database behind /api/v1/store. "
        "Point STORE_ENDPOINT_URL at /api/v1/store to share one store."
    )
    admin_emails = [settings.default_admin_email] if settings.default_admin_email else []
    return LocalStoreTransport.in_memory(
        DEMO_CASES,
        admin_emails,
        delay_seconds=settings.fallback_delay_seconds,
        lock_timeout=settings.store_lock_timeout_seconds,
    )
