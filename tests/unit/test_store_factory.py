"""Unit tests for choosing the store transport from settings."""

import logging

import pytest

from case_library.application.services import AuthorizationService, CaseStoreClient
from case_library.config import Settings
from case_library.infrastructure.store import (
    HttpStoreTransport,
    LocalStoreTransport,
    build_store_transport,
)
from case_library.infrastructure.store.demo_data import DEMO_CASES


def test_configured_endpoint_builds_remote_transport():
    transport = build_store_transport(
        Settings(store_endpoint_url=" https://store.example.com/exec ")
    )

    assert isinstance(transport, HttpStoreTransport)
    assert transport.mode == "remote"


@pytest.mark.asyncio
async def test_missing_endpoint_builds_seeded_fallback_store():
    settings = Settings(
        store_endpoint_url="",
        fallback_delay_seconds=0,
        default_admin_email="owner@example.com",
    )

    transport = build_store_transport(settings)
    client = CaseStoreClient(transport)
    cases = await client.list_cases()

    assert isinstance(transport, LocalStoreTransport)
    assert [case.id for case in cases.data] == [case.id for case in DEMO_CASES]
    assert await AuthorizationService(client).is_authorized_admin("Owner@Example.com")


def test_fallback_store_warns_that_catalog_and_store_endpoint_are_separate(caplog):
    with caplog.at_level(logging.WARNING, logger="case_library.infrastructure.store"):
        build_store_transport(Settings(store_endpoint_url=""))

    assert "separate from the database behind /api/v1/store" in caplog.text
