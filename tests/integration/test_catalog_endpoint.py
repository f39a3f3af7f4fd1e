"""Integration tests for the catalog browse endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from case_library.application.schemas.store_protocol import StoreEnvelope
from case_library.application.services import CaseStoreClient
from case_library.infrastructure.dependencies import get_case_store_client
from case_library.infrastructure.store.demo_data import DEMO_CASES
from case_library.main import app

from tests.store_fakes import FixedTransport, local_transport


@pytest.fixture
def demo_store():
    client = CaseStoreClient(local_transport(DEMO_CASES))
    app.dependency_overrides[get_case_store_client] = lambda: client
    yield client
    app.dependency_overrides.clear()


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_browse_without_filters_returns_everything(demo_store):
    async with _client() as client:
        response = await client.get("/api/v1/catalog/cases")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == len(DEMO_CASES)
    assert body["options"]["robotTypes"] == ["BellaBot", "CC1", "KettyBot"]
    first = body["items"][0]
    assert first["clientName"] == "McDonald's"
    assert first["thumbnailUrl"].startswith("https://img.youtube.com/vi/")


@pytest.mark.asyncio
async def test_browse_applies_search_and_selectors(demo_store):
    async with _client() as client:
        searched = (
            await client.get("/api/v1/catalog/cases", params={"search": "DELIVERY"})
        ).json()
        narrowed = (
            await client.get(
                "/api/v1/catalog/cases",
                params={"search": "delivery", "region": "China"},
            )
        ).json()

    assert [item["id"] for item in searched["items"]] == ["1", "2"]
    assert [item["id"] for item in narrowed["items"]] == ["2"]
    # Options always describe the whole collection
    assert narrowed["options"]["regions"] == ["China", "Germany", "Japan", "USA"]


@pytest.mark.asyncio
async def test_browse_non_youtube_case_gets_placeholder_thumbnail(demo_store):
    async with _client() as client:
        body = (
            await client.get("/api/v1/catalog/cases", params={"category": "Retail"})
        ).json()

    assert body["total"] == 1
    assert body["items"][0]["thumbnailUrl"] == "https://picsum.photos/seed/3/400/225"


@pytest.mark.asyncio
async def test_browse_reports_store_failure_as_bad_gateway():
    failing = CaseStoreClient(
        FixedTransport(StoreEnvelope.failure("Network error connecting to backend."))
    )
    app.dependency_overrides[get_case_store_client] = lambda: failing
    try:
        async with _client() as client:
            response = await client.get("/api/v1/catalog/cases")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 502
    assert response.json()["detail"] == "Network error connecting to backend."


@pytest.mark.asyncio
async def test_admin_check_is_case_insensitive(demo_store):
    async with _client() as client:
        admin = await client.get(
            "/api/v1/catalog/admins/check", params={"email": "Admin@Example.com"}
        )
        visitor = await client.get(
            "/api/v1/catalog/admins/check", params={"email": "visitor@example.com"}
        )

    assert admin.json() == {"email": "Admin@Example.com", "isAdmin": True}
    assert visitor.json() == {"email": "visitor@example.com", "isAdmin": False}


@pytest.mark.asyncio
async def test_admin_check_requires_email(demo_store):
    async with _client() as client:
        response = await client.get("/api/v1/catalog/admins/check")

    assert response.status_code == 422
