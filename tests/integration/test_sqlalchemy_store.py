"""Integration tests: protocol handler over the SQLAlchemy repositories (SQLite)."""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from case_library.application.services import StoreProtocolHandler
from case_library.domain.entities import AdminUser
from case_library.infrastructure.database import Base
from case_library.infrastructure.database.repositories import (
    SQLAlchemyAdminRepository,
    SQLAlchemyCaseRepository,
)
from case_library.infrastructure.database.session import _get_async_url

from tests.store_fakes import make_case

NEW_CASE = {
    "category": "Catering",
    "subcategory": "Hotpot",
    "region": "China",
    "robotType": "KettyBot",
    "clientName": "Haidilao",
    "videoUrl": "https://youtu.be/9bZkp7q19f0",
    "rating": 5,
    "keywords": ["hotpot", "reception"],
}


async def _make_session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'cases.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine, async_sessionmaker(engine, expire_on_commit=False)


def _make_handler(session) -> StoreProtocolHandler:
    return StoreProtocolHandler(
        SQLAlchemyCaseRepository(session),
        SQLAlchemyAdminRepository(session),
        lock=asyncio.Lock(),
        commit=session.commit,
        rollback=session.rollback,
    )


@pytest.mark.asyncio
async def test_cases_persist_across_sessions(tmp_path):
    engine, factory = await _make_session_factory(tmp_path)
    try:
        async with factory() as session:
            created = await _make_handler(session).handle(
                {"action": "create", "data": NEW_CASE}
            )
        case_id = created.data[0]["id"]

        async with factory() as session:
            listed = await _make_handler(session).handle({"action": "get"})
    finally:
        await engine.dispose()

    assert created.success is True
    assert [case["id"] for case in listed.data] == [case_id]
    stored = listed.data[0]
    assert stored["keywords"] == ["hotpot", "reception"]
    assert stored["subcategory"] == "Hotpot"
    assert stored.get("description") is None


@pytest.mark.asyncio
async def test_update_and_delete_round_trip(tmp_path):
    engine, factory = await _make_session_factory(tmp_path)
    try:
        async with factory() as session:
            await SQLAlchemyCaseRepository(session).create(make_case("1", keywords=[]))
            await session.commit()

        async with factory() as session:
            handler = _make_handler(session)
            updated = await handler.handle(
                {"action": "update", "data": {**NEW_CASE, "id": "1"}}
            )
            missing = await handler.handle(
                {"action": "update", "data": {**NEW_CASE, "id": "2"}}
            )
            listed = await handler.handle({"action": "get"})
            deleted = await handler.handle({"action": "delete", "id": "1"})
            deleted_again = await handler.handle({"action": "delete", "id": "1"})

        async with factory() as session:
            remaining = await SQLAlchemyCaseRepository(session).get_all()
    finally:
        await engine.dispose()

    assert updated.success is True
    assert missing.message == "ID not found"
    assert listed.data[0]["clientName"] == "Haidilao"
    assert deleted.success is True
    assert deleted_again.success is True
    assert remaining == []


@pytest.mark.asyncio
async def test_empty_keywords_are_stored_and_read_back_as_empty_list(tmp_path):
    engine, factory = await _make_session_factory(tmp_path)
    try:
        async with factory() as session:
            repo = SQLAlchemyCaseRepository(session)
            await repo.create(make_case("1", keywords=[]))
            await session.commit()
            case = await repo.get_by_id("1")
    finally:
        await engine.dispose()

    assert case.keywords == []


@pytest.mark.asyncio
async def test_admin_emails_are_unique_case_insensitively(tmp_path):
    engine, factory = await _make_session_factory(tmp_path)
    try:
        async with factory() as session:
            handler = _make_handler(session)
            await handler.handle(
                {"action": "addAdmin", "email": "Alice@Co.com", "addedBy": "bob@co.com"}
            )
            await handler.handle(
                {"action": "addAdmin", "email": "alice@co.com", "addedBy": "carol@co.com"}
            )
            admins = await handler.handle({"action": "getAdmins"})
            removed = await handler.handle({"action": "deleteAdmin", "email": "ALICE@CO.COM"})
            after = await handler.handle({"action": "getAdmins"})
    finally:
        await engine.dispose()

    assert [(a["email"], a["addedBy"]) for a in admins.data] == [("Alice@Co.com", "bob@co.com")]
    assert removed.success is True
    assert after.data == []


@pytest.mark.asyncio
async def test_default_admin_is_seeded_once(tmp_path):
    engine, factory = await _make_session_factory(tmp_path)
    try:
        async with factory() as session:
            seeded = await _make_handler(session).ensure_default_admin("admin@example.com")
        async with factory() as session:
            reseeded = await _make_handler(session).ensure_default_admin("admin@example.com")
            admins = await SQLAlchemyAdminRepository(session).get_all()
    finally:
        await engine.dispose()

    assert seeded is True
    assert reseeded is False
    assert admins == [
        AdminUser(email="admin@example.com", added_by="System", added_at=admins[0].added_at)
    ]


def test_async_url_conversion_for_sqlite():
    assert _get_async_url("sqlite:///data/case_library.db") == (
        "sqlite+aiosqlite:///data/case_library.db"
    )
