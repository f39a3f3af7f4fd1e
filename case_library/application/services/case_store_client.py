"""Sync client — typed case and admin operations over a StoreTransport.

Each method sends one protocol request and decodes the envelope into a
StoreResult carrying that action's payload type. Decoding happens here, so
callers never see raw ``data`` and never get an exception: transport and
payload failures both arrive as ``StoreResult(success=False, message=...)``.
"""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from case_library.application.interfaces import StoreTransport
from case_library.application.schemas.store_protocol import (
    AddAdminRequest,
    AdminRecord,
    CreateCaseRequest,
    DeleteAdminRequest,
    DeleteCaseRequest,
    GetAdminsRequest,
    GetCasesRequest,
    StoreEnvelope,
    UpdateCaseRequest,
    VideoCaseDraft,
    VideoCaseRecord,
)
from case_library.domain.entities import AdminUser, StoreResult, VideoCase

logger = logging.getLogger(__name__)

_case_list_adapter = TypeAdapter(list[VideoCaseRecord])
_admin_list_adapter = TypeAdapter(list[AdminRecord])


class CaseStoreClient:
    """Mediates every read and write against the case store."""

    def __init__(self, transport: StoreTransport):
        self._transport = transport

    @property
    def mode(self) -> str:
        return self._transport.mode

    # ── Cases ────────────────────────────────────────────────────────

    async def list_cases(self) -> StoreResult[list[VideoCase]]:
        envelope = await self._transport.send(GetCasesRequest())
        if not envelope.success:
            return _failed("get", envelope)
        records = _decode(_case_list_adapter, envelope.data or [], "get")
        if records is None:
            return StoreResult.failure("Malformed case list in store response")
        return StoreResult.ok([record.to_entity() for record in records])

    async def create_case(self, draft: VideoCaseDraft) -> StoreResult[VideoCase]:
        """Create a case; the created record (with its new id) is ``data``."""
        envelope = await self._transport.send(CreateCaseRequest(data=draft))
        if not envelope.success:
            return _failed("create", envelope)
        records = _decode(_case_list_adapter, envelope.data or [], "create")
        if not records:
            return StoreResult.failure("Store did not return the created case")
        return StoreResult.ok(records[0].to_entity())

    async def update_case(self, case: VideoCase) -> StoreResult[VideoCase]:
        """Replace a case keyed by id. Re-list for the authoritative state."""
        envelope = await self._transport.send(
            UpdateCaseRequest(data=VideoCaseRecord.from_entity(case))
        )
        if not envelope.success:
            return _failed("update", envelope)
        records = _decode(_case_list_adapter, envelope.data or [], "update")
        return StoreResult.ok(records[0].to_entity() if records else None)

    async def delete_case(self, case_id: str) -> StoreResult[None]:
        envelope = await self._transport.send(DeleteCaseRequest(id=case_id))
        if not envelope.success:
            return _failed("delete", envelope)
        return StoreResult.ok()

    # ── Admins ───────────────────────────────────────────────────────

    async def list_admins(self) -> StoreResult[list[AdminUser]]:
        envelope = await self._transport.send(GetAdminsRequest())
        if not envelope.success:
            return _failed("getAdmins", envelope)
        records = _decode(_admin_list_adapter, envelope.data or [], "getAdmins")
        if records is None:
            return StoreResult.failure("Malformed admin list in store response")
        return StoreResult.ok([record.to_entity() for record in records])

    async def add_admin(self, email: str, added_by: str) -> StoreResult[None]:
        envelope = await self._transport.send(
            AddAdminRequest(email=email, added_by=added_by)
        )
        if not envelope.success:
            return _failed("addAdmin", envelope)
        return StoreResult.ok()

    async def remove_admin(self, email: str) -> StoreResult[None]:
        envelope = await self._transport.send(DeleteAdminRequest(email=email))
        if not envelope.success:
            return _failed("deleteAdmin", envelope)
        return StoreResult.ok()


def _failed(action: str, envelope: StoreEnvelope) -> StoreResult[Any]:
    message = envelope.message or f"Store action '{action}' failed"
    logger.warning("Store action '%s' failed: %s", action, message)
    return StoreResult.failure(message)


def _decode(adapter: TypeAdapter, data: Any, action: str) -> Any:
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        logger.error(
            "Store returned malformed data for '%s': %d validation error(s)",
            action,
            exc.error_count(),
        )
        return None
