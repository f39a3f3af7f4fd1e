"""Server side of the case-store protocol.

Takes one decoded JSON request, runs the named action against the case and
admin repositories, and answers with the ``{success, data?, message?}``
envelope. Requests are serialised by a shared ``asyncio.Lock``; a request
that cannot get the lock within the configured wait fails instead of
hanging. Nothing raised while handling a request escapes as an exception.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from case_library.application.interfaces import AdminRepository, CaseRepository
from case_library.application.schemas.store_protocol import (
    STORE_ACTIONS,
    AddAdminRequest,
    AdminRecord,
    CreateCaseRequest,
    DeleteAdminRequest,
    DeleteCaseRequest,
    StoreEnvelope,
    StoreRequest,
    UpdateCaseRequest,
    VideoCaseRecord,
    store_request_adapter,
)
from case_library.domain.entities import AdminUser, VideoCase

logger = logging.getLogger(__name__)

STORE_BUSY_MESSAGE = "Store is busy, try again"
ID_NOT_FOUND_MESSAGE = "ID not found"
DEFAULT_ADDED_BY = "System"

TransactionHook = Callable[[], Awaitable[None]]


class CaseIdGenerator:
    """Issues time-based case ids (epoch milliseconds as a decimal string).

    Ids strictly increase for the lifetime of the generator even when two
    cases are created within the same millisecond.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def next_id(self) -> str:
        candidate = int(self._clock() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)


class StoreProtocolHandler:
    """Dispatches protocol actions to the repositories under a mutual-exclusion lock."""

    def __init__(
        self,
        case_repository: CaseRepository,
        admin_repository: AdminRepository,
        *,
        lock: asyncio.Lock,
        lock_timeout: float = 10.0,
        id_generator: CaseIdGenerator | None = None,
        commit: TransactionHook | None = None,
        rollback: TransactionHook | None = None,
    ):
        self._cases = case_repository
        self._admins = admin_repository
        self._lock = lock
        self._lock_timeout = lock_timeout
        self._ids = id_generator or CaseIdGenerator()
        self._commit = commit
        self._rollback = rollback
        self._actions: dict[str, Callable[[Any], Awaitable[StoreEnvelope]]] = {
            "get": self._get_cases,
            "create": self._create_case,
            "update": self._update_case,
            "delete": self._delete_case,
            "getAdmins": self._get_admins,
            "addAdmin": self._add_admin,
            "deleteAdmin": self._delete_admin,
        }

    async def handle(self, payload: Any) -> StoreEnvelope:
        """Validate, serialise and run a single protocol request."""
        if not isinstance(payload, dict):
            return StoreEnvelope.failure("Request body must be a JSON object")

        action = payload.get("action")
        if not isinstance(action, str) or action not in STORE_ACTIONS:
            return StoreEnvelope.failure(f"Unknown action: {action}")

        try:
            request: StoreRequest = store_request_adapter.validate_python(payload)
        except ValidationError as exc:
            return StoreEnvelope.failure(f"Invalid '{action}' request: {_describe(exc)}")

        try:
            await asyncio.wait_for(self._lock.acquire(), timeout=self._lock_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Store lock not acquired within %.1fs — rejecting '%s'",
                self._lock_timeout,
                action,
            )
            return StoreEnvelope.failure(STORE_BUSY_MESSAGE)

        try:
            envelope = await self._actions[action](request)
            if envelope.success:
                if self._commit is not None:
                    await self._commit()
            elif self._rollback is not None:
                await self._rollback()
            return envelope
        except Exception as exc:
            logger.exception("Store action '%s' failed", action)
            if self._rollback is not None:
                await self._rollback()
            return StoreEnvelope.failure(str(exc))
        finally:
            self._lock.release()

    async def ensure_default_admin(self, email: str) -> bool:
        """Seed the admin list with ``email`` when it is empty.

        Returns True when an admin was added. Idempotent — safe to call on
        every startup.
        """
        if not email or await self._admins.get_all():
            return False
        await self._admins.add(
            AdminUser(
                email=email,
                added_by=DEFAULT_ADDED_BY,
                added_at=datetime.now(timezone.utc),
            )
        )
        if self._commit is not None:
            await self._commit()
        logger.info("Seeded default admin '%s'", email)
        return True

    # ── Case actions ─────────────────────────────────────────────────

    async def _get_cases(self, request: Any) -> StoreEnvelope:
        cases = await self._cases.get_all()
        return StoreEnvelope.ok([_dump_case(case) for case in cases])

    async def _create_case(self, request: CreateCaseRequest) -> StoreEnvelope:
        case_id = await self._next_case_id()
        created = await self._cases.create(request.data.with_id(case_id))
        logger.info("Created case %s (%s)", created.id, created.client_name)
        return StoreEnvelope.ok([_dump_case(created)])

    async def _update_case(self, request: UpdateCaseRequest) -> StoreEnvelope:
        case = request.data.to_entity()
        if await self._cases.get_by_id(case.id) is None:
            logger.info("Update rejected — case %s does not exist", case.id)
            return StoreEnvelope.failure(ID_NOT_FOUND_MESSAGE)
        updated = await self._cases.update(case)
        logger.info("Updated case %s", updated.id)
        return StoreEnvelope.ok([_dump_case(updated)])

    async def _delete_case(self, request: DeleteCaseRequest) -> StoreEnvelope:
        deleted = await self._cases.delete(request.id)
        if deleted:
            logger.info("Deleted case %s", request.id)
        else:
            logger.debug("Delete of unknown case %s ignored", request.id)
        return StoreEnvelope.ok()

    async def _next_case_id(self) -> str:
        case_id = self._ids.next_id()
        while await self._cases.get_by_id(case_id) is not None:
            case_id = self._ids.next_id()
        return case_id

    # ── Admin actions ────────────────────────────────────────────────

    async def _get_admins(self, request: Any) -> StoreEnvelope:
        admins = await self._admins.get_all()
        return StoreEnvelope.ok(
            [
                AdminRecord.from_entity(admin).model_dump(mode="json", by_alias=True)
                for admin in admins
            ]
        )

    async def _add_admin(self, request: AddAdminRequest) -> StoreEnvelope:
        if await self._admins.get_by_email(request.email) is not None:
            logger.debug("Admin '%s' already present — nothing to add", request.email)
            return StoreEnvelope.ok()
        await self._admins.add(
            AdminUser(
                email=request.email,
                added_by=request.added_by or DEFAULT_ADDED_BY,
                added_at=datetime.now(timezone.utc),
            )
        )
        logger.info("Added admin '%s' (by %s)", request.email, request.added_by)
        return StoreEnvelope.ok()

    async def _delete_admin(self, request: DeleteAdminRequest) -> StoreEnvelope:
        if await self._admins.delete_by_email(request.email):
            logger.info("Removed admin '%s'", request.email)
        return StoreEnvelope.ok()


def _dump_case(case: VideoCase) -> dict[str, Any]:
    return VideoCaseRecord.from_entity(case).model_dump(mode="json", by_alias=True)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
