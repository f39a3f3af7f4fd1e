"""Case-store protocol endpoint — the single action-dispatching URL.

Always answers 200 with the ``{success, data?, message?}`` envelope;
failures are reported through ``success`` and ``message``.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from case_library.application.schemas.store_protocol import StoreEnvelope
from case_library.application.services import StoreProtocolHandler
from case_library.infrastructure.dependencies import get_store_protocol_handler

router = APIRouter(prefix="/store", tags=["Store"])


@router.post("")
async def handle_store_request(
    request: Request,
    handler: StoreProtocolHandler = Depends(get_store_protocol_handler),
) -> dict[str, Any]:
    """Run one protocol action named by the body's ``action`` field."""
    try:
        payload = await request.json()
    except ValueError:
        return StoreEnvelope.failure("Request body is not valid JSON").to_wire()
    envelope = await handler.handle(payload)
    return envelope.to_wire()


@router.get("")
async def list_store_cases(
    handler: StoreProtocolHandler = Depends(get_store_protocol_handler),
) -> dict[str, Any]:
    """Plain GET is a full case fetch, same as ``action=get``."""
    envelope = await handler.handle({"action": "get"})
    return envelope.to_wire()
