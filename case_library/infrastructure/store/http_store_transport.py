"""Remote store transport — POSTs protocol requests to one fixed endpoint.

The endpoint is typically a spreadsheet-backed web app (or this service's
own ``/api/v1/store``). Every call is a JSON POST with an ``action`` field;
every answer is the ``{success, data?, message?}`` envelope.
"""

import logging

import httpx
from pydantic import ValidationError

from case_library.application.interfaces import StoreTransport
from case_library.application.schemas.store_protocol import (
    StoreEnvelope,
    StoreRequest,
    encode_request,
)

logger = logging.getLogger(__name__)


class HttpStoreTransport(StoreTransport):
    """Infrastructure adapter — talks to the remote case store over HTTP.

    Failures never raise: network errors, HTTP error statuses, non-JSON
    bodies and malformed envelopes all come back as failed envelopes.
    """

    def __init__(
        self,
        endpoint_url: str,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._endpoint_url = endpoint_url
        self._timeout = timeout
        self._http_client = http_client

    @property
    def mode(self) -> str:
        return "remote"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        # Web-app deployments answer POSTs with a redirect to the result
        return httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)

    async def send(self, request: StoreRequest) -> StoreEnvelope:
        body = encode_request(request)
        action = body["action"]

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(self._endpoint_url, json=body)
        except httpx.HTTPError as exc:
            logger.error("Store request '%s' failed: %s", action, exc)
            return StoreEnvelope.failure("Network error connecting to backend.")
        finally:
            if should_close:
                await client.aclose()

        if response.is_error:
            logger.error(
                "Store request '%s' returned HTTP %d", action, response.status_code
            )
            return StoreEnvelope.failure(
                f"Store responded with HTTP {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError:
            logger.error("Store request '%s' returned a non-JSON body", action)
            return StoreEnvelope.failure("Store returned a non-JSON response")

        try:
            envelope = StoreEnvelope.model_validate(payload)
        except ValidationError:
            logger.error("Store request '%s' returned a malformed envelope", action)
            return StoreEnvelope.failure("Store returned a malformed response envelope")

        logger.debug("Store request '%s' → success=%s", action, envelope.success)
        return envelope
