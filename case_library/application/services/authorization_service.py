"""Application service (use case) deciding whether an identity is an admin."""

import logging

from case_library.application.services.case_store_client import CaseStoreClient
from case_library.domain.entities import is_admin_email

logger = logging.getLogger(__name__)


class AuthorizationService:
    """Checks signed-in emails against the store's admin list."""

    def __init__(self, client: CaseStoreClient):
        self._client = client

    async def is_authorized_admin(self, email: str) -> bool:
        """Fetch the current admin list and test case-insensitive membership.

        An admin list that cannot be fetched grants nothing.
        """
        if not email:
            return False
        result = await self._client.list_admins()
        if not result.success:
            logger.warning(
                "Could not verify admin status for '%s': %s", email, result.message
            )
            return False
        authorized = is_admin_email(result.data or [], email)
        logger.info("Admin check for '%s': %s", email, "granted" if authorized else "denied")
        return authorized
