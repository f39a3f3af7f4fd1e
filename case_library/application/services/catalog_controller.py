"""View/controller for the single-page case catalog.

Owns the state the page renders — cached cases, derived filter options,
the current filters, the signed-in identity, admin flags and the two modal
editors — and drives the sync client. After every successful mutation the
whole collection is fetched again; the cache is never patched in place, so
interleaved reloads simply leave whichever one finished last.
"""

import asyncio
import logging
from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import ValidationError

from case_library.application.interfaces import UserPrompt
from case_library.application.schemas.video_case import (
    AdminEmailForm,
    CaseForm,
    case_to_form,
    default_case_form,
)
from case_library.application.services.authorization_service import AuthorizationService
from case_library.application.services.case_filter import derive_filter_options, filter_cases
from case_library.application.services.case_store_client import CaseStoreClient
from case_library.application.schemas.store_protocol import VideoCaseDraft
from case_library.domain.entities import (
    AdminUser,
    FilterOptions,
    FilterState,
    UserProfile,
    VideoCase,
    is_admin_email,
)
from case_library.domain.exceptions import AdminAccessRequiredError

logger = logging.getLogger(__name__)

ACCESS_DENIED_MESSAGE = "Access Denied: Your email is not on the admin list."
CONFIRM_DELETE_CASE = "Are you sure you want to delete this case?"
INVALID_EMAIL_MESSAGE = "Invalid email address"
DUPLICATE_ADMIN_MESSAGE = "Admin already exists"


@dataclass
class CaseEditorState:
    """The create/edit case modal."""

    is_open: bool = False
    editing: VideoCase | None = None
    form: dict[str, Any] = field(default_factory=default_case_form)
    keyword_input: str = ""
    error: str | None = None

    @property
    def title(self) -> str:
        return "Edit Case" if self.editing is not None else "Add New Case"

    def add_keyword(self, text: str | None = None) -> bool:
        """Append the trimmed keyword input; blank input is ignored."""
        keyword = (self.keyword_input if text is None else text).strip()
        if not keyword:
            return False
        self.form["keywords"] = [*self.form.get("keywords", []), keyword]
        self.keyword_input = ""
        return True

    def remove_keyword(self, index: int) -> None:
        keywords = list(self.form.get("keywords", []))
        if 0 <= index < len(keywords):
            del keywords[index]
        self.form["keywords"] = keywords


@dataclass
class AdminManagerState:
    """The admin list modal."""

    is_open: bool = False
    admins: list[AdminUser] = field(default_factory=list)
    error: str | None = None
    loading: bool = False


class CatalogController:
    """State owner behind the catalog page. Depends on the sync client (DI)."""

    def __init__(
        self,
        client: CaseStoreClient,
        authorization: AuthorizationService,
        prompt: UserPrompt,
    ):
        self._client = client
        self._authorization = authorization
        self._prompt = prompt
        self._pending: set[asyncio.Task] = set()
        self._loads_in_flight = 0

        self.cases: list[VideoCase] = []
        self.filter_options = FilterOptions()
        self.filters = FilterState()
        self.loading = False

        self.user: UserProfile | None = None
        self.is_authorized_admin = False
        self.admin_mode = False

        self.editor = CaseEditorState()
        self.admin_manager = AdminManagerState()

    # ── Collection ───────────────────────────────────────────────────

    @property
    def visible_cases(self) -> list[VideoCase]:
        return filter_cases(self.cases, self.filters)

    async def load(self) -> bool:
        """Fetch the full collection and replace the cache wholesale.

        A failed fetch leaves the current cache untouched. ``loading`` stays
        on until every overlapping reload has finished.
        """
        self._loads_in_flight += 1
        self.loading = True
        try:
            result = await self._client.list_cases()
        finally:
            self._loads_in_flight -= 1
            self.loading = self._loads_in_flight > 0
        if not result.success:
            logger.warning("Loading cases failed: %s", result.message)
            return False
        self.cases = list(result.data or [])
        self.filter_options = derive_filter_options(self.cases)
        return True

    def update_filters(self, **changes: str) -> FilterState:
        self.filters = replace(self.filters, **changes)
        return self.filters

    def reset_filters(self) -> FilterState:
        self.filters = FilterState()
        return self.filters

    # ── Identity ─────────────────────────────────────────────────────

    async def sign_in(self, profile: UserProfile) -> bool:
        """Record the identity and run the admin check once for this sign-in."""
        self.user = profile
        authorized = await self._authorization.is_authorized_admin(profile.email)
        if self.user is not profile:
            # Signed out or switched identity while the check was in flight
            return False

        self.is_authorized_admin = authorized
        self.admin_mode = authorized
        if not authorized:
            self._prompt.notify(ACCESS_DENIED_MESSAGE)
        return authorized

    def sign_out(self) -> None:
        self.user = None
        self.is_authorized_admin = False
        self.admin_mode = False
        self.editor = CaseEditorState()
        self.admin_manager = AdminManagerState()

    def toggle_admin_mode(self) -> bool:
        """Switch the admin controls on or off. Display-only."""
        if not self.is_authorized_admin:
            self.admin_mode = False
            return False
        self.admin_mode = not self.admin_mode
        return self.admin_mode

    def _require_admin_mode(self, action: str) -> None:
        if not self.admin_mode:
            raise AdminAccessRequiredError(action)

    # ── Case editor ──────────────────────────────────────────────────

    def open_case_editor(self, case: VideoCase | None = None) -> CaseEditorState:
        self._require_admin_mode("edit cases")
        form = case_to_form(case) if case is not None else default_case_form()
        self.editor = CaseEditorState(is_open=True, editing=case, form=form)
        return self.editor

    def close_case_editor(self) -> None:
        self.editor = CaseEditorState()

    def save_case(self, form: dict[str, Any] | None = None) -> "asyncio.Task[bool] | None":
        """Validate the editor form, close the editor and persist in the background.

        Invalid input stays in the open editor with an inline error and
        nothing is sent to the store. Otherwise the returned task performs
        the create or update followed by a full reload.
        """
        self._require_admin_mode("save cases")
        values = dict(self.editor.form if form is None else form)
        editing = self.editor.editing

        try:
            validated = CaseForm.model_validate(values)
        except ValidationError as exc:
            self.editor.form = values
            self.editor.error = _form_error(exc)
            return None

        self.close_case_editor()
        task = asyncio.create_task(self._persist_case(editing, validated.to_draft()))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _persist_case(self, editing: VideoCase | None, draft: VideoCaseDraft) -> bool:
        if editing is None:
            result = await self._client.create_case(draft)
        else:
            result = await self._client.update_case(draft.with_id(editing.id))
        if not result.success:
            logger.warning("Saving case failed: %s", result.message)
            return False
        await self.load()
        return True

    async def delete_case(self, case_id: str) -> bool:
        """Delete after interactive confirmation, then reload."""
        self._require_admin_mode("delete cases")
        if not self._prompt.confirm(CONFIRM_DELETE_CASE):
            return False
        result = await self._client.delete_case(case_id)
        if not result.success:
            logger.warning("Deleting case %s failed: %s", case_id, result.message)
            return False
        await self.load()
        return True

    async def wait_for_pending(self) -> None:
        """Await background saves still in flight."""
        if self._pending:
            await asyncio.gather(*self._pending)

    # ── Admin manager ────────────────────────────────────────────────

    async def open_admin_manager(self) -> AdminManagerState:
        self._require_admin_mode("manage admins")
        self.admin_manager = AdminManagerState(is_open=True)
        await self._reload_admins()
        return self.admin_manager

    def close_admin_manager(self) -> None:
        self.admin_manager = AdminManagerState()

    async def add_admin(self, email: str) -> bool:
        self._require_admin_mode("manage admins")
        manager = self.admin_manager
        try:
            new_admin = AdminEmailForm(email=email)
        except ValidationError:
            manager.error = INVALID_EMAIL_MESSAGE
            return False
        if is_admin_email(manager.admins, new_admin.email):
            manager.error = DUPLICATE_ADMIN_MESSAGE
            return False

        added_by = self.user.email if self.user is not None else ""
        result = await self._client.add_admin(new_admin.email, added_by)
        manager.error = None if result.success else result.message
        await self._reload_admins()
        return result.success

    async def remove_admin(self, email: str) -> bool:
        self._require_admin_mode("manage admins")
        if not self._prompt.confirm(f"Remove admin access for {email}?"):
            return False
        result = await self._client.remove_admin(email)
        if not result.success:
            self.admin_manager.error = result.message
        await self._reload_admins()
        return result.success

    async def _reload_admins(self) -> None:
        manager = self.admin_manager
        manager.loading = True
        result = await self._client.list_admins()
        manager.loading = False
        if result.success:
            manager.admins = list(result.data or [])
        else:
            logger.warning("Loading admins failed: %s", result.message)


def _form_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "form"
        messages.append(f"{location}: {error['msg']}")
    return "; ".join(messages)
