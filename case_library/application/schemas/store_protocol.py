"""Pydantic DTOs for the case-store wire protocol.

Every request is a JSON object with an ``action`` discriminator plus that
action's payload; every response is the ``{success, data?, message?}``
envelope. Field names travel in camelCase.
"""

import math
from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from case_library.domain.entities import AdminUser, VideoCase, MAX_RATING, MIN_RATING
from case_library.domain.keywords import parse_keywords


def coerce_case_id(value: Any) -> Any:
    """Accept numeric ids (spreadsheet cells) as their integer string form."""
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("id must be a finite number")
    if isinstance(value, (int, float)):
        return str(int(value))
    return value


class WireModel(BaseModel):
    """Base for protocol models — camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Records ──────────────────────────────────────────────────────────


class VideoCaseDraft(WireModel):
    """A case without its id, as sent by ``create``."""

    category: str
    subcategory: str | None = None
    region: str
    robot_type: str
    client_name: str = Field(..., min_length=1)
    video_url: str
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    keywords: list[str] = Field(default_factory=list)
    description: str | None = None

    @field_validator("keywords", mode="before")
    @classmethod
    def _split_keyword_string(cls, value: Any) -> Any:
        # Spreadsheet-backed stores hand keywords back as one joined cell
        if value is None:
            return []
        if isinstance(value, str):
            return parse_keywords(value)
        return value

    def with_id(self, case_id: str) -> VideoCase:
        return VideoCase(
            id=case_id,
            category=self.category,
            subcategory=self.subcategory,
            region=self.region,
            robot_type=self.robot_type,
            client_name=self.client_name,
            video_url=self.video_url,
            rating=self.rating,
            keywords=list(self.keywords),
            description=self.description,
        )


class VideoCaseRecord(VideoCaseDraft):
    """A full case including its store-assigned id."""

    id: str = Field(..., min_length=1)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return coerce_case_id(value)

    def to_entity(self) -> VideoCase:
        return self.with_id(self.id)

    @classmethod
    def from_entity(cls, case: VideoCase) -> "VideoCaseRecord":
        return cls(
            id=case.id,
            category=case.category,
            subcategory=case.subcategory,
            region=case.region,
            robot_type=case.robot_type,
            client_name=case.client_name,
            video_url=case.video_url,
            rating=case.rating,
            keywords=list(case.keywords),
            description=case.description,
        )


class AdminRecord(WireModel):
    """An admin list entry."""

    email: str
    added_by: str | None = None
    added_at: datetime | None = None

    @field_validator("added_at", mode="before")
    @classmethod
    def _blank_timestamp(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    def to_entity(self) -> AdminUser:
        return AdminUser(email=self.email, added_by=self.added_by, added_at=self.added_at)

    @classmethod
    def from_entity(cls, admin: AdminUser) -> "AdminRecord":
        return cls(email=admin.email, added_by=admin.added_by, added_at=admin.added_at)


# ── Requests ─────────────────────────────────────────────────────────


class GetCasesRequest(WireModel):
    action: Literal["get"] = "get"


class CreateCaseRequest(WireModel):
    action: Literal["create"] = "create"
    data: VideoCaseDraft


class UpdateCaseRequest(WireModel):
    action: Literal["update"] = "update"
    data: VideoCaseRecord


class DeleteCaseRequest(WireModel):
    action: Literal["delete"] = "delete"
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return coerce_case_id(value)


class GetAdminsRequest(WireModel):
    action: Literal["getAdmins"] = "getAdmins"


class AddAdminRequest(WireModel):
    action: Literal["addAdmin"] = "addAdmin"
    email: str = Field(..., min_length=1)
    added_by: str | None = None


class DeleteAdminRequest(WireModel):
    action: Literal["deleteAdmin"] = "deleteAdmin"
    email: str


StoreRequest = Annotated[
    Union[
        GetCasesRequest,
        CreateCaseRequest,
        UpdateCaseRequest,
        DeleteCaseRequest,
        GetAdminsRequest,
        AddAdminRequest,
        DeleteAdminRequest,
    ],
    Field(discriminator="action"),
]

STORE_ACTIONS = frozenset(
    {"get", "create", "update", "delete", "getAdmins", "addAdmin", "deleteAdmin"}
)

store_request_adapter: TypeAdapter[StoreRequest] = TypeAdapter(StoreRequest)


def encode_request(request: StoreRequest) -> dict[str, Any]:
    """Serialize a request to the JSON body sent to the store."""
    return request.model_dump(mode="json", by_alias=True, exclude_none=True)


# ── Response ─────────────────────────────────────────────────────────


class StoreEnvelope(BaseModel):
    """Response envelope shared by every action."""

    success: bool
    data: Any = None
    message: str | None = None

    @classmethod
    def ok(cls, data: Any = None) -> "StoreEnvelope":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, message: str) -> "StoreEnvelope":
        return cls(success=False, message=message)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
