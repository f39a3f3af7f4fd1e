"""Pydantic DTOs for the case editor form and the admin manager."""

from typing import Any

from pydantic import Field, field_validator

from case_library.application.schemas.store_protocol import (
    VideoCaseDraft,
    VideoCaseRecord,
    WireModel,
)
from case_library.domain.entities import VideoCase


def default_case_form() -> dict[str, Any]:
    """Field values a fresh "Add New Case" form starts with."""
    return {
        "clientName": "",
        "category": "Catering",
        "subcategory": "",
        "region": "",
        "robotType": "BellaBot",
        "videoUrl": "",
        "rating": 3,
        "keywords": [],
    }


def case_to_form(case: VideoCase) -> dict[str, Any]:
    """Pre-fill the editor from an existing case."""
    form = VideoCaseRecord.from_entity(case).model_dump(by_alias=True)
    form.pop("id")
    return form


class CaseForm(VideoCaseDraft):
    """Editor submission — the draft plus the form's required-field rules."""

    region: str = Field(..., min_length=1)
    video_url: str = Field(..., min_length=1)

    @field_validator("client_name", "region", "video_url")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("subcategory", "description")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    def to_draft(self) -> VideoCaseDraft:
        return VideoCaseDraft.model_validate(self.model_dump())


class AdminEmailForm(WireModel):
    """New-admin submission from the admin manager."""

    email: str

    @field_validator("email")
    @classmethod
    def _looks_like_email(cls, value: str) -> str:
        value = value.strip()
        if "@" not in value:
            raise ValueError("Invalid email address")
        return value
