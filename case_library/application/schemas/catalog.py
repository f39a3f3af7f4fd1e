"""Pydantic DTOs returned by the catalog browse endpoints."""

from pydantic import Field

from case_library.application.schemas.store_protocol import VideoCaseRecord, WireModel
from case_library.domain.entities import FilterOptions, VideoCase


class CaseItemResponse(VideoCaseRecord):
    """A case as shown in the card grid."""

    thumbnail_url: str

    @classmethod
    def from_case(cls, case: VideoCase) -> "CaseItemResponse":
        record = VideoCaseRecord.from_entity(case)
        return cls(**record.model_dump(), thumbnail_url=case.thumbnail_url())


class FilterOptionsResponse(WireModel):
    categories: list[str] = Field(default_factory=list)
    regions: list[str] = Field(default_factory=list)
    robot_types: list[str] = Field(default_factory=list)

    @classmethod
    def from_options(cls, options: FilterOptions) -> "FilterOptionsResponse":
        return cls(
            categories=options.categories,
            regions=options.regions,
            robot_types=options.robot_types,
        )


class CatalogResponse(WireModel):
    total: int
    items: list[CaseItemResponse]
    options: FilterOptionsResponse


class AdminCheckResponse(WireModel):
    email: str
    is_admin: bool
