"""Typed outcome of a single case-store action."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Success flag plus the action's own payload type.

    Failures carry a message and never a payload, so callers check
    ``success`` before reading ``data``.
    """

    success: bool
    data: T | None = None
    message: str | None = None

    @classmethod
    def ok(cls, data: T | None = None) -> "StoreResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, message: str) -> "StoreResult[T]":
        return cls(success=False, message=message)
