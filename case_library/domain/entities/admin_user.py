"""Domain entities for admin membership and the signed-in identity."""

from dataclasses import dataclass
from datetime import datetime


def normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass
class AdminUser:
    """An email address allowed to manage cases and the admin list.

    Equality of admin emails is case-insensitive everywhere.
    """

    email: str
    added_by: str | None = None
    added_at: datetime | None = None

    def matches(self, email: str) -> bool:
        return normalize_email(self.email) == normalize_email(email)


@dataclass
class UserProfile:
    """Identity handed over by the sign-in provider."""

    email: str
    name: str = ""
    picture: str = ""


def is_admin_email(admins: list[AdminUser], email: str) -> bool:
    """Case-insensitive membership test against an admin list."""
    return any(admin.matches(email) for admin in admins)
