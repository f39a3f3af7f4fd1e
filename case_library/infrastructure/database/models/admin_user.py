"""SQLAlchemy ORM model for the AdminUser entity."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from case_library.infrastructure.database.base import Base


class AdminUserModel(Base):
    """ORM model — maps to the 'admin_users' table.

    ``email_key`` holds the lower-cased address and carries the unique
    constraint; ``email`` keeps the spelling the admin was added with.
    """

    __tablename__ = "admin_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    email_key: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    added_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    added_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<AdminUserModel(email='{self.email}')>"
