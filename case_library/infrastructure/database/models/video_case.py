"""SQLAlchemy ORM model for the VideoCase entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from case_library.infrastructure.database.base import Base


class VideoCaseModel(Base):
    """ORM model — maps to the 'video_cases' table.

    Keywords are kept as a single comma-joined column, mirroring the
    spreadsheet layout the protocol was designed around.
    """

    __tablename__ = "video_cases"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    subcategory: Mapped[str | None] = mapped_column(String(255), nullable=True)
    region: Mapped[str] = mapped_column(String(255), nullable=False)
    robot_type: Mapped[str] = mapped_column(String(100), nullable=False)
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    video_url: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    keywords: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_video_cases_created", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<VideoCaseModel(id={self.id}, client='{self.client_name}')>"
