"""
Persistence tables.

Learner progress is stored as one row per storage key, with the full
UserProgress serialized as JSON text plus a few denormalized columns for
inspection.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ProgressRecord(Base):
    """Serialized learner progress under a storage key."""

    __tablename__ = "user_progress"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False)

    # Denormalized from payload
    total_score: Mapped[int] = mapped_column(Integer, default=0)
    current_level_id: Mapped[str | None] = mapped_column(String(64))

    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<ProgressRecord(key={self.key!r}, score={self.total_score})>"
