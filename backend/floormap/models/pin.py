"""Pin ORM: a positioned annotation on a floor.

Invariants:
    - Always belongs to a Floor (floor_id FK)
    - editor_id/editor_nickname identify who wrote the pin: the owning user
      or an anonymous public editor

Design Decisions:
    - editor_id is not a FK: it may reference users.id or public_editors.id
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Float, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from floormap.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Pin(Base):
    __tablename__ = "pins"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    floor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("floors.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    x_position: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    y_position: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    editor_id: Mapped[str] = mapped_column(String(36), nullable=False, default="")
    editor_nickname: Mapped[str] = mapped_column(
        String(100), nullable=False, default="",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )
