"""Map ORM: the top-level annotation canvas owned by one user.

Invariants:
    - id is internal (uuid4 text); map_id is the public, human-chosen identifier (unique)
    - user_id is the owner; ownership decides every floor/pin write
    - is_publicly_editable gates anonymous public editors

Design Decisions:
    - Deletion cascades to floors, pins and public editors in one transaction
      (MapSqlRepository.delete) and at the FK level (ON DELETE CASCADE)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from floormap.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Map(Base):
    __tablename__ = "maps"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    map_id: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    is_publicly_editable: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )
