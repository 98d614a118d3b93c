"""PublicEditor ORM: anonymous write session scoped to one publicly editable map.

Invariants:
    - editor_token is 64 hex chars (32 random bytes) and is never part of a
      response schema except the registration response
    - last_active only moves forward (refreshed on every successful verify)

Design Decisions:
    - No expiry column: sessions have no revoke/expire transition
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from floormap.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PublicEditor(Base):
    __tablename__ = "public_editors"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    map_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("maps.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    editor_token: Mapped[str] = mapped_column(String(128), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    last_active: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
