"""User ORM: registered account that can own maps.

Invariants:
    - email is unique
    - password holds a bcrypt digest, never plaintext
    - role is "user" or "admin" (core/domain_types.Role)

Design Decisions:
    - String ids (uuid4 text): same id type across users, maps, floors, pins, editors
    - maps relationship has no ORM cascade; user deletion cascades through
      the repository inside one transaction and through FK ON DELETE CASCADE
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from floormap.core.domain_types import Role
from floormap.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Role.USER.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
