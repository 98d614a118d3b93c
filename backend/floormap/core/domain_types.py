"""Domain Types: identity types, roles, and the requester value passed to services.

Invariants:
    - All ids are opaque strings (uuid4 text for generated ids, free text for map public ids)
    - Role is the only source of truth for admin checks
    - Requester is immutable; a request resolves to exactly one Requester

Design Decisions:
    - Ids are NewType aliases of str
    - Requester unifies authenticated users and anonymous public editors so the
      permission resolver takes one shape for both
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
MapId = NewType("MapId", str)
FloorId = NewType("FloorId", str)
PinId = NewType("PinId", str)
EditorId = NewType("EditorId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """User roles: maps to the `users.role` column."""
    USER = "user"
    ADMIN = "admin"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class SessionClaims:
    """Identity claims carried by a validated bearer token."""
    user_id: str
    email: str
    role: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class Requester:
    """Who is asking: an authenticated user or a verified anonymous public editor."""
    id: str
    role: str = Role.USER.value
    is_anonymous_editor: bool = False
    nickname: str = ""
    editor_map_id: str | None = None

    @property
    def is_admin(self) -> bool:
        return not self.is_anonymous_editor and self.role == Role.ADMIN.value

    @classmethod
    def from_user(cls, user) -> "Requester":
        """Role comes from the stored row, not the token claims."""
        return cls(id=user.id, role=user.role)

    @classmethod
    def from_editor(cls, editor) -> "Requester":
        return cls(
            id=editor.id,
            is_anonymous_editor=True,
            nickname=editor.nickname,
            editor_map_id=editor.map_id,
        )
