"""Boundary Protocols: contracts between the services and persistence.

Invariants:
    - Services NEVER import a concrete repository; they receive Protocol-typed collaborators
    - get_* methods return None for a missing row; services turn None into NotFound errors
    - delete_* methods that cascade do so inside one transaction

Design Decisions:
    - typing.Protocol (structural), no ABC base classes
    - Two implementations per protocol: SQLAlchemy (infrastructure/repositories.py)
      and in-memory (tests/fakes.py)
    - *Like protocols describe entities structurally so ORM rows and test records
      are interchangeable in the permission resolver
"""

from datetime import datetime
from typing import Protocol


class UserLike(Protocol):
    """Structural contract for User rows."""
    id: str
    email: str
    password: str
    name: str
    role: str
    created_at: datetime


class MapLike(Protocol):
    """Structural contract for Map rows."""
    id: str
    map_id: str
    title: str
    description: str
    user_id: str
    is_publicly_editable: bool
    created_at: datetime
    updated_at: datetime


class FloorLike(Protocol):
    """Structural contract for Floor rows."""
    id: str
    map_id: str
    floor_number: int
    name: str
    image_url: str
    created_at: datetime
    updated_at: datetime


class PinLike(Protocol):
    """Structural contract for Pin rows."""
    id: str
    floor_id: str
    title: str
    description: str
    x_position: float
    y_position: float
    image_url: str
    editor_id: str
    editor_nickname: str
    created_at: datetime
    updated_at: datetime


class PublicEditorLike(Protocol):
    """Structural contract for PublicEditor rows."""
    id: str
    map_id: str
    nickname: str
    editor_token: str
    created_at: datetime
    last_active: datetime


class UserRepository(Protocol):
    async def create(self, data: dict) -> UserLike: ...
    async def get_by_id(self, user_id: str) -> UserLike | None: ...
    async def get_by_email(self, email: str) -> UserLike | None: ...
    async def list_all(self) -> list[UserLike]: ...
    async def update(self, user: UserLike) -> UserLike: ...
    async def delete(self, user_id: str) -> None: ...


class MapRepository(Protocol):
    async def create(self, data: dict) -> MapLike: ...
    async def get_by_id(self, map_id: str) -> MapLike | None: ...
    async def get_by_public_id(self, public_id: str) -> MapLike | None: ...
    async def list_by_user(self, user_id: str) -> list[MapLike]: ...
    async def update(self, map_: MapLike) -> MapLike: ...
    async def delete(self, map_id: str) -> None: ...


class FloorRepository(Protocol):
    async def create(self, data: dict) -> FloorLike: ...
    async def get_by_id(self, floor_id: str) -> FloorLike | None: ...
    async def list_by_map(self, map_id: str) -> list[FloorLike]: ...
    async def update(self, floor: FloorLike) -> FloorLike: ...
    async def delete(self, floor_id: str) -> None: ...


class PinRepository(Protocol):
    async def create(self, data: dict) -> PinLike: ...
    async def get_by_id(self, pin_id: str) -> PinLike | None: ...
    async def list_by_floor(self, floor_id: str) -> list[PinLike]: ...
    async def list_by_floors(self, floor_ids: list[str]) -> list[PinLike]: ...
    async def update(self, pin: PinLike) -> PinLike: ...
    async def delete(self, pin_id: str) -> None: ...


class PublicEditorRepository(Protocol):
    async def create(self, data: dict) -> PublicEditorLike: ...
    async def get_by_id(self, editor_id: str) -> PublicEditorLike | None: ...
    async def list_by_map(self, map_id: str) -> list[PublicEditorLike]: ...
    async def update(self, editor: PublicEditorLike) -> PublicEditorLike: ...
