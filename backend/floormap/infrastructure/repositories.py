"""SQL Repositories: SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - One repository instance per request, bound to that request's AsyncSession
    - Every write commits exactly once; cascades (user → maps → floors → pins,
      map → public editors) are issued as bulk deletes inside that single commit
    - get_* returns None for missing rows, never raises NotFound

Design Decisions:
    - Cascades are explicit bulk deletes, not ORM relationship cascades; they do
      not depend on engine FK enforcement (off by default in SQLite)
    - Ordering: maps newest first, floors by floor_number, pins oldest first,
      editors most recently active first
"""

import logging

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from floormap.models.floor import Floor
from floormap.models.map import Map
from floormap.models.pin import Pin
from floormap.models.public_editor import PublicEditor
from floormap.models.user import User

logger = logging.getLogger(__name__)


async def _commit(db: AsyncSession) -> None:
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise


async def _delete_maps_where(db: AsyncSession, map_ids: Select) -> None:
    """Queue the delete statements for every map selected by map_ids (no commit)."""
    floor_ids = select(Floor.id).where(Floor.map_id.in_(map_ids))
    for stmt in (
        delete(Pin).where(Pin.floor_id.in_(floor_ids)),
        delete(Floor).where(Floor.map_id.in_(map_ids)),
        delete(PublicEditor).where(PublicEditor.map_id.in_(map_ids)),
        delete(Map).where(Map.id.in_(map_ids)),
    ):
        await db.execute(stmt.execution_options(synchronize_session=False))


class UserSqlRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: dict) -> User:
        user = User(**data)
        self.db.add(user)
        await _commit(self.db)
        return user

    async def get_by_id(self, user_id: str) -> User | None:
        return await self.db.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[User]:
        result = await self.db.execute(select(User).order_by(User.created_at.desc()))
        return list(result.scalars().all())

    async def update(self, user: User) -> User:
        self.db.add(user)
        await _commit(self.db)
        return user

    async def delete(self, user_id: str) -> None:
        """Delete the user and everything hanging off the user's maps."""
        try:
            await _delete_maps_where(
                self.db, select(Map.id).where(Map.user_id == user_id),
            )
            await self.db.execute(
                delete(User).where(User.id == user_id)
                .execution_options(synchronize_session=False),
            )
        except Exception:
            await self.db.rollback()
            raise
        await _commit(self.db)
        self.db.expunge_all()


class MapSqlRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: dict) -> Map:
        map_ = Map(**data)
        self.db.add(map_)
        await _commit(self.db)
        return map_

    async def get_by_id(self, map_id: str) -> Map | None:
        return await self.db.get(Map, map_id)

    async def get_by_public_id(self, public_id: str) -> Map | None:
        result = await self.db.execute(select(Map).where(Map.map_id == public_id))
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: str) -> list[Map]:
        result = await self.db.execute(
            select(Map).where(Map.user_id == user_id)
            .order_by(Map.created_at.desc()),
        )
        return list(result.scalars().all())

    async def update(self, map_: Map) -> Map:
        self.db.add(map_)
        await _commit(self.db)
        return map_

    async def delete(self, map_id: str) -> None:
        """Delete the map with its floors, pins and public editors in one commit."""
        try:
            await _delete_maps_where(self.db, select(Map.id).where(Map.id == map_id))
        except Exception:
            await self.db.rollback()
            raise
        await _commit(self.db)
        self.db.expunge_all()


class FloorSqlRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: dict) -> Floor:
        floor = Floor(**data)
        self.db.add(floor)
        await _commit(self.db)
        return floor

    async def get_by_id(self, floor_id: str) -> Floor | None:
        return await self.db.get(Floor, floor_id)

    async def list_by_map(self, map_id: str) -> list[Floor]:
        result = await self.db.execute(
            select(Floor).where(Floor.map_id == map_id)
            .order_by(Floor.floor_number.asc()),
        )
        return list(result.scalars().all())

    async def update(self, floor: Floor) -> Floor:
        self.db.add(floor)
        await _commit(self.db)
        return floor

    async def delete(self, floor_id: str) -> None:
        """Delete the floor and its pins in one commit."""
        try:
            for stmt in (
                delete(Pin).where(Pin.floor_id == floor_id),
                delete(Floor).where(Floor.id == floor_id),
            ):
                await self.db.execute(stmt.execution_options(synchronize_session=False))
        except Exception:
            await self.db.rollback()
            raise
        await _commit(self.db)
        self.db.expunge_all()


class PinSqlRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: dict) -> Pin:
        pin = Pin(**data)
        self.db.add(pin)
        await _commit(self.db)
        return pin

    async def get_by_id(self, pin_id: str) -> Pin | None:
        return await self.db.get(Pin, pin_id)

    async def list_by_floor(self, floor_id: str) -> list[Pin]:
        result = await self.db.execute(
            select(Pin).where(Pin.floor_id == floor_id)
            .order_by(Pin.created_at.asc()),
        )
        return list(result.scalars().all())

    async def list_by_floors(self, floor_ids: list[str]) -> list[Pin]:
        if not floor_ids:
            return []
        result = await self.db.execute(
            select(Pin).where(Pin.floor_id.in_(floor_ids))
            .order_by(Pin.created_at.asc()),
        )
        return list(result.scalars().all())

    async def update(self, pin: Pin) -> Pin:
        self.db.add(pin)
        await _commit(self.db)
        return pin

    async def delete(self, pin_id: str) -> None:
        await self.db.execute(
            delete(Pin).where(Pin.id == pin_id)
            .execution_options(synchronize_session=False),
        )
        await _commit(self.db)
        self.db.expunge_all()


class PublicEditorSqlRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: dict) -> PublicEditor:
        editor = PublicEditor(**data)
        self.db.add(editor)
        await _commit(self.db)
        return editor

    async def get_by_id(self, editor_id: str) -> PublicEditor | None:
        return await self.db.get(PublicEditor, editor_id)

    async def list_by_map(self, map_id: str) -> list[PublicEditor]:
        result = await self.db.execute(
            select(PublicEditor).where(PublicEditor.map_id == map_id)
            .order_by(PublicEditor.last_active.desc()),
        )
        return list(result.scalars().all())

    async def update(self, editor: PublicEditor) -> PublicEditor:
        self.db.add(editor)
        await _commit(self.db)
        return editor
