"""Map Service: owner-scoped map CRUD.

Invariants:
    - Only the owner edits a map; owner or admin may view or delete it
    - map_id (public identifier) is unique across all maps
    - Deletion removes floors, pins and public editors in the same transaction
    - Updates are sparse: None/"" leaves the stored value unchanged
"""

import logging

from floormap.core.domain_types import Requester
from floormap.core.errors import ForbiddenError, ValidationError
from floormap.core.permissions import can_delete_map, can_edit_map, can_view_map
from floormap.core.repository_protocols import MapLike, MapRepository
from floormap.core.sparse_patch import apply_sparse_patch
from floormap.services.ownership_chain import get_map_or_404

logger = logging.getLogger(__name__)

_MAP_PATCH_FIELDS = ("title", "description", "is_publicly_editable")


class MapService:
    def __init__(self, maps: MapRepository):
        self.maps = maps

    async def list_for_user(self, user_id: str) -> list[MapLike]:
        return await self.maps.list_by_user(user_id)

    async def get(self, map_id: str, requester: Requester) -> MapLike:
        map_ = await get_map_or_404(self.maps, map_id)
        if not can_view_map(map_, requester.id, requester.role):
            raise ForbiddenError("You do not have access to this map")
        return map_

    async def create(self, requester: Requester, data: dict) -> MapLike:
        if await self.maps.get_by_public_id(data["map_id"]) is not None:
            raise ValidationError("This map ID is already in use", field="map_id")
        map_ = await self.maps.create({
            "map_id": data["map_id"],
            "title": data["title"],
            "description": data.get("description") or "",
            "user_id": requester.id,
            "is_publicly_editable": bool(data.get("is_publicly_editable", False)),
        })
        logger.info("Map created", extra={"user_id": requester.id, "map_id": map_.id})
        return map_

    async def update(self, map_id: str, requester: Requester, patch: dict) -> MapLike:
        map_ = await get_map_or_404(self.maps, map_id)
        if not can_edit_map(map_, requester.id):
            raise ForbiddenError("You do not have permission to edit this map")
        changed = apply_sparse_patch(map_, patch, _MAP_PATCH_FIELDS)
        if not changed:
            return map_
        map_ = await self.maps.update(map_)
        logger.info("Map updated", extra={"map_id": map_id, "fields": changed})
        return map_

    async def delete(self, map_id: str, requester: Requester) -> None:
        map_ = await get_map_or_404(self.maps, map_id)
        if not can_delete_map(map_, requester.id, requester.role):
            raise ForbiddenError("You do not have permission to delete this map")
        await self.maps.delete(map_id)
        logger.info("Map deleted", extra={"map_id": map_id, "user_id": requester.id})
