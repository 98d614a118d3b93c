"""Floor Service: floors are created, changed and removed only by the map owner."""

import logging

from floormap.core.domain_types import Requester
from floormap.core.errors import ForbiddenError
from floormap.core.permissions import can_edit_floor
from floormap.core.repository_protocols import (
    FloorLike, FloorRepository, MapRepository,
)
from floormap.core.sparse_patch import apply_sparse_patch
from floormap.services.ownership_chain import get_floor_chain, get_map_or_404

logger = logging.getLogger(__name__)

_FLOOR_PATCH_FIELDS = ("name", "floor_number", "image_url")


class FloorService:
    def __init__(self, floors: FloorRepository, maps: MapRepository):
        self.floors = floors
        self.maps = maps

    async def list_by_map(self, map_id: str) -> list[FloorLike]:
        await get_map_or_404(self.maps, map_id)
        return await self.floors.list_by_map(map_id)

    async def get(self, floor_id: str) -> FloorLike:
        floor, _ = await get_floor_chain(self.floors, self.maps, floor_id)
        return floor

    async def create(self, map_id: str, requester: Requester, data: dict) -> FloorLike:
        map_ = await get_map_or_404(self.maps, map_id)
        if not can_edit_floor(map_, requester.id):
            raise ForbiddenError("You do not have permission to edit this map")
        floor = await self.floors.create({
            "map_id": map_.id,
            "floor_number": data["floor_number"],
            "name": data["name"],
            "image_url": "",
        })
        logger.info("Floor created", extra={"map_id": map_.id, "floor_id": floor.id})
        return floor

    async def update(self, floor_id: str, requester: Requester, patch: dict) -> FloorLike:
        floor, map_ = await get_floor_chain(self.floors, self.maps, floor_id)
        if not can_edit_floor(map_, requester.id):
            raise ForbiddenError("You do not have permission to edit this floor")
        changed = apply_sparse_patch(floor, patch, _FLOOR_PATCH_FIELDS)
        if not changed:
            return floor
        floor = await self.floors.update(floor)
        logger.info("Floor updated", extra={"floor_id": floor_id, "fields": changed})
        return floor

    async def set_image(self, floor_id: str, requester: Requester, image_url: str) -> FloorLike:
        """Store the URL of an image the client already uploaded."""
        return await self.update(floor_id, requester, {"image_url": image_url})

    async def delete(self, floor_id: str, requester: Requester) -> None:
        _, map_ = await get_floor_chain(self.floors, self.maps, floor_id)
        if not can_edit_floor(map_, requester.id):
            raise ForbiddenError("You do not have permission to delete this floor")
        await self.floors.delete(floor_id)
        logger.info("Floor deleted", extra={"floor_id": floor_id, "map_id": map_.id})
