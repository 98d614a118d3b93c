"""Pin Service: pin CRUD for map owners and anonymous public editors.

Invariants:
    - The requester is either an authenticated user or a verified public editor
      (core/domain_types.Requester); permission decisions come from core/permissions.py
    - A public editor acts only on the map it registered for
    - Pins written by a public editor always carry that editor's id and nickname,
      whatever the payload says
    - Updates are sparse: None/"" leaves the stored value unchanged

Design Decisions:
    - One service for both route groups (/api/pins and /api/public-edit/pins):
      the Requester decides which permission branch applies
"""

import logging

from floormap.core.domain_types import Requester
from floormap.core.errors import ForbiddenError
from floormap.core.permissions import can_create_pin, can_delete_pin, can_write_pin
from floormap.core.repository_protocols import (
    FloorRepository, MapLike, MapRepository, PinLike, PinRepository,
)
from floormap.core.sparse_patch import apply_sparse_patch
from floormap.services.ownership_chain import get_floor_chain, get_pin_chain

logger = logging.getLogger(__name__)

_PIN_PATCH_FIELDS = ("title", "description", "image_url", "x_position", "y_position")


def _check_editor_scope(map_: MapLike, requester: Requester) -> None:
    if requester.is_anonymous_editor and requester.editor_map_id != map_.id:
        raise ForbiddenError("This editor session belongs to a different map")


class PinService:
    def __init__(
        self, pins: PinRepository, floors: FloorRepository, maps: MapRepository,
    ):
        self.pins = pins
        self.floors = floors
        self.maps = maps

    async def list_by_floor(self, floor_id: str) -> list[PinLike]:
        await get_floor_chain(self.floors, self.maps, floor_id)
        return await self.pins.list_by_floor(floor_id)

    async def get(self, pin_id: str) -> PinLike:
        pin, _, _ = await get_pin_chain(self.pins, self.floors, self.maps, pin_id)
        return pin

    async def create(self, floor_id: str, requester: Requester, data: dict) -> PinLike:
        floor, map_ = await get_floor_chain(self.floors, self.maps, floor_id)
        _check_editor_scope(map_, requester)
        if not can_create_pin(map_, requester.id, requester.is_anonymous_editor):
            raise ForbiddenError("You do not have permission to add pins to this map")
        if requester.is_anonymous_editor:
            nickname = requester.nickname
        else:
            nickname = data.get("editor_nickname") or requester.nickname
        pin = await self.pins.create({
            "floor_id": floor.id,
            "title": data["title"],
            "description": data.get("description") or "",
            "x_position": data["x_position"],
            "y_position": data["y_position"],
            "image_url": data.get("image_url") or "",
            "editor_id": requester.id,
            "editor_nickname": nickname or "",
        })
        logger.info(
            "Pin created",
            extra={"pin_id": pin.id, "floor_id": floor.id, "editor_id": requester.id},
        )
        return pin

    async def update(self, pin_id: str, requester: Requester, patch: dict) -> PinLike:
        pin, _, map_ = await get_pin_chain(self.pins, self.floors, self.maps, pin_id)
        _check_editor_scope(map_, requester)
        if not can_write_pin(map_, pin, requester.id, requester.is_anonymous_editor):
            logger.warning(
                "Pin update denied", extra={"pin_id": pin_id, "editor_id": requester.id},
            )
            raise ForbiddenError("You do not have permission to edit this pin")
        changed = apply_sparse_patch(pin, patch, _PIN_PATCH_FIELDS)
        if not changed:
            return pin
        pin = await self.pins.update(pin)
        logger.info("Pin updated", extra={"pin_id": pin_id, "fields": changed})
        return pin

    async def set_image(self, pin_id: str, requester: Requester, image_url: str) -> PinLike:
        """Store the URL of an image the client already uploaded."""
        return await self.update(pin_id, requester, {"image_url": image_url})

    async def delete(self, pin_id: str, requester: Requester) -> None:
        pin, _, map_ = await get_pin_chain(self.pins, self.floors, self.maps, pin_id)
        _check_editor_scope(map_, requester)
        if not can_delete_pin(map_, pin, requester.id, requester.is_anonymous_editor):
            logger.warning(
                "Pin delete denied", extra={"pin_id": pin_id, "editor_id": requester.id},
            )
            raise ForbiddenError("You do not have permission to delete this pin")
        await self.pins.delete(pin_id)
        logger.info("Pin deleted", extra={"pin_id": pin_id, "editor_id": requester.id})
