"""Ownership Chain: fetch helpers that walk pin → floor → map and raise NotFound per hop.

Invariants:
    - A missing entity at any hop raises that hop's ResourceNotFoundError subclass
    - Helpers only read; they never check permissions
"""

from floormap.core.errors import FloorNotFoundError, MapNotFoundError, PinNotFoundError
from floormap.core.repository_protocols import (
    FloorLike, FloorRepository, MapLike, MapRepository, PinLike, PinRepository,
)


async def get_map_or_404(maps: MapRepository, map_id: str) -> MapLike:
    map_ = await maps.get_by_id(map_id)
    if map_ is None:
        raise MapNotFoundError(map_id)
    return map_


async def get_map_by_public_id_or_404(maps: MapRepository, public_id: str) -> MapLike:
    map_ = await maps.get_by_public_id(public_id)
    if map_ is None:
        raise MapNotFoundError(public_id)
    return map_


async def get_floor_chain(
    floors: FloorRepository, maps: MapRepository, floor_id: str,
) -> tuple[FloorLike, MapLike]:
    floor = await floors.get_by_id(floor_id)
    if floor is None:
        raise FloorNotFoundError(floor_id)
    return floor, await get_map_or_404(maps, floor.map_id)


async def get_pin_chain(
    pins: PinRepository, floors: FloorRepository, maps: MapRepository, pin_id: str,
) -> tuple[PinLike, FloorLike, MapLike]:
    pin = await pins.get_by_id(pin_id)
    if pin is None:
        raise PinNotFoundError(pin_id)
    floor, map_ = await get_floor_chain(floors, maps, pin.floor_id)
    return pin, floor, map_
