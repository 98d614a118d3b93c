"""Viewer Service: read-only aggregate of a map with all floors and pins, for shared links."""

from dataclasses import dataclass

from floormap.core.repository_protocols import (
    FloorLike, FloorRepository, MapLike, MapRepository, PinLike, PinRepository,
)
from floormap.services.ownership_chain import get_map_by_public_id_or_404


@dataclass
class ViewerData:
    map: MapLike
    floors: list[FloorLike]
    pins: list[PinLike]


class ViewerService:
    def __init__(
        self, maps: MapRepository, floors: FloorRepository, pins: PinRepository,
    ):
        self.maps = maps
        self.floors = floors
        self.pins = pins

    async def get_map_data(self, map_public_id: str) -> ViewerData:
        map_ = await get_map_by_public_id_or_404(self.maps, map_public_id)
        floors = await self.floors.list_by_map(map_.id)
        pins = await self.pins.list_by_floors([f.id for f in floors])
        return ViewerData(map=map_, floors=floors, pins=pins)
