"""Viewer Route: public read-only snapshot of a map by its public map_id."""

from fastapi import APIRouter, Depends

from floormap.api.dependencies import get_viewer_service
from floormap.schemas.maps import (
    FloorResponse, MapResponse, PinResponse, ViewerResponse,
)
from floormap.services.viewer_service import ViewerService

router = APIRouter(prefix="/api/viewer", tags=["viewer"])


@router.get("/{map_public_id}", response_model=ViewerResponse)
async def view_map(
    map_public_id: str, viewer: ViewerService = Depends(get_viewer_service),
):
    data = await viewer.get_map_data(map_public_id)
    return ViewerResponse(
        map=MapResponse.model_validate(data.map),
        floors=[FloorResponse.model_validate(f) for f in data.floors],
        pins=[PinResponse.model_validate(p) for p in data.pins],
    )
