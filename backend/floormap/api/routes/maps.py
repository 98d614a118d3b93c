"""Map Routes: owner map CRUD plus the floors collection of a map.

Invariants:
    - {map_id} in these paths is the internal id; the public map_id is only used
      by the viewer and public-edit registration
    - Listing floors is public; creating one requires ownership
"""

from fastapi import APIRouter, Depends, status

from floormap.api.dependencies import (
    get_current_user, get_floor_service, get_map_service,
    get_public_editor_service,
)
from floormap.core.domain_types import Requester
from floormap.schemas.maps import (
    DeletedResponse, FloorCreate, FloorResponse, MapCreate, MapResponse,
    MapUpdate,
)
from floormap.schemas.public_edit import EditorSummary
from floormap.services.floor_service import FloorService
from floormap.services.map_service import MapService
from floormap.services.public_editor_service import PublicEditorService

router = APIRouter(prefix="/api/maps", tags=["maps"])


@router.get("", response_model=list[MapResponse])
async def list_maps(
    requester: Requester = Depends(get_current_user),
    maps: MapService = Depends(get_map_service),
):
    """Maps owned by the caller, newest first."""
    return await maps.list_for_user(requester.id)


@router.post("", response_model=MapResponse, status_code=status.HTTP_201_CREATED)
async def create_map(
    body: MapCreate,
    requester: Requester = Depends(get_current_user),
    maps: MapService = Depends(get_map_service),
):
    return await maps.create(requester, body.model_dump())


@router.get("/{map_id}", response_model=MapResponse)
async def get_map(
    map_id: str,
    requester: Requester = Depends(get_current_user),
    maps: MapService = Depends(get_map_service),
):
    return await maps.get(map_id, requester)


@router.patch("/{map_id}", response_model=MapResponse)
async def update_map(
    map_id: str,
    body: MapUpdate,
    requester: Requester = Depends(get_current_user),
    maps: MapService = Depends(get_map_service),
):
    return await maps.update(map_id, requester, body.model_dump())


@router.delete("/{map_id}", response_model=DeletedResponse)
async def delete_map(
    map_id: str,
    requester: Requester = Depends(get_current_user),
    maps: MapService = Depends(get_map_service),
):
    await maps.delete(map_id, requester)
    return DeletedResponse(message="Map deleted", id=map_id)


@router.get("/{map_id}/floors", response_model=list[FloorResponse])
async def list_floors(
    map_id: str, floors: FloorService = Depends(get_floor_service),
):
    return await floors.list_by_map(map_id)


@router.post(
    "/{map_id}/floors", response_model=FloorResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_floor(
    map_id: str,
    body: FloorCreate,
    requester: Requester = Depends(get_current_user),
    floors: FloorService = Depends(get_floor_service),
):
    return await floors.create(map_id, requester, body.model_dump())


@router.get("/{map_id}/editors", response_model=list[EditorSummary])
async def list_editors(
    map_id: str,
    requester: Requester = Depends(get_current_user),
    editors: PublicEditorService = Depends(get_public_editor_service),
):
    """Anonymous editors registered on the map (owner only)."""
    return await editors.list_by_map(map_id, requester)
