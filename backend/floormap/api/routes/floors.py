"""Floor Routes: single-floor read/update/delete, floor image and the pins of a floor."""

from fastapi import APIRouter, Depends, status

from floormap.api.dependencies import (
    get_current_user, get_floor_service, get_pin_service,
)
from floormap.core.domain_types import Requester
from floormap.schemas.maps import (
    DeletedResponse, FloorResponse, FloorUpdate, ImageUrlUpdate, PinCreate,
    PinResponse,
)
from floormap.services.floor_service import FloorService
from floormap.services.pin_service import PinService

router = APIRouter(prefix="/api/floors", tags=["floors"])


@router.get("/{floor_id}", response_model=FloorResponse)
async def get_floor(
    floor_id: str, floors: FloorService = Depends(get_floor_service),
):
    return await floors.get(floor_id)


@router.patch("/{floor_id}", response_model=FloorResponse)
async def update_floor(
    floor_id: str,
    body: FloorUpdate,
    requester: Requester = Depends(get_current_user),
    floors: FloorService = Depends(get_floor_service),
):
    return await floors.update(floor_id, requester, body.model_dump())


@router.delete("/{floor_id}", response_model=DeletedResponse)
async def delete_floor(
    floor_id: str,
    requester: Requester = Depends(get_current_user),
    floors: FloorService = Depends(get_floor_service),
):
    await floors.delete(floor_id, requester)
    return DeletedResponse(message="Floor deleted", id=floor_id)


@router.post("/{floor_id}/image", response_model=FloorResponse)
async def set_floor_image(
    floor_id: str,
    body: ImageUrlUpdate,
    requester: Requester = Depends(get_current_user),
    floors: FloorService = Depends(get_floor_service),
):
    return await floors.set_image(floor_id, requester, body.image_url)


@router.get("/{floor_id}/pins", response_model=list[PinResponse])
async def list_pins(floor_id: str, pins: PinService = Depends(get_pin_service)):
    return await pins.list_by_floor(floor_id)


@router.post(
    "/{floor_id}/pins", response_model=PinResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_pin(
    floor_id: str,
    body: PinCreate,
    requester: Requester = Depends(get_current_user),
    pins: PinService = Depends(get_pin_service),
):
    return await pins.create(floor_id, requester, body.model_dump())
