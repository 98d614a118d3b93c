"""Pin Routes: authenticated single-pin read/update/delete and pin image."""

from fastapi import APIRouter, Depends

from floormap.api.dependencies import get_current_user, get_pin_service
from floormap.core.domain_types import Requester
from floormap.schemas.maps import (
    DeletedResponse, ImageUrlUpdate, PinResponse, PinUpdate,
)
from floormap.services.pin_service import PinService

router = APIRouter(prefix="/api/pins", tags=["pins"])


@router.get("/{pin_id}", response_model=PinResponse)
async def get_pin(pin_id: str, pins: PinService = Depends(get_pin_service)):
    return await pins.get(pin_id)


@router.patch("/{pin_id}", response_model=PinResponse)
async def update_pin(
    pin_id: str,
    body: PinUpdate,
    requester: Requester = Depends(get_current_user),
    pins: PinService = Depends(get_pin_service),
):
    return await pins.update(pin_id, requester, body.model_dump())


@router.delete("/{pin_id}", response_model=DeletedResponse)
async def delete_pin(
    pin_id: str,
    requester: Requester = Depends(get_current_user),
    pins: PinService = Depends(get_pin_service),
):
    await pins.delete(pin_id, requester)
    return DeletedResponse(message="Pin deleted", id=pin_id)


@router.post("/{pin_id}/image", response_model=PinResponse)
async def set_pin_image(
    pin_id: str,
    body: ImageUrlUpdate,
    requester: Requester = Depends(get_current_user),
    pins: PinService = Depends(get_pin_service),
):
    return await pins.set_image(pin_id, requester, body.image_url)
