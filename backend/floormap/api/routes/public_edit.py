"""Public Edit Routes: anonymous editor registration, verification and pin writes.

Invariants:
    - Registration addresses the map by its public map_id
    - Pin routes authenticate with X-Editor-Id / X-Editor-Token (get_public_editor),
      never with a bearer token
    - Pins created here always carry the editor's id and nickname
"""

import logging

from fastapi import APIRouter, Depends, status

from floormap.api.dependencies import (
    get_pin_service, get_public_editor, get_public_editor_service,
)
from floormap.core.domain_types import Requester
from floormap.schemas.maps import (
    DeletedResponse, PinResponse, PinUpdate, PublicPinCreate,
)
from floormap.schemas.public_edit import (
    EditorRegister, EditorRegisterResponse, EditorVerify, EditorVerifyResponse,
)
from floormap.services.pin_service import PinService
from floormap.services.public_editor_service import PublicEditorService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/public-edit", tags=["public-edit"])


@router.post(
    "/register", response_model=EditorRegisterResponse,
    response_model_by_alias=True, status_code=status.HTTP_201_CREATED,
)
async def register_editor(
    body: EditorRegister,
    editors: PublicEditorService = Depends(get_public_editor_service),
):
    editor, map_ = await editors.register(body.map_id, body.nickname)
    return EditorRegisterResponse(
        editor_id=editor.id, nickname=editor.nickname,
        map_id=map_.map_id, token=editor.editor_token,
    )


@router.post(
    "/verify", response_model=EditorVerifyResponse, response_model_by_alias=True,
)
async def verify_editor(
    body: EditorVerify,
    editors: PublicEditorService = Depends(get_public_editor_service),
):
    editor = await editors.verify(body.editor_id, body.token)
    return EditorVerifyResponse(
        editor_id=editor.id, nickname=editor.nickname, map_id=editor.map_id,
    )


@router.post(
    "/pins", response_model=PinResponse, status_code=status.HTTP_201_CREATED,
)
async def create_pin(
    body: PublicPinCreate,
    editor: Requester = Depends(get_public_editor),
    pins: PinService = Depends(get_pin_service),
):
    data = body.model_dump(exclude={"floor_id"})
    return await pins.create(body.floor_id, editor, data)


@router.patch("/pins/{pin_id}", response_model=PinResponse)
async def update_pin(
    pin_id: str,
    body: PinUpdate,
    editor: Requester = Depends(get_public_editor),
    pins: PinService = Depends(get_pin_service),
):
    return await pins.update(pin_id, editor, body.model_dump())


@router.delete("/pins/{pin_id}", response_model=DeletedResponse)
async def delete_pin(
    pin_id: str,
    editor: Requester = Depends(get_public_editor),
    pins: PinService = Depends(get_pin_service),
):
    await pins.delete(pin_id, editor)
    return DeletedResponse(message="Pin deleted", id=pin_id)
