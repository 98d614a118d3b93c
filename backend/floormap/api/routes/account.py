"""Account Routes: self-service profile and password changes."""

from fastapi import APIRouter, Depends

from floormap.api.dependencies import get_auth_service, get_current_user
from floormap.core.domain_types import Requester
from floormap.schemas.auth import (
    MessageResponse, PasswordChange, ProfileUpdate, ProfileUpdateResponse,
    UserResponse,
)
from floormap.services.auth_service import AuthService

router = APIRouter(prefix="/api/account", tags=["account"])


@router.patch("/update-profile", response_model=ProfileUpdateResponse)
async def update_profile(
    body: ProfileUpdate,
    requester: Requester = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    user = await auth.update_profile(requester.id, body.name)
    return ProfileUpdateResponse(
        message="Profile updated", user=UserResponse.model_validate(user),
    )


@router.post("/change-password", response_model=MessageResponse)
async def change_password(
    body: PasswordChange,
    requester: Requester = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    await auth.change_password(
        requester.id, body.current_password, body.new_password,
    )
    return MessageResponse(message="Password changed")
