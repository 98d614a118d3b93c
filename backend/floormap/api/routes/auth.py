"""Auth Routes: registration, login and the current-user probe."""

import logging

from fastapi import APIRouter, Depends, status

from floormap.api.dependencies import get_auth_service, get_current_user
from floormap.core.domain_types import Requester
from floormap.schemas.auth import (
    LoginResponse, MeResponse, RegisterResponse, UserLogin, UserRegister,
    UserResponse,
)
from floormap.services.auth_service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register", response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: UserRegister, auth: AuthService = Depends(get_auth_service),
):
    user = await auth.register(body.email, body.password, body.name)
    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
async def login(body: UserLogin, auth: AuthService = Depends(get_auth_service)):
    token, user = await auth.login(body.email, body.password)
    return LoginResponse(token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=MeResponse)
async def me(
    requester: Requester = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    """Return the account behind the bearer token."""
    user = await auth.get_user(requester.id)
    return MeResponse(user=UserResponse.model_validate(user))
