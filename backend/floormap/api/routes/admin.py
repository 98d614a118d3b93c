"""Admin Routes: user listing, role changes and user deletion.

Invariants:
    - Every route requires the admin role (require_admin → 403 otherwise)
    - An admin can neither change their own role nor delete themselves
"""

from fastapi import APIRouter, Depends

from floormap.api.dependencies import get_auth_service, require_admin
from floormap.core.domain_types import Requester
from floormap.schemas.auth import RoleUpdate, UserResponse
from floormap.schemas.maps import DeletedResponse
from floormap.services.auth_service import AuthService

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/users", response_model=list[UserResponse])
async def list_users(
    _: Requester = Depends(require_admin),
    auth: AuthService = Depends(get_auth_service),
):
    return await auth.list_users()


@router.patch("/users/{user_id}", response_model=UserResponse)
async def update_user_role(
    user_id: str,
    body: RoleUpdate,
    admin: Requester = Depends(require_admin),
    auth: AuthService = Depends(get_auth_service),
):
    return await auth.update_role(admin.id, user_id, body.role)


@router.delete("/users/{user_id}", response_model=DeletedResponse)
async def delete_user(
    user_id: str,
    admin: Requester = Depends(require_admin),
    auth: AuthService = Depends(get_auth_service),
):
    await auth.delete_user(admin.id, user_id)
    return DeletedResponse(message="User deleted", id=user_id)
