"""API Dependencies: request identity and service wiring for route handlers.

Invariants:
    - Authenticated routes resolve exactly one Requester from the bearer token and
      the user row it names; a deleted account is an invalid session
    - Public-edit routes resolve exactly one Requester from X-Editor-Id / X-Editor-Token,
      verified (and last_active refreshed) on every request
    - Services are built per request on that request's AsyncSession

Design Decisions:
    - Factories over module-level service singletons: repositories hold the session
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from floormap.config import Settings, get_settings
from floormap.core.domain_types import Requester
from floormap.core.errors import ForbiddenError, InvalidSessionError, InvalidTokenError
from floormap.infrastructure.credentials import validate_session
from floormap.infrastructure.database import get_db
from floormap.infrastructure.repositories import (
    FloorSqlRepository, MapSqlRepository, PinSqlRepository,
    PublicEditorSqlRepository, UserSqlRepository,
)
from floormap.services.auth_service import AuthService
from floormap.services.floor_service import FloorService
from floormap.services.map_service import MapService
from floormap.services.pin_service import PinService
from floormap.services.public_editor_service import PublicEditorService
from floormap.services.viewer_service import ViewerService


# ─── Services ────────────────────────────────────────────────────

def get_auth_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(
        UserSqlRepository(db),
        jwt_secret=settings.jwt_secret,
        jwt_algorithm=settings.jwt_algorithm,
        session_ttl_hours=settings.session_ttl_hours,
    )


def get_map_service(db: AsyncSession = Depends(get_db)) -> MapService:
    return MapService(MapSqlRepository(db))


def get_floor_service(db: AsyncSession = Depends(get_db)) -> FloorService:
    return FloorService(FloorSqlRepository(db), MapSqlRepository(db))


def get_pin_service(db: AsyncSession = Depends(get_db)) -> PinService:
    return PinService(
        PinSqlRepository(db), FloorSqlRepository(db), MapSqlRepository(db),
    )


def get_public_editor_service(
    db: AsyncSession = Depends(get_db),
) -> PublicEditorService:
    return PublicEditorService(PublicEditorSqlRepository(db), MapSqlRepository(db))


def get_viewer_service(db: AsyncSession = Depends(get_db)) -> ViewerService:
    return ViewerService(
        MapSqlRepository(db), FloorSqlRepository(db), PinSqlRepository(db),
    )


# ─── Identity ────────────────────────────────────────────────────

def _bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise InvalidSessionError("Authentication required")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise InvalidSessionError("Malformed Authorization header")
    return token.strip()


async def get_current_user(
    authorization: str | None = Header(None),
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
) -> Requester:
    """Validate the bearer token and return the authenticated Requester.

    The account must still exist; its current role is read from the row.
    """
    claims = validate_session(
        _bearer_token(authorization), settings.jwt_secret, settings.jwt_algorithm,
    )
    user = await UserSqlRepository(db).get_by_id(claims.user_id)
    if user is None:
        raise InvalidSessionError("Account no longer exists")
    return Requester.from_user(user)


async def require_admin(
    requester: Requester = Depends(get_current_user),
) -> Requester:
    if not requester.is_admin:
        raise ForbiddenError("Administrator role required")
    return requester


async def get_public_editor(
    x_editor_id: str | None = Header(None),
    x_editor_token: str | None = Header(None),
    editors: PublicEditorService = Depends(get_public_editor_service),
) -> Requester:
    """Verify the anonymous editor headers; refreshes last_active."""
    if not x_editor_id or not x_editor_token:
        raise InvalidTokenError()
    return await editors.resolve_requester(x_editor_id, x_editor_token)
