"""Public Editor Service: anonymous, token-authenticated write sessions on one map.

Invariants:
    - Registration only on an existing map with is_publicly_editable=True
    - Tokens are 32 random bytes (64 hex chars), one per registration
    - created_at == last_active at registration
    - verify compares tokens in constant time and refreshes last_active on success;
      a failed refresh fails the whole verification
    - No revoke/expire transition: turning the public flag off revokes write
      rights (core/permissions.py) but tokens stay verifiable

Design Decisions:
    - Lifecycle: unregistered → registered (token issued) → active (verified)
"""

import hmac
import logging
import secrets
from datetime import datetime, timezone

from floormap.core.domain_types import Requester
from floormap.core.errors import (
    EditorNotFoundError, ForbiddenError, InvalidTokenError, MapNotPubliclyEditableError,
)
from floormap.core.permissions import can_edit_map
from floormap.core.repository_protocols import (
    MapLike, MapRepository, PublicEditorLike, PublicEditorRepository,
)
from floormap.services.ownership_chain import (
    get_map_by_public_id_or_404, get_map_or_404,
)

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


def generate_editor_token() -> str:
    return secrets.token_hex(TOKEN_BYTES)


class PublicEditorService:
    def __init__(self, editors: PublicEditorRepository, maps: MapRepository):
        self.editors = editors
        self.maps = maps

    async def register(self, map_public_id: str, nickname: str) -> tuple[PublicEditorLike, MapLike]:
        """Issue a new editor session on a publicly editable map."""
        map_ = await get_map_by_public_id_or_404(self.maps, map_public_id)
        if not map_.is_publicly_editable:
            raise MapNotPubliclyEditableError(map_public_id)
        now = datetime.now(timezone.utc)
        editor = await self.editors.create({
            "map_id": map_.id,
            "nickname": nickname,
            "editor_token": generate_editor_token(),
            "created_at": now,
            "last_active": now,
        })
        logger.info(
            "Public editor registered", extra={"editor_id": editor.id, "map_id": map_.id},
        )
        return editor, map_

    async def verify(self, editor_id: str, token: str) -> PublicEditorLike:
        """Check the token and mark the editor active."""
        editor = await self.editors.get_by_id(editor_id)
        if editor is None:
            raise EditorNotFoundError(editor_id)
        if not hmac.compare_digest(
            editor.editor_token.encode("utf-8"), token.encode("utf-8"),
        ):
            logger.warning("Editor token mismatch", extra={"editor_id": editor_id})
            raise InvalidTokenError()
        return await self.touch(editor)

    async def touch(self, editor: PublicEditorLike) -> PublicEditorLike:
        editor.last_active = datetime.now(timezone.utc)
        return await self.editors.update(editor)

    async def list_by_map(self, map_id: str, requester: Requester) -> list[PublicEditorLike]:
        """Owner-only listing of the editors registered on a map."""
        map_ = await get_map_or_404(self.maps, map_id)
        if not can_edit_map(map_, requester.id):
            raise ForbiddenError("You do not have access to this map's editors")
        return await self.editors.list_by_map(map_id)

    async def resolve_requester(self, editor_id: str, token: str) -> Requester:
        editor = await self.verify(editor_id, token)
        return Requester.from_editor(editor)
