"""Permission Resolver: allow/deny decisions over the map → floor → pin chain.

Invariants:
    - All functions are PURE: no IO, no async, no DB, operate on already-fetched entities
    - Floors have no override of their own: floor rights are map rights
    - Map ownership always wins, including on publicly editable maps
    - An anonymous editor has no write rights at all once the map stops being
      publicly editable (its session stays verifiable, its writes do not)

Design Decisions:
    - Return bool, raise nothing (except check_not_self); services choose the
      ForbiddenError message
    - Deletion is stricter than update: the public-edit branch never lets
      someone delete a pin they did not write
"""

from floormap.core.domain_types import Role
from floormap.core.errors import SelfProtectionError
from floormap.core.repository_protocols import MapLike, PinLike


def is_owner(map_: MapLike, requester_id: str) -> bool:
    return map_.user_id == requester_id


def can_edit_map(map_: MapLike, requester_user_id: str) -> bool:
    """Only the owner edits a map."""
    return is_owner(map_, requester_user_id)


def can_edit_floor(map_: MapLike, requester_user_id: str) -> bool:
    """Floors inherit the map rule."""
    return can_edit_map(map_, requester_user_id)


def can_view_map(map_: MapLike, requester_user_id: str, requester_role: str) -> bool:
    """Authenticated detail view: owner or admin."""
    return is_owner(map_, requester_user_id) or requester_role == Role.ADMIN.value


def can_delete_map(map_: MapLike, requester_user_id: str, requester_role: str) -> bool:
    """Owner or admin."""
    return is_owner(map_, requester_user_id) or requester_role == Role.ADMIN.value


def can_create_pin(
    map_: MapLike, requester_id: str, is_anonymous_editor: bool,
) -> bool:
    """Owner always; anyone else only while the map is publicly editable."""
    if is_owner(map_, requester_id) and not is_anonymous_editor:
        return True
    return map_.is_publicly_editable


def can_write_pin(
    map_: MapLike, pin: PinLike, requester_id: str, is_anonymous_editor: bool,
) -> bool:
    """Update rule: owner, else original author, else public-edit call on a public map."""
    if is_owner(map_, requester_id) and not is_anonymous_editor:
        return True
    if is_anonymous_editor and not map_.is_publicly_editable:
        return False
    if pin.editor_id == requester_id:
        return True
    return map_.is_publicly_editable and is_anonymous_editor


def can_delete_pin(
    map_: MapLike, pin: PinLike, requester_id: str, is_anonymous_editor: bool,
) -> bool:
    """Delete rule: owner or original author only."""
    if is_owner(map_, requester_id) and not is_anonymous_editor:
        return True
    if is_anonymous_editor and not map_.is_publicly_editable:
        return False
    return pin.editor_id == requester_id


def check_not_self(acting_user_id: str, target_user_id: str, action: str) -> None:
    """Admins may not change their own role or delete themselves."""
    if acting_user_id == target_user_id:
        raise SelfProtectionError(action)
