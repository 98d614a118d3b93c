"""Permission Resolver: allow/deny decisions for users and anonymous editors.

Tests cover:
    - Map/floor rights: owner only; view/delete also open to admins
    - Pin create/update/delete across owner, author, other editor, stranger
    - Non-public maps strip anonymous editors of every write right
    - Ownership wins on publicly editable maps
    - check_not_self raises SelfProtectionError
"""

from types import SimpleNamespace

import pytest

from floormap.core.errors import SelfProtectionError
from floormap.core.permissions import (
    can_create_pin, can_delete_map, can_delete_pin, can_edit_floor,
    can_edit_map, can_view_map, can_write_pin, check_not_self,
)


def _map(public=False):
    return SimpleNamespace(id="m1", user_id="u1", is_publicly_editable=public)


def _pin(editor_id):
    return SimpleNamespace(id="p1", floor_id="f1", editor_id=editor_id)


def test_only_owner_edits_map_and_floor():
    m = _map(public=True)
    assert can_edit_map(m, "u1")
    assert can_edit_floor(m, "u1")
    assert not can_edit_map(m, "u2")
    assert not can_edit_floor(m, "e1")


def test_admin_can_view_and_delete_but_not_edit():
    m = _map()
    assert can_view_map(m, "admin-1", "admin")
    assert can_delete_map(m, "admin-1", "admin")
    assert not can_edit_map(m, "admin-1")
    assert not can_view_map(m, "u2", "user")
    assert not can_delete_map(m, "u2", "user")


@pytest.mark.parametrize("public,expected", [(True, True), (False, False)])
def test_anonymous_create_follows_public_flag(public, expected):
    assert can_create_pin(_map(public), "e1", True) is expected


def test_owner_creates_pins_on_private_map():
    assert can_create_pin(_map(False), "u1", False)


def test_author_updates_own_pin_on_public_map():
    assert can_write_pin(_map(True), _pin("e1"), "e1", True)


def test_other_editor_updates_pin_on_public_map():
    assert can_write_pin(_map(True), _pin("e1"), "e2", True)


def test_authenticated_stranger_cannot_update_others_pin():
    assert not can_write_pin(_map(True), _pin("u1"), "u2", False)


def test_anonymous_editor_loses_writes_when_map_goes_private():
    m, pin = _map(False), _pin("e1")
    assert not can_create_pin(m, "e1", True)
    assert not can_write_pin(m, pin, "e1", True)
    assert not can_delete_pin(m, pin, "e1", True)


def test_owner_wins_on_public_map():
    m, pin = _map(True), _pin("e1")
    assert can_write_pin(m, pin, "u1", False)
    assert can_delete_pin(m, pin, "u1", False)


def test_delete_never_uses_public_edit_branch():
    assert not can_delete_pin(_map(True), _pin("u1"), "e1", True)
    assert can_delete_pin(_map(True), _pin("e1"), "e1", True)


def test_check_not_self_raises_for_same_id():
    with pytest.raises(SelfProtectionError) as exc_info:
        check_not_self("admin-1", "admin-1", "delete")
    assert exc_info.value.http_status == 400
    check_not_self("admin-1", "u1", "delete")
