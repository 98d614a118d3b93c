"""Request Schemas: boundary validation for auth, map and public-edit payloads.

Tests cover:
    - Whitespace-only names/titles/nicknames rejected, others stripped
    - map_id limited to URL-safe characters
    - camelCase aliases accepted on public-edit and password payloads
    - Update payloads default every field to None; whitespace-only text becomes None
"""

import pytest
from pydantic import ValidationError

from floormap.schemas.auth import PasswordChange, RoleUpdate, UserRegister
from floormap.schemas.maps import (
    FloorCreate, FloorUpdate, MapCreate, MapUpdate, PinCreate, PinUpdate, PublicPinCreate,
)
from floormap.schemas.public_edit import EditorRegister, EditorVerify


def test_register_strips_name():
    body = UserRegister(email="a@example.com", password="secret1", name="  Ann ")
    assert body.name == "Ann"


def test_register_rejects_blank_name():
    with pytest.raises(ValidationError):
        UserRegister(email="a@example.com", password="secret1", name="   ")


@pytest.mark.parametrize("map_id", ["campus-hq", "Floor_2", "abc123"])
def test_map_id_accepts_url_safe(map_id):
    assert MapCreate(map_id=map_id, title="T").map_id == map_id


@pytest.mark.parametrize("map_id", ["", "a b", "a/b", "ü"])
def test_map_id_rejects_unsafe(map_id):
    with pytest.raises(ValidationError):
        MapCreate(map_id=map_id, title="T")


def test_update_payloads_default_to_none():
    assert MapUpdate().model_dump() == {
        "title": None, "description": None, "is_publicly_editable": None,
    }
    assert set(PinUpdate().model_dump().values()) == {None}


def test_public_edit_aliases():
    reg = EditorRegister.model_validate({"mapId": "campus-hq", "nickname": " Alice "})
    assert reg.map_id == "campus-hq"
    assert reg.nickname == "Alice"
    ver = EditorVerify.model_validate({"editorId": "e1", "token": "abc"})
    assert ver.editor_id == "e1"


def test_password_change_aliases():
    body = PasswordChange.model_validate({"currentPassword": "old123", "newPassword": "new123"})
    assert body.current_password == "old123"
    assert body.new_password == "new123"


def test_role_update_defers_role_check_to_service():
    assert RoleUpdate(role="root").role == "root"
    with pytest.raises(ValidationError):
        RoleUpdate(role="")


def test_public_pin_requires_floor():
    with pytest.raises(ValidationError):
        PublicPinCreate(title="T", x_position=1, y_position=1)


def test_update_payloads_treat_whitespace_as_absent():
    assert MapUpdate(title="  ", description="\n").title is None
    assert FloorUpdate(name=" ", image_url="  ").model_dump(exclude_none=True) == {}
    patch = PinUpdate(title=" Desk ", description="   ")
    assert patch.title == "Desk"
    assert patch.description is None


@pytest.mark.parametrize("model, payload", [
    (PinCreate, {"title": "   ", "x_position": 1, "y_position": 1}),
    (FloorCreate, {"floor_number": 1, "name": "  "}),
])
def test_create_payloads_reject_blank_text(model, payload):
    with pytest.raises(ValidationError):
        model(**payload)
