"""Sparse Patch: empty values leave stored fields untouched.

Tests cover:
    - None and "" are skipped, other values are written
    - Falsy non-empty values (0, False) are written
    - Fields outside the allow-list are ignored
    - Return value lists only fields that changed
"""

from types import SimpleNamespace

from floormap.core.sparse_patch import apply_sparse_patch, is_empty


def test_is_empty():
    assert is_empty(None)
    assert is_empty("")
    assert not is_empty(" ")
    assert not is_empty(0)
    assert not is_empty(False)


def test_empty_title_leaves_entity_unchanged():
    pin = SimpleNamespace(title="Lobby", description="Main entrance")
    changed = apply_sparse_patch(pin, {"title": "", "description": None}, ("title", "description"))
    assert changed == []
    assert pin.title == "Lobby"
    assert pin.description == "Main entrance"


def test_zero_and_false_are_written():
    entity = SimpleNamespace(x_position=5.0, is_publicly_editable=True)
    changed = apply_sparse_patch(
        entity, {"x_position": 0.0, "is_publicly_editable": False},
        ("x_position", "is_publicly_editable"),
    )
    assert entity.x_position == 0.0
    assert entity.is_publicly_editable is False
    assert changed == ["x_position", "is_publicly_editable"]


def test_fields_outside_allow_list_ignored():
    entity = SimpleNamespace(title="A", user_id="u1")
    apply_sparse_patch(entity, {"title": "B", "user_id": "u2"}, ("title",))
    assert entity.title == "B"
    assert entity.user_id == "u1"


def test_unchanged_value_not_reported():
    entity = SimpleNamespace(name="Ground")
    assert apply_sparse_patch(entity, {"name": "Ground"}, ("name",)) == []
