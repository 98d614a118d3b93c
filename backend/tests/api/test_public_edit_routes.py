"""Public Edit Routes: anonymous editor sessions over HTTP.

Tests cover:
    - register → verify with camelCase wire format; token only in register response
    - Registration on a private or missing map → 403 / 404
    - Bad or missing editor headers → 401
    - Scenario: editor creates a pin, owner edits it, editor cannot delete the owner's pin
    - Turning the public flag off revokes editor writes
"""

PIN = {"title": "Coffee", "x_position": 3.0, "y_position": 4.0}


async def test_register_and_verify(client, public_map):
    res = await client.post("/api/public-edit/register", json={
        "mapId": "campus-hq", "nickname": "Alice",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["nickname"] == "Alice"
    assert body["mapId"] == "campus-hq"
    assert body["verified"] is True
    assert len(body["token"]) == 64

    res = await client.post("/api/public-edit/verify", json={
        "editorId": body["editorId"], "token": body["token"],
    })
    assert res.status_code == 200
    verified = res.json()
    assert verified["editorId"] == body["editorId"]
    assert verified["nickname"] == "Alice"
    assert "token" not in verified


async def test_verify_with_tampered_token(client, editor_headers):
    token = editor_headers["X-Editor-Token"]
    tampered = ("0" if token[0] != "0" else "1") + token[1:]
    res = await client.post("/api/public-edit/verify", json={
        "editorId": editor_headers["X-Editor-Id"], "token": tampered,
    })
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_EDITOR_TOKEN"


async def test_register_on_private_or_missing_map(client, owner_auth):
    _, headers = owner_auth
    await client.post("/api/maps", headers=headers, json={"map_id": "private", "title": "Private"})
    res = await client.post("/api/public-edit/register", json={"mapId": "private", "nickname": "A"})
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "MAP_NOT_PUBLICLY_EDITABLE"
    res = await client.post("/api/public-edit/register", json={"mapId": "ghost", "nickname": "A"})
    assert res.status_code == 404


async def test_pin_routes_require_editor_headers(client, public_map):
    _, floor = public_map
    res = await client.post("/api/public-edit/pins", json={**PIN, "floor_id": floor["id"]})
    assert res.status_code == 401
    res = await client.post(
        "/api/public-edit/pins", json={**PIN, "floor_id": floor["id"]},
        headers={"X-Editor-Id": "nobody", "X-Editor-Token": "0" * 64},
    )
    assert res.status_code == 404


async def test_scenario(client, public_map, owner_auth, editor_headers):
    _, floor = public_map
    owner_id, owner_headers = owner_auth

    res = await client.post("/api/public-edit/pins", headers=editor_headers, json={
        **PIN, "floor_id": floor["id"], "editor_nickname": "Mallory",
    })
    assert res.status_code == 201
    editor_pin = res.json()
    assert editor_pin["editor_id"] == editor_headers["X-Editor-Id"]
    assert editor_pin["editor_nickname"] == "Alice"

    res = await client.patch(
        f"/api/pins/{editor_pin['id']}", headers=owner_headers, json={"title": "Espresso bar"},
    )
    assert res.status_code == 200
    assert res.json()["title"] == "Espresso bar"

    res = await client.post(f"/api/floors/{floor['id']}/pins", headers=owner_headers, json=PIN)
    owner_pin = res.json()
    res = await client.delete(f"/api/public-edit/pins/{owner_pin['id']}", headers=editor_headers)
    assert res.status_code == 403

    res = await client.patch(
        f"/api/public-edit/pins/{editor_pin['id']}", headers=editor_headers,
        json={"description": "Open 8-17"},
    )
    assert res.status_code == 200
    res = await client.delete(f"/api/public-edit/pins/{editor_pin['id']}", headers=editor_headers)
    assert res.status_code == 200


async def test_private_flag_revokes_editor_writes(client, public_map, owner_auth, editor_headers):
    map_, floor = public_map
    _, owner_headers = owner_auth
    res = await client.post("/api/public-edit/pins", headers=editor_headers, json={
        **PIN, "floor_id": floor["id"],
    })
    pin = res.json()

    await client.patch(
        f"/api/maps/{map_['id']}", headers=owner_headers, json={"is_publicly_editable": False},
    )

    res = await client.post("/api/public-edit/pins", headers=editor_headers, json={
        **PIN, "floor_id": floor["id"],
    })
    assert res.status_code == 403
    res = await client.patch(
        f"/api/public-edit/pins/{pin['id']}", headers=editor_headers, json={"title": "X"},
    )
    assert res.status_code == 403
    res = await client.delete(f"/api/public-edit/pins/{pin['id']}", headers=editor_headers)
    assert res.status_code == 403


async def test_owner_lists_editors(client, public_map, owner_auth, stranger_auth, editor_headers):
    map_, _ = public_map
    _, headers = owner_auth
    res = await client.get(f"/api/maps/{map_['id']}/editors", headers=headers)
    assert res.status_code == 200
    assert [e["nickname"] for e in res.json()] == ["Alice"]
    assert "editor_token" not in res.json()[0]
    _, other = stranger_auth
    res = await client.get(f"/api/maps/{map_['id']}/editors", headers=other)
    assert res.status_code == 403
