"""Admin Routes: user management behind the admin role.

Tests cover:
    - Non-admins get 403 on every admin route
    - Role change and delete of other users
    - Self role-change and self-delete → 400 SELF_PROTECTION
    - Deleting a user removes their maps and invalidates their token
    - Role changes apply to tokens issued before the change
"""


async def test_non_admin_forbidden(client, owner_auth):
    _, headers = owner_auth
    assert (await client.get("/api/admin/users", headers=headers)).status_code == 403


async def test_list_users(client, admin_auth, owner_auth):
    _, headers = admin_auth
    res = await client.get("/api/admin/users", headers=headers)
    assert res.status_code == 200
    emails = {u["email"] for u in res.json()}
    assert {"admin@example.com", "owner@example.com"} <= emails


async def test_role_change(client, admin_auth, owner_auth):
    _, headers = admin_auth
    owner_id, _ = owner_auth
    res = await client.patch(f"/api/admin/users/{owner_id}", headers=headers, json={"role": "admin"})
    assert res.status_code == 200
    assert res.json()["role"] == "admin"
    res = await client.patch(f"/api/admin/users/{owner_id}", headers=headers, json={"role": "root"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_self_protection(client, admin_auth):
    admin_id, headers = admin_auth
    res = await client.patch(f"/api/admin/users/{admin_id}", headers=headers, json={"role": "user"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "SELF_PROTECTION"
    res = await client.patch(
        f"/api/admin/users/{admin_id}", headers=headers, json={"role": "superuser"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "SELF_PROTECTION"
    res = await client.delete(f"/api/admin/users/{admin_id}", headers=headers)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "SELF_PROTECTION"


async def test_delete_user_removes_maps(client, admin_auth, owner_auth, public_map):
    _, headers = admin_auth
    owner_id, _ = owner_auth
    map_, _ = public_map
    res = await client.delete(f"/api/admin/users/{owner_id}", headers=headers)
    assert res.status_code == 200
    assert (await client.get(f"/api/maps/{map_['id']}", headers=headers)).status_code == 404
    assert (await client.get("/api/viewer/campus-hq")).status_code == 404
    res = await client.delete(f"/api/admin/users/{owner_id}", headers=headers)
    assert res.status_code == 404


async def test_deleted_user_token_rejected(client, admin_auth, stranger_auth):
    _, admin_headers = admin_auth
    stranger_id, stranger_headers = stranger_auth
    res = await client.delete(f"/api/admin/users/{stranger_id}", headers=admin_headers)
    assert res.status_code == 200
    res = await client.post("/api/maps", headers=stranger_headers, json={
        "map_id": "orphan", "title": "Orphan",
    })
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_SESSION"
    assert (await client.get("/api/viewer/orphan")).status_code == 404


async def test_role_change_applies_to_existing_token(client, admin_auth, owner_auth):
    _, admin_headers = admin_auth
    owner_id, owner_headers = owner_auth
    await client.patch(f"/api/admin/users/{owner_id}", headers=admin_headers, json={"role": "admin"})
    assert (await client.get("/api/admin/users", headers=owner_headers)).status_code == 200
    await client.patch(f"/api/admin/users/{owner_id}", headers=admin_headers, json={"role": "user"})
    assert (await client.get("/api/admin/users", headers=owner_headers)).status_code == 403
