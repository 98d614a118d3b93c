"""Route test fixtures: async SQLite DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager points at the test engine so the readiness probe sees it

Design Decisions:
    - StaticPool: one shared connection, so the in-memory database survives
      across the sessions opened by different requests
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import update
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import floormap.infrastructure.database as db_module
from floormap.db.base import Base
from floormap.infrastructure.database import DatabaseSessionManager, get_db
from floormap.main import app
from floormap.models.user import User


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def _register_and_login(client, email, name="User"):
    res = await client.post("/api/auth/register", json={
        "email": email, "password": "secret123", "name": name,
    })
    assert res.status_code == 201, res.text
    res = await client.post("/api/auth/login", json={
        "email": email, "password": "secret123",
    })
    assert res.status_code == 200, res.text
    body = res.json()
    return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture
async def owner_auth(client):
    """(user_id, headers) for the map owner."""
    return await _register_and_login(client, "owner@example.com", "Owner")


@pytest.fixture
async def stranger_auth(client):
    return await _register_and_login(client, "stranger@example.com", "Stranger")


@pytest.fixture
async def admin_auth(client, test_db):
    """Admin account: registered as a user, promoted in the DB, then logged in."""
    user_id, _ = await _register_and_login(client, "admin@example.com", "Admin")
    await test_db.execute(update(User).where(User.id == user_id).values(role="admin"))
    await test_db.commit()
    res = await client.post("/api/auth/login", json={
        "email": "admin@example.com", "password": "secret123",
    })
    return user_id, {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
async def public_map(client, owner_auth):
    """Publicly editable map with one floor: returns (map, floor) JSON."""
    _, headers = owner_auth
    res = await client.post("/api/maps", headers=headers, json={
        "map_id": "campus-hq", "title": "Campus HQ", "is_publicly_editable": True,
    })
    assert res.status_code == 201, res.text
    map_ = res.json()
    res = await client.post(
        f"/api/maps/{map_['id']}/floors", headers=headers,
        json={"floor_number": 1, "name": "Ground"},
    )
    assert res.status_code == 201, res.text
    return map_, res.json()


@pytest.fixture
async def editor_headers(client, public_map):
    res = await client.post("/api/public-edit/register", json={
        "mapId": "campus-hq", "nickname": "Alice",
    })
    assert res.status_code == 201, res.text
    body = res.json()
    return {"X-Editor-Id": body["editorId"], "X-Editor-Token": body["token"]}
