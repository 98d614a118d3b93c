"""Root conftest: environment defaults and in-memory service fixtures.

Invariants:
    - Environment is pinned before floormap.config is first imported
    - Every test gets a fresh FakeStore; services built here share it
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402

from fakes import (  # noqa: E402
    FakeFloorRepository, FakeMapRepository, FakePinRepository,
    FakePublicEditorRepository, FakeStore, FakeUserRepository, TEST_SECRET,
    UserRecord,
)
from floormap.core.domain_types import Requester, Role  # noqa: E402
from floormap.services.auth_service import AuthService  # noqa: E402
from floormap.services.floor_service import FloorService  # noqa: E402
from floormap.services.map_service import MapService  # noqa: E402
from floormap.services.pin_service import PinService  # noqa: E402
from floormap.services.public_editor_service import PublicEditorService  # noqa: E402
from floormap.services.viewer_service import ViewerService  # noqa: E402


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def auth_service(store):
    return AuthService(FakeUserRepository(store), jwt_secret=TEST_SECRET)


@pytest.fixture
def map_service(store):
    return MapService(FakeMapRepository(store))


@pytest.fixture
def floor_service(store):
    return FloorService(FakeFloorRepository(store), FakeMapRepository(store))


@pytest.fixture
def pin_service(store):
    return PinService(
        FakePinRepository(store), FakeFloorRepository(store), FakeMapRepository(store),
    )


@pytest.fixture
def editor_service(store):
    return PublicEditorService(FakePublicEditorRepository(store), FakeMapRepository(store))


@pytest.fixture
def viewer_service(store):
    return ViewerService(
        FakeMapRepository(store), FakeFloorRepository(store), FakePinRepository(store),
    )


@pytest.fixture
def owner(store):
    """u1: a regular user who owns the scenario map."""
    store.users["u1"] = UserRecord(
        id="u1", email="owner@example.com", password="x", name="Owner",
    )
    return Requester(id="u1", role=Role.USER.value, nickname="Owner")


@pytest.fixture
def admin(store):
    store.users["admin-1"] = UserRecord(
        id="admin-1", email="admin@example.com", password="x", name="Admin",
        role=Role.ADMIN.value,
    )
    return Requester(id="admin-1", role=Role.ADMIN.value)


@pytest.fixture
def stranger():
    return Requester(id="u2", role=Role.USER.value, nickname="Stranger")


@pytest.fixture
async def public_map(map_service, owner):
    """m1: publicly editable map owned by u1."""
    return await map_service.create(owner, {
        "map_id": "campus-hq", "title": "Campus HQ", "is_publicly_editable": True,
    })


@pytest.fixture
async def floor(floor_service, public_map, owner):
    """f1: ground floor of m1."""
    return await floor_service.create(
        public_map.id, owner, {"floor_number": 1, "name": "Ground"},
    )


@pytest.fixture
async def editor(editor_service, public_map):
    """e1: anonymous editor "Alice" registered on m1, as a Requester."""
    record, _ = await editor_service.register(public_map.map_id, "Alice")
    return Requester.from_editor(record)
