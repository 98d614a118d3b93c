"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Ownership chain: User → Map → Floor → Pin; Map → PublicEditor

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from floormap.models.user import User  # noqa: F401
from floormap.models.map import Map  # noqa: F401
from floormap.models.floor import Floor  # noqa: F401
from floormap.models.pin import Pin  # noqa: F401
from floormap.models.public_editor import PublicEditor  # noqa: F401
