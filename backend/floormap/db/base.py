"""SQLAlchemy Declarative Base."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all floormap ORM models; Base.metadata feeds alembic and create_all."""
