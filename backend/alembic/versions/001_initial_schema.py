"""Initial schema: users, maps, floors, pins, public_editors.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "maps",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("map_id", sa.String(100), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("is_publicly_editable", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_maps_map_id", "maps", ["map_id"], unique=True)
    op.create_index("ix_maps_user_id", "maps", ["user_id"])

    op.create_table(
        "floors",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("map_id", sa.String(36), sa.ForeignKey("maps.id", ondelete="CASCADE"), nullable=False),
        sa.Column("floor_number", sa.Integer, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("image_url", sa.String(1024), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_floors_map_id", "floors", ["map_id"])

    op.create_table(
        "pins",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("floor_id", sa.String(36), sa.ForeignKey("floors.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("x_position", sa.Float, nullable=False, server_default="0"),
        sa.Column("y_position", sa.Float, nullable=False, server_default="0"),
        sa.Column("image_url", sa.String(1024), nullable=False, server_default=""),
        sa.Column("editor_id", sa.String(36), nullable=False, server_default=""),
        sa.Column("editor_nickname", sa.String(100), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_pins_floor_id", "pins", ["floor_id"])

    op.create_table(
        "public_editors",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("map_id", sa.String(36), sa.ForeignKey("maps.id", ondelete="CASCADE"), nullable=False),
        sa.Column("nickname", sa.String(100), nullable=False),
        sa.Column("editor_token", sa.String(128), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("last_active", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_public_editors_map_id", "public_editors", ["map_id"])


def downgrade() -> None:
    op.drop_table("public_editors")
    op.drop_table("pins")
    op.drop_table("floors")
    op.drop_table("maps")
    op.drop_table("users")
