"""Map, Floor & Pin Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - Create payloads require the fields the database cannot default
    - Update payloads are all-optional: None or "" means "leave unchanged" (core/sparse_patch.py);
      whitespace-only text is normalized to None
    - Required create text is stripped and must not be blank
    - Response models read straight from ORM rows (from_attributes)

Design Decisions:
    - map_id (public identifier) restricted to URL-safe characters: it appears in viewer links
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Orm(BaseModel):
    model_config = ConfigDict(from_attributes=True)


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("value cannot be empty or whitespace")
    return v


def _strip_optional(v: str | None) -> str | None:
    """Whitespace-only counts as absent, so the stored value is kept."""
    if v is None:
        return None
    return v.strip() or None


# --- Maps ----------------------------------------------------------------------

class MapCreate(BaseModel):
    map_id: str = Field(min_length=1, max_length=100, pattern=r"^[A-Za-z0-9_-]+$")
    title: str = Field(min_length=1, max_length=255)
    description: str = Field("", max_length=10_000)
    is_publicly_editable: bool = False

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_required(v)


class MapUpdate(BaseModel):
    title: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=10_000)
    is_publicly_editable: bool | None = None

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_optional(v)


class MapResponse(_Orm):
    id: str
    map_id: str
    title: str
    description: str
    user_id: str
    is_publicly_editable: bool
    created_at: datetime
    updated_at: datetime


# --- Floors --------------------------------------------------------------------

class FloorCreate(BaseModel):
    floor_number: int
    name: str = Field(min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_required(v)


class FloorUpdate(BaseModel):
    name: str | None = Field(None, max_length=255)
    floor_number: int | None = None
    image_url: str | None = Field(None, max_length=1024)

    @field_validator("name", "image_url")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_optional(v)


class FloorResponse(_Orm):
    id: str
    map_id: str
    floor_number: int
    name: str
    image_url: str
    created_at: datetime
    updated_at: datetime


# --- Pins ----------------------------------------------------------------------

class PinCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field("", max_length=10_000)
    x_position: float
    y_position: float
    image_url: str = Field("", max_length=1024)
    editor_nickname: str = Field("", max_length=100)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_required(v)


class PublicPinCreate(PinCreate):
    """Public-edit variant: the floor travels in the body, not the path."""
    floor_id: str = Field(min_length=1)


class PinUpdate(BaseModel):
    title: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=10_000)
    image_url: str | None = Field(None, max_length=1024)
    x_position: float | None = None
    y_position: float | None = None

    @field_validator("title", "description", "image_url")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_optional(v)


class PinResponse(_Orm):
    id: str
    floor_id: str
    title: str
    description: str
    x_position: float
    y_position: float
    image_url: str
    editor_id: str
    editor_nickname: str
    created_at: datetime
    updated_at: datetime


class ImageUrlUpdate(BaseModel):
    image_url: str = Field(min_length=1, max_length=1024)


class DeletedResponse(BaseModel):
    message: str
    id: str


# --- Viewer --------------------------------------------------------------------

class ViewerResponse(BaseModel):
    map: MapResponse
    floors: list[FloorResponse]
    pins: list[PinResponse]
