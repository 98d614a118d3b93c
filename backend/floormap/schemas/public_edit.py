"""Public Edit Schemas: anonymous editor registration and verification.

Invariants:
    - Wire format is camelCase (mapId, editorId) like the public-edit client expects
    - The editor token is only returned by registration, never by verification
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Camel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class EditorRegister(_Camel):
    map_id: str = Field(alias="mapId", min_length=1)
    nickname: str = Field(min_length=1, max_length=100)

    @field_validator("nickname")
    @classmethod
    def strip_nickname(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("nickname cannot be empty or whitespace")
        return v


class EditorVerify(_Camel):
    editor_id: str = Field(alias="editorId", min_length=1)
    token: str = Field(min_length=1)


class EditorRegisterResponse(_Camel):
    editor_id: str = Field(alias="editorId")
    nickname: str
    map_id: str = Field(alias="mapId")
    token: str
    verified: bool = True


class EditorVerifyResponse(_Camel):
    editor_id: str = Field(alias="editorId")
    nickname: str
    map_id: str = Field(alias="mapId")
    verified: bool = True


class EditorSummary(_Camel):
    id: str
    nickname: str
    created_at: datetime
    last_active: datetime
