"""Group request/response schemas."""

import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.group import NAME_MAX_LENGTH, NAME_MIN_LENGTH


class GroupCreate(BaseModel):
    """Create group request. The name is trimmed before length checks."""

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    color: str = Field(pattern=r"^#[0-9A-Fa-f]{6}$", description="Hex color like #FF0000")

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Team Alpha", "color": "#16008B"}}
    )

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class GroupResponse(BaseModel):
    id: uuid.UUID
    name: str
    color: str
    initials: str
    owner_id: uuid.UUID
    member_ids: List[uuid.UUID]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GroupData(BaseModel):
    group: GroupResponse


class GroupListData(BaseModel):
    groups: List[GroupResponse]
