"""
Note schemas - create/update requests and the note as returned to clients.
"""

import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.note import TEXT_MAX_LENGTH


class NoteWrite(BaseModel):
    """Body for both creating and editing a note."""

    text: str = Field(min_length=1, max_length=TEXT_MAX_LENGTH, description="Note text")

    model_config = ConfigDict(json_schema_extra={"example": {"text": "Buy milk"}})

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class NoteCreate(NoteWrite):
    pass


class NoteUpdate(NoteWrite):
    pass


class NoteAuthor(BaseModel):
    id: uuid.UUID
    username: str

    model_config = ConfigDict(from_attributes=True)


class NoteResponse(BaseModel):
    id: uuid.UUID
    text: str
    group_id: uuid.UUID
    author: NoteAuthor
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NoteData(BaseModel):
    note: NoteResponse


class NoteListData(BaseModel):
    notes: List[NoteResponse]
