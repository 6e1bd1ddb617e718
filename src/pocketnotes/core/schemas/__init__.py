"""
Pydantic schemas for validating and documenting API requests and responses.

Requests are validated here before any service code runs; responses are
wrapped in the common ``ApiResponse`` envelope.
"""

from .auth import AuthData, LoginRequest, RegisterRequest, UserData, UserResponse
from .common import ApiResponse, FieldError
from .groups import GroupCreate, GroupData, GroupListData, GroupResponse
from .notes import (
    NoteAuthor,
    NoteCreate,
    NoteData,
    NoteListData,
    NoteResponse,
    NoteUpdate,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "UserData",
    "AuthData",
    # Group schemas
    "GroupCreate",
    "GroupResponse",
    "GroupData",
    "GroupListData",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteAuthor",
    "NoteResponse",
    "NoteData",
    "NoteListData",
    # Common schemas
    "ApiResponse",
    "FieldError",
]
