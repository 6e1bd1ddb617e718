"""Repository layer for data access."""

from .base import BaseRepository
from .group_repository import GroupRepository
from .note_repository import NoteRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "GroupRepository",
    "NoteRepository",
]
