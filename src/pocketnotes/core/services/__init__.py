"""
Service layer interfaces and implementations.
"""

from .interfaces import IAuthService, IGroupService, INoteService

from .auth_service import AuthService
from .group_service import GroupService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "IAuthService",
    "IGroupService",
    "INoteService",

    # Implementations
    "AuthService",
    "GroupService",
    "NoteService",
]
