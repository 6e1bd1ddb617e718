"""
Service interfaces for the Pocket Notes application.

Every operation except registration and login takes the authenticated
caller as its first argument.
"""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ..models.user import User
from ..schemas.auth import AuthData, LoginRequest, RegisterRequest, UserResponse
from ..schemas.groups import GroupCreate, GroupResponse
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Credential store and session entry points."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> User:
        """Persist a new user with a hashed password."""
        pass

    @abstractmethod
    async def verify_credentials(self, identifier: str, password: str) -> User:
        """Resolve username/email plus password to a user."""
        pass

    @abstractmethod
    async def register(self, request: RegisterRequest) -> AuthData:
        """Register and open a session."""
        pass

    @abstractmethod
    async def login(self, request: LoginRequest) -> AuthData:
        """Verify credentials and open a session."""
        pass

    @abstractmethod
    async def get_current_user(self, user: User) -> UserResponse:
        """Profile of the caller."""
        pass


class IGroupService(ABC):
    """Group lifecycle and access predicate."""

    @abstractmethod
    async def list_groups(self, user: User) -> List[GroupResponse]:
        pass

    @abstractmethod
    async def create_group(self, user: User, request: GroupCreate) -> GroupResponse:
        pass

    @abstractmethod
    async def get_group(self, user: User, group_id: str | UUID) -> GroupResponse:
        pass

    @abstractmethod
    async def delete_group(self, user: User, group_id: str | UUID) -> None:
        pass

    @abstractmethod
    async def has_access(self, user: User, group_id: str | UUID) -> bool:
        pass


class INoteService(ABC):
    """Notes scoped to groups."""

    @abstractmethod
    async def list_group_notes(self, user: User, group_id: str | UUID) -> List[NoteResponse]:
        pass

    @abstractmethod
    async def create_note(self, user: User, group_id: str | UUID, request: NoteCreate) -> NoteResponse:
        pass

    @abstractmethod
    async def update_note(self, user: User, note_id: str | UUID, request: NoteUpdate) -> NoteResponse:
        pass

    @abstractmethod
    async def delete_note(self, user: User, note_id: str | UUID) -> None:
        pass
