"""User repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError

from ..exceptions import Duplicate
from ..models.user import User
from .base import BaseRepository


class UserRepository(BaseRepository):
    """Repository for user database operations."""

    async def create_user(self, user_data: dict) -> User:
        """Insert a user. A unique-key race surfaces as Duplicate."""
        user = User(**user_data)
        async with self.store_operation("create_user"):
            self.session.add(user)
            try:
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise Duplicate("Username or email already exists") from e
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        async with self.store_operation("get_user_by_id"):
            result = await self.session.execute(select(User).where(User.id == user_id))
            return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by exact username."""
        async with self.store_operation("get_user_by_username"):
            result = await self.session.execute(select(User).where(User.username == username))
            return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by normalized email."""
        async with self.store_operation("get_user_by_email"):
            stmt = select(User).where(User.email == User.normalize_email(email))
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_by_identifier(self, identifier: str) -> Optional[User]:
        """Login lookup: username (trimmed) or email (trimmed, lower-cased)."""
        stmt = select(User).where(
            or_(
                User.username == identifier.strip(),
                User.email == User.normalize_email(identifier),
            )
        )
        async with self.store_operation("get_user_by_identifier"):
            result = await self.session.execute(stmt)
            return result.scalars().first()

    async def update_user(self, user: User, update_data: dict) -> User:
        """Apply field updates to a loaded user."""
        for key, value in update_data.items():
            setattr(user, key, value)
        async with self.store_operation("update_user"):
            await self.session.commit()
        return user

    async def is_username_taken(self, username: str) -> bool:
        return await self.get_by_username(username) is not None

    async def is_email_taken(self, email: str) -> bool:
        return await self.get_by_email(email) is not None
