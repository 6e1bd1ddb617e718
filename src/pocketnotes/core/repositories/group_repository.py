"""Group repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, desc, or_, select
from sqlalchemy.exc import IntegrityError

from ..exceptions import Duplicate
from ..models.group import Group
from ..models.note import Note
from ..models.user import User
from .base import BaseRepository


class GroupRepository(BaseRepository):
    """Repository for group database operations."""

    @staticmethod
    def _access_condition(user_id: UUID):
        # owner OR member
        return or_(Group.owner_id == user_id, Group.members.any(User.id == user_id))

    async def create_group(self, group_data: dict, members: List[User]) -> Group:
        """Insert a group with its initial members. A taken (owner, name key) is Duplicate."""
        group = Group(**group_data)
        group.members = list(members)
        async with self.store_operation("create_group"):
            self.session.add(group)
            try:
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise Duplicate("You already have a group with this name") from e
        return group

    async def get_by_id(self, group_id: UUID) -> Optional[Group]:
        async with self.store_operation("get_group_by_id"):
            result = await self.session.execute(select(Group).where(Group.id == group_id))
            return result.scalar_one_or_none()

    async def get_accessible(self, group_id: UUID, user_id: UUID) -> Optional[Group]:
        """Get group if the user owns it or is a member."""
        stmt = select(Group).where(and_(Group.id == group_id, self._access_condition(user_id)))
        async with self.store_operation("get_accessible_group"):
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def list_accessible(self, user_id: UUID) -> List[Group]:
        """All groups the user owns or belongs to, newest first."""
        stmt = (
            select(Group)
            .where(self._access_condition(user_id))
            .order_by(desc(Group.created_at))
        )
        async with self.store_operation("list_accessible_groups"):
            result = await self.session.execute(stmt)
            return list(result.scalars().unique())

    async def find_owned_by_name(self, user_id: UUID, name: str) -> Optional[Group]:
        """Lookup of one of the user's groups by case-folded trimmed name."""
        stmt = select(Group).where(
            and_(Group.owner_id == user_id, Group.name_key == Group.make_name_key(name))
        )
        async with self.store_operation("find_owned_group_by_name"):
            result = await self.session.execute(stmt)
            return result.scalars().first()

    async def delete_with_notes(self, group: Group) -> int:
        """Delete the group's notes and then the group in a single transaction.

        Returns the number of notes removed. On any failure the transaction is
        rolled back, so neither the notes nor the group go away.
        """
        async with self.store_operation("delete_group_with_notes"):
            result = await self.session.execute(
                delete(Note)
                .where(Note.group_id == group.id)
                .execution_options(synchronize_session=False)
            )
            await self.session.delete(group)
            await self.session.commit()
        return result.rowcount or 0
