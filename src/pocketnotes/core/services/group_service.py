"""Group service implementation."""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import Duplicate, NotFound, ValidationFailed
from ..logging import get_logger
from ..models.group import NAME_MAX_LENGTH, NAME_MIN_LENGTH, Group
from ..models.types import coerce_uuid
from ..models.user import User
from ..repositories.group_repository import GroupRepository
from ..schemas.groups import GroupCreate, GroupResponse
from .interfaces import IGroupService

logger = get_logger("services.groups")


class GroupService(IGroupService):
    """Owns group lifecycle and decides who may see a group.

    Owners and members can read a group and post into it; only the owner
    can delete it. Lookups that fail for any reason (unknown id, malformed
    id, no rights) all raise the same NotFound so existence is not leaked.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.group_repo = GroupRepository(session)

    async def list_groups(self, user: User) -> List[GroupResponse]:
        groups = await self.group_repo.list_accessible(user.id)
        return [self._to_response(group) for group in groups]

    async def create_group(self, user: User, request: GroupCreate) -> GroupResponse:
        """Create a group owned by ``user`` with ``user`` as first member."""
        name = request.name.strip()
        if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            raise ValidationFailed(
                f"Group name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
            )
        if not Group.is_valid_color(request.color):
            raise ValidationFailed("Please provide a valid hex color code")

        # a concurrent create that slips past this check hits the (owner_id, name_key) constraint
        if await self.group_repo.find_owned_by_name(user.id, name):
            raise Duplicate("You already have a group with this name")

        group = await self.group_repo.create_group(
            {
                "name": name,
                "name_key": Group.make_name_key(name),
                "color": request.color,
                "initials": Group.compute_initials(name),
                "owner_id": user.id,
            },
            members=[user],
        )
        logger.info(
            "Group created",
            extra={"group_id": str(group.id), "owner_id": str(user.id)},
        )
        return self._to_response(group)

    async def get_group(self, user: User, group_id: str | UUID) -> GroupResponse:
        group = await self._get_accessible(user, group_id)
        if not group:
            raise NotFound("Group not found")
        return self._to_response(group)

    async def delete_group(self, user: User, group_id: str | UUID) -> None:
        """Delete an owned group and every note in it, atomically."""
        gid = coerce_uuid(group_id)
        group = await self.group_repo.get_by_id(gid) if gid else None
        if not group or not group.is_owned_by(user.id):
            raise NotFound("Group not found or you are not authorized to delete it")

        removed = await self.group_repo.delete_with_notes(group)
        logger.info(
            "Group deleted",
            extra={"group_id": str(gid), "owner_id": str(user.id), "notes_removed": removed},
        )

    async def has_access(self, user: User, group_id: str | UUID) -> bool:
        return await self._get_accessible(user, group_id) is not None

    async def _get_accessible(self, user: User, group_id: str | UUID) -> Group | None:
        gid = coerce_uuid(group_id)
        if gid is None:
            return None
        return await self.group_repo.get_accessible(gid, user.id)

    def _to_response(self, group: Group) -> GroupResponse:
        return GroupResponse(
            id=group.id,
            name=group.name,
            color=group.color,
            initials=group.initials,
            owner_id=group.owner_id,
            member_ids=group.member_ids,
            created_at=group.created_at,
            updated_at=group.updated_at,
        )
