"""Groups API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.models.user import User
from ..core.schemas import ApiResponse, GroupCreate, GroupData, GroupListData
from ..core.services import GroupService
from ..database import get_db_session
from ..middleware.auth import get_current_user

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("", response_model=ApiResponse[GroupListData], response_model_exclude_none=True)
async def list_groups(
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Groups the caller owns or belongs to, newest first."""
    groups = await GroupService(session).list_groups(current_user)
    return ApiResponse[GroupListData].ok(GroupListData(groups=groups))


@router.post(
    "",
    response_model=ApiResponse[GroupData],
    response_model_exclude_none=True,
    status_code=201,
)
async def create_group(
    request: GroupCreate,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new group."""
    group = await GroupService(session).create_group(current_user, request)
    return ApiResponse[GroupData].ok(GroupData(group=group), "Group created successfully")


@router.get("/{group_id}", response_model=ApiResponse[GroupData], response_model_exclude_none=True)
async def get_group(
    group_id: str,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a group the caller can access."""
    group = await GroupService(session).get_group(current_user, group_id)
    return ApiResponse[GroupData].ok(GroupData(group=group))


@router.delete("/{group_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_group(
    group_id: str,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete an owned group together with its notes."""
    await GroupService(session).delete_group(current_user, group_id)
    return ApiResponse[None].ok(message="Group and all its notes deleted successfully")
