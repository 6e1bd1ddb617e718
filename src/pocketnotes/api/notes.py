"""Notes API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.models.user import User
from ..core.schemas import ApiResponse, NoteCreate, NoteData, NoteListData, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_user

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get(
    "/group/{group_id}",
    response_model=ApiResponse[NoteListData],
    response_model_exclude_none=True,
)
async def list_group_notes(
    group_id: str,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Notes of a group, oldest first."""
    notes = await NoteService(session).list_group_notes(current_user, group_id)
    return ApiResponse[NoteListData].ok(NoteListData(notes=notes))


@router.post(
    "/group/{group_id}",
    response_model=ApiResponse[NoteData],
    response_model_exclude_none=True,
    status_code=201,
)
async def create_note(
    group_id: str,
    request: NoteCreate,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Post a note into a group."""
    note = await NoteService(session).create_note(current_user, group_id, request)
    return ApiResponse[NoteData].ok(NoteData(note=note), "Note created successfully")


@router.put("/{note_id}", response_model=ApiResponse[NoteData], response_model_exclude_none=True)
async def update_note(
    note_id: str,
    request: NoteUpdate,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Edit one of the caller's notes."""
    note = await NoteService(session).update_note(current_user, note_id, request)
    return ApiResponse[NoteData].ok(NoteData(note=note), "Note updated successfully")


@router.delete("/{note_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_note(
    note_id: str,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete one of the caller's notes."""
    await NoteService(session).delete_note(current_user, note_id)
    return ApiResponse[None].ok(message="Note deleted successfully")
