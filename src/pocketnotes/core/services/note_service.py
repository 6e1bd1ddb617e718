"""Note service implementation."""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFound, ValidationFailed
from ..logging import get_logger
from ..models.note import TEXT_MAX_LENGTH, Note
from ..models.types import coerce_uuid
from ..models.user import User
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteAuthor, NoteCreate, NoteResponse, NoteUpdate
from .group_service import GroupService
from .interfaces import INoteService

logger = get_logger("services.notes")


class NoteService(INoteService):
    """Note service implementation.

    Reading and posting need access to the group (owner or member, decided by
    GroupService). Editing and deleting depend only on authorship: the
    author's group role does not matter and nobody else can touch the note.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.groups = GroupService(session)

    async def list_group_notes(self, user: User, group_id: str | UUID) -> List[NoteResponse]:
        """Notes of an accessible group, oldest first."""
        gid = await self._require_group_access(user, group_id)
        notes = await self.note_repo.list_group_notes(gid)
        return [self._note_to_response(note) for note in notes]

    async def create_note(self, user: User, group_id: str | UUID, request: NoteCreate) -> NoteResponse:
        """Post a note into an accessible group."""
        gid = await self._require_group_access(user, group_id)
        text = self._clean_text(request.text)

        note = await self.note_repo.create_note(
            {"text": text, "group_id": gid, "author_id": user.id, "author": user}
        )
        logger.info(
            "Note created",
            extra={"note_id": str(note.id), "group_id": str(gid), "author_id": str(user.id)},
        )
        return self._note_to_response(note)

    async def update_note(self, user: User, note_id: str | UUID, request: NoteUpdate) -> NoteResponse:
        """Replace the text of one of the caller's notes."""
        note = await self._get_authored(user, note_id)
        if not note:
            raise NotFound("Note not found or you are not authorized to edit it")

        text = self._clean_text(request.text)
        note = await self.note_repo.update_note(note, {"text": text})
        logger.info("Note updated", extra={"note_id": str(note.id), "author_id": str(user.id)})
        return self._note_to_response(note)

    async def delete_note(self, user: User, note_id: str | UUID) -> None:
        note = await self._get_authored(user, note_id)
        if not note:
            raise NotFound("Note not found or you are not authorized to delete it")

        await self.note_repo.delete_note(note)
        logger.info("Note deleted", extra={"note_id": str(note_id), "author_id": str(user.id)})

    async def _require_group_access(self, user: User, group_id: str | UUID) -> UUID:
        gid = coerce_uuid(group_id)
        if gid is None or not await self.groups.has_access(user, gid):
            raise NotFound("Group not found or access denied")
        return gid

    async def _get_authored(self, user: User, note_id: str | UUID) -> Note | None:
        nid = coerce_uuid(note_id)
        if nid is None:
            return None
        note = await self.note_repo.get_by_id(nid)
        return note if note and note.is_authored_by(user.id) else None

    @staticmethod
    def _clean_text(text: str) -> str:
        cleaned = (text or "").strip()
        if not 1 <= len(cleaned) <= TEXT_MAX_LENGTH:
            raise ValidationFailed(
                f"Note text must be between 1 and {TEXT_MAX_LENGTH} characters"
            )
        return cleaned

    def _note_to_response(self, note: Note) -> NoteResponse:
        """Convert note model to response, author attached."""
        return NoteResponse(
            id=note.id,
            text=note.text,
            group_id=note.group_id,
            author=NoteAuthor(id=note.author.id, username=note.author.display_name),
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
