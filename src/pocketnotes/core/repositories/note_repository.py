"""Note repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import asc, select

from ..models.note import Note
from .base import BaseRepository


class NoteRepository(BaseRepository):
    """Repository for note database operations."""

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        async with self.store_operation("create_note"):
            self.session.add(note)
            await self.session.commit()
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID with its author."""
        async with self.store_operation("get_note_by_id"):
            result = await self.session.execute(select(Note).where(Note.id == note_id))
            return result.scalar_one_or_none()

    async def list_group_notes(self, group_id: UUID) -> List[Note]:
        """Notes of a group, oldest first (chat order)."""
        stmt = select(Note).where(Note.group_id == group_id).order_by(asc(Note.created_at))
        async with self.store_operation("list_group_notes"):
            result = await self.session.execute(stmt)
            return list(result.scalars())

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Apply updates to a loaded note and bump its timestamp."""
        for key, value in update_data.items():
            setattr(note, key, value)
        note.touch()
        async with self.store_operation("update_note"):
            await self.session.commit()
        return note

    async def delete_note(self, note: Note) -> None:
        async with self.store_operation("delete_note"):
            await self.session.delete(note)
            await self.session.commit()
