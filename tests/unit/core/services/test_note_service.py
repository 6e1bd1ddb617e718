"""Unit tests for NoteService."""

import uuid
from datetime import datetime, timezone

import pytest

from src.pocketnotes.core.exceptions import NotFound, ValidationFailed
from src.pocketnotes.core.repositories import GroupRepository
from src.pocketnotes.core.schemas.groups import GroupCreate
from src.pocketnotes.core.schemas.notes import NoteCreate, NoteUpdate
from src.pocketnotes.core.services.group_service import GroupService
from src.pocketnotes.core.services.note_service import NoteService


@pytest.fixture
def service(test_session):
    return NoteService(test_session)


@pytest.fixture
async def team(test_session, alice, bob):
    """Group owned by alice with bob as member."""
    group = await GroupService(test_session).create_group(
        alice, GroupCreate(name="Team", color="#123ABC")
    )
    stored = await GroupRepository(test_session).get_by_id(group.id)
    stored.members.append(bob)
    await test_session.commit()
    return group


class TestPostAndRead:
    @pytest.mark.asyncio
    async def test_owner_posts(self, service, alice, team):
        note = await service.create_note(alice, str(team.id), NoteCreate(text="  Buy milk  "))

        assert note.text == "Buy milk"
        assert note.group_id == team.id
        assert note.author.id == alice.id
        assert note.author.username == "alice"

    @pytest.mark.asyncio
    async def test_member_posts_and_reads(self, service, alice, bob, team):
        await service.create_note(alice, team.id, NoteCreate(text="first"))
        await service.create_note(bob, team.id, NoteCreate(text="second"))

        notes = await service.list_group_notes(bob, team.id)

        assert sorted(n.text for n in notes) == ["first", "second"]
        assert {n.author.username for n in notes} == {"alice", "bob"}

    @pytest.mark.asyncio
    async def test_list_empty_group(self, service, alice, team):
        assert await service.list_group_notes(alice, team.id) == []

    @pytest.mark.asyncio
    async def test_stranger_cannot_read_or_post(self, service, carol, team):
        with pytest.raises(NotFound) as exc:
            await service.list_group_notes(carol, team.id)
        assert exc.value.message == "Group not found or access denied"

        with pytest.raises(NotFound):
            await service.create_note(carol, team.id, NoteCreate(text="let me in"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("group_id", ["bad-id", ""])
    async def test_malformed_group_id(self, service, alice, group_id):
        with pytest.raises(NotFound):
            await service.list_group_notes(alice, group_id)

    @pytest.mark.asyncio
    async def test_unknown_group(self, service, alice):
        with pytest.raises(NotFound):
            await service.create_note(alice, uuid.uuid4(), NoteCreate(text="hi"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "    ", "x" * 5001])
    async def test_text_validated(self, service, alice, team, text):
        with pytest.raises(ValidationFailed):
            await service.create_note(alice, team.id, NoteCreate.model_construct(text=text))


class TestEditAndDelete:
    @pytest.mark.asyncio
    async def test_author_edits(self, service, bob, team):
        note = await service.create_note(bob, team.id, NoteCreate(text="draft"))

        updated = await service.update_note(bob, str(note.id), NoteUpdate(text=" final "))

        assert updated.id == note.id
        assert updated.text == "final"
        assert updated.updated_at >= note.updated_at
        notes = await service.list_group_notes(bob, team.id)
        assert [n.text for n in notes] == ["final"]

    @pytest.mark.asyncio
    async def test_group_owner_cannot_edit_members_note(self, service, alice, bob, team):
        note = await service.create_note(bob, team.id, NoteCreate(text="bob's"))

        with pytest.raises(NotFound) as exc:
            await service.update_note(alice, note.id, NoteUpdate(text="hijacked"))
        assert exc.value.message == "Note not found or you are not authorized to edit it"

        with pytest.raises(NotFound) as exc:
            await service.delete_note(alice, note.id)
        assert exc.value.message == "Note not found or you are not authorized to delete it"

        notes = await service.list_group_notes(alice, team.id)
        assert [n.text for n in notes] == ["bob's"]

    @pytest.mark.asyncio
    async def test_author_deletes(self, service, alice, team):
        note = await service.create_note(alice, team.id, NoteCreate(text="temp"))

        await service.delete_note(alice, note.id)

        assert await service.list_group_notes(alice, team.id) == []
        with pytest.raises(NotFound):
            await service.delete_note(alice, note.id)

    @pytest.mark.asyncio
    async def test_edit_rejects_blank_text(self, service, alice, team):
        note = await service.create_note(alice, team.id, NoteCreate(text="keep"))

        with pytest.raises(ValidationFailed):
            await service.update_note(alice, note.id, NoteUpdate.model_construct(text="   "))

    @pytest.mark.asyncio
    async def test_malformed_note_id(self, service, alice):
        with pytest.raises(NotFound):
            await service.update_note(alice, "not-a-uuid", NoteUpdate(text="x"))
        with pytest.raises(NotFound):
            await service.delete_note(alice, "not-a-uuid")

    @pytest.mark.asyncio
    async def test_notes_gone_after_group_delete(self, service, test_session, alice, team):
        note = await service.create_note(alice, team.id, NoteCreate(text="soon gone"))

        await GroupService(test_session).delete_group(alice, team.id)

        with pytest.raises(NotFound):
            await service.update_note(alice, note.id, NoteUpdate(text="still here?"))
        with pytest.raises(NotFound):
            await service.list_group_notes(alice, team.id)


def test_note_to_response_uses_author_display_name():
    class Author:
        id = uuid.uuid4()
        display_name = "alice"

    class Row:
        id = uuid.uuid4()
        text = "hello"
        group_id = uuid.uuid4()
        author = Author()
        created_at = datetime.now(timezone.utc)
        updated_at = datetime.now(timezone.utc)

    response = NoteService(session=None)._note_to_response(Row())

    assert response.author.username == "alice"
    assert response.text == "hello"
