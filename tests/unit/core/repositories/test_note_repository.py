"""Unit tests for NoteRepository."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from src.pocketnotes.core.models import Group
from src.pocketnotes.core.repositories import NoteRepository


@pytest.fixture
async def group(test_session, alice, bob):
    group = Group(name="Chat", color="#ABCDEF", initials="C", owner_id=alice.id)
    group.members = [alice, bob]
    test_session.add(group)
    await test_session.commit()
    return group


@pytest.fixture
def repo(test_session):
    return NoteRepository(test_session)


class TestNoteRepository:
    @pytest.mark.asyncio
    async def test_create_and_get(self, repo, group, alice):
        note = await repo.create_note(
            {"text": "hello", "group_id": group.id, "author_id": alice.id, "author": alice}
        )

        loaded = await repo.get_by_id(note.id)
        assert loaded.text == "hello"
        assert loaded.author.username == "alice"
        assert await repo.get_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_list_oldest_first(self, repo, group, alice, bob):
        base = datetime(2024, 5, 1, tzinfo=timezone.utc)
        second = await repo.create_note(
            {
                "text": "second",
                "group_id": group.id,
                "author_id": bob.id,
                "author": bob,
                "created_at": base + timedelta(minutes=1),
            }
        )
        first = await repo.create_note(
            {
                "text": "first",
                "group_id": group.id,
                "author_id": alice.id,
                "author": alice,
                "created_at": base,
            }
        )

        notes = await repo.list_group_notes(group.id)

        assert [n.id for n in notes] == [first.id, second.id]
        assert [n.author.username for n in notes] == ["alice", "bob"]

    @pytest.mark.asyncio
    async def test_update_bumps_updated_at(self, repo, group, alice):
        note = await repo.create_note(
            {
                "text": "draft",
                "group_id": group.id,
                "author_id": alice.id,
                "author": alice,
                "updated_at": datetime(2020, 1, 1, tzinfo=timezone.utc),
            }
        )

        updated = await repo.update_note(note, {"text": "final"})

        assert updated.text == "final"
        assert updated.updated_at > datetime(2020, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_delete(self, repo, group, alice):
        note = await repo.create_note(
            {"text": "bye", "group_id": group.id, "author_id": alice.id, "author": alice}
        )

        await repo.delete_note(note)

        assert await repo.get_by_id(note.id) is None
