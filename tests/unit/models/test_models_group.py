"""
Unit tests for Group model.
"""

import uuid

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.pocketnotes.core.models import Group, User, group_members


class TestGroupHelpers:
    @pytest.mark.parametrize(
        "name, initials",
        [
            ("Team Alpha", "TA"),
            ("solo", "S"),
            ("a b c", "AB"),
            ("  spaced   out  ", "SO"),
            ("x1 project", "XP"),
        ],
    )
    def test_compute_initials(self, name, initials):
        assert Group.compute_initials(name) == initials

    @pytest.mark.parametrize("color", ["#FF0000", "#16008b", "#abcdef", "#000000"])
    def test_valid_colors(self, color):
        assert Group.is_valid_color(color) is True

    @pytest.mark.parametrize("color", ["FF0000", "#FFF", "#GG0000", "#FF00000", "", None, "red"])
    def test_invalid_colors(self, color):
        assert Group.is_valid_color(color) is False

    @pytest.mark.parametrize(
        "name, key",
        [("Work", "work"), ("  Équipe ", "équipe"), ("Straße", "strasse"), ("STRASSE", "strasse")],
    )
    def test_make_name_key(self, name, key):
        assert Group.make_name_key(name) == key

    def test_membership_helpers(self):
        owner = User(id=uuid.uuid4(), username="owner", email="o@example.com", password_hash="h")
        member = User(id=uuid.uuid4(), username="member", email="m@example.com", password_hash="h")
        group = Group(name="Team", color="#FF0000", initials="T", owner_id=owner.id)
        group.members = [owner, member]

        assert group.is_owned_by(owner.id)
        assert not group.is_owned_by(member.id)
        assert group.member_ids == [owner.id, member.id]


class TestGroupPersistence:
    @pytest.mark.asyncio
    async def test_create_group_with_members(self, test_session, alice, bob):
        group = Group(name="Team Alpha", color="#16008B", initials="TA", owner_id=alice.id)
        group.members = [alice, bob]
        test_session.add(group)
        await test_session.commit()

        rows = (
            await test_session.execute(
                select(group_members.c.user_id).where(group_members.c.group_id == group.id)
            )
        ).scalars().all()
        assert {str(r) for r in rows} == {str(alice.id), str(bob.id)}
        assert isinstance(group.id, uuid.UUID)

    @pytest.mark.asyncio
    async def test_name_key_defaults_from_name(self, test_session, alice):
        group = Group(name="Équipe Rouge", color="#FF0000", initials="ÉR", owner_id=alice.id)
        test_session.add(group)
        await test_session.commit()

        assert group.name_key == "équipe rouge"

    @pytest.mark.asyncio
    async def test_name_key_unique_per_owner(self, test_session, alice):
        test_session.add(Group(name="ÉQUIPE", color="#FF0000", initials="É", owner_id=alice.id))
        await test_session.commit()

        test_session.add(Group(name="équipe", color="#00FF00", initials="É", owner_id=alice.id))
        with pytest.raises(IntegrityError):
            await test_session.commit()
        await test_session.rollback()

    @pytest.mark.asyncio
    async def test_color_length_enforced(self, test_session, alice):
        test_session.add(Group(name="Bad", color="#FFF", initials="B", owner_id=alice.id))
        with pytest.raises(IntegrityError):
            await test_session.commit()
        await test_session.rollback()

    @pytest.mark.asyncio
    async def test_owner_must_exist(self, test_session):
        test_session.add(Group(name="Orphan", color="#FFFFFF", initials="O", owner_id=uuid.uuid4()))
        with pytest.raises(IntegrityError):
            await test_session.commit()
        await test_session.rollback()
