"""Initial schema: users, groups, group members and notes

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from pocketnotes.core.models.types import GUID


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('username', sa.String(length=30), nullable=False, unique=True),
        sa.Column('email', sa.String(length=254), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(username) <= 30', name='ck_users_username_len'),
        sa.CheckConstraint('email = lower(email)', name='ck_users_email_lowercase'),
    )
    op.create_index('idx_users_username', 'users', ['username'])
    op.create_index('idx_users_email', 'users', ['email'])

    op.create_table(
        'groups',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('name', sa.String(length=30), nullable=False),
        sa.Column('name_key', sa.String(length=90), nullable=False),
        sa.Column('color', sa.String(length=7), nullable=False),
        sa.Column('initials', sa.String(length=2), nullable=False),
        sa.Column('owner_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(name) <= 30', name='ck_groups_name_len'),
        sa.CheckConstraint('length(color) = 7', name='ck_groups_color_len'),
        sa.CheckConstraint('length(initials) <= 2', name='ck_groups_initials_len'),
        sa.UniqueConstraint('owner_id', 'name_key', name='uq_groups_owner_name_key'),
    )
    op.create_index('idx_groups_created_at', 'groups', ['created_at'])

    op.create_table(
        'group_members',
        sa.Column('group_id', GUID(), sa.ForeignKey('groups.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
    )
    op.create_index('idx_group_members_user_id', 'group_members', ['user_id'])

    op.create_table(
        'notes',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('group_id', GUID(), sa.ForeignKey('groups.id', ondelete='CASCADE'), nullable=False),
        sa.Column('author_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(text) <= 5000', name='ck_notes_text_len'),
    )
    op.create_index('idx_notes_group_created', 'notes', ['group_id', 'created_at'])
    op.create_index('idx_notes_author_created', 'notes', ['author_id', 'created_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('notes')
    op.drop_table('group_members')
    op.drop_table('groups')
    op.drop_table('users')
