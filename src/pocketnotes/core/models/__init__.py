"""
Database models for the Pocket Notes application.

SQLAlchemy ORM models that define the schema:
    - User: account with username/email login and a password hash
    - Group: named, colored container owned by one user, shared with members
    - Note: text entry inside a group, editable only by its author
"""

from .base import BaseModel
from .group import Group, group_members
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Group",
    "group_members",
    "Note",
]
