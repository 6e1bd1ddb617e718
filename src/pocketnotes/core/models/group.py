# Groups: named, colored containers of notes with an owner and members
import re
import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, String, Table, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .user import User

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 30
COLOR_PATTERN = re.compile(r"^#[0-9A-F]{6}$", re.IGNORECASE)


# membership link, the owner gets a row too
group_members = Table(
    "group_members",
    BaseModel.metadata,
    Column("group_id", GUID(), ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", GUID(), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Index("idx_group_members_user_id", "user_id"),
)


class Group(BaseModel):
    """Color-tagged group of notes."""

    __tablename__ = "groups"

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    # case-folded trimmed name, unique per owner; casefold can lengthen a string
    name_key: Mapped[str] = mapped_column(
        String(3 * NAME_MAX_LENGTH),
        nullable=False,
        default=lambda context: Group.make_name_key(context.get_current_parameters()["name"]),
    )
    color: Mapped[str] = mapped_column(String(7), nullable=False)  # hex colors
    initials: Mapped[str] = mapped_column(String(2), nullable=False)

    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    members: Mapped[List["User"]] = relationship(
        "User",
        secondary=group_members,
        lazy="selectin",
        doc="Users with read/append access, owner included",
    )

    __table_args__ = (
        CheckConstraint("length(name) <= 30", name="ck_groups_name_len"),
        CheckConstraint("length(color) = 7", name="ck_groups_color_len"),
        CheckConstraint("length(initials) <= 2", name="ck_groups_initials_len"),
        UniqueConstraint("owner_id", "name_key", name="uq_groups_owner_name_key"),
        Index("idx_groups_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Group(name='{self.name}', owner_id={self.owner_id})>"

    @classmethod
    def compute_initials(cls, name: str) -> str:
        """First letter of each word, upper-cased, at most two of them."""
        return "".join(word[0].upper() for word in name.split())[:2]

    @staticmethod
    def make_name_key(name: str) -> str:
        """Key under which two names count as the same group name."""
        return name.strip().casefold()

    @classmethod
    def is_valid_color(cls, color: str) -> bool:
        return bool(COLOR_PATTERN.match(color or ""))

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        return self.owner_id == user_id

    @property
    def member_ids(self) -> List[uuid.UUID]:
        return [member.id for member in self.members]
