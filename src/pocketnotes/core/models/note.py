# Note model: one text entry inside a group
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .user import User

TEXT_MAX_LENGTH = 5000


class Note(BaseModel):
    """Timestamped text posted into a group."""

    __tablename__ = "notes"

    text: Mapped[str] = mapped_column(Text, nullable=False)

    # group deletion removes notes explicitly, the FK cascade is a backstop
    group_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("groups.id", ondelete="CASCADE"), nullable=False
    )
    author_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    author: Mapped["User"] = relationship("User", lazy="selectin")

    __table_args__ = (
        CheckConstraint("length(text) <= 5000", name="ck_notes_text_len"),
        Index("idx_notes_group_created", "group_id", "created_at"),
        Index("idx_notes_author_created", "author_id", "created_at"),
    )

    def __repr__(self) -> str:
        # keep reprs short for long notes
        preview = self.text if len(self.text) <= 30 else (self.text[:30] + "...")
        return f"<Note(text='{preview}', author_id={self.author_id})>"

    def is_authored_by(self, user_id: uuid.UUID) -> bool:
        return self.author_id == user_id
