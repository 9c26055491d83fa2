"""
NZWalks Backend — WalkDifficulty SQLAlchemy Model
==================================================

What:  ORM model for the `walk_difficulties` reference table
       (e.g. Easy, Medium, Hard).
Why unique code: the difficulty code is how clients recognise a level; the
       service rejects duplicates before insert and the constraint backs
       that check up at the database.
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from nzwalks.database import Base


class WalkDifficulty(Base):
    """Reference data describing how hard a walk is."""

    __tablename__ = "walk_difficulties"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<WalkDifficulty(id={self.id}, code='{self.code}')>"
