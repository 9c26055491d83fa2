"""
NZWalks Backend — Walk SQLAlchemy Model
========================================

What:  ORM model for the `walks` table.

Relationships:
    walks.region_id          → regions.id            (many-to-one)
    walks.walk_difficulty_id → walk_difficulties.id  (many-to-one)

    Both foreign keys cascade on delete: removing a region or a difficulty
    removes the walks that depend on it. Existence of both targets is
    checked by the walk service before every write.
"""

import uuid

from sqlalchemy import Float, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from nzwalks.database import Base


class Walk(Base):
    """A named walking track inside a region."""

    __tablename__ = "walks"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Kilometres; must be strictly positive
    length: Mapped[float] = mapped_column(Float, nullable=False)

    region_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("regions.id", ondelete="CASCADE"),
        nullable=False,
    )

    walk_difficulty_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("walk_difficulties.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_walks_region_id", "region_id"),
        Index("idx_walks_walk_difficulty_id", "walk_difficulty_id"),
    )

    def __repr__(self) -> str:
        return f"<Walk(id={self.id}, name='{self.name}', length={self.length})>"
