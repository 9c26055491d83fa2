"""
NZWalks Backend — Region SQLAlchemy Model
==========================================

What:  ORM model for the `regions` table.
Who:   Stored and loaded by the region repositories; mapped to and from the
       region transfer objects by `nzwalks.mapper`.

Column notes:
    - UUID primary key generated client-side (uuid4) so the in-memory and
      SQL repositories assign identifiers the same way
    - area, latitude, longitude are double precision; no unit conversion
    - population is a BigInteger (country-sized values fit)
"""

import uuid

from sqlalchemy import BigInteger, Float, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from nzwalks.database import Base


class Region(Base):
    """A geographic region that walks belong to."""

    __tablename__ = "regions"

    # Assigned once by the repository on insert; never overwritten by updates
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    code: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    area: Mapped[float] = mapped_column(Float, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    population: Mapped[int] = mapped_column(BigInteger, nullable=False)

    def __repr__(self) -> str:
        return f"<Region(id={self.id}, code='{self.code}', name='{self.name}')>"
