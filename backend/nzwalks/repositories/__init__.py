"""
NZWalks Backend — Repositories Package
=======================================

`Repositories` bundles the three entity repositories a request works with.
The walk service needs all three (region and difficulty lookups validate a
walk before it is written), and in the SQL backend they must share one
session so the whole request is one transaction.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from nzwalks.repositories.base import (
    RegionRepository,
    Repository,
    WalkDifficultyRepository,
    WalkRepository,
)
from nzwalks.repositories.memory import (
    InMemoryRegionRepository,
    InMemoryWalkDifficultyRepository,
    InMemoryWalkRepository,
)
from nzwalks.repositories.sql import (
    SqlRegionRepository,
    SqlWalkDifficultyRepository,
    SqlWalkRepository,
)

__all__ = [
    "RegionRepository",
    "Repositories",
    "Repository",
    "WalkDifficultyRepository",
    "WalkRepository",
]


@dataclass
class Repositories:
    regions: RegionRepository
    walks: WalkRepository
    walk_difficulties: WalkDifficultyRepository

    @classmethod
    def for_session(cls, session: AsyncSession) -> "Repositories":
        """SQL repositories sharing one request-scoped session."""
        return cls(
            regions=SqlRegionRepository(session),
            walks=SqlWalkRepository(session),
            walk_difficulties=SqlWalkDifficultyRepository(session),
        )

    @classmethod
    def in_memory(cls) -> "Repositories":
        """A fresh, empty set of in-memory repositories."""
        return cls(
            regions=InMemoryRegionRepository(),
            walks=InMemoryWalkRepository(),
            walk_difficulties=InMemoryWalkDifficultyRepository(),
        )
