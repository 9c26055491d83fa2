"""
NZWalks Backend — Repository Interfaces
========================================

What:  Abstract storage contracts, one per entity.
Why:   Services depend only on these interfaces, so the SQLAlchemy store
       and the in-memory store are interchangeable without touching any
       handler or service code.

Contract (every entity):
    get_all()            → list, empty when there are no rows
    get_by_id(id)        → entity or None ("not found" is not an error)
    add(entity)          → entity with a freshly assigned UUID
    update(id, entity)   → overwrites every non-id field; None if no row
    delete(id)           → the removed entity; None if no row

    WalkDifficultyRepository adds get_by_code(code) for duplicate checks.

Storage faults are raised as DatabaseError and are never turned into None.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from nzwalks.models import Region, Walk, WalkDifficulty

EntityT = TypeVar("EntityT")


class Repository(ABC, Generic[EntityT]):
    """CRUD contract shared by every entity repository."""

    @abstractmethod
    async def get_all(self) -> List[EntityT]:
        ...

    @abstractmethod
    async def get_by_id(self, entity_id: uuid.UUID) -> Optional[EntityT]:
        ...

    @abstractmethod
    async def add(self, entity: EntityT) -> EntityT:
        """Persist a new entity. Any id already set on it is replaced."""
        ...

    @abstractmethod
    async def update(self, entity_id: uuid.UUID, entity: EntityT) -> Optional[EntityT]:
        """Copy every mutable field of `entity` onto the stored row `entity_id`."""
        ...

    @abstractmethod
    async def delete(self, entity_id: uuid.UUID) -> Optional[EntityT]:
        ...


class RegionRepository(Repository[Region]):
    """Storage contract for regions."""


class WalkRepository(Repository[Walk]):
    """Storage contract for walks."""


class WalkDifficultyRepository(Repository[WalkDifficulty]):
    """Storage contract for walk difficulties."""

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[WalkDifficulty]:
        """Exact, case-sensitive code lookup."""
        ...
