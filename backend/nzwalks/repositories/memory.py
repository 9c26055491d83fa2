"""
NZWalks Backend — In-Memory Repositories
=========================================

What:  Dictionary-backed implementations of the repository interfaces.
When:  REPOSITORY_BACKEND=memory, and throughout the test suite.

Behaviour differences from the SQL store:
    - get_all returns rows in insertion order
    - foreign keys are not enforced and deletes do not cascade
    - data lives for the lifetime of the process only

Every method completes without awaiting, so concurrent requests on one
event loop never observe a half-applied write.
"""

import uuid
from typing import Any, ClassVar, Dict, List, Optional, Type

from nzwalks.models import Region, Walk, WalkDifficulty, mutable_fields
from nzwalks.repositories.base import (
    EntityT,
    RegionRepository,
    Repository,
    WalkDifficultyRepository,
    WalkRepository,
)


class InMemoryRepository(Repository[EntityT]):
    model: ClassVar[Type[Any]]

    def __init__(self) -> None:
        self._rows: Dict[uuid.UUID, EntityT] = {}

    def __len__(self) -> int:
        return len(self._rows)

    async def get_all(self) -> List[EntityT]:
        return list(self._rows.values())

    async def get_by_id(self, entity_id: uuid.UUID) -> Optional[EntityT]:
        return self._rows.get(entity_id)

    async def add(self, entity: EntityT) -> EntityT:
        entity.id = uuid.uuid4()
        self._rows[entity.id] = entity
        return entity

    async def update(self, entity_id: uuid.UUID, entity: EntityT) -> Optional[EntityT]:
        existing = self._rows.get(entity_id)
        if existing is None:
            return None
        for field in mutable_fields(self.model):
            setattr(existing, field, getattr(entity, field))
        return existing

    async def delete(self, entity_id: uuid.UUID) -> Optional[EntityT]:
        return self._rows.pop(entity_id, None)


class InMemoryRegionRepository(InMemoryRepository[Region], RegionRepository):
    model = Region


class InMemoryWalkRepository(InMemoryRepository[Walk], WalkRepository):
    model = Walk


class InMemoryWalkDifficultyRepository(InMemoryRepository[WalkDifficulty], WalkDifficultyRepository):
    model = WalkDifficulty

    async def get_by_code(self, code: str) -> Optional[WalkDifficulty]:
        for difficulty in self._rows.values():
            if difficulty.code == code:
                return difficulty
        return None
