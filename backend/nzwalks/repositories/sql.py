"""
NZWalks Backend — SQLAlchemy Repositories
==========================================

What:  Relational implementations of the repository interfaces on top of a
       per-request AsyncSession.
How:   Writes are flushed, never committed; `get_db_session` owns the
       transaction and commits once the request succeeds.

Query plans:
    get_by_id   → session.get() (identity map first, then PK lookup)
    get_all     → SELECT ... ORDER BY <order column>
    get_by_code → SELECT ... WHERE code = :code (unique index)

Any SQLAlchemyError is logged with context and re-raised as DatabaseError so
the client gets a generic 500 and no SQL leaks into the response.
"""

import logging
import uuid
from typing import Any, ClassVar, List, Optional, Type

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nzwalks.exceptions import DatabaseError
from nzwalks.models import Region, Walk, WalkDifficulty, mutable_fields
from nzwalks.repositories.base import (
    EntityT,
    RegionRepository,
    Repository,
    WalkDifficultyRepository,
    WalkRepository,
)

logger = logging.getLogger(__name__)


class SqlRepository(Repository[EntityT]):
    """
    Generic SQLAlchemy CRUD for one mapped model.

    Subclasses set `model` and `order_by` (the column name used to give
    get_all a deterministic order).
    """

    model: ClassVar[Type[Any]]
    order_by: ClassVar[str] = "id"

    def __init__(self, session: AsyncSession):
        self.session = session

    def _wrap(self, operation: str, exc: SQLAlchemyError, entity_id: Optional[uuid.UUID] = None) -> DatabaseError:
        logger.error(
            "Database error during %s on %s (id=%s): %s",
            operation, self.model.__tablename__, entity_id, str(exc),
        )
        return DatabaseError(
            context={
                "operation": operation,
                "table": self.model.__tablename__,
                "entity_id": str(entity_id) if entity_id else None,
                "error_type": type(exc).__name__,
            },
        )

    async def get_all(self) -> List[EntityT]:
        try:
            result = await self.session.execute(
                select(self.model).order_by(getattr(self.model, self.order_by))
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._wrap("get_all", e)

    async def get_by_id(self, entity_id: uuid.UUID) -> Optional[EntityT]:
        try:
            return await self.session.get(self.model, entity_id)
        except SQLAlchemyError as e:
            raise self._wrap("get_by_id", e, entity_id)

    async def add(self, entity: EntityT) -> EntityT:
        entity.id = uuid.uuid4()
        try:
            self.session.add(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise self._wrap("add", e, entity.id)
        return entity

    async def update(self, entity_id: uuid.UUID, entity: EntityT) -> Optional[EntityT]:
        existing = await self.get_by_id(entity_id)
        if existing is None:
            return None
        for field in mutable_fields(self.model):
            setattr(existing, field, getattr(entity, field))
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            raise self._wrap("update", e, entity_id)
        return existing

    async def delete(self, entity_id: uuid.UUID) -> Optional[EntityT]:
        existing = await self.get_by_id(entity_id)
        if existing is None:
            return None
        try:
            await self.session.delete(existing)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise self._wrap("delete", e, entity_id)
        return existing


class SqlRegionRepository(SqlRepository[Region], RegionRepository):
    model = Region
    order_by = "name"


class SqlWalkRepository(SqlRepository[Walk], WalkRepository):
    model = Walk
    order_by = "name"


class SqlWalkDifficultyRepository(SqlRepository[WalkDifficulty], WalkDifficultyRepository):
    model = WalkDifficulty
    order_by = "code"

    async def get_by_code(self, code: str) -> Optional[WalkDifficulty]:
        try:
            result = await self.session.execute(
                select(WalkDifficulty).where(WalkDifficulty.code == code)
            )
            return result.scalars().first()
        except SQLAlchemyError as e:
            raise self._wrap("get_by_code", e)
