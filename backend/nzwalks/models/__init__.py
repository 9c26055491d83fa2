"""
NZWalks Backend — ORM Models
=============================

Importing this package registers every table on `Base.metadata`, which is
what Alembic autogenerate and `create_schema` rely on.
"""

from typing import List, Type

from sqlalchemy import inspect

from nzwalks.database import Base
from nzwalks.models.region import Region
from nzwalks.models.walk import Walk
from nzwalks.models.walk_difficulty import WalkDifficulty

__all__ = ["Region", "Walk", "WalkDifficulty", "mutable_fields"]


def mutable_fields(model: Type[Base]) -> List[str]:
    """Column attribute names an update may overwrite, i.e. everything but the primary key."""
    mapper = inspect(model)
    primary = {column.key for column in mapper.primary_key}
    return [attr.key for attr in mapper.column_attrs if attr.key not in primary]
