"""
NZWalks Backend — Domain ↔ Transfer Object Mapper
===================================================

What:  Structural, field-by-field conversion between ORM rows and Pydantic
       transfer objects, in both directions.
How:   A profile is registered per (source, destination) pair. Each
       destination field is resolved against the source once, at
       registration time:
         1. explicit correspondence from `fields={dest: source}`
         2. otherwise a source field with the identical name
       and the two field types must agree. Anything unresolved raises
       MappingConfigurationError, so a broken profile stops the app at
       import instead of failing a request.
Who:   The services call `mapper.map` / `mapper.map_many`.

No validation and no computed values live here; Pydantic re-validates the
destination when it is a transfer object.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable

from nzwalks.exceptions import MappingConfigurationError
from nzwalks.models import Region, Walk, WalkDifficulty
from nzwalks.schemas import (
    AddRegionRequest,
    AddWalkDifficultyRequest,
    AddWalkRequest,
    RegionResponse,
    UpdateRegionRequest,
    UpdateWalkDifficultyRequest,
    UpdateWalkRequest,
    WalkDifficultyResponse,
    WalkResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _field_types(cls: type) -> Dict[str, Optional[type]]:
    """Field name → Python type for a Pydantic model or a mapped ORM class."""
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return {
            name: field.annotation if isinstance(field.annotation, type) else None
            for name, field in cls.model_fields.items()
        }

    try:
        orm_mapper = inspect(cls)
    except NoInspectionAvailable:
        raise MappingConfigurationError(
            message=f"{cls.__name__} is neither a Pydantic model nor a mapped ORM class",
            context={"type": cls.__name__},
        )

    types: Dict[str, Optional[type]] = {}
    for attr in orm_mapper.column_attrs:
        try:
            types[attr.key] = attr.columns[0].type.python_type
        except NotImplementedError:
            types[attr.key] = None
    return types


def _compatible(source_type: Optional[type], dest_type: Optional[type]) -> bool:
    if source_type is None or dest_type is None:
        return True
    if source_type is dest_type:
        return True
    # JSON numbers: an integer column may feed a float field
    return dest_type is float and source_type is int


@dataclass(frozen=True)
class MappingProfile:
    """Resolved destination-field → source-field correspondence for one type pair."""
    source: type
    destination: type
    fields: Tuple[Tuple[str, str], ...]


class Mapper:
    """
    Registry of mapping profiles.

    Usage:
        mapper = Mapper()
        mapper.register(Region, RegionResponse)
        mapper.register(AddRegionRequest, Region, ignore=("id",))
        dto = mapper.map(region, RegionResponse)
    """

    def __init__(self) -> None:
        self._profiles: Dict[Tuple[type, type], MappingProfile] = {}

    def register(
        self,
        source: type,
        destination: type,
        fields: Optional[Mapping[str, str]] = None,
        ignore: Iterable[str] = (),
    ) -> MappingProfile:
        """
        Resolve and store the profile for `source` → `destination`.

        Args:
            fields:  explicit destination → source field names
            ignore:  destination fields left unset (e.g. an id the store assigns)

        Raises:
            MappingConfigurationError: a destination field has no source
                counterpart, or the two field types disagree
        """
        explicit = dict(fields or {})
        ignored = set(ignore)
        source_types = _field_types(source)
        dest_types = _field_types(destination)

        unknown = (set(explicit) | ignored) - set(dest_types)
        if unknown:
            raise MappingConfigurationError(
                message=(
                    f"{source.__name__} → {destination.__name__}: "
                    f"unknown destination fields {sorted(unknown)}"
                ),
                context={"fields": sorted(unknown)},
            )

        resolved: List[Tuple[str, str]] = []
        for dest_name, dest_type in dest_types.items():
            if dest_name in ignored:
                continue
            source_name = explicit.get(dest_name, dest_name)
            if source_name not in source_types:
                raise MappingConfigurationError(
                    message=(
                        f"{source.__name__} → {destination.__name__}: "
                        f"no source field for '{dest_name}'"
                    ),
                    context={"field": dest_name},
                )
            if not _compatible(source_types[source_name], dest_type):
                raise MappingConfigurationError(
                    message=(
                        f"{source.__name__}.{source_name} → {destination.__name__}.{dest_name}: "
                        f"type mismatch"
                    ),
                    context={"field": dest_name},
                )
            resolved.append((dest_name, source_name))

        profile = MappingProfile(source=source, destination=destination, fields=tuple(resolved))
        self._profiles[(source, destination)] = profile
        logger.debug(
            "Registered mapping %s → %s (%d fields)",
            source.__name__, destination.__name__, len(resolved),
        )
        return profile

    def map(self, obj: Any, destination: Type[T]) -> T:
        """Build a `destination` instance from `obj` using the registered profile."""
        profile = self._profiles.get((type(obj), destination))
        if profile is None:
            raise MappingConfigurationError(
                message=f"No mapping registered for {type(obj).__name__} → {destination.__name__}",
                context={"source": type(obj).__name__, "destination": destination.__name__},
            )
        values = {dest: getattr(obj, src) for dest, src in profile.fields}
        return destination(**values)

    def map_many(self, objs: Iterable[Any], destination: Type[T]) -> List[T]:
        return [self.map(obj, destination) for obj in objs]


def build_mapper() -> Mapper:
    """Register every profile the services need."""
    m = Mapper()

    m.register(Region, RegionResponse)
    m.register(RegionResponse, Region)
    m.register(AddRegionRequest, Region, ignore=("id",))
    m.register(UpdateRegionRequest, Region, ignore=("id",))

    m.register(WalkDifficulty, WalkDifficultyResponse)
    m.register(WalkDifficultyResponse, WalkDifficulty)
    m.register(AddWalkDifficultyRequest, WalkDifficulty, ignore=("id",))
    m.register(UpdateWalkDifficultyRequest, WalkDifficulty, ignore=("id",))

    m.register(Walk, WalkResponse)
    m.register(WalkResponse, Walk)
    m.register(AddWalkRequest, Walk, ignore=("id",))
    m.register(UpdateWalkRequest, Walk, ignore=("id",))

    return m


# Built at import so a bad profile fails startup
mapper = build_mapper()
