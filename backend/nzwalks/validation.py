"""
NZWalks Backend — Request Validation Rules
===========================================

What:  Business-rule checks run before any write.
How:   Each routine takes a `FieldErrors` value (or starts a fresh one),
       appends every violation it finds and returns it. Nothing
       short-circuits: a payload with three problems reports three
       problems. The caller decides what to do with the result, normally
       `errors.raise_if_invalid()`.

Field names are the JSON (camelCase) names the client sent, so the 400
body points straight at the offending keys.

Rules:
    Region          code, name required; population not negative
    WalkDifficulty  code required; code not used by another difficulty
    Walk            name required; length > 0; regionId and
                    walkDifficultyId resolve to stored rows
"""

import math
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from nzwalks.exceptions import ValidationError
from nzwalks.repositories import RegionRepository, WalkDifficultyRepository
from nzwalks.schemas import (
    AddRegionRequest,
    AddWalkDifficultyRequest,
    AddWalkRequest,
    UpdateRegionRequest,
    UpdateWalkDifficultyRequest,
    UpdateWalkRequest,
)

RegionRequest = Union[AddRegionRequest, UpdateRegionRequest]
WalkRequest = Union[AddWalkRequest, UpdateWalkRequest]
WalkDifficultyRequest = Union[AddWalkDifficultyRequest, UpdateWalkDifficultyRequest]


@dataclass
class FieldErrors:
    """Accumulated validation messages, field name → messages in the order found."""

    errors: Dict[str, List[str]] = field(default_factory=dict)

    def add(self, field_name: str, message: str) -> "FieldErrors":
        self.errors.setdefault(field_name, []).append(message)
        return self

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def as_dict(self) -> Dict[str, List[str]]:
        return {name: list(messages) for name, messages in self.errors.items()}

    def raise_if_invalid(self) -> None:
        """Raise ValidationError carrying every collected message, if there are any."""
        if not self.is_valid:
            raise ValidationError(errors=self.as_dict())


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_region_request(
    request: RegionRequest,
    errors: Optional[FieldErrors] = None,
) -> FieldErrors:
    errors = errors if errors is not None else FieldErrors()

    if _is_blank(request.code):
        errors.add("code", "Code is required.")
    if _is_blank(request.name):
        errors.add("name", "Name is required.")
    if request.population < 0:
        errors.add("population", "Population cannot be less than zero.")

    return errors


async def validate_walk_difficulty_request(
    request: WalkDifficultyRequest,
    walk_difficulties: WalkDifficultyRepository,
    current_id: Optional[uuid.UUID] = None,
    errors: Optional[FieldErrors] = None,
) -> FieldErrors:
    """
    Check a walk difficulty payload.

    `current_id` is the row being updated; a difficulty may keep its own
    code. On add it is None, so any existing row with the code conflicts.
    """
    errors = errors if errors is not None else FieldErrors()

    if _is_blank(request.code):
        errors.add("code", "Code is required.")
    else:
        existing = await walk_difficulties.get_by_code(request.code)
        if existing is not None and existing.id != current_id:
            errors.add("code", "Code already exists.")

    return errors


async def validate_walk_request(
    request: WalkRequest,
    regions: RegionRepository,
    walk_difficulties: WalkDifficultyRepository,
    errors: Optional[FieldErrors] = None,
) -> FieldErrors:
    """
    Check a walk payload, including both references.

    Up to two reads hit storage here. The references are checked again by
    the database's foreign keys on the SQL backend; a region deleted between
    this check and the write surfaces as a DatabaseError.
    """
    errors = errors if errors is not None else FieldErrors()

    if _is_blank(request.name):
        errors.add("name", "Name is required.")
    # NaN and Infinity bind as floats but are not lengths
    if not math.isfinite(request.length) or request.length <= 0:
        errors.add("length", "Length should be greater than zero.")

    if await regions.get_by_id(request.region_id) is None:
        errors.add("regionId", "RegionId is invalid.")
    if await walk_difficulties.get_by_id(request.walk_difficulty_id) is None:
        errors.add("walkDifficultyId", "WalkDifficultyId is invalid.")

    return errors
