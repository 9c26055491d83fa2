"""
NZWalks Backend — Pydantic Transfer Objects
============================================

What:  The API contract: request bodies and response shapes per entity.
Why:   Kept separate from the ORM models so the wire format can evolve
       independently of the table layout.

JSON keys are camelCase (`regionId`, `walkDifficultyId`). Snake_case keys
are accepted on input as well, which keeps Python callers and tests simple.
"""

from nzwalks.schemas.common import ErrorResponse, HealthResponse, ValidationErrorResponse
from nzwalks.schemas.region import AddRegionRequest, RegionResponse, UpdateRegionRequest
from nzwalks.schemas.walk import AddWalkRequest, UpdateWalkRequest, WalkResponse
from nzwalks.schemas.walk_difficulty import (
    AddWalkDifficultyRequest,
    UpdateWalkDifficultyRequest,
    WalkDifficultyResponse,
)

__all__ = [
    "AddRegionRequest",
    "AddWalkDifficultyRequest",
    "AddWalkRequest",
    "ErrorResponse",
    "HealthResponse",
    "RegionResponse",
    "UpdateRegionRequest",
    "UpdateWalkDifficultyRequest",
    "UpdateWalkRequest",
    "ValidationErrorResponse",
    "WalkDifficultyResponse",
    "WalkResponse",
]
