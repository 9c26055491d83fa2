"""
NZWalks Backend — Walk Schemas
===============================

regionId and walkDifficultyId are checked against storage by the walk
service before any write; a dangling reference is a 400, not a 500.
"""

import uuid

from pydantic import Field

from nzwalks.schemas.common import CamelModel


class AddWalkRequest(CamelModel):
    name: str
    length: float = Field(description="Length in kilometres, must be greater than zero")
    region_id: uuid.UUID
    walk_difficulty_id: uuid.UUID


class UpdateWalkRequest(CamelModel):
    name: str
    length: float = Field(description="Length in kilometres, must be greater than zero")
    region_id: uuid.UUID
    walk_difficulty_id: uuid.UUID


class WalkResponse(CamelModel):
    id: uuid.UUID
    name: str
    length: float
    region_id: uuid.UUID
    walk_difficulty_id: uuid.UUID
