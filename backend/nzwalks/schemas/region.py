"""
NZWalks Backend — Region Schemas
=================================

AddRegionRequest / UpdateRegionRequest carry every mutable field; updates
overwrite the whole row, so there is no partial-update shape.
Business rules (required code and name, non-negative population) are
enforced by `nzwalks.validation`, not here, so that all violations are
reported together.
"""

import uuid

from pydantic import Field

from nzwalks.schemas.common import CamelModel


class AddRegionRequest(CamelModel):
    code: str = Field(description="Short region code, e.g. 'AKL'")
    name: str = Field(description="Display name")
    area: float = Field(description="Area in square kilometres")
    latitude: float
    longitude: float
    population: int


class UpdateRegionRequest(CamelModel):
    code: str = Field(description="Short region code, e.g. 'AKL'")
    name: str = Field(description="Display name")
    area: float = Field(description="Area in square kilometres")
    latitude: float
    longitude: float
    population: int


class RegionResponse(CamelModel):
    """Region as returned by every /Regions endpoint."""
    id: uuid.UUID = Field(description="Unique region identifier (UUID)")
    code: str
    name: str
    area: float
    latitude: float
    longitude: float
    population: int
