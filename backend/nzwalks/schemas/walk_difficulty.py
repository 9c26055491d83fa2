"""NZWalks Backend — WalkDifficulty Schemas"""

import uuid

from pydantic import Field

from nzwalks.schemas.common import CamelModel


class AddWalkDifficultyRequest(CamelModel):
    code: str = Field(description="Difficulty code, unique, e.g. 'Easy'")


class UpdateWalkDifficultyRequest(CamelModel):
    code: str = Field(description="Difficulty code, unique, e.g. 'Easy'")


class WalkDifficultyResponse(CamelModel):
    id: uuid.UUID
    code: str
