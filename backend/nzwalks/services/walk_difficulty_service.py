"""
NZWalks Backend — Walk Difficulty Service
==========================================

What:  CRUD for the walk difficulty reference data.

Validation runs on both add and update: the code is required and must not
belong to another difficulty. On update the row keeps its own code without
tripping the duplicate check.
"""

import logging
import uuid
from typing import List

from nzwalks.exceptions import NotFoundError
from nzwalks.mapper import mapper
from nzwalks.models import WalkDifficulty
from nzwalks.repositories import Repositories
from nzwalks.schemas import (
    AddWalkDifficultyRequest,
    UpdateWalkDifficultyRequest,
    WalkDifficultyResponse,
)
from nzwalks.validation import validate_walk_difficulty_request

logger = logging.getLogger(__name__)


class WalkDifficultyService:

    async def list_walk_difficulties(self, repos: Repositories) -> List[WalkDifficultyResponse]:
        difficulties = await repos.walk_difficulties.get_all()
        return mapper.map_many(difficulties, WalkDifficultyResponse)

    async def get_walk_difficulty(
        self, repos: Repositories, difficulty_id: uuid.UUID
    ) -> WalkDifficultyResponse:
        difficulty = await repos.walk_difficulties.get_by_id(difficulty_id)
        if difficulty is None:
            raise NotFoundError(resource="walk difficulty", resource_id=str(difficulty_id))
        return mapper.map(difficulty, WalkDifficultyResponse)

    async def add_walk_difficulty(
        self, repos: Repositories, request: AddWalkDifficultyRequest
    ) -> WalkDifficultyResponse:
        errors = await validate_walk_difficulty_request(request, repos.walk_difficulties)
        errors.raise_if_invalid()

        difficulty = mapper.map(request, WalkDifficulty)
        difficulty = await repos.walk_difficulties.add(difficulty)
        logger.info("Walk difficulty created: %s (%s)", difficulty.id, difficulty.code)

        return mapper.map(difficulty, WalkDifficultyResponse)

    async def update_walk_difficulty(
        self,
        repos: Repositories,
        difficulty_id: uuid.UUID,
        request: UpdateWalkDifficultyRequest,
    ) -> WalkDifficultyResponse:
        errors = await validate_walk_difficulty_request(
            request, repos.walk_difficulties, current_id=difficulty_id
        )
        errors.raise_if_invalid()

        difficulty = await repos.walk_difficulties.update(
            difficulty_id, mapper.map(request, WalkDifficulty)
        )
        if difficulty is None:
            raise NotFoundError(resource="walk difficulty", resource_id=str(difficulty_id))
        logger.info("Walk difficulty updated: %s", difficulty.id)

        return mapper.map(difficulty, WalkDifficultyResponse)

    async def delete_walk_difficulty(
        self, repos: Repositories, difficulty_id: uuid.UUID
    ) -> WalkDifficultyResponse:
        difficulty = await repos.walk_difficulties.delete(difficulty_id)
        if difficulty is None:
            raise NotFoundError(resource="walk difficulty", resource_id=str(difficulty_id))
        logger.info("Walk difficulty deleted: %s", difficulty.id)

        return mapper.map(difficulty, WalkDifficultyResponse)


walk_difficulty_service = WalkDifficultyService()
