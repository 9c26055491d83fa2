"""
NZWalks Backend — Walk Service
===============================

What:  CRUD for walks, the one entity with references to other rows.

Write Flow (add and update):
    ┌──────────┐    ┌────────────────────────┐    ┌──────────┐    ┌──────────┐
    │  Request │───▶│  Validate              │───▶│   Map    │───▶│  Store   │
    │  (Route) │    │  name, length,         │    │ to Walk  │    │  (Repo)  │
    └──────────┘    │  region + difficulty   │    └──────────┘    └──────────┘
                    └────────────────────────┘

    Validation reads the region and difficulty repositories, so a write
    costs up to three reads and one write, in sequence.

Not-found on update and delete carries a public detail, so the 404 body
tells the client which resource was missing.
"""

import logging
import uuid
from typing import List

from nzwalks.exceptions import NotFoundError
from nzwalks.mapper import mapper
from nzwalks.models import Walk
from nzwalks.repositories import Repositories
from nzwalks.schemas import AddWalkRequest, UpdateWalkRequest, WalkResponse
from nzwalks.validation import validate_walk_request

logger = logging.getLogger(__name__)

WALK_NOT_FOUND = "Walk with this id was not found"


class WalkService:

    async def list_walks(self, repos: Repositories) -> List[WalkResponse]:
        walks = await repos.walks.get_all()
        return mapper.map_many(walks, WalkResponse)

    async def get_walk(self, repos: Repositories, walk_id: uuid.UUID) -> WalkResponse:
        walk = await repos.walks.get_by_id(walk_id)
        if walk is None:
            raise NotFoundError(resource="walk", resource_id=str(walk_id))
        return mapper.map(walk, WalkResponse)

    async def add_walk(self, repos: Repositories, request: AddWalkRequest) -> WalkResponse:
        errors = await validate_walk_request(request, repos.regions, repos.walk_difficulties)
        errors.raise_if_invalid()

        walk = mapper.map(request, Walk)
        walk = await repos.walks.add(walk)
        logger.info("Walk created: %s in region %s", walk.id, walk.region_id)

        return mapper.map(walk, WalkResponse)

    async def update_walk(
        self,
        repos: Repositories,
        walk_id: uuid.UUID,
        request: UpdateWalkRequest,
    ) -> WalkResponse:
        errors = await validate_walk_request(request, repos.regions, repos.walk_difficulties)
        errors.raise_if_invalid()

        walk = await repos.walks.update(walk_id, mapper.map(request, Walk))
        if walk is None:
            raise NotFoundError(resource="walk", resource_id=str(walk_id), detail=WALK_NOT_FOUND)
        logger.info("Walk updated: %s", walk.id)

        return mapper.map(walk, WalkResponse)

    async def delete_walk(self, repos: Repositories, walk_id: uuid.UUID) -> WalkResponse:
        walk = await repos.walks.delete(walk_id)
        if walk is None:
            raise NotFoundError(resource="walk", resource_id=str(walk_id), detail=WALK_NOT_FOUND)
        logger.info("Walk deleted: %s", walk.id)

        return mapper.map(walk, WalkResponse)


walk_service = WalkService()
