"""
NZWalks Backend — Region Service
=================================

What:  Orchestrates region CRUD: validate → map → repository → map back.
Who:   Called by the /Regions route handlers.

Error Handling:
    Unknown id    → NotFoundError with no public detail (404, empty body)
    Bad payload   → ValidationError with every field message (400)
    Storage fault → DatabaseError from the repository, propagated (500)
"""

import logging
import uuid
from typing import List

from nzwalks.exceptions import NotFoundError
from nzwalks.mapper import mapper
from nzwalks.models import Region
from nzwalks.repositories import Repositories
from nzwalks.schemas import AddRegionRequest, RegionResponse, UpdateRegionRequest
from nzwalks.validation import validate_region_request

logger = logging.getLogger(__name__)


class RegionService:

    async def list_regions(self, repos: Repositories) -> List[RegionResponse]:
        regions = await repos.regions.get_all()
        return mapper.map_many(regions, RegionResponse)

    async def get_region(self, repos: Repositories, region_id: uuid.UUID) -> RegionResponse:
        region = await repos.regions.get_by_id(region_id)
        if region is None:
            raise NotFoundError(resource="region", resource_id=str(region_id))
        return mapper.map(region, RegionResponse)

    async def add_region(self, repos: Repositories, request: AddRegionRequest) -> RegionResponse:
        """
        Create a region.

        The request is mapped without an id; the repository assigns one and
        the stored row is mapped back for the 201 body.
        """
        validate_region_request(request).raise_if_invalid()

        region = mapper.map(request, Region)
        region = await repos.regions.add(region)
        logger.info("Region created: %s (%s)", region.id, region.code)

        return mapper.map(region, RegionResponse)

    async def update_region(
        self,
        repos: Repositories,
        region_id: uuid.UUID,
        request: UpdateRegionRequest,
    ) -> RegionResponse:
        validate_region_request(request).raise_if_invalid()

        region = await repos.regions.update(region_id, mapper.map(request, Region))
        if region is None:
            raise NotFoundError(resource="region", resource_id=str(region_id))
        logger.info("Region updated: %s", region.id)

        return mapper.map(region, RegionResponse)

    async def delete_region(self, repos: Repositories, region_id: uuid.UUID) -> RegionResponse:
        region = await repos.regions.delete(region_id)
        if region is None:
            raise NotFoundError(resource="region", resource_id=str(region_id))
        logger.info("Region deleted: %s", region.id)

        return mapper.map(region, RegionResponse)


region_service = RegionService()
