"""
NZWalks Backend — Region Route Handlers
========================================

What:  CRUD endpoints under /Regions.
How:   Each handler delegates to `region_service`; errors are raised as
       application exceptions and rendered by the global handlers.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from nzwalks.dependencies import get_repositories
from nzwalks.repositories import Repositories
from nzwalks.schemas import (
    AddRegionRequest,
    ErrorResponse,
    RegionResponse,
    UpdateRegionRequest,
    ValidationErrorResponse,
)
from nzwalks.services.region_service import region_service

router = APIRouter(prefix="/Regions", tags=["Regions"])


@router.get(
    "",
    response_model=List[RegionResponse],
    summary="List all regions",
)
async def list_regions(repos: Repositories = Depends(get_repositories)) -> List[RegionResponse]:
    return await region_service.list_regions(repos)


@router.get(
    "/{region_id:uuid}",
    name="get_region",
    response_model=RegionResponse,
    responses={404: {"description": "Region not found (empty body)"}},
    summary="Get a region by ID",
)
async def get_region(
    region_id: uuid.UUID,
    repos: Repositories = Depends(get_repositories),
) -> RegionResponse:
    return await region_service.get_region(repos, region_id)


@router.post(
    "",
    status_code=201,
    response_model=RegionResponse,
    responses={400: {"description": "Validation failed", "model": ValidationErrorResponse}},
    summary="Create a region",
)
async def add_region(
    body: AddRegionRequest,
    request: Request,
    response: Response,
    repos: Repositories = Depends(get_repositories),
) -> RegionResponse:
    """Creates a region and points the Location header at GET /Regions/{id}."""
    result = await region_service.add_region(repos, body)
    response.headers["Location"] = str(request.url_for("get_region", region_id=result.id))
    return result


@router.put(
    "/{region_id:uuid}",
    response_model=RegionResponse,
    responses={
        400: {"description": "Validation failed", "model": ValidationErrorResponse},
        404: {"description": "Region not found (empty body)"},
    },
    summary="Replace every field of a region",
)
async def update_region(
    region_id: uuid.UUID,
    body: UpdateRegionRequest,
    repos: Repositories = Depends(get_repositories),
) -> RegionResponse:
    return await region_service.update_region(repos, region_id, body)


@router.delete(
    "/{region_id:uuid}",
    response_model=RegionResponse,
    responses={
        404: {"description": "Region not found (empty body)"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a region and return it",
)
async def delete_region(
    region_id: uuid.UUID,
    repos: Repositories = Depends(get_repositories),
) -> RegionResponse:
    return await region_service.delete_region(repos, region_id)
