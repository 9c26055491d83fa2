"""
NZWalks Backend — Walk Route Handlers
======================================

What:  CRUD endpoints under /Walks.

Both POST and PUT validate the referenced region and walk difficulty before
writing; an unknown reference is reported as a 400 field error under
`regionId` / `walkDifficultyId`.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from nzwalks.dependencies import get_repositories
from nzwalks.repositories import Repositories
from nzwalks.schemas import (
    AddWalkRequest,
    ErrorResponse,
    UpdateWalkRequest,
    ValidationErrorResponse,
    WalkResponse,
)
from nzwalks.services.walk_service import walk_service

router = APIRouter(prefix="/Walks", tags=["Walks"])


@router.get("", response_model=List[WalkResponse], summary="List all walks")
async def list_walks(repos: Repositories = Depends(get_repositories)) -> List[WalkResponse]:
    return await walk_service.list_walks(repos)


@router.get(
    "/{walk_id:uuid}",
    name="get_walk",
    response_model=WalkResponse,
    responses={404: {"description": "Walk not found (empty body)"}},
    summary="Get a walk by ID",
)
async def get_walk(
    walk_id: uuid.UUID,
    repos: Repositories = Depends(get_repositories),
) -> WalkResponse:
    return await walk_service.get_walk(repos, walk_id)


@router.post(
    "",
    status_code=201,
    response_model=WalkResponse,
    responses={400: {"description": "Validation failed", "model": ValidationErrorResponse}},
    summary="Create a walk",
)
async def add_walk(
    body: AddWalkRequest,
    request: Request,
    response: Response,
    repos: Repositories = Depends(get_repositories),
) -> WalkResponse:
    result = await walk_service.add_walk(repos, body)
    response.headers["Location"] = str(request.url_for("get_walk", walk_id=result.id))
    return result


@router.put(
    "/{walk_id:uuid}",
    response_model=WalkResponse,
    responses={
        400: {"description": "Validation failed", "model": ValidationErrorResponse},
        404: {"description": "Walk not found", "model": ErrorResponse},
    },
    summary="Replace every field of a walk",
)
async def update_walk(
    walk_id: uuid.UUID,
    body: UpdateWalkRequest,
    repos: Repositories = Depends(get_repositories),
) -> WalkResponse:
    return await walk_service.update_walk(repos, walk_id, body)


@router.delete(
    "/{walk_id:uuid}",
    response_model=WalkResponse,
    responses={404: {"description": "Walk not found", "model": ErrorResponse}},
    summary="Delete a walk and return it",
)
async def delete_walk(
    walk_id: uuid.UUID,
    repos: Repositories = Depends(get_repositories),
) -> WalkResponse:
    return await walk_service.delete_walk(repos, walk_id)
