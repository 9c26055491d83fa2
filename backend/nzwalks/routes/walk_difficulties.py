"""
NZWalks Backend — Walk Difficulty Route Handlers
=================================================

What:  CRUD endpoints under /WalkDifficulties.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from nzwalks.dependencies import get_repositories
from nzwalks.repositories import Repositories
from nzwalks.schemas import (
    AddWalkDifficultyRequest,
    UpdateWalkDifficultyRequest,
    ValidationErrorResponse,
    WalkDifficultyResponse,
)
from nzwalks.services.walk_difficulty_service import walk_difficulty_service

router = APIRouter(prefix="/WalkDifficulties", tags=["Walk Difficulties"])


@router.get("", response_model=List[WalkDifficultyResponse], summary="List all walk difficulties")
async def list_walk_difficulties(
    repos: Repositories = Depends(get_repositories),
) -> List[WalkDifficultyResponse]:
    return await walk_difficulty_service.list_walk_difficulties(repos)


@router.get(
    "/{difficulty_id:uuid}",
    name="get_walk_difficulty",
    response_model=WalkDifficultyResponse,
    responses={404: {"description": "Walk difficulty not found (empty body)"}},
    summary="Get a walk difficulty by ID",
)
async def get_walk_difficulty(
    difficulty_id: uuid.UUID,
    repos: Repositories = Depends(get_repositories),
) -> WalkDifficultyResponse:
    return await walk_difficulty_service.get_walk_difficulty(repos, difficulty_id)


@router.post(
    "",
    status_code=201,
    response_model=WalkDifficultyResponse,
    responses={400: {"description": "Missing or duplicate code", "model": ValidationErrorResponse}},
    summary="Create a walk difficulty",
)
async def add_walk_difficulty(
    body: AddWalkDifficultyRequest,
    request: Request,
    response: Response,
    repos: Repositories = Depends(get_repositories),
) -> WalkDifficultyResponse:
    result = await walk_difficulty_service.add_walk_difficulty(repos, body)
    response.headers["Location"] = str(
        request.url_for("get_walk_difficulty", difficulty_id=result.id)
    )
    return result


@router.put(
    "/{difficulty_id:uuid}",
    response_model=WalkDifficultyResponse,
    responses={
        400: {"description": "Missing or duplicate code", "model": ValidationErrorResponse},
        404: {"description": "Walk difficulty not found (empty body)"},
    },
    summary="Replace a walk difficulty",
)
async def update_walk_difficulty(
    difficulty_id: uuid.UUID,
    body: UpdateWalkDifficultyRequest,
    repos: Repositories = Depends(get_repositories),
) -> WalkDifficultyResponse:
    return await walk_difficulty_service.update_walk_difficulty(repos, difficulty_id, body)


@router.delete(
    "/{difficulty_id:uuid}",
    response_model=WalkDifficultyResponse,
    responses={404: {"description": "Walk difficulty not found (empty body)"}},
    summary="Delete a walk difficulty and return it",
)
async def delete_walk_difficulty(
    difficulty_id: uuid.UUID,
    repos: Repositories = Depends(get_repositories),
) -> WalkDifficultyResponse:
    return await walk_difficulty_service.delete_walk_difficulty(repos, difficulty_id)
