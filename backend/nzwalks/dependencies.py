"""
NZWalks Backend — FastAPI Dependencies
=======================================

What:  Provides the `Repositories` bundle each route handler works with.
How:   By default the bundle wraps the request's AsyncSession, so commit and
       rollback follow `get_db_session`. The app factory overrides
       `get_repositories` with a process-wide in-memory bundle when
       REPOSITORY_BACKEND=memory; tests override it the same way.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nzwalks.database import get_db_session
from nzwalks.repositories import Repositories


async def get_repositories(db: AsyncSession = Depends(get_db_session)) -> Repositories:
    return Repositories.for_session(db)
