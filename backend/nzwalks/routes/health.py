"""
NZWalks Backend — Health Check Route
=====================================

What:  Liveness/readiness probe for Docker and load balancers.
How:   With the SQL backend, runs SELECT 1 against the database. The
       memory backend has no external dependency and reports "unused".

Status levels:
    healthy:   storage reachable (HTTP 200)
    unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Response

from nzwalks import __version__
from nzwalks.config import settings
from nzwalks.database import ping_database
from nzwalks.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check(response: Response) -> HealthResponse:
    db_status = "unused"
    overall = "healthy"

    if settings.repository_backend == "sql":
        try:
            await ping_database()
            db_status = "connected"
        except Exception as e:
            db_status = "disconnected"
            overall = "unhealthy"
            response.status_code = 503
            logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        repository_backend=settings.repository_backend,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
