"""
NZWalks Backend — Request Logging Middleware
=============================================

What:  One access-log line per request: method, route, status, duration,
       request id and client address.
How:   The route is the matched template (`/Walks/{walk_id}`), so lines for
       the same endpoint group together regardless of the id. Requests that
       match no route are logged with their raw path.
Why:   uvicorn's access log has no request id and no timing; it is turned
       down to WARNING in main.setup_logging.

Level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from nzwalks.middleware.request_id import request_id_var

logger = logging.getLogger("nzwalks.access")

# Probes hit these every few seconds
QUIET_PATHS = {"/health"}


def route_template(request: Request) -> str:
    """Path template of the route that handled `request`, or the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path_format", request.url.path)


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        route = route_template(request)

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get()

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            route,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "route": route,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
