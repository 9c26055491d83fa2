"""
NZWalks Backend — FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers, routers and the
       storage backend; uvicorn serves the module-level `app`
       (uvicorn nzwalks.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip → CORS    │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌────────┐ ┌──────────────────┐ ┌───┐ │
    │  │ /Regions │ │ /Walks │ │ /WalkDifficulties│ │/hc│ │
    │  └──────────┘ └────────┘ └──────────────────┘ └───┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ NotFound→404 │ Database→500       │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, optionally create tables, log readiness
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.responses import Response

from nzwalks import __version__
from nzwalks.config import settings
from nzwalks.database import create_schema, dispose_engine
from nzwalks.dependencies import get_repositories
from nzwalks.exceptions import (
    DatabaseError,
    NotFoundError,
    NZWalksError,
    ValidationError,
)
from nzwalks.middleware.logging import RequestLoggingMiddleware
from nzwalks.middleware.request_id import RequestIDMiddleware, request_id_var
from nzwalks.repositories import Repositories
from nzwalks.routes import health, regions, walk_difficulties, walks

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout
    so container runtimes collect it.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("NZWalks API %s starting (repository backend: %s)",
                __version__, settings.repository_backend)

    if settings.repository_backend == "sql" and settings.db_create_schema:
        await create_schema()
        logger.info("Database schema created")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("NZWalks API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _binding_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    """
    Flatten FastAPI's body/path errors into field → messages.

    `loc` looks like ("body", "regionId"); the last string element is the
    JSON key the client sent. A malformed body as a whole lands under "body".
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        names = [part for part in error.get("loc", ()) if isinstance(part, str)]
        field = names[-1] if names else "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value."))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

        ValidationError         → 400 with field → [messages]
        RequestValidationError  → 400, same shape (body binding failures)
        NotFoundError           → 404, empty body unless a detail is set
        DatabaseError           → 500, generic message
        NZWalksError (base)     → 500
        Exception (fallback)    → 500, stack trace logged

    Responses never include stack traces, SQL or exception context.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get()
        logger.info("[%s] Validation failed on %s: %s", rid, request.url.path, exc.errors)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "errors": exc.errors,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get()
        errors = _binding_errors(exc)
        logger.info("[%s] Request binding failed on %s: %s", rid, request.url.path, errors)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "One or more validation errors occurred.",
                "errors": errors,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get()
        logger.info("[%s] %s", rid, exc.message)
        if exc.detail is None:
            return Response(status_code=404)
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.detail,
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get()
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(NZWalksError)
    async def handle_application_error(request: Request, exc: NZWalksError):
        rid = request_id_var.get()
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get()
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Assemble the application.

    With REPOSITORY_BACKEND=memory one in-memory Repositories bundle is
    created here and shared by every request for the life of the process.
    """
    app = FastAPI(
        title="NZWalks API",
        description="CRUD API for New Zealand regions, walks and walk difficulties.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    if settings.repository_backend == "memory":
        memory_repositories = Repositories.in_memory()
        app.dependency_overrides[get_repositories] = lambda: memory_repositories

    app.include_router(regions.router)
    app.include_router(walks.router)
    app.include_router(walk_difficulties.router)
    app.include_router(health.router)

    return app


app = create_app()
