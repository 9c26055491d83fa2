"""
NZWalks Backend — Shared Schema Pieces
=======================================

What:  The camelCase base model plus the error and health response shapes
       used by every router.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every transfer object.

    alias_generator:  serializes `region_id` as `regionId`
    populate_by_name: also accepts `region_id` on input
    from_attributes:  allows validation straight from ORM rows
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class ErrorResponse(BaseModel):
    """
    Standard error body.

    error:      machine-readable code ("not_found", "server_error", ...)
    message:    human-readable description
    request_id: correlation id, also sent as the X-Request-ID header
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class ValidationErrorResponse(ErrorResponse):
    """400 body: every collected message, keyed by JSON field name."""
    errors: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Field name → list of validation messages",
    )


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    repository_backend: str = Field(description="Active storage backend: sql, memory")
    database: str = Field(description="Database connectivity: connected, disconnected, unused")
    uptime_seconds: float = Field(description="Seconds since service started")
