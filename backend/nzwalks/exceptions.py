"""
NZWalks Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions raised by services, repositories and
       the mapper.
How:   Each exception carries a message and an optional context dict. Global
       handlers registered in main.py translate them into HTTP responses.

Exception Hierarchy:
    NZWalksError (base)               → 500 Internal Server Error
    ├── ValidationError               → 400 Bad Request, field → [messages]
    ├── NotFoundError                 → 404 Not Found
    ├── DatabaseError                 → 500 Internal Server Error
    └── MappingConfigurationError     → raised at startup, never per request
"""

from typing import Any, Dict, List, Optional


class NZWalksError(Exception):
    """
    Base exception for all NZWalks application errors.

    Attributes:
        message:  Human-readable description, safe to return to clients
        context:  Debug details that are logged but never returned
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NZWalksError):
    """
    Raised when request data breaks one or more field rules.

    HTTP: 400 Bad Request

    `errors` maps the JSON field name to every message collected for it, so
    a client sees all problems with a payload in a single round trip:

        {
            "error": "validation_error",
            "message": "One or more validation errors occurred.",
            "errors": {
                "length": ["Length should be greater than zero."],
                "regionId": ["RegionId is invalid."]
            }
        }
    """

    def __init__(
        self,
        message: str = "One or more validation errors occurred.",
        errors: Optional[Dict[str, List[str]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.errors = errors or {}


class NotFoundError(NZWalksError):
    """
    Raised when no row matches the requested identifier.

    HTTP: 404 Not Found

    Repositories return None for missing rows; services turn that into this
    exception. `detail` is the only text sent to the client. When it is None
    the response has an empty body.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        detail: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
        self.detail = detail


class DatabaseError(NZWalksError):
    """
    Raised when a storage operation fails unexpectedly.

    HTTP: 500 Internal Server Error

    The client only ever sees a generic message. Driver details (SQL,
    constraint names) stay in the context and the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class MappingConfigurationError(NZWalksError):
    """
    Raised when a mapper profile cannot be resolved.

    Profiles are registered at import time, so this surfaces during startup
    (or test collection) rather than while serving a request.
    """

    def __init__(
        self,
        message: str = "Invalid mapping configuration",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
