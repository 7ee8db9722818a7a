"""
Blog Post API — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the error scenarios of the post API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the post service and the store adapter; caught by global handlers.

Exception Hierarchy:
    BlogPostError (base)
    ├── ValidationError    → 400 Bad Request (client can fix)
    ├── NotFoundError      → 404 Not Found
    └── DatabaseError      → 500 Internal Server Error (opaque store failure)
"""

from typing import Any, Dict, Optional


class BlogPostError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client
                  unless the handler chooses to expose it)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BlogPostError):
    """
    Raised when client input fails validation.

    When:    Missing required fields, wrong field shapes, or a body `id`
             that does not match the path `id` on update.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Request path id (abc) and request body id (xyz) must match",
            "details": {"field": "id"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(BlogPostError):
    """
    Raised when a requested resource does not exist.

    When:    GET or PUT /posts/{id} with an id the store does not know.
    HTTP:    404 Not Found

    The store returns None for missing records; the service converts
    None into this exception so routes stay free of existence checks.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
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


class DatabaseError(BlogPostError):
    """
    Raised when a store operation fails.

    When:    Connection lost mid-query, constraint violation, serialization fault.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The original
    driver exception is chained (``raise ... from``) and logged server-side.
    Store failures are never retried.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
