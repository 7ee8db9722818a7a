"""
Blog Post API — Pydantic Request/Response Schemas
===================================================

What:  Pydantic models defining the API contract for the posts resource.
How:   FastAPI validates request bodies against PostCreate / PostUpdate and
       serializes PostView / PostListResponse on the way out.
When:  Validated on every request (input) and serialized on every response (output).

Stored vs public shape:
    The store keeps `author` as {"firstName", "lastName"}. PostView renders it
    as a single "First Last" string. The flattening happens here, at the
    response boundary, and nowhere else.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.post import as_utc


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what clients send
# ══════════════════════════════════════════════════════════════════════════


class AuthorName(BaseModel):
    """Structured author name. Both parts are required whenever `author` is sent."""
    firstName: str = Field(min_length=1, description="Author's first name")
    lastName: str = Field(min_length=1, description="Author's last name")


class PostCreate(BaseModel):
    """
    What:  Body of POST /posts.
    Who:   Validated by FastAPI before PostService.create_post runs.

    `id` is never accepted from the client; unknown fields are ignored.
    """
    author: AuthorName
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    created: Optional[datetime] = Field(
        default=None,
        description="Creation time; the store uses the current time when omitted",
    )

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Offsets are converted to UTC; a timestamp without one is read as UTC."""
        return as_utc(v)

    def to_document(self) -> dict:
        return self.model_dump(exclude_none=True)


class PostUpdate(BaseModel):
    """
    What:  Body of PUT /posts/{id}: a partial update.

    Only fields the client actually sent are written. `id`, when sent,
    must match the path id (checked by PostService). A field that is sent
    must not be null.
    """
    id: Optional[str] = Field(default=None, description="Must equal the path id if present")
    author: Optional[AuthorName] = None
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "PostUpdate":
        for name in ("author", "title", "content"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"'{name}' may be omitted but not null")
        return self

    def changes(self) -> dict:
        """The updatable fields the client supplied, ready for the store."""
        return self.model_dump(include={"author", "title", "content"}, exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns
# ══════════════════════════════════════════════════════════════════════════


class PostView(BaseModel):
    """
    What:  Public representation of a post.
    Who:   Items of GET /posts, body of GET /posts/{id} and POST /posts.

    Example:
        {
            "id": "6f1c...",
            "author": "Ada Lovelace",
            "title": "Notes",
            "content": "...",
            "created": "2024-01-15T12:00:00Z"
        }
    """
    id: str = Field(description="Store-assigned post identifier")
    author: str = Field(description="Author display name: '<firstName> <lastName>'")
    title: str
    content: str
    created: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "PostView":
        author = doc.get("author") or {}
        name = f"{author.get('firstName', '')} {author.get('lastName', '')}".strip()
        return cls(
            id=doc["id"],
            author=name,
            title=doc["title"],
            content=doc["content"],
            created=doc.get("created"),
        )


class PostListResponse(BaseModel):
    """
    What:  Wrapper returned by GET /posts.

    No pagination: `blogposts` holds every stored post.
    """
    blogposts: List[PostView] = Field(description="All stored posts, newest first")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
