"""
Blog Post API — Posts Route Handlers
======================================

What:  Handles the five operations of the /posts resource.
How:   Extracts path params and validated bodies, delegates to PostService,
       sets status codes and headers.

Route table:
    GET    /posts        → 200 {"blogposts": [PostView, ...]}
    GET    /posts/{id}   → 200 PostView | 404
    POST   /posts        → 201 PostView (+ Location header) | 400
    PUT    /posts/{id}   → 204 empty | 400 | 404
    DELETE /posts/{id}   → 204 empty (also for unknown ids)
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.post import (
    ErrorResponse,
    PostCreate,
    PostListResponse,
    PostUpdate,
    PostView,
)
from app.services.post_service import post_service
from app.services.sql_post_store import SQLAlchemyPostStore
from app.services.store_base import PostStore

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/posts", tags=["Posts"])


def get_post_store(db: AsyncSession = Depends(get_db_session)) -> PostStore:
    """Request-scoped post store bound to this request's session."""
    return SQLAlchemyPostStore(db)


@router.get(
    "",
    response_model=PostListResponse,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List all blog posts",
)
async def list_posts(
    response: Response,
    store: PostStore = Depends(get_post_store),
) -> PostListResponse:
    """
    Return every stored post. There is no pagination; X-Total-Count
    carries the number of items returned.
    """
    result = await post_service.list_posts(store)
    response.headers["X-Total-Count"] = str(len(result.blogposts))
    return result


@router.get(
    "/{post_id}",
    response_model=PostView,
    responses={
        404: {"description": "Post not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Get a single blog post",
)
async def get_post(
    post_id: str,
    store: PostStore = Depends(get_post_store),
) -> PostView:
    return await post_service.get_post(store, post_id)


@router.post(
    "",
    response_model=PostView,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid post body", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create a blog post",
)
async def create_post(
    payload: PostCreate,
    response: Response,
    store: PostStore = Depends(get_post_store),
) -> PostView:
    """
    Create a post from a body carrying author.firstName, author.lastName,
    title and content. `created` is optional.
    """
    view = await post_service.create_post(store, payload)
    response.headers["Location"] = f"{router.prefix}/{view.id}"
    return view


@router.put(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Invalid body or id mismatch", "model": ErrorResponse},
        404: {"description": "Post not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Partially update a blog post",
)
async def update_post(
    post_id: str,
    payload: PostUpdate,
    store: PostStore = Depends(get_post_store),
) -> Response:
    """
    Change only the fields present in the body. A body `id`, if sent,
    must equal the path id.
    """
    await post_service.update_post(store, post_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="Delete a blog post",
)
async def delete_post(
    post_id: str,
    store: PostStore = Depends(get_post_store),
) -> Response:
    await post_service.delete_post(store, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
