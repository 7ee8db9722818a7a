"""
Blog Post API — Post Service (Resource Handler)
=================================================

What:  Business logic for the posts resource: list, get, create, update, delete.
How:   Turns validated request models into PostStore calls and store
       documents into PostView responses.
Who:   Called by the route handlers in app/routes/posts.py.
When:  Once per request; each operation issues exactly one store call
       (update issues none when the ids mismatch).

Error Handling Strategy:
    - Path/body id mismatch → ValidationError, raised before the store is touched
    - Store returns None for a lookup → NotFoundError
    - Store failures arrive as DatabaseError and propagate untouched
    - Deleting an unknown id is not an error

PostService is stateless: the store is passed into every call, so one
singleton serves all concurrent requests.
"""

import logging

from app.exceptions import NotFoundError, ValidationError
from app.schemas.post import PostCreate, PostListResponse, PostUpdate, PostView
from app.services.store_base import PostStore

logger = logging.getLogger(__name__)


class PostService:
    """
    Resource handler for blog posts.

    Responsibilities:
        - list_posts(): every post, flattened to PostView
        - get_post(): single post with not-found handling
        - create_post(): insert and return the stored post's view
        - update_post(): partial update with id consistency check
        - delete_post(): idempotent hard delete
    """

    async def list_posts(self, store: PostStore) -> PostListResponse:
        """
        Return all posts under the `blogposts` key.

        The result is never truncated: its length equals store.count()
        at the time of the read.
        """
        documents = await store.find_all()
        return PostListResponse(
            blogposts=[PostView.from_document(doc) for doc in documents],
        )

    async def get_post(self, store: PostStore, post_id: str) -> PostView:
        """
        Retrieve a single post by id.

        Raises:
            NotFoundError: No post has this id (→ 404)
            DatabaseError: The store failed (→ 500)
        """
        document = await store.find_by_id(post_id)
        if document is None:
            raise NotFoundError(resource="post", resource_id=post_id)
        return PostView.from_document(document)

    async def create_post(self, store: PostStore, payload: PostCreate) -> PostView:
        """
        Insert a new post. The store assigns `id` and, when omitted, `created`.

        Args:
            store: Post store for this request
            payload: Body already validated against PostCreate

        Returns:
            PostView of the stored post
        """
        document = await store.insert_one(payload.to_document())
        logger.info("Created post %s", document["id"])
        return PostView.from_document(document)

    async def update_post(
        self,
        store: PostStore,
        post_id: str,
        payload: PostUpdate,
    ) -> None:
        """
        Apply a partial update: only fields present in the body change.

        Raises:
            ValidationError: Body `id` is present and differs from `post_id`
            NotFoundError: No post has this id
        """
        if payload.id is not None and payload.id != post_id:
            message = (
                f"Request path id ({post_id}) and request body id "
                f"({payload.id}) must match"
            )
            logger.warning("Update rejected: %s", message)
            raise ValidationError(message=message, field="id")

        changes = payload.changes()
        updated = await store.update_by_id(post_id, changes)
        if updated is None:
            raise NotFoundError(resource="post", resource_id=post_id)
        logger.info("Updated post %s (%s)", post_id, ", ".join(sorted(changes)) or "no fields")

    async def delete_post(self, store: PostStore, post_id: str) -> None:
        """Hard-delete a post. Unknown ids complete as a no-op."""
        removed = await store.delete_by_id(post_id)
        if removed:
            logger.info("Deleted post %s", post_id)
        else:
            logger.info("Delete of unknown post %s treated as no-op", post_id)


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
