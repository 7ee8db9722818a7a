"""
Blog Post API — Abstract Post Store Interface
===============================================

What:  Abstract base class defining the contract for the post document store.
How:   Concrete implementations inherit from PostStore and implement every
       coroutine below against a real persistent collection.
Who:   Called by PostService; implemented by SQLAlchemyPostStore.

Contract:
    - Documents are plain dicts:
        {"id", "author": {"firstName", "lastName"}, "title", "content", "created"}
    - The store assigns `id` and defaults `created`; callers never do
    - No validation and no shaping: the store persists what it is given
    - Every method is a single atomic round trip; writes are committed
      before the coroutine returns
    - Driver failures are raised as DatabaseError with the original chained
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional

Document = Dict[str, Any]


class PostStore(ABC):
    """
    Abstract interface over a persistent collection of post documents.

    Implementations:
        - SQLAlchemyPostStore: async SQLAlchemy (PostgreSQL or SQLite)
    """

    @abstractmethod
    async def insert_one(self, doc: Mapping[str, Any]) -> Document:
        """
        Persist a new post.

        Returns:
            The stored document, including the assigned `id` and `created`.
        """
        ...

    @abstractmethod
    async def insert_many(self, docs: Iterable[Mapping[str, Any]]) -> List[Document]:
        """Persist several posts in one commit. Returns them in input order."""
        ...

    @abstractmethod
    async def find_all(self) -> List[Document]:
        """Every stored post, newest `created` first."""
        ...

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Document]:
        """The post with this id, or None."""
        ...

    @abstractmethod
    async def find_one(self, filter: Optional[Mapping[str, Any]] = None) -> Optional[Document]:
        """
        First post matching an equality filter, or None.

        Args:
            filter: Field → value. Keys are top-level fields or dotted
                    author paths ("author.firstName"). None or {} matches
                    any post.

        Raises:
            ValueError: A filter key names a field the store does not have.
        """
        ...

    @abstractmethod
    async def update_by_id(self, post_id: str, partial: Mapping[str, Any]) -> Optional[Document]:
        """
        Overwrite only the fields present in `partial`.

        Returns:
            The updated document, or None when no post has this id.
        """
        ...

    @abstractmethod
    async def delete_by_id(self, post_id: str) -> bool:
        """
        Remove a post. Deleting an unknown id is a no-op.

        Returns:
            True if a post was removed, False if none existed.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Total number of stored posts."""
        ...
