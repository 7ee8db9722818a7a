"""
Blog Post API — SQLAlchemy Post Store
=======================================

What:  PostStore implementation over the `blogposts` table via async SQLAlchemy.
How:   Each method runs one query on the request's AsyncSession and commits
       its own writes. ORM rows never leave this module; callers get dicts.
Who:   Built per request by the `get_post_store` route dependency, and
       directly by the test suite for seeding.

Failure translation:
    Any SQLAlchemyError becomes DatabaseError (original chained via
    ``raise ... from``). The session is rolled back by `get_db_session`.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.post import BlogPost, as_utc
from app.services.store_base import Document, PostStore

logger = logging.getLogger(__name__)

# Fields a caller may write. `id` is store-assigned and never copied in.
WRITABLE_FIELDS = ("author", "title", "content", "created")

# Top-level fields usable as find_one() filter keys
FILTER_FIELDS = ("id", "title", "content", "created")


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Wrap driver failures in DatabaseError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Store operation '%s' failed: %s", operation, str(e))
        raise DatabaseError(
            context={"operation": operation, "error_type": type(e).__name__},
        ) from e


def _writable(doc: Mapping[str, Any]) -> Dict[str, Any]:
    values = {k: doc[k] for k in WRITABLE_FIELDS if k in doc}
    if values.get("created") is not None:
        values["created"] = as_utc(values["created"])
    return values


def _to_row(doc: Mapping[str, Any]) -> BlogPost:
    # A missing or null `created` is left to the column default
    values = {k: v for k, v in _writable(doc).items() if v is not None}
    return BlogPost(**values)


class SQLAlchemyPostStore(PostStore):
    """Async SQLAlchemy implementation of the post document store."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def insert_one(self, doc: Mapping[str, Any]) -> Document:
        row = _to_row(doc)
        with _store_errors("insert_one"):
            self._session.add(row)
            await self._session.commit()
        logger.debug("Inserted post %s", row.id)
        return row.to_document()

    async def insert_many(self, docs: Iterable[Mapping[str, Any]]) -> List[Document]:
        rows = [_to_row(doc) for doc in docs]
        with _store_errors("insert_many"):
            self._session.add_all(rows)
            await self._session.commit()
        logger.debug("Inserted %d posts", len(rows))
        return [row.to_document() for row in rows]

    async def find_all(self) -> List[Document]:
        with _store_errors("find_all"):
            result = await self._session.execute(
                select(BlogPost).order_by(BlogPost.created.desc())
            )
            rows = result.scalars().all()
        return [row.to_document() for row in rows]

    async def find_by_id(self, post_id: str) -> Optional[Document]:
        with _store_errors("find_by_id"):
            row = await self._session.get(BlogPost, post_id)
        return row.to_document() if row is not None else None

    async def find_one(self, filter: Optional[Mapping[str, Any]] = None) -> Optional[Document]:
        query = select(BlogPost)
        for key, value in (filter or {}).items():
            query = query.where(_filter_clause(key, value))
        with _store_errors("find_one"):
            result = await self._session.execute(query.limit(1))
            row = result.scalars().first()
        return row.to_document() if row is not None else None

    async def update_by_id(self, post_id: str, partial: Mapping[str, Any]) -> Optional[Document]:
        with _store_errors("update_by_id"):
            row = await self._session.get(BlogPost, post_id)
            if row is None:
                return None
            for field, value in _writable(partial).items():
                setattr(row, field, value)
            await self._session.commit()
        logger.debug("Updated post %s fields=%s", post_id, sorted(set(partial) & set(WRITABLE_FIELDS)))
        return row.to_document()

    async def delete_by_id(self, post_id: str) -> bool:
        with _store_errors("delete_by_id"):
            result = await self._session.execute(
                delete(BlogPost).where(BlogPost.id == post_id)
            )
            await self._session.commit()
        return (result.rowcount or 0) > 0

    async def count(self) -> int:
        with _store_errors("count"):
            result = await self._session.execute(
                select(func.count()).select_from(BlogPost)
            )
            return result.scalar_one()


def _filter_clause(key: str, value: Any):
    """Equality clause for a find_one() filter key."""
    if "." in key:
        field, sub = key.split(".", 1)
        if field != "author" or sub not in ("firstName", "lastName"):
            raise ValueError(f"Unsupported filter key '{key}'")
        return BlogPost.author[sub].as_string() == value
    if key not in FILTER_FIELDS:
        raise ValueError(f"Unsupported filter key '{key}'")
    if key == "created" and isinstance(value, datetime):
        value = as_utc(value)
    return getattr(BlogPost, key) == value
