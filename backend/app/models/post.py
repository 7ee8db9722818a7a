"""
Blog Post API — BlogPost SQLAlchemy Model
===========================================

What:  ORM model representing the `blogposts` collection.
How:   Inherits from the shared DeclarativeBase; created at startup by
       `create_tables()`.
Who:   Used only by SQLAlchemyPostStore. Nothing above the store adapter
       touches ORM rows; everything else works with plain documents.

Table Design:
    - id: uuid4 string generated store-side, immutable after insert
    - author: JSON composite {"firstName", "lastName"}, the source of truth
      for the author; the "First Last" display string is computed on read
    - title / content: TEXT, no length limit
    - created: UTC with timezone, defaults to insert time. Any offset the
      caller supplied is converted to UTC before the row is written
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a timestamp to aware UTC.

    Naive values are taken to be UTC already. SQLite drops the offset on
    write, so every `created` is converted before it reaches a row.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class BlogPost(Base):
    """
    A stored blog post.

    Lifecycle:
        1. Inserted with id and created assigned by column defaults
        2. Mutated only through explicit partial updates
        3. Hard-deleted; there is no soft-delete flag
    """

    __tablename__ = "blogposts"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=_new_id,
        comment="Store-assigned identifier (uuid4)",
    )

    author: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        comment="Structured author name: firstName, lastName",
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        comment="When the post was created (UTC)",
    )

    # List returns newest first
    __table_args__ = (
        Index("idx_blogposts_created", created.desc()),
    )

    def to_document(self) -> Dict[str, Any]:
        """Plain-dict form handed to callers of the store."""
        return {
            "id": self.id,
            "author": dict(self.author or {}),
            "title": self.title,
            "content": self.content,
            "created": as_utc(self.created),
        }

    def __repr__(self) -> str:
        return f"<BlogPost(id={self.id}, title='{self.title}', created='{self.created}')>"
