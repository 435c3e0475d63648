"""SQL Post Store: durable ordered map from post id to Post over an AsyncSession.

Invariants:
    - Every write commits before returning (durable, one transaction per call)
    - Reads bypass the identity map (populate_existing) so they reflect committed rows
    - values() enumerates in primary-key order
    - SQLAlchemy failures roll back and surface as DatabaseError (core/errors.py)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Post, PostId
from app.core.errors import DatabaseError, ErrorContext
from app.models.post import PostRecord

logger = logging.getLogger(__name__)


class SqlPostStore:
    """PostStore backed by the posts table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _guard(self, operation: str, post_id: str | None = None) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Post store {operation} failed: {e}",
                extra={"operation": operation, "post_id": post_id},
            )
            raise DatabaseError(
                "Post store unavailable", operation,
                ErrorContext(post_id=post_id, operation=operation),
            ) from e

    async def insert(self, post_id: PostId, post: Post) -> None:
        """Upsert: overwrites whatever is stored under post_id."""
        record = PostRecord.from_domain(post)
        record.id = post_id
        async with self._guard("insert", post_id):
            await self._db.merge(record)
            await self._db.commit()

    async def get(self, post_id: PostId) -> Post | None:
        async with self._guard("get", post_id):
            record = await self._db.get(
                PostRecord, post_id, populate_existing=True,
            )
        return record.to_domain() if record else None

    async def remove(self, post_id: PostId) -> Post | None:
        """Delete and return the prior value, or None if absent."""
        async with self._guard("remove", post_id):
            record = await self._db.get(
                PostRecord, post_id, populate_existing=True,
            )
            if record is None:
                return None
            post = record.to_domain()
            await self._db.delete(record)
            await self._db.commit()
        return post

    async def values(self) -> Sequence[Post]:
        async with self._guard("values"):
            result = await self._db.execute(
                select(PostRecord)
                .order_by(PostRecord.id)
                .execution_options(populate_existing=True),
            )
            records = result.scalars().all()
        return [r.to_domain() for r in records]

    async def contains(self, post_id: PostId) -> bool:
        async with self._guard("contains", post_id):
            result = await self._db.execute(
                select(PostRecord.id).where(PostRecord.id == post_id),
            )
            return result.scalar_one_or_none() is not None
