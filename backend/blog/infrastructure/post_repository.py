"""Post Repository — SQLAlchemy implementation of the PostRepository protocol.

Invariants:
    - Every public method commits its own unit of work (one store call per operation)
    - SQLAlchemyError never escapes: it is rolled back and re-raised as StoreError
    - find() orders by id DESC, so newest posts come first
    - find_by_id_and_update() returns the post AFTER the update

Design Decisions:
    - tag filter as EXISTS over post_tags (Post.tag_rows.any): exact, case-sensitive
    - Post dicts, not ORM instances, cross the boundary (core/repository_protocols.py)
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import func, select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.core.domain_types import PostId
from blog.core.errors import StoreError
from blog.models.post import Post, PostTag

logger = logging.getLogger(__name__)


class SqlPostRepository:
    """Post persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _operation(self, name: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            detail = str(e.orig) if isinstance(e, DBAPIError) else str(e)
            logger.error(f"Post store {name} failed: {detail}")
            raise StoreError(detail, name) from e

    async def insert(self, title: str, body: str, tags: list[str]) -> dict:
        async with self._operation("insert"):
            post = Post(title=title, body=body, tags=tags)
            self._db.add(post)
            await self._db.commit()
            return post.to_dict()

    async def find(
        self, tag: str | None, skip: int, limit: int,
    ) -> list[dict]:
        query = select(Post).order_by(Post.id.desc())
        if tag is not None:
            query = query.where(_has_tag(tag))
        query = query.offset(skip).limit(limit)
        async with self._operation("find"):
            result = await self._db.execute(query)
            return [post.to_dict() for post in result.scalars().all()]

    async def count(self, tag: str | None = None) -> int:
        query = select(func.count()).select_from(Post)
        if tag is not None:
            query = query.where(_has_tag(tag))
        async with self._operation("count"):
            result = await self._db.execute(query)
            return result.scalar_one()

    async def find_by_id(self, post_id: PostId) -> dict | None:
        async with self._operation("find_by_id"):
            post = await self._db.get(Post, post_id)
            return post.to_dict() if post else None

    async def find_by_id_and_update(
        self, post_id: PostId, fields: dict[str, Any],
    ) -> dict | None:
        async with self._operation("update"):
            post = await self._db.get(Post, post_id)
            if post is None:
                return None
            for name, value in fields.items():
                setattr(post, name, value)
            await self._db.commit()
            return post.to_dict()

    async def find_by_id_and_delete(self, post_id: PostId) -> dict | None:
        async with self._operation("delete"):
            post = await self._db.get(Post, post_id)
            if post is None:
                return None
            snapshot = post.to_dict()
            await self._db.delete(post)
            await self._db.commit()
            return snapshot


def _has_tag(tag: str):
    return Post.tag_rows.any(PostTag.name == tag)
