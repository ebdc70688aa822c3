"""Post Service — the command/query layer behind /api/posts.

Invariants:
    - Mutating operations take an explicit AuthContext and check it first
    - list() validates the page before touching the store; an empty tag means no filter
    - read() and update() raise PostNotFoundError for a missing id
    - delete() never raises for a missing id (returns False instead)
    - Store faults arrive as StoreError and are never caught here

Design Decisions:
    - Service depends on the PostRepository protocol, not on SQLAlchemy
    - Last-Page counts the whole collection unless count_filtered is set;
      the unfiltered count is the long-standing API behaviour clients rely on
"""

import logging
from dataclasses import dataclass
from typing import Any

from blog.core.auth import check_login
from blog.core.domain_types import AuthContext, PostId
from blog.core.errors import PostNotFoundError
from blog.core.post_listing import last_page, page_window, to_excerpt
from blog.core.post_patch import extract_patch
from blog.core.repository_protocols import PostRepository

logger = logging.getLogger(__name__)


@dataclass
class PostPage:
    """One page of post excerpts plus the pagination header value."""
    posts: list[dict]
    last_page: int


class PostService:
    def __init__(self, repo: PostRepository, count_filtered: bool = False):
        self._repo = repo
        self._count_filtered = count_filtered

    async def create(
        self, auth: AuthContext, title: str, body: str, tags: list[str],
    ) -> dict:
        check_login(auth)
        post = await self._repo.insert(title, body, tags)
        logger.info("Post created", extra={"post_id": post["id"]})
        return post

    async def list(self, page: int = 1, tag: str | None = None) -> PostPage:
        skip, limit = page_window(page)
        tag = tag or None
        posts = await self._repo.find(tag, skip, limit)
        count = await self._repo.count(tag if self._count_filtered else None)
        return PostPage(
            posts=[to_excerpt(p) for p in posts],
            last_page=last_page(count),
        )

    async def read(self, post_id: PostId) -> dict:
        post = await self._repo.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def update(
        self, auth: AuthContext, post_id: PostId, raw_fields: dict[str, Any],
    ) -> dict:
        check_login(auth)
        post = await self._repo.find_by_id_and_update(
            post_id, extract_patch(raw_fields),
        )
        if post is None:
            raise PostNotFoundError(post_id)
        logger.info("Post updated", extra={"post_id": post_id})
        return post

    async def delete(self, auth: AuthContext, post_id: PostId) -> bool:
        """Delete a post. Returns whether one existed; the API answers 204 either way."""
        check_login(auth)
        removed = await self._repo.find_by_id_and_delete(post_id)
        if removed is None:
            logger.info("Delete of missing post ignored", extra={"post_id": post_id})
            return False
        logger.info("Post deleted", extra={"post_id": post_id})
        return True
