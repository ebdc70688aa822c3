"""Boundary Protocols — contract between the post service and the document store.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Posts cross the boundary as plain dicts: {id, title, body, tags, created_at}
    - Every method raises StoreError (never a driver exception) on store faults

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
    - Method names follow the document-store vocabulary the service speaks
"""

from typing import Any, Protocol

from blog.core.domain_types import PostId


class PostRepository(Protocol):
    """Contract for post persistence — implemented by shell."""
    async def insert(self, title: str, body: str, tags: list[str]) -> dict: ...
    async def find(
        self, tag: str | None, skip: int, limit: int,
    ) -> list[dict]: ...
    async def count(self, tag: str | None = None) -> int: ...
    async def find_by_id(self, post_id: PostId) -> dict | None: ...
    async def find_by_id_and_update(
        self, post_id: PostId, fields: dict[str, Any],
    ) -> dict | None: ...
    async def find_by_id_and_delete(self, post_id: PostId) -> dict | None: ...
