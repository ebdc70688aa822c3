"""Post Listing — page arithmetic and excerpt shaping for GET /api/posts.

Invariants:
    - A missing or empty page means page 1; anything not an integer, or
      below 1, raises InvalidPageError before any store access
    - skip = (page - 1) * PAGE_SIZE, limit = PAGE_SIZE
    - last_page = ceil(count / PAGE_SIZE); 0 when the collection is empty
    - Excerpts cut body only when it is longer than EXCERPT_LENGTH
"""

import math

from blog.core.domain_types import EXCERPT_LENGTH, EXCERPT_SUFFIX, PAGE_SIZE
from blog.core.errors import InvalidPageError


def parse_page(raw: str | None) -> int:
    """Page number from the raw query string value."""
    if not raw:
        return 1
    try:
        return int(raw, 10)
    except ValueError:
        raise InvalidPageError(raw)


def page_window(page: int) -> tuple[int, int]:
    """Return (skip, limit) for a 1-based page number."""
    if page < 1:
        raise InvalidPageError(page)
    return (page - 1) * PAGE_SIZE, PAGE_SIZE


def last_page(count: int) -> int:
    return math.ceil(count / PAGE_SIZE)


def excerpt_body(body: str) -> str:
    if len(body) <= EXCERPT_LENGTH:
        return body
    return body[:EXCERPT_LENGTH] + EXCERPT_SUFFIX


def to_excerpt(post: dict) -> dict:
    """Copy of a post dict with its body shortened for list views."""
    return {**post, "body": excerpt_body(post["body"])}
