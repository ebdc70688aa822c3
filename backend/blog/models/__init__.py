"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Post is the only aggregate; PostTag rows belong to exactly one Post

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from blog.models.post import Post, PostTag  # noqa: F401
