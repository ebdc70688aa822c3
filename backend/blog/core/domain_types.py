"""Domain Types — identity types, constants, and the explicit auth context.

Invariants:
    - PostId is a 24-char hex string — never pass a raw path string to the store
    - PAGE_SIZE and EXCERPT_LENGTH are fixed, not configurable
    - MUTABLE_FIELDS lists the only fields an update may touch

Design Decisions:
    - NewType over dataclass wrapper for PostId: zero runtime cost
    - AuthContext is frozen and passed into the command layer explicitly,
      so services never read request/session state themselves
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", str)


# ─── Constants ───────────────────────────────────────────────────

PAGE_SIZE = 10
EXCERPT_LENGTH = 350
EXCERPT_SUFFIX = "..."
MUTABLE_FIELDS = ("title", "body", "tags")


# ─── Auth ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AuthContext:
    """Authentication state of the current request.

    enforced=False means the deployment runs without the session gate
    (require_login_for_writes off); check_login() then always passes.
    """
    logged_in: bool
    enforced: bool = True

