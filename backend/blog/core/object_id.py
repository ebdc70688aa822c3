"""Post Identifiers — time-ordered 24-char hex ids and their format check.

Invariants:
    - Generated ids are 24 lowercase hex chars: 8 (unix seconds) + 10 (process
      random) + 6 (counter)
    - Ids generated later sort after ids generated earlier in the same process,
      so ORDER BY id DESC lists newest first
    - is_valid_post_id() accepts either hex case, nothing else

Design Decisions:
    - Layout matches the BSON ObjectId so ids stay portable to a document store
"""

import itertools
import os
import re
import time

from blog.core.domain_types import PostId

_POST_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")
_COUNTER_MAX = 0xFFFFFF

_process_random = os.urandom(5).hex()
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))


def generate_post_id(now: float | None = None) -> PostId:
    """Return a new id for the current second (or `now`, for tests)."""
    seconds = int(time.time() if now is None else now) & 0xFFFFFFFF
    count = next(_counter) & _COUNTER_MAX
    return PostId(f"{seconds:08x}{_process_random}{count:06x}")


def is_valid_post_id(raw: object) -> bool:
    return isinstance(raw, str) and bool(_POST_ID_RE.match(raw))
