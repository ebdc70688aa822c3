"""Post Schemas — the create-payload contract and the post response shape.

Invariants:
    - PostCreate: title, body, tags all required; strings are never coerced
      from other JSON types; empty strings rejected
    - Update bodies have no schema (see core/post_patch.py)
    - PostResponse is used for full posts and list excerpts alike
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, StrictStr

TagName = Annotated[StrictStr, Field(min_length=1)]


class PostCreate(BaseModel):
    """Body of POST /api/posts."""
    title: StrictStr = Field(min_length=1)
    body: StrictStr = Field(min_length=1)
    tags: list[TagName]


class PostResponse(BaseModel):
    """Post as returned by the API."""
    id: str
    title: str
    body: str
    tags: list[str]
    created_at: datetime
