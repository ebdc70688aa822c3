"""Post Patch — turns a raw PATCH body into the fields the store will overwrite.

Invariants:
    - Only MUTABLE_FIELDS survive; id and unknown keys are dropped silently
    - No schema validation: scalars (numbers, booleans) are cast to their
      string form, and a value the store cannot cast (null, object, array
      for a text field) is a StoreError (500), not a 400
    - A bare scalar for tags is stored as a one-element list
"""

from typing import Any

from blog.core.domain_types import MUTABLE_FIELDS
from blog.core.errors import StoreError


def extract_patch(raw: dict[str, Any]) -> dict[str, Any]:
    """Return {field: value} for the mutable fields present in `raw`."""
    patch: dict[str, Any] = {}
    for name in MUTABLE_FIELDS:
        if name not in raw:
            continue
        value = raw[name]
        if name == "tags":
            patch[name] = _cast_tags(value)
        else:
            patch[name] = _cast_text(name, value)
    return patch


def _cast_text(path: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    raise StoreError(
        f"cannot cast {type(value).__name__} value to string at path '{path}'",
        "update",
    )


def _cast_tags(value: Any) -> list[str]:
    if isinstance(value, list):
        return [_cast_text(f"tags.{i}", item) for i, item in enumerate(value)]
    return [_cast_text("tags", value)]
