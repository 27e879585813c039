"""Store identifiers.

Every document gets an opaque identifier in canonical UUID form. Anything
else is treated as malformed before it reaches a query.
"""

from typing import Any
from uuid import UUID, uuid4


def new_object_id() -> str:
    return str(uuid4())


def is_valid_object_id(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        return str(UUID(value)) == value.lower()
    except ValueError:
        return False


__all__ = ["is_valid_object_id", "new_object_id"]
