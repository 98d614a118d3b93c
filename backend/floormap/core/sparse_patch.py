"""Sparse Patch: applies update payloads where empty values mean "leave unchanged".

Invariants:
    - A field whose patch value is None or "" is never written
    - Fields not listed in `allowed` are ignored, whatever the payload says
    - Returns the names of the fields that actually changed (for logging)

Design Decisions:
    - Empty string cannot blank a stored field through an update. This is the
      observed contract of the map/floor/pin update endpoints and is kept on purpose
"""

from typing import Any, Iterable


def is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def apply_sparse_patch(entity: Any, patch: dict, allowed: Iterable[str]) -> list[str]:
    """Write non-empty patch values onto entity; return changed field names."""
    changed = []
    for name in allowed:
        value = patch.get(name)
        if is_empty(value):
            continue
        if getattr(entity, name) != value:
            setattr(entity, name, value)
            changed.append(name)
    return changed
