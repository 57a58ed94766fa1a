"""
ACL Memory - Dotted Key Paths
=============================
"acl_default.roles" → record "acl_default", nested path ("roles",).
"""

from __future__ import annotations

from typing import Any, MutableMapping

_MISSING = object()


def split_key(key: str) -> tuple[str, tuple[str, ...]]:
    if not isinstance(key, str) or not key.strip():
        raise ValueError("memory key must be a non-empty string.")

    parts = key.split(".")
    if any(not part for part in parts):
        raise ValueError(f"memory key '{key}' contains an empty segment.")
    return parts[0], tuple(parts[1:])


def get_path(data: Any, path: tuple[str, ...], default: Any = None) -> Any:
    current = data
    for segment in path:
        if not isinstance(current, MutableMapping):
            return default
        current = current.get(segment, _MISSING)
        if current is _MISSING:
            return default
    return current


def set_path(data: MutableMapping, path: tuple[str, ...], value: Any) -> None:
    """Write value at path, replacing non-mapping intermediates."""
    if not path:
        raise ValueError("path must contain at least one segment.")

    current = data
    for segment in path[:-1]:
        child = current.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            current[segment] = child
        current = child
    current[path[-1]] = value
