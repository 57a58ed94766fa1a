"""
ACL Memory - Store Protocol and Runtime Store
=============================================
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Mapping, Protocol

from acl.memory.paths import get_path, set_path, split_key

logger = logging.getLogger("acl.memory")


class MemoryStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any:
        ...

    def put(self, key: str, value: Any) -> None:
        ...


class RuntimeMemoryStore:
    """
    In-process store used for bootstrap/tests.

    Values are deep-copied on the way in and out.
    """

    def __init__(self, items: Mapping[str, Any] | None = None):
        self._items: dict[str, Any] = copy.deepcopy(dict(items or {}))

    def get(self, key: str, default: Any = None) -> Any:
        record, path = split_key(key)
        if record not in self._items:
            return default
        return copy.deepcopy(get_path(self._items[record], path, default))

    def put(self, key: str, value: Any) -> None:
        record, path = split_key(key)
        value = copy.deepcopy(value)

        if not path:
            self._items[record] = value
        else:
            current = self._items.get(record)
            if not isinstance(current, dict):
                current = {}
                self._items[record] = current
            set_path(current, path, value)

        logger.debug(f"Runtime memory write: {key}")

    def all(self) -> dict[str, Any]:
        return copy.deepcopy(self._items)
