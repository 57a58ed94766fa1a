"""
ACL - Ordered Named Set
=======================
Ordered, index-addressable collection of unique slugs.

Used identically for roles and actions. Indices follow insertion order
and compact on removal, so an index is only meaningful against the
current contents of the set.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

from acl.text import slug


class NamedSet:
    def __init__(self, name: str):
        self.name = name
        self._items: list[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._items))

    def __contains__(self, key) -> bool:
        return self.has(key)

    def __repr__(self) -> str:
        return f"NamedSet({self.name!r}, {self._items!r})"

    # ══════════════════════════════════════════════════════════
    # MUTATION
    # ══════════════════════════════════════════════════════════

    def add(self, key) -> "NamedSet":
        """Append a slug unless it already exists."""
        if key is None:
            raise ValueError(f"Can't add empty {self.name} name.")

        key = slug(key)
        if not key:
            raise ValueError(f"Can't add empty {self.name} name.")

        if key not in self._items:
            self._items.append(key)
        return self

    def fill(self, keys: Iterable) -> "NamedSet":
        for key in keys:
            self.add(key)
        return self

    def rename(self, from_key, to_key) -> bool:
        """
        Replace an entry in place, keeping its index.

        Returns False without mutating when the source is missing or
        the target name is already taken.
        """
        from_key = slug(from_key)
        to_key = slug(to_key)

        index = self.search(from_key)
        if index is None or not to_key or self.has(to_key):
            return False

        self._items[index] = to_key
        return True

    def remove(self, key) -> bool:
        """Delete an entry; later entries shift down by one index."""
        index = self.search(key)
        if index is None:
            return False

        del self._items[index]
        return True

    # ══════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════

    def has(self, key) -> bool:
        return self.search(key) is not None

    def exist(self, index) -> bool:
        if isinstance(index, bool):
            return False
        if isinstance(index, str):
            if not index.isdigit():
                return False
            index = int(index)
        if not isinstance(index, int):
            return False
        return 0 <= index < len(self._items)

    def search(self, key) -> Optional[int]:
        if key is None:
            return None
        try:
            return self._items.index(slug(key))
        except ValueError:
            return None

    def get(self) -> tuple[str, ...]:
        return tuple(self._items)

    def filter(self, request: Union[str, Iterable, None]) -> list[str]:
        """Expand a single name or a sequence of names into slugs."""
        if request is None:
            return []
        if isinstance(request, str):
            return [slug(request)]
        return [slug(item) for item in request]
