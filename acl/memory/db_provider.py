"""
ACL Memory - DB-backed Store
============================
One MemoryRecord row per top-level key; nested keys live in its JSON value.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import transaction

from acl.memory.paths import get_path, set_path, split_key

logger = logging.getLogger("acl.memory")


class DbMemoryStore:
    def get(self, key: str, default: Any = None) -> Any:
        record, path = split_key(key)

        from acl.memory_store.models import MemoryRecord

        row = MemoryRecord.objects.filter(name=record).first()
        if row is None:
            return default
        return get_path(row.value, path, default)

    def put(self, key: str, value: Any) -> None:
        record, path = split_key(key)

        from acl.memory_store.models import MemoryRecord

        with transaction.atomic():
            row = (
                MemoryRecord.objects.select_for_update()
                .filter(name=record)
                .first()
            )
            if row is None:
                row = MemoryRecord(name=record, value={})

            if not path:
                row.value = value
            else:
                current = row.value if isinstance(row.value, dict) else {}
                set_path(current, path, value)
                row.value = current

            row.save()

        logger.debug(f"DB memory write: {key}")
