"""
ACL Memory - Public API
=======================
"""

from acl.memory.db_provider import DbMemoryStore
from acl.memory.provider import MemoryStore, RuntimeMemoryStore

__all__ = [
    "MemoryStore",
    "RuntimeMemoryStore",
    "DbMemoryStore",
]
