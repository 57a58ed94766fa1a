"""
ACL - Public API
================
Role × action access control container with pluggable identity and
memory (persistence) backends.
"""

from acl.conf import AclSettings, get_acl_settings
from acl.container import Container
from acl.exceptions import (
    AclError,
    DuplicateAttachmentError,
    UnknownActionError,
    UnknownRoleError,
)
from acl.identity import (
    DjangoUserIdentity,
    GuestIdentity,
    IdentityAdapter,
    StaticIdentity,
)
from acl.manager import AclManager
from acl.memory import DbMemoryStore, MemoryStore, RuntimeMemoryStore
from acl.named_set import NamedSet
from acl.text import slug

__all__ = [
    "AclSettings",
    "get_acl_settings",
    "Container",
    "AclManager",
    "NamedSet",
    "slug",
    "AclError",
    "DuplicateAttachmentError",
    "UnknownActionError",
    "UnknownRoleError",
    "IdentityAdapter",
    "StaticIdentity",
    "GuestIdentity",
    "DjangoUserIdentity",
    "MemoryStore",
    "RuntimeMemoryStore",
    "DbMemoryStore",
]
