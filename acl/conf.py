"""
ACL - Settings Access
=====================
Reads the ``ACL`` dict from Django settings, falling back to defaults
when Django is not configured (plain library use).
"""

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


DEFAULT_ACL_NAME = "default"
DEFAULT_GUEST_ROLE = "guest"


@dataclass(frozen=True)
class AclSettings:
    default_name: str = DEFAULT_ACL_NAME
    guest_role: str = DEFAULT_GUEST_ROLE

    def __post_init__(self):
        if not self.default_name or not isinstance(self.default_name, str):
            raise ValueError("ACL DEFAULT_NAME must be a non-empty string.")
        if not self.guest_role or not isinstance(self.guest_role, str):
            raise ValueError("ACL GUEST_ROLE must be a non-empty string.")


def get_acl_settings() -> AclSettings:
    try:
        overrides = getattr(settings, "ACL", None) or {}
    except ImproperlyConfigured:
        return AclSettings()

    return AclSettings(
        default_name=overrides.get("DEFAULT_NAME", DEFAULT_ACL_NAME),
        guest_role=overrides.get("GUEST_ROLE", DEFAULT_GUEST_ROLE),
    )
