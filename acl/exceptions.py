"""
ACL - Exceptions
================
Hard failures surfaced to callers of the ACL container.

Unresolvable tokens during replay or role resolution are NOT errors;
they are skipped silently by the container.
"""

from __future__ import annotations


class AclError(Exception):
    """Base error for ACL operations."""
    pass


class DuplicateAttachmentError(AclError, RuntimeError):
    """A memory store is already attached to the container."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unable to assign multiple memory instances to ACL '{name}'."
        )


class UnknownActionError(AclError, ValueError):
    """Action is not registered in the container."""

    def __init__(self, action: str, message: str | None = None):
        self.action = action
        super().__init__(message or f"Action {action} does not exist.")


class UnknownRoleError(AclError, ValueError):
    """Role is not registered in the container."""

    def __init__(self, role: str):
        self.role = role
        super().__init__(f"Role {role} does not exist.")
