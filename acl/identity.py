"""
ACL - Identity Adapters
=======================
The container only asks two questions of the current principal:
is it anonymous, and which role names does it hold (in order).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence


class IdentityAdapter(Protocol):
    def is_anonymous(self) -> bool:
        ...

    def current_role_names(self) -> Sequence[str]:
        ...


@dataclass(frozen=True)
class StaticIdentity:
    """
    Fixed principal used for bootstrap/tests.

    Anonymous when no subject is given.
    """

    subject: Optional[str] = None
    roles: tuple[str, ...] = ()

    def __post_init__(self):
        if self.subject is not None and (
            not isinstance(self.subject, str) or not self.subject.strip()
        ):
            raise ValueError("subject must be a non-empty string or None.")
        object.__setattr__(self, "roles", tuple(self.roles))

    def is_anonymous(self) -> bool:
        return self.subject is None

    def current_role_names(self) -> tuple[str, ...]:
        return self.roles


class GuestIdentity:
    def is_anonymous(self) -> bool:
        return True

    def current_role_names(self) -> tuple[str, ...]:
        return tuple()


class DjangoUserIdentity:
    """
    Adapter over a django.contrib.auth user.

    Group names act as role names, ordered by group primary key.
    """

    def __init__(self, user):
        self._user = user

    def is_anonymous(self) -> bool:
        return bool(getattr(self._user, "is_anonymous", True))

    def current_role_names(self) -> tuple[str, ...]:
        if self.is_anonymous():
            return tuple()
        return tuple(
            self._user.groups.order_by("pk").values_list("name", flat=True)
        )
