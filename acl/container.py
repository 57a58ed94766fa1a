"""
ACL - Permission Container
==========================
Roles × actions permission matrix bound to an identity adapter and,
optionally, one memory store.

Responsibilities:
- Own the roles and actions NamedSets ("guest" seeded into roles)
- Store allow/deny entries keyed "{role_index}:{action_index}"
- Resolve decisions: first role (in caller order) with an entry wins,
  deny by default
- Load from / save to the attached memory store under "acl_{name}"

Reads never touch the store. Every mutation syncs immediately.
Not thread-safe: one container per unit of work, or guard externally.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from acl.conf import get_acl_settings
from acl.exceptions import (
    DuplicateAttachmentError,
    UnknownActionError,
    UnknownRoleError,
)
from acl.identity import IdentityAdapter
from acl.memory.provider import MemoryStore
from acl.named_set import NamedSet
from acl.text import slug

logger = logging.getLogger("acl.container")

Names = Union[str, Iterable[str]]


def _saved_name(names, token):
    """Map a saved index onto the saved list; None when out of range."""
    if isinstance(token, str) and token.isdigit() and names:
        index = int(token)
        return names[index] if index < len(names) else None
    return token


class Container:
    """
    Usage:
        acl = Container(identity, "default", memory=RuntimeMemoryStore())
        acl.add_role("member").add_actions(["view", "edit"])
        acl.allow("member", ["view", "edit"])
        acl.deny("guest", "edit")

        acl.can("edit")                       # current principal
        acl.check(["guest", "member"], "edit")  # explicit roles
    """

    def __init__(
        self,
        identity: IdentityAdapter,
        name: str,
        memory: Optional[MemoryStore] = None,
        guest_role: Optional[str] = None,
    ):
        if not name or not isinstance(name, str):
            raise ValueError("ACL name must be a non-empty string.")

        self._identity = identity
        self._name = name
        self._memory: Optional[MemoryStore] = None
        self._guest_role = slug(guest_role or get_acl_settings().guest_role)
        self._roles = NamedSet("roles")
        self._actions = NamedSet("actions")
        self._acl: dict[str, bool] = {}

        self._roles.add(self._guest_role)
        self.attach(memory)

    @property
    def name(self) -> str:
        return self._name

    @property
    def roles(self) -> NamedSet:
        return self._roles

    @property
    def actions(self) -> NamedSet:
        return self._actions

    @property
    def acl(self) -> dict[str, bool]:
        return dict(self._acl)

    @property
    def memory(self) -> Optional[MemoryStore]:
        return self._memory

    @property
    def memory_key(self) -> str:
        return f"acl_{self._name}"

    # ══════════════════════════════════════════════════════════
    # MEMORY ATTACHMENT
    # ══════════════════════════════════════════════════════════

    def attached(self) -> bool:
        return self._memory is not None

    def attach(self, memory: Optional[MemoryStore] = None) -> "Container":
        """
        Bind a memory store, merge its saved state, then save back.

        Only one store may ever be attached.
        """
        if self.attached():
            raise DuplicateAttachmentError(self._name)

        if memory is None:
            return self

        self._memory = memory

        data = {"acl": {}, "actions": [], "roles": []}
        data.update(memory.get(self.memory_key, {}) or {})

        for role in data["roles"] or ():
            self._roles.add(role)

        for action in data["actions"] or ():
            self._actions.add(action)

        # Saved keys index the saved lists, which may differ from the
        # merged order when entries were registered before attaching.
        for key, allow in (data["acl"] or {}).items():
            role, _, action = str(key).partition(":")
            role = _saved_name(data["roles"], role)
            action = _saved_name(data["actions"], action)
            if role is None or action is None:
                continue
            self._assign(role, action, bool(allow))

        logger.info(
            f"ACL '{self._name}' attached: "
            f"{len(self._roles)} roles, {len(self._actions)} actions, "
            f"{len(self._acl)} entries"
        )

        return self.sync()

    def sync(self) -> "Container":
        """Re-apply held entries and persist full state to the store."""
        for key, allow in list(self._acl.items()):
            role, _, action = key.partition(":")
            self._assign(role, action, allow)

        if self._memory is not None:
            key = self.memory_key
            self._memory.put(f"{key}.actions", list(self._actions.get()))
            self._memory.put(f"{key}.roles", list(self._roles.get()))
            self._memory.put(f"{key}.acl", dict(self._acl))

        logger.debug(f"ACL '{self._name}' synced (attached={self.attached()})")
        return self

    # ══════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════

    def can(self, action: str) -> bool:
        """Check action against the current principal's roles."""
        roles: list[str] = []

        if not self._identity.is_anonymous():
            roles = list(self._identity.current_role_names())
        elif self._roles.has(self._guest_role):
            roles = [self._guest_role]

        return self.check(roles, action)

    def check(self, roles: Names, action: str) -> bool:
        """
        Resolve a decision for the given roles.

        Roles are consulted in the given order; the first one holding
        an entry for the action decides. No entry means deny.
        """
        action_key = self._actions.search(action)
        if action_key is None:
            raise UnknownActionError(
                action,
                f"Unable to verify unknown action {action}.",
            )

        for role in self._roles.filter(roles):
            role_key = self._roles.search(role)
            if role_key is None:
                continue

            allow = self._acl.get(f"{role_key}:{action_key}")
            if allow is not None:
                return allow

        return False

    # ══════════════════════════════════════════════════════════
    # PERMISSION CHANGES
    # ══════════════════════════════════════════════════════════

    def allow(self, roles: Names, actions: Names, allow: bool = True) -> "Container":
        """
        Set allow/deny for every role × action pair.

        All roles and actions are validated before anything is written.
        """
        roles = self._roles.filter(roles)
        actions = self._actions.filter(actions)

        for role in roles:
            if not self._roles.has(role):
                raise UnknownRoleError(role)

        for action in actions:
            if not self._actions.has(action):
                raise UnknownActionError(action)

        for role in roles:
            role_key = self._roles.search(role)
            for action in actions:
                self._set_entry(role_key, self._actions.search(action), allow)

        logger.info(
            f"ACL '{self._name}' {'allow' if allow else 'deny'}: "
            f"roles={roles} actions={actions}"
        )

        return self.sync()

    def deny(self, roles: Names, actions: Names) -> "Container":
        return self.allow(roles, actions, False)

    def _resolve(self, items: NamedSet, value) -> Optional[int]:
        if items.exist(value):
            return int(value)
        return items.search(value)

    def _assign(self, role, action, allow: bool = True) -> None:
        """
        Write one entry from an index or a name on either side.

        Unresolvable tokens are skipped so stale saved data never
        breaks loading.
        """
        role_key = self._resolve(self._roles, role)
        action_key = self._resolve(self._actions, action)

        if role_key is None or action_key is None:
            return

        self._set_entry(role_key, action_key, allow)

    def _set_entry(self, role_key: int, action_key: int, allow: bool) -> None:
        self._acl[f"{role_key}:{action_key}"] = bool(allow)

    def _named_entries(self) -> list[tuple[str, str, bool]]:
        roles = self._roles.get()
        actions = self._actions.get()
        entries = []
        for key, allow in self._acl.items():
            role_key, _, action_key = key.partition(":")
            if not (self._roles.exist(role_key) and self._actions.exist(action_key)):
                continue
            entries.append((roles[int(role_key)], actions[int(action_key)], allow))
        return entries

    def _remove(self, items: NamedSet, keys: Names) -> "Container":
        # Removal compacts indices; re-key entries by name so none
        # end up pointing at a neighbour.
        entries = self._named_entries()

        for key in items.filter(keys):
            items.remove(key)

        self._acl = {}
        for role, action, allow in entries:
            role_key = self._roles.search(role)
            action_key = self._actions.search(action)
            if role_key is None or action_key is None:
                continue
            self._set_entry(role_key, action_key, allow)

        return self.sync()

    # ══════════════════════════════════════════════════════════
    # ROLES
    # ══════════════════════════════════════════════════════════

    def add_role(self, role: str) -> "Container":
        self._roles.add(role)
        return self.sync()

    def add_roles(self, roles: Iterable[str]) -> "Container":
        return self.fill_roles(roles)

    def fill_roles(self, roles: Iterable[str]) -> "Container":
        self._roles.fill(roles)
        return self.sync()

    def rename_role(self, from_role: str, to_role: str) -> "Container":
        self._roles.rename(from_role, to_role)
        return self.sync()

    def has_role(self, role: str) -> bool:
        return self._roles.has(role)

    def get_roles(self) -> tuple[str, ...]:
        self.sync()
        return self._roles.get()

    def remove_role(self, role: str) -> "Container":
        return self._remove(self._roles, role)

    def remove_roles(self, roles: Iterable[str]) -> "Container":
        return self._remove(self._roles, roles)

    # ══════════════════════════════════════════════════════════
    # ACTIONS
    # ══════════════════════════════════════════════════════════

    def add_action(self, action: str) -> "Container":
        self._actions.add(action)
        return self.sync()

    def add_actions(self, actions: Iterable[str]) -> "Container":
        return self.fill_actions(actions)

    def fill_actions(self, actions: Iterable[str]) -> "Container":
        self._actions.fill(actions)
        return self.sync()

    def rename_action(self, from_action: str, to_action: str) -> "Container":
        self._actions.rename(from_action, to_action)
        return self.sync()

    def has_action(self, action: str) -> bool:
        return self._actions.has(action)

    def get_actions(self) -> tuple[str, ...]:
        self.sync()
        return self._actions.get()

    def remove_action(self, action: str) -> "Container":
        return self._remove(self._actions, action)

    def remove_actions(self, actions: Iterable[str]) -> "Container":
        return self._remove(self._actions, actions)
