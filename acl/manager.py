"""
ACL - Container Manager
=======================
Keeps one Container per ACL name, all bound to the same identity.

Usage:
    manager = AclManager(identity)
    acl = manager.make("backend", memory=DbMemoryStore())

    manager.register(lambda acl: acl.add_role("admin"))  # default ACL

    manager.finish()  # sync everything, forget cached containers
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, Dict, Optional, Union

from acl.conf import get_acl_settings
from acl.container import Container
from acl.identity import IdentityAdapter
from acl.memory.provider import MemoryStore

logger = logging.getLogger("acl.manager")


class AclManager:
    def __init__(
        self,
        identity: IdentityAdapter,
        default_name: Optional[str] = None,
    ):
        self._identity = identity
        self._default_name = default_name or get_acl_settings().default_name
        self._containers: Dict[str, Container] = {}
        self._lock = Lock()

    @property
    def default_name(self) -> str:
        return self._default_name

    def make(
        self,
        name: Optional[str] = None,
        memory: Optional[MemoryStore] = None,
    ) -> Container:
        """
        Return the container for name, creating it on first use.

        A store passed for an existing, unattached container is attached.
        """
        name = name or self._default_name

        with self._lock:
            container = self._containers.get(name)
            if container is None:
                container = Container(self._identity, name, memory)
                self._containers[name] = container
                logger.info(f"ACL '{name}' created (attached={container.attached()})")
                return container

        if memory is not None and container.memory is not memory:
            container.attach(memory)
        return container

    def register(
        self,
        name: Union[str, Callable[[Container], None], None] = None,
        callback: Optional[Callable[[Container], None]] = None,
    ) -> Container:
        if callable(name):
            callback, name = name, None

        container = self.make(name)
        if callback is not None:
            callback(container)
        return container

    def get(self, name: str) -> Optional[Container]:
        with self._lock:
            return self._containers.get(name)

    def all(self) -> Dict[str, Container]:
        with self._lock:
            return dict(self._containers)

    def finish(self) -> bool:
        """Sync every container and clear the cache."""
        with self._lock:
            containers = list(self._containers.values())
            self._containers = {}

        for container in containers:
            container.sync()

        logger.info(f"ACL manager finished, {len(containers)} container(s) synced")
        return True
