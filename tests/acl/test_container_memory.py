"""
Tests for acl.container — memory attachment and sync.
"""

from __future__ import annotations

import pytest

from acl.container import Container
from acl.exceptions import DuplicateAttachmentError
from acl.identity import GuestIdentity
from acl.memory.provider import RuntimeMemoryStore


class RecordingStore(RuntimeMemoryStore):
    def __init__(self, items=None):
        super().__init__(items)
        self.writes: list[str] = []

    def put(self, key, value):
        self.writes.append(key)
        super().put(key, value)


class FailingStore(RuntimeMemoryStore):
    def put(self, key, value):
        raise ConnectionError("store unavailable")


def test_attach_without_store_is_noop():
    acl = Container(GuestIdentity(), "default")
    assert acl.attach(None) is acl
    assert not acl.attached()


def test_second_attach_raises():
    acl = Container(GuestIdentity(), "default", RuntimeMemoryStore())
    assert acl.attached()

    with pytest.raises(DuplicateAttachmentError, match="multiple memory"):
        acl.attach(RuntimeMemoryStore())

    # Even None is rejected once attached.
    with pytest.raises(DuplicateAttachmentError):
        acl.attach(None)


def test_attach_saves_default_state_immediately():
    store = RuntimeMemoryStore()
    Container(GuestIdentity(), "default", store)

    assert store.get("acl_default") == {
        "actions": [],
        "roles": ["guest"],
        "acl": {},
    }


def test_sync_writes_three_sub_keys():
    store = RecordingStore()
    acl = Container(GuestIdentity(), "backend", store)
    store.writes.clear()

    acl.sync()

    assert store.writes == [
        "acl_backend.actions",
        "acl_backend.roles",
        "acl_backend.acl",
    ]


def test_every_mutation_syncs_but_reads_do_not():
    store = RecordingStore()
    acl = Container(GuestIdentity(), "default", store)
    acl.add_role("member").add_action("view")
    store.writes.clear()

    acl.has_role("member")
    acl.check("member", "view")
    acl.can("view")
    assert store.writes == []

    acl.allow("member", "view")
    assert store.get("acl_default.acl") == {"1:0": True}


def test_attach_loads_saved_state():
    store = RuntimeMemoryStore(
        {
            "acl_default": {
                "roles": ["guest", "admin"],
                "actions": ["view-post", "edit-post"],
                "acl": {"1:0": True, "1:1": True, "0:0": False},
            }
        }
    )
    acl = Container(GuestIdentity(), "default", store)

    assert acl.get_roles() == ("guest", "admin")
    assert acl.get_actions() == ("view-post", "edit-post")
    assert acl.check("admin", "edit-post") is True
    assert acl.check("guest", "view-post") is False


def test_attach_merges_with_registered_entries():
    store = RuntimeMemoryStore(
        {
            "acl_default": {
                "roles": ["guest", "member"],
                "actions": ["view"],
                "acl": {"1:0": True},
            }
        }
    )
    acl = Container(GuestIdentity(), "default")
    acl.add_roles(["admin"]).add_actions(["edit"])
    acl.allow("admin", "edit")

    acl.attach(store)

    assert acl.get_roles() == ("guest", "admin", "member")
    assert acl.get_actions() == ("edit", "view")
    assert acl.check("member", "view") is True
    assert acl.check("admin", "edit") is True
    assert acl.check("admin", "view") is False
    assert store.get("acl_default.roles") == ["guest", "admin", "member"]


def test_attach_accepts_name_keyed_entries():
    store = RuntimeMemoryStore(
        {
            "acl_default": {
                "roles": ["guest", "editor"],
                "actions": ["publish"],
                "acl": {"editor:publish": True},
            }
        }
    )
    acl = Container(GuestIdentity(), "default", store)

    assert acl.check("editor", "publish") is True
    assert acl.acl == {"1:0": True}


def test_attach_skips_stale_entries():
    store = RuntimeMemoryStore(
        {
            "acl_default": {
                "roles": ["guest"],
                "actions": ["view"],
                "acl": {"7:0": True, "0:9": True, "ghost:view": True, "0:0": True},
            }
        }
    )
    acl = Container(GuestIdentity(), "default", store)

    assert acl.acl == {"0:0": True}
    assert store.get("acl_default.acl") == {"0:0": True}


def test_attach_with_partial_record_uses_defaults():
    store = RuntimeMemoryStore({"acl_default": {"roles": ["member"]}})
    acl = Container(GuestIdentity(), "default", store)

    assert acl.get_roles() == ("guest", "member")
    assert acl.get_actions() == ()


def test_round_trip_reproduces_decisions():
    store = RuntimeMemoryStore()
    acl = Container(GuestIdentity(), "default", store)
    acl.add_roles(["member", "admin"]).add_actions(["view", "edit", "delete"])
    acl.allow("guest", "view")
    acl.allow(["member", "admin"], ["view", "edit"])
    acl.allow("admin", "delete")
    acl.deny("member", "view")

    reloaded = Container(GuestIdentity(), "default", store)

    for role in ("guest", "member", "admin"):
        for action in ("view", "edit", "delete"):
            assert reloaded.check(role, action) == acl.check(role, action)


def test_round_trip_after_removal_keeps_entries_attached_to_names():
    store = RuntimeMemoryStore()
    acl = Container(GuestIdentity(), "default", store)
    acl.add_roles(["member", "admin"]).add_actions(["view"])
    acl.allow("admin", "view")
    acl.remove_role("member")

    reloaded = Container(GuestIdentity(), "default", store)

    assert reloaded.check("admin", "view") is True
    assert reloaded.check("guest", "view") is False


def test_names_are_isolated_in_shared_store():
    store = RuntimeMemoryStore()
    frontend = Container(GuestIdentity(), "frontend", store)
    backend = Container(GuestIdentity(), "backend", store)
    frontend.add_action("view").allow("guest", "view")
    backend.add_action("view")

    assert backend.check("guest", "view") is False
    assert store.get("acl_frontend.acl") == {"0:0": True}
    assert store.get("acl_backend.acl") == {}


def test_store_failure_propagates():
    with pytest.raises(ConnectionError):
        Container(GuestIdentity(), "default", FailingStore())


def test_attach_skips_saved_index_beyond_saved_roles():
    store = RuntimeMemoryStore(
        {
            "acl_default": {
                "roles": ["guest"],
                "actions": ["view"],
                "acl": {"3:0": True},
            }
        }
    )
    acl = Container(GuestIdentity(), "default")
    acl.add_roles(["a", "b", "c"]).add_actions(["view"])

    acl.attach(store)

    assert acl.check("c", "view") is False
    assert acl.acl == {}
    assert store.get("acl_default.acl") == {}
