"""Shared pytest configuration and fixtures for the BPDX test suite.

This module provides:
- Isolation of the config and log directories
- A small community site as host data
- Helper fixtures for building hosts and exporters
"""
import copy
import sys
from pathlib import Path

import pytest


# Add src/ to path so test modules can import the bpdx package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from bpdx.exporters.hooks import ExportHooks  # noqa: E402
from bpdx.host.memory import InMemoryHost  # noqa: E402


ALICE = "alice@example.com"

SITE_DATA = {
    "site_url": "https://example.org",
    "active_components": [
        "settings", "activity", "xprofile", "messages",
        "groups", "friends", "notifications",
    ],
    "users": [
        {"id": 1, "email": ALICE, "display_name": "Alice", "user_nicename": "alice"},
        {"id": 2, "email": "bob@example.com", "display_name": "Bob", "user_nicename": "bob"},
        {"id": 3, "email": "carol@example.com", "display_name": "Carol", "user_nicename": "carol"},
        {"id": 4, "email": "dave@example.com", "display_name": "Dave", "user_nicename": "dave"},
    ],
    "user_meta": {"1": {"notification_activity_new_reply": "no"}},
    "activities": [
        {
            "id": 10, "user_id": 1, "component": "activity", "type": "activity_update",
            "date_recorded": "2018-05-01 10:00:00", "action": "Alice posted an update",
            "content": "Hello world",
        },
        {
            "id": 11, "user_id": 1, "component": "groups", "type": "joined_group",
            "date_recorded": "2018-05-02 10:00:00", "action": "",
        },
        {
            "id": 12, "user_id": 2, "component": "activity", "type": "activity_update",
            "date_recorded": "2018-05-03 10:00:00", "action": "Bob posted an update",
        },
    ],
    "profile_fields": {
        "1": [
            {"field_id": 1, "name": "Name", "value": "Alice"},
            {"field_id": 2, "name": "Interests", "value": "Chess, Go"},
        ]
    },
    "threads": [
        {
            "thread_id": 100,
            "recipients": [{"user_id": 1}, {"user_id": 2}, {"user_id": 3}],
            "messages": [
                {"id": 1000, "sender_id": 1, "subject": "Hi", "message": "First",
                 "date_sent": "2018-05-01 09:00:00"},
                {"id": 1001, "sender_id": 2, "subject": "Re: Hi", "message": "Second",
                 "date_sent": "2018-05-01 09:05:00"},
                {"id": 1002, "sender_id": 3, "subject": "Re: Hi", "message": "Third",
                 "date_sent": "2018-05-01 09:10:00"},
                {"id": 1003, "sender_id": 1, "subject": "Re: Hi", "message": "Fourth",
                 "date_sent": "2018-05-01 09:15:00"},
                {"id": 1004, "sender_id": 2, "subject": "Re: Hi", "message": "Fifth",
                 "date_sent": "2018-05-01 09:20:00"},
            ],
        },
    ],
    "groups": [
        {"id": 5, "name": "Chess Club", "slug": "chess-club", "creator_id": 1},
        {"id": 6, "name": "Go Club", "slug": "go-club", "creator_id": 2},
        {"id": 7, "name": "Book Club", "slug": "book-club", "creator_id": 3},
    ],
    "memberships": [
        {"id": 1, "group_id": 5, "user_id": 1, "is_admin": True, "is_confirmed": True,
         "date_modified": "2018-01-01 00:00:00"},
        {"id": 2, "group_id": 6, "user_id": 1, "inviter_id": 2, "is_confirmed": True,
         "date_modified": "2018-01-02 00:00:00"},
        {"id": 3, "group_id": 7, "user_id": 1, "is_confirmed": False,
         "date_modified": "2018-01-03 00:00:00"},
        {"id": 4, "group_id": 7, "user_id": 1, "inviter_id": 3, "is_confirmed": False,
         "date_modified": "2018-01-04 00:00:00"},
        {"id": 5, "group_id": 5, "user_id": 4, "inviter_id": 1, "is_confirmed": False,
         "date_modified": "2018-01-05 00:00:00"},
    ],
    "friendships": [
        {"id": 1, "initiator_user_id": 1, "friend_user_id": 2, "is_confirmed": True,
         "date_created": "2018-02-01 00:00:00"},
        {"id": 2, "initiator_user_id": 3, "friend_user_id": 1, "is_confirmed": True,
         "date_created": "2018-02-02 00:00:00"},
        {"id": 3, "initiator_user_id": 1, "friend_user_id": 4, "is_confirmed": False,
         "date_created": "2018-02-03 00:00:00"},
        {"id": 4, "initiator_user_id": 2, "friend_user_id": 1, "is_confirmed": False,
         "date_created": "2018-02-04 00:00:00"},
    ],
    "notifications": [
        {"id": 50, "user_id": 1, "item_id": 5, "secondary_item_id": 2,
         "component_name": "groups", "component_action": "new_membership_request",
         "date_notified": "2018-03-01 00:00:00", "is_new": True},
        {"id": 51, "user_id": 1, "item_id": 2, "secondary_item_id": 0,
         "component_name": "xprofile", "component_action": "profile_updated",
         "date_notified": "2018-03-02 00:00:00", "is_new": False},
    ],
}


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Keep config and logs out of the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path


@pytest.fixture
def site_data():
    """Provide a deep copy of the sample site so tests can mutate it."""
    return copy.deepcopy(SITE_DATA)


@pytest.fixture
def host(site_data):
    return InMemoryHost.from_dict(site_data)


@pytest.fixture
def hooks():
    return ExportHooks()


@pytest.fixture
def make_host(site_data):
    """Build a host from the sample site with top-level keys replaced."""
    def _make(**overrides):
        data = copy.deepcopy(site_data)
        data.update(overrides)
        return InMemoryHost.from_dict(data)
    return _make


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (fast, isolated)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (slower)"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their location."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
