"""
In-memory host.

A HostContext backed by plain data, loadable from a JSON document. It is
what the CLI runs exports against and what the tests use. Orderings
follow the platform defaults: activity and notifications newest first,
threads by most recent message, memberships and friendships by id.

Document layout::

    {
      "site_url": "https://example.org",
      "active_components": ["activity", "groups", ...],
      "translations": {"Activity": "Activité"},
      "users": [{"id": 1, "email": "...", "display_name": "...", "user_nicename": "..."}],
      "user_meta": {"1": {"notification_activity_new_mention": "no"}},
      "group_invites_setting": {"1": true},
      "activities": [{...}],
      "profile_fields": {"1": [{"field_id": 1, "name": "Name", "value": "Jo"}]},
      "threads": [{"thread_id": 1, "recipients": [...], "messages": [...]}],
      "groups": [{...}],
      "memberships": [{...}],
      "friendships": [{...}],
      "notifications": [{...}]
    }
"""

import json
from html import escape
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from bpdx.logging import get_logger
from bpdx.utils.pagination import PaginationHandler
from .context import FriendshipFilter, HostContext, MembershipFilter
from .models import (
    Activity,
    Friendship,
    Group,
    Membership,
    Message,
    Notification,
    ProfileField,
    Recipient,
    Thread,
    User,
)


class InMemoryHost(HostContext):
    """HostContext over in-memory records"""

    def __init__(
        self,
        site_url: str = "https://example.org",
        active_components: Iterable[str] = (),
        users: Iterable[User] = (),
        user_meta: Optional[Dict[int, Dict[str, str]]] = None,
        group_invites_setting: Optional[Dict[int, bool]] = None,
        activities: Iterable[Activity] = (),
        profile_fields: Optional[Dict[int, List[ProfileField]]] = None,
        threads: Iterable[Thread] = (),
        groups: Iterable[Group] = (),
        memberships: Iterable[Membership] = (),
        friendships: Iterable[Friendship] = (),
        notifications: Iterable[Notification] = (),
        translations: Optional[Dict[str, str]] = None,
    ):
        self.site_url = site_url.rstrip("/")
        self.active_components = set(active_components)
        self.users = {u.id: u for u in users}
        self.user_meta = user_meta or {}
        self.group_invites = group_invites_setting or {}
        self.activities = list(activities)
        self.profile_fields = profile_fields or {}
        self.threads = list(threads)
        self.groups = {g.id: g for g in groups}
        self.memberships = list(memberships)
        self.friendships = list(friendships)
        self.notifications = list(notifications)
        self.translations = translations or {}
        self.logger = get_logger("bpdx.host.memory")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InMemoryHost":
        """Build a host from a decoded JSON document"""
        threads = []
        for raw in data.get("threads", []):
            threads.append(
                Thread(
                    thread_id=raw["thread_id"],
                    recipients=[
                        Recipient(**{**r, "thread_id": raw["thread_id"]})
                        for r in raw.get("recipients", [])
                    ],
                    messages=[
                        Message(**{**m, "thread_id": raw["thread_id"]})
                        for m in raw.get("messages", [])
                    ],
                )
            )

        return cls(
            site_url=data.get("site_url", "https://example.org"),
            active_components=data.get("active_components", []),
            users=[User(**u) for u in data.get("users", [])],
            user_meta={
                int(uid): meta for uid, meta in data.get("user_meta", {}).items()
            },
            group_invites_setting={
                int(uid): bool(v)
                for uid, v in data.get("group_invites_setting", {}).items()
            },
            activities=[Activity(**a) for a in data.get("activities", [])],
            profile_fields={
                int(uid): [ProfileField(**f) for f in fields]
                for uid, fields in data.get("profile_fields", {}).items()
            },
            threads=threads,
            groups=[Group(**g) for g in data.get("groups", [])],
            memberships=[Membership(**m) for m in data.get("memberships", [])],
            friendships=[Friendship(**f) for f in data.get("friendships", [])],
            notifications=[Notification(**n) for n in data.get("notifications", [])],
            translations=data.get("translations", {}),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "InMemoryHost":
        """Load a host from a JSON file

        Raises:
            FileNotFoundError: If the file does not exist
            json.JSONDecodeError: If the file is not valid JSON
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        host = cls.from_dict(data)
        host.logger.info(f"Loaded host data from {path}: {len(host.users)} users")
        return host

    # Core services

    def is_component_active(self, name: str) -> bool:
        return name in self.active_components

    def find_user_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None
        wanted = email.lower()
        for user in self.users.values():
            if user.email.lower() == wanted:
                return user
        return None

    def translate(self, text: str) -> str:
        return self.translations.get(text, text)

    def get_user_meta(self, user_id: int, key: str) -> Optional[str]:
        return self.user_meta.get(user_id, {}).get(key)

    def get_group_invites_setting(self, user_id: int) -> bool:
        return self.group_invites.get(user_id, False)

    def user_link(self, user_id: int) -> str:
        user = self.users.get(user_id)
        if user is None:
            return ""
        slug = user.user_nicename or str(user.id)
        name = escape(user.display_name or slug)
        return f'<a href="{self.site_url}/members/{slug}/">{name}</a>'

    # Component queries

    def get_activities(self, user_id: int, offset: int, limit: int) -> List[Activity]:
        records = sorted(
            (a for a in self.activities if a.user_id == user_id),
            key=lambda a: (a.date_recorded, a.id),
            reverse=True,
        )
        return PaginationHandler.slice_page(records, offset, limit)

    def activity_permalink(self, activity: Activity) -> str:
        return f"{self.site_url}/activity/p/{activity.id}/"

    def get_profile_fields(self, user_id: int) -> List[ProfileField]:
        return list(self.profile_fields.get(user_id, []))

    def get_sent_threads(self, user_id: int, offset: int, limit: int) -> List[Thread]:
        records = sorted(
            (
                t for t in self.threads
                if any(m.sender_id == user_id for m in t.messages)
                and not any(
                    r.user_id == user_id and r.is_deleted for r in t.recipients
                )
            ),
            key=lambda t: (t.last_date, t.thread_id),
            reverse=True,
        )
        return PaginationHandler.slice_page(records, offset, limit)

    def thread_url(self, thread_id: int, user_id: int) -> str:
        user = self.users.get(user_id)
        slug = (user.user_nicename or str(user.id)) if user else str(user_id)
        return f"{self.site_url}/members/{slug}/messages/view/{thread_id}/"

    def get_memberships(
        self, membership_filter: MembershipFilter, offset: int, limit: int
    ) -> List[Membership]:
        records = sorted(
            (m for m in self.memberships if membership_filter.matches(m)),
            key=lambda m: m.id,
        )
        return PaginationHandler.slice_page(records, offset, limit)

    def get_group(self, group_id: int) -> Group:
        group = self.groups[group_id]
        if group.url:
            return group
        return Group(
            id=group.id,
            name=group.name,
            slug=group.slug,
            creator_id=group.creator_id,
            status=group.status,
            url=f"{self.site_url}/groups/{group.slug}/",
        )

    def get_friendships(
        self, friendship_filter: FriendshipFilter, offset: int, limit: int
    ) -> List[Friendship]:
        records = sorted(
            (f for f in self.friendships if friendship_filter.matches(f)),
            key=lambda f: f.id,
        )
        return PaginationHandler.slice_page(records, offset, limit)

    def get_notifications(
        self, user_id: int, offset: int, limit: int
    ) -> List[Notification]:
        records = sorted(
            (n for n in self.notifications if n.user_id == user_id),
            key=lambda n: (n.date_notified, n.id),
            reverse=True,
        )
        return PaginationHandler.slice_page(records, offset, limit)
