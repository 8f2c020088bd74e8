"""
Record types returned by the host.

These mirror the rows the community platform stores for each component.
Dates are kept as the host's string representation.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class User:
    id: int
    email: str
    display_name: str = ""
    user_nicename: str = ""


@dataclass(frozen=True)
class Activity:
    id: int
    user_id: int
    component: str
    type: str
    date_recorded: str
    action: str = ""
    content: str = ""
    primary_link: str = ""
    item_id: int = 0
    secondary_item_id: int = 0
    hide_sitewide: bool = False


@dataclass(frozen=True)
class ProfileField:
    field_id: int
    name: str
    value: str


@dataclass(frozen=True)
class Message:
    id: int
    thread_id: int
    sender_id: int
    subject: str
    message: str
    date_sent: str


@dataclass(frozen=True)
class Recipient:
    user_id: int
    thread_id: int
    unread_count: int = 0
    sender_only: bool = False
    is_deleted: bool = False


@dataclass(frozen=True)
class Thread:
    thread_id: int
    recipients: List[Recipient] = field(default_factory=list)
    messages: List[Message] = field(default_factory=list)

    @property
    def last_date(self) -> str:
        """Date of the most recent message, or an empty string"""
        return max((m.date_sent for m in self.messages), default="")


@dataclass(frozen=True)
class Group:
    id: int
    name: str
    slug: str
    creator_id: int
    status: str = "public"
    url: str = ""


@dataclass(frozen=True)
class Membership:
    id: int
    group_id: int
    user_id: int
    inviter_id: int = 0
    is_admin: bool = False
    is_mod: bool = False
    is_banned: bool = False
    is_confirmed: bool = False
    invite_sent: bool = False
    date_modified: str = ""


@dataclass(frozen=True)
class Friendship:
    id: int
    initiator_user_id: int
    friend_user_id: int
    is_confirmed: bool = False
    date_created: str = ""


@dataclass(frozen=True)
class Notification:
    id: int
    user_id: int
    item_id: int
    secondary_item_id: int
    component_name: str
    component_action: str
    date_notified: str
    is_new: bool = True
    total_count: int = 1
