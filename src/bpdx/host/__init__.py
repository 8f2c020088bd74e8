"""
Host platform capability.

The exporters talk to the platform only through HostContext. InMemoryHost
is a complete implementation over plain data.
"""

from .context import FriendshipFilter, HostContext, MembershipFilter
from .memory import InMemoryHost
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

__all__ = [
    "HostContext",
    "InMemoryHost",
    "MembershipFilter",
    "FriendshipFilter",
    "Activity",
    "Friendship",
    "Group",
    "Membership",
    "Message",
    "Notification",
    "ProfileField",
    "Recipient",
    "Thread",
    "User",
]
