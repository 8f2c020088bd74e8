"""
Host capability used by the exporters.

The exporters never reach for ambient platform state. Everything they
need (user lookup, component activation, localisation and the
component-specific queries) goes through a HostContext passed in at
construction time.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from .models import (
    Activity,
    Friendship,
    Group,
    Membership,
    Notification,
    ProfileField,
    Thread,
    User,
)


@dataclass(frozen=True)
class MembershipFilter:
    """Filter applied to the group membership table.

    A field left as None does not constrain the query. ``has_inviter``
    distinguishes membership requests (no inviter) from invitations.
    """

    user_id: Optional[int] = None
    inviter_id: Optional[int] = None
    is_confirmed: Optional[bool] = None
    has_inviter: Optional[bool] = None

    def matches(self, membership: Membership) -> bool:
        if self.user_id is not None and membership.user_id != self.user_id:
            return False
        if self.inviter_id is not None and membership.inviter_id != self.inviter_id:
            return False
        if (
            self.is_confirmed is not None
            and bool(membership.is_confirmed) != self.is_confirmed
        ):
            return False
        if (
            self.has_inviter is not None
            and bool(membership.inviter_id) != self.has_inviter
        ):
            return False
        return True


@dataclass(frozen=True)
class FriendshipFilter:
    """Filter applied to the friendship table.

    ``user_id`` matches either side of the relationship;
    ``initiator_user_id`` and ``friend_user_id`` pin one side.
    """

    user_id: Optional[int] = None
    is_confirmed: Optional[bool] = None
    initiator_user_id: Optional[int] = None
    friend_user_id: Optional[int] = None

    def matches(self, friendship: Friendship) -> bool:
        if self.user_id is not None and self.user_id not in (
            friendship.initiator_user_id,
            friendship.friend_user_id,
        ):
            return False
        if (
            self.is_confirmed is not None
            and bool(friendship.is_confirmed) != self.is_confirmed
        ):
            return False
        if (
            self.initiator_user_id is not None
            and friendship.initiator_user_id != self.initiator_user_id
        ):
            return False
        if (
            self.friend_user_id is not None
            and friendship.friend_user_id != self.friend_user_id
        ):
            return False
        return True


class HostContext(ABC):
    """Capabilities the host platform provides to the exporters"""

    @abstractmethod
    def is_component_active(self, name: str) -> bool:
        """Return True if the named component is enabled"""
        pass

    @abstractmethod
    def find_user_by_email(self, email: str) -> Optional[User]:
        """Look up an account by email address"""
        pass

    def translate(self, text: str) -> str:
        """Localise a display string. Identity unless overridden."""
        return text

    @abstractmethod
    def get_user_meta(self, user_id: int, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def get_group_invites_setting(self, user_id: int) -> bool:
        """Whether the user only accepts group invitations from friends"""
        pass

    @abstractmethod
    def get_activities(self, user_id: int, offset: int, limit: int) -> List[Activity]:
        """Activity items for a user, comments streamed and hidden items included"""
        pass

    @abstractmethod
    def activity_permalink(self, activity: Activity) -> str:
        pass

    @abstractmethod
    def get_profile_fields(self, user_id: int) -> List[ProfileField]:
        """Extended profile fields with values already comma-formatted"""
        pass

    @abstractmethod
    def get_sent_threads(self, user_id: int, offset: int, limit: int) -> List[Thread]:
        """Message threads from the user's sent box"""
        pass

    @abstractmethod
    def thread_url(self, thread_id: int, user_id: int) -> str:
        pass

    @abstractmethod
    def get_memberships(
        self, membership_filter: MembershipFilter, offset: int, limit: int
    ) -> List[Membership]:
        pass

    @abstractmethod
    def get_group(self, group_id: int) -> Group:
        pass

    @abstractmethod
    def get_friendships(
        self, friendship_filter: FriendshipFilter, offset: int, limit: int
    ) -> List[Friendship]:
        pass

    @abstractmethod
    def get_notifications(
        self, user_id: int, offset: int, limit: int
    ) -> List[Notification]:
        """Read and unread notifications for a user, newest first"""
        pass

    @abstractmethod
    def user_link(self, user_id: int) -> str:
        """HTML link to a member's profile"""
        pass
