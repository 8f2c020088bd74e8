"""
Friendship exporters.

Confirmed friendships match the user on either side. Pending requests
pin one side: the user as initiator for sent requests, the user as
recipient for received ones, so an unconfirmed friendship lands in
exactly one of the two.
"""

from abc import abstractmethod
from typing import Iterable, List

from bpdx.constants import COMPONENT_FRIENDS, FRIENDS_BATCH_SIZE
from bpdx.host.context import FriendshipFilter
from bpdx.host.models import Friendship, User
from .base_exporter import BaseExporter
from .models import ExportItem


class BaseFriendsExporter(BaseExporter):
    component = COMPONENT_FRIENDS
    batch_size = FRIENDS_BATCH_SIZE

    @abstractmethod
    def friendship_filter(self, user: User) -> FriendshipFilter:
        """Which side of the friendship the user sits on, and its state"""
        pass

    def fetch_records(self, user: User, page: int) -> List[Friendship]:
        return self.host.get_friendships(
            self.friendship_filter(user), self.offset_for(page), self.batch_size
        )


class FriendsExporter(BaseFriendsExporter):
    key = "friends"
    friendly_name = "BuddyPress Friends"
    group_id = "bp_friends"
    group_label_text = "Friends"

    def friendship_filter(self, user: User) -> FriendshipFilter:
        return FriendshipFilter(user_id=user.id, is_confirmed=True)

    def build_items(self, user: User, record: Friendship) -> Iterable[ExportItem]:
        user_is_initiator = record.initiator_user_id == user.id
        friend_id = (
            record.friend_user_id if user_is_initiator else record.initiator_user_id
        )

        item = self.new_item(f"bp-friends-{friend_id}")
        item.add_field(self._("Friend"), self.host.user_link(friend_id))
        item.add_field(self._("Initiated By Me"), self.yes_no(user_is_initiator))
        item.add_field(self._("Friendship Date"), record.date_created)
        return [item]


class FriendsPendingSentRequestsExporter(BaseFriendsExporter):
    key = "friends-pending-sent-requests"
    friendly_name = "BuddyPress Friend Requests (Sent)"
    group_id = "bp_friends_pending_sent_requests"
    group_label_text = "Pending Friend Requests (Sent)"

    def friendship_filter(self, user: User) -> FriendshipFilter:
        return FriendshipFilter(
            user_id=user.id, is_confirmed=False, initiator_user_id=user.id
        )

    def build_items(self, user: User, record: Friendship) -> Iterable[ExportItem]:
        item = self.new_item(f"bp-friends-pending-sent-request-{record.friend_user_id}")
        item.add_field(self._("Recipient"), self.host.user_link(record.friend_user_id))
        item.add_field(self._("Date Sent"), record.date_created)
        return [item]


class FriendsPendingReceivedRequestsExporter(BaseFriendsExporter):
    key = "friends-pending-received-requests"
    friendly_name = "BuddyPress Friend Requests (Received)"
    group_id = "bp_friends_pending_received_requests"
    group_label_text = "Pending Friend Requests (Received)"

    def friendship_filter(self, user: User) -> FriendshipFilter:
        return FriendshipFilter(
            user_id=user.id, is_confirmed=False, friend_user_id=user.id
        )

    def build_items(self, user: User, record: Friendship) -> Iterable[ExportItem]:
        item = self.new_item(
            f"bp-friends-pending-received-request-{record.initiator_user_id}"
        )
        item.add_field(self._("Requester"), self.host.user_link(record.initiator_user_id))
        item.add_field(self._("Date Sent"), record.date_created)
        return [item]
