"""
Group membership exporters.

Four exporters share one membership-table query and differ only in the
filter applied and the fields they report:

- confirmed memberships of the user
- membership requests the user sent (unconfirmed, no inviter)
- invitations the user received (unconfirmed, with an inviter)
- invitations the user sent (unconfirmed, user is the inviter)
"""

from enum import Enum
from typing import Iterable, List

from bpdx.constants import COMPONENT_GROUPS, GROUPS_BATCH_SIZE
from bpdx.host.context import HostContext, MembershipFilter
from bpdx.host.models import Group, Membership, User
from bpdx.utils.pagination import PaginationHandler
from .base_exporter import BaseExporter
from .models import ExportItem


class MembershipType(Enum):
    MEMBERSHIP = "membership"
    PENDING_REQUEST = "pending_request"
    PENDING_RECEIVED_INVITATION = "pending_received_invitation"
    PENDING_SENT_INVITATION = "pending_sent_invitation"

    def filter_for(self, user_id: int) -> MembershipFilter:
        """Build the membership-table filter for this type"""
        if self is MembershipType.PENDING_REQUEST:
            return MembershipFilter(user_id=user_id, is_confirmed=False, has_inviter=False)
        if self is MembershipType.PENDING_RECEIVED_INVITATION:
            return MembershipFilter(user_id=user_id, is_confirmed=False, has_inviter=True)
        if self is MembershipType.PENDING_SENT_INVITATION:
            return MembershipFilter(inviter_id=user_id, is_confirmed=False)
        return MembershipFilter(user_id=user_id, is_confirmed=True)


def get_user_memberships(
    host: HostContext,
    user_id: int,
    membership_type: MembershipType = MembershipType.MEMBERSHIP,
    page: int = 1,
    per_page: int = GROUPS_BATCH_SIZE,
) -> List[Membership]:
    """Fetch one page of a user's memberships of the given type"""
    offset = PaginationHandler.offset_for(page, per_page)
    return host.get_memberships(membership_type.filter_for(user_id), offset, per_page)


def group_role(user: User, group: Group, membership: Membership) -> str:
    """Role of the user in a group; the creator check wins over flags"""
    if group.creator_id == user.id:
        return "Creator"
    if membership.is_admin:
        return "Admin"
    if membership.is_mod:
        return "Moderator"
    return "Member"


class BaseGroupsExporter(BaseExporter):
    """Shared fetch and item layout for the membership-table exporters"""

    component = COMPONENT_GROUPS
    batch_size = GROUPS_BATCH_SIZE
    membership_type = MembershipType.MEMBERSHIP
    item_prefix = ""

    def fetch_records(self, user: User, page: int) -> List[Membership]:
        return get_user_memberships(
            self.host, user.id, self.membership_type, page, self.batch_size
        )

    def build_items(self, user: User, record: Membership) -> Iterable[ExportItem]:
        group = self.host.get_group(record.group_id)
        item = self.new_item(f"{self.item_prefix}-{group.id}")
        item.add_field(self._("Group Name"), group.name)
        item.add_field(self._("Group URL"), group.url)
        self.add_details(item, user, group, record)
        return [item]

    def add_details(
        self, item: ExportItem, user: User, group: Group, membership: Membership
    ) -> None:
        item.add_field(self._("Date Sent"), membership.date_modified)


class GroupMembershipsExporter(BaseGroupsExporter):
    key = "groups-memberships"
    friendly_name = "BuddyPress Group Memberships"
    group_id = "bp_groups_memberships"
    group_label_text = "Group Memberships"
    membership_type = MembershipType.MEMBERSHIP
    item_prefix = "bp-group-membership"

    def add_details(self, item, user, group, membership):
        if membership.inviter_id:
            item.add_field(self._("Invited By"), self.host.user_link(membership.inviter_id))
        item.add_field(self._("Group Role"), self._(group_role(user, group, membership)))
        item.add_field(self._("Date Joined"), membership.date_modified)


class GroupPendingRequestsExporter(BaseGroupsExporter):
    key = "groups-pending-requests"
    friendly_name = "BuddyPress Pending Group Membership Requests"
    group_id = "bp_groups_pending_requests"
    group_label_text = "Pending Group Membership Requests"
    membership_type = MembershipType.PENDING_REQUEST
    item_prefix = "bp-group-pending-request"


class GroupPendingReceivedInvitationsExporter(BaseGroupsExporter):
    key = "groups-pending-received-invitations"
    friendly_name = "BuddyPress Pending Group Invitations (Received)"
    group_id = "bp_groups_pending_received_invitations"
    group_label_text = "Pending Group Invitations (Received)"
    membership_type = MembershipType.PENDING_RECEIVED_INVITATION
    item_prefix = "bp-group-pending-received-invitation"

    def add_details(self, item, user, group, membership):
        item.add_field(self._("Invited By"), self.host.user_link(membership.inviter_id))
        item.add_field(self._("Date Sent"), membership.date_modified)


class GroupPendingSentInvitationsExporter(BaseGroupsExporter):
    key = "groups-pending-sent-invitations"
    friendly_name = "BuddyPress Pending Group Invitations (Sent)"
    group_id = "bp_groups_pending_sent_invitations"
    group_label_text = "Pending Group Invitations (Sent)"
    membership_type = MembershipType.PENDING_SENT_INVITATION
    item_prefix = "bp-group-pending-sent-invitation"

    def add_details(self, item, user, group, membership):
        item.add_field(self._("Sent To"), self.host.user_link(membership.user_id))
        item.add_field(self._("Date Sent"), membership.date_modified)
