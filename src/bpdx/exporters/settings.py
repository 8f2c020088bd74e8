"""
Settings exporter.

Exports the user's email notification preferences. Preferences only
exist for active components, and a preference with nothing stored is
on by default.
"""

from typing import Iterable, List, Tuple

from bpdx.constants import (
    COMPONENT_ACTIVITY,
    COMPONENT_FRIENDS,
    COMPONENT_GROUPS,
    COMPONENT_MESSAGES,
    COMPONENT_NOUVEAU,
    COMPONENT_SETTINGS,
)
from bpdx.host.models import User
from .base_exporter import BaseExporter
from .models import ExportItem

# (gating component, label, meta key)
NOTIFICATION_SETTINGS: Tuple[Tuple[str, str, str], ...] = (
    (
        COMPONENT_ACTIVITY,
        "Receive email when a member mentions you in an update?",
        "notification_activity_new_mention",
    ),
    (
        COMPONENT_ACTIVITY,
        "Receive email when a member replies to an update or comment you've posted?",
        "notification_activity_new_reply",
    ),
    (
        COMPONENT_MESSAGES,
        "Receive email when a member sends you a new message?",
        "notification_messages_new_message",
    ),
    (
        COMPONENT_FRIENDS,
        "Receive email when a member invites you to join a group?",
        "notification_groups_invite",
    ),
    (
        COMPONENT_GROUPS,
        "Receive email when group information is updated?",
        "notification_groups_group_updated",
    ),
    (
        COMPONENT_GROUPS,
        "Receive email when you are promoted to a group administrator or moderator?",
        "notification_groups_admin_promoted",
    ),
    (
        COMPONENT_GROUPS,
        "Receive email when a member requests to join a private group for which "
        "you are an admin?",
        "notification_groups_membership_request",
    ),
    (
        COMPONENT_GROUPS,
        "Receive email when your request to join a group has been approved or denied?",
        "notification_membership_request_completed",
    ),
)

GROUP_INVITES_LABEL = "Receive group invitations from my friends only?"


class SettingsExporter(BaseExporter):
    key = "settings"
    component = COMPONENT_SETTINGS
    friendly_name = "BuddyPress Settings Data"
    group_id = "bp_settings"
    group_label_text = "Settings"

    def fetch_records(self, user: User, page: int) -> List[User]:
        return [user]

    def build_items(self, user: User, record: User) -> Iterable[ExportItem]:
        item = self.new_item(f"bp-settings-{user.id}")

        for component, label, meta_key in NOTIFICATION_SETTINGS:
            if not self.host.is_component_active(component):
                continue
            stored = self.host.get_user_meta(user.id, meta_key)
            if not stored:
                stored = "yes"
            item.add_field(self._(label), self.yes_no(stored == "yes"))

        if self.host.is_component_active(COMPONENT_NOUVEAU):
            item.add_field(
                self._(GROUP_INVITES_LABEL),
                self.yes_no(self.host.get_group_invites_setting(user.id)),
            )

        return [item]
