"""
Notifications exporter.
"""

from typing import Iterable, List

from bpdx.constants import (
    COMPONENT_NOTIFICATIONS,
    COMPONENT_XPROFILE,
    NOTIFICATIONS_BATCH_SIZE,
)
from bpdx.host.models import Notification, User
from .base_exporter import BaseExporter
from .models import ExportItem

# Components whose formatter is registered under a different name
COMPONENT_ALIASES = {COMPONENT_XPROFILE: "profile"}


class NotificationsExporter(BaseExporter):
    """Read and unread notifications of the user, newest first"""

    key = "notifications"
    component = COMPONENT_NOTIFICATIONS
    friendly_name = "BuddyPress Notifications Data"
    group_id = "bp_notifications"
    group_label_text = "Notifications"
    batch_size = NOTIFICATIONS_BATCH_SIZE

    def fetch_records(self, user: User, page: int) -> List[Notification]:
        return self.host.get_notifications(
            user.id, self.offset_for(page), self.batch_size
        )

    def describe(self, notification: Notification) -> str:
        """Readable content of a notification.

        Uses the component's notification formatter when one is
        registered; otherwise runs the fallback filters over the
        component action.
        """
        component = COMPONENT_ALIASES.get(
            notification.component_name, notification.component_name
        )
        formatter = self.hooks.get_notification_formatter(component)
        if formatter:
            return formatter(notification)
        return self.hooks.apply_notification_filters(
            notification.component_action, notification, component
        )

    def build_items(self, user: User, record: Notification) -> Iterable[ExportItem]:
        item = self.new_item(f"bp-notifications-{record.id}")
        item.add_field(self._("Notification Content"), self.describe(record))
        item.add_field(self._("Notification Date"), record.date_notified)
        item.add_field(
            self._("Status"), self._("Unread") if record.is_new else self._("Read")
        )
        return [item]
