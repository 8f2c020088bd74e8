"""
Activity exporter.

Exports the user's activity stream items, comments included. Item
enrichers registered for ``bp_activity`` can append fields for activity
types whose stored action does not describe them well.
"""

from typing import Iterable, List

from bpdx.constants import ACTIVITY_BATCH_SIZE, COMPONENT_ACTIVITY
from bpdx.host.models import Activity, User
from .base_exporter import BaseExporter
from .models import ExportItem


class ActivityExporter(BaseExporter):
    key = "activity"
    component = COMPONENT_ACTIVITY
    friendly_name = "BuddyPress Activity Data"
    group_id = "bp_activity"
    group_label_text = "Activity"
    batch_size = ACTIVITY_BATCH_SIZE

    def fetch_records(self, user: User, page: int) -> List[Activity]:
        return self.host.get_activities(
            user.id, self.offset_for(page), self.batch_size
        )

    def describe(self, activity: Activity) -> str:
        """Readable description of an activity item.

        The registered formatter for the activity type wins, then the
        stored action string, then the bare type.
        """
        formatter = self.hooks.get_activity_formatter(activity.component, activity.type)
        if formatter:
            return formatter(activity)
        if activity.action:
            return activity.action
        return activity.type

    def build_items(self, user: User, record: Activity) -> Iterable[ExportItem]:
        item = self.new_item(f"bp-activity-{record.id}")
        item.add_field(self._("Activity Date"), record.date_recorded)
        item.add_field(self._("Activity Description"), self.describe(record))
        item.add_field(self._("Activity URL"), self.host.activity_permalink(record))
        if record.content:
            item.add_field(self._("Activity Content"), record.content)
        return [item]
