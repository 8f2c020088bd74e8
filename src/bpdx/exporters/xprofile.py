"""
Extended profile exporter.
"""

from typing import Iterable, List

from bpdx.constants import COMPONENT_XPROFILE
from bpdx.host.models import User
from .base_exporter import BaseExporter
from .models import ExportItem


class XProfileExporter(BaseExporter):
    """All profile fields of the user as a single item"""

    key = "xprofile"
    component = COMPONENT_XPROFILE
    friendly_name = "BuddyPress XProfile Data"
    group_id = "bp_xprofile"
    group_label_text = "Extended Profile Data"

    def fetch_records(self, user: User, page: int) -> List[User]:
        return [user]

    def build_items(self, user: User, record: User) -> Iterable[ExportItem]:
        item = self.new_item(f"bp-xprofile-{user.id}")
        for profile_field in self.host.get_profile_fields(user.id):
            item.add_field(profile_field.name, profile_field.value)
        return [item]
