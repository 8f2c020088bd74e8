"""
Extension points for the exporters.

Components register formatters that turn activity items and
notifications into readable descriptions, and plugins register item
enrichers that append fields to export items of a given group. Lookups
are by name; enrichers run in registration order.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, Tuple

from bpdx.host.models import Activity, Notification
from bpdx.logging import get_logger
from .models import ExportItem

ActivityFormatter = Callable[[Activity], str]
NotificationFormatter = Callable[[Notification], str]
NotificationFilter = Callable[[str, Notification, str], str]
ItemEnricher = Callable[[ExportItem, Any], ExportItem]


class ExportHooks:
    """Registry of formatters and item enrichers"""

    def __init__(self):
        self._activity_formatters: Dict[Tuple[str, str], ActivityFormatter] = {}
        self._notification_formatters: Dict[str, NotificationFormatter] = {}
        self._notification_filters: List[NotificationFilter] = []
        self._enrichers: Dict[str, List[ItemEnricher]] = defaultdict(list)
        self.logger = get_logger("bpdx.exporters.hooks")

    def register_activity_formatter(
        self, component: str, activity_type: str, formatter: ActivityFormatter
    ) -> None:
        """Register the action formatter for one activity type"""
        self._activity_formatters[(component, activity_type)] = formatter
        self.logger.debug(
            f"Registered activity formatter for {component}/{activity_type}"
        )

    def get_activity_formatter(
        self, component: str, activity_type: str
    ) -> Optional[ActivityFormatter]:
        return self._activity_formatters.get((component, activity_type))

    def register_notification_formatter(
        self, component: str, formatter: NotificationFormatter
    ) -> None:
        """Register the notification formatter of a component"""
        self._notification_formatters[component] = formatter
        self.logger.debug(f"Registered notification formatter for {component}")

    def get_notification_formatter(
        self, component: str
    ) -> Optional[NotificationFormatter]:
        return self._notification_formatters.get(component)

    def add_notification_filter(self, notification_filter: NotificationFilter) -> None:
        """Add a fallback filter for notifications without a formatter.

        Filters receive the current content, the notification and the
        component name, and return the new content.
        """
        self._notification_filters.append(notification_filter)

    def apply_notification_filters(
        self, content: str, notification: Notification, component: str
    ) -> str:
        for notification_filter in self._notification_filters:
            content = notification_filter(content, notification, component)
        return content

    def add_item_enricher(self, group_id: str, enricher: ItemEnricher) -> None:
        """Add an enricher for export items of a group"""
        self._enrichers[group_id].append(enricher)
        self.logger.debug(f"Registered item enricher for {group_id}")

    def enrich(self, item: ExportItem, record: Any) -> ExportItem:
        """Run the group's enrichers over an item, in registration order"""
        for enricher in self._enrichers.get(item.group_id, ()):
            item = enricher(item, record)
        return item
