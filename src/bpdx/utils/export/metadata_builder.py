"""
Metadata builder for export runs.

Builds the metadata block written alongside a user's exported data.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from bpdx.constants import TOOL_VERSION


class MetadataBuilder:
    """Builds metadata for export reports"""

    @staticmethod
    def count_items(data: Dict[str, List[Any]]) -> int:
        """
        Count export items across all exporters.

        Args:
            data: Mapping of exporter key to its items

        Returns:
            Total number of items
        """
        return sum(len(items) for items in data.values())

    @staticmethod
    def build_metadata(
        email_address: str,
        data: Dict[str, List[Any]],
        pages: Dict[str, int],
    ) -> Dict[str, Any]:
        """
        Build metadata dictionary for an export report.

        Args:
            email_address: Address the export was run for
            data: Mapping of exporter key to its items
            pages: Mapping of exporter key to pages fetched

        Returns:
            Metadata dictionary
        """
        return {
            "tool_version": TOOL_VERSION,
            "email_address": email_address,
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "exporters": list(data.keys()),
            "items_per_exporter": {key: len(items) for key, items in data.items()},
            "pages_per_exporter": dict(pages),
            "total_items": MetadataBuilder.count_items(data),
        }
