"""
View renderer for displaying export reports in tables.
"""

from typing import Any, Dict, List

from rich.table import Table

from bpdx.utils.console import console, info

MAX_VALUE_WIDTH = 80


class ViewRenderer:
    """Renders export reports as rich tables"""

    @staticmethod
    def truncate(value: str, width: int = MAX_VALUE_WIDTH) -> str:
        if len(value) > width:
            return value[:width] + "..."
        return value

    @staticmethod
    def build_table(title: str, items: List[Dict[str, Any]]) -> Table:
        """
        Build a table of one exporter's items.

        Args:
            title: Table title
            items: Export items as dicts

        Returns:
            Table with one row per field
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Item", style="bold yellow", no_wrap=True)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        for item in items:
            first = True
            for field in item.get("data", []):
                table.add_row(
                    item.get("item_id", "") if first else "",
                    field.get("name", ""),
                    ViewRenderer.truncate(str(field.get("value", ""))),
                )
                first = False
            if first:
                table.add_row(item.get("item_id", ""), "", "")
        return table

    @staticmethod
    def display_report(report: Dict[str, Any]) -> None:
        """
        Display every exporter's items, one table per exporter.

        Args:
            report: Report with ``metadata`` and ``data``
        """
        displayed = 0
        for key, items in report.get("data", {}).items():
            if not items:
                continue
            title = f"{items[0].get('group_label', key)} ({key})"
            console.print(ViewRenderer.build_table(title, items))
            displayed += 1

        if not displayed:
            info("No personal data found for this address")
            return

        total = report.get("metadata", {}).get("total_items", 0)
        info(f"Displayed {total} items from {displayed} exporters")
