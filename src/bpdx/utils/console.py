from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# stdout carries tables and reports; logs go to stderr
console = Console()


def success(message: str):
    """Display success message"""
    console.print(f"✔ {message}", style="bold green")


def error(message: str):
    """Display error message"""
    console.print(f"✖ {message}", style="bold red")


def warning(message: str):
    """Display warning message"""
    console.print(f"⚠  {message}", style="bold yellow")


def info(message: str):
    console.print(message, style="cyan")


def create_table(
    title: str, columns: List[str], styles: Optional[Sequence[str]] = None
) -> Table:
    """Create a table, optionally styling each column

    Args:
        title: Table title
        columns: Column headers
        styles: Per-column styles, matched by position
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    styles = list(styles or [])
    for index, column in enumerate(columns):
        style = styles[index] if index < len(styles) else None
        table.add_column(column, style=style)
    return table


def display_panel(content: str, title: str, style: str = "blue"):
    console.print(Panel(content, title=title, border_style=style))


def display_report_summary(metadata: Dict[str, Any], saved_to: Optional[str] = None):
    """Display the per-exporter item counts of an export report"""
    counts = metadata.get("items_per_exporter", {})
    pages = metadata.get("pages_per_exporter", {})
    lines = [f"Email: {metadata.get('email_address', '')}"]
    lines.extend(
        f"{key}: {count} items ({pages.get(key, 0)} pages)"
        for key, count in counts.items()
    )
    lines.append(f"Total: {metadata.get('total_items', 0)} items")
    if saved_to:
        lines.append(f"Saved to: {saved_to}")
    display_panel("\n".join(lines), "Export Summary", "green")
