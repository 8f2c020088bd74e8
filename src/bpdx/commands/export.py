"""
Export commands.

Runs the personal data exporters against a host data file and either
displays the result or saves it as JSON.
"""

from typing import List, Optional

import typer

from bpdx.constants import DEFAULT_MAX_PAGES
from bpdx.exporters import ExportHooks, register_exporters
from bpdx.host import InMemoryHost
from bpdx.logging import get_logger
from bpdx.utils.config_store import ConfigStore
from bpdx.utils.console import (
    console,
    create_table,
    display_report_summary,
    error,
    success,
    warning,
)
from bpdx.utils.export import ExportRunner, FileSaver, ViewRenderer

app = typer.Typer(help="Export a member's personal data")


def resolve_data_file(data_file: Optional[str], config_store: ConfigStore) -> str:
    """Data file from the argument, falling back to the stored setting"""
    resolved = data_file or config_store.get_setting("data_file")
    if not resolved:
        error("No host data file given. Use --data or 'bpdx config set --data-file'.")
        raise typer.Exit(1)
    return resolved


def load_exporters(data_file: str):
    """Load the host and register the exporters of its active components"""
    host = InMemoryHost.from_file(data_file)
    return register_exporters({}, host, ExportHooks())


@app.command("run")
def run_export(
    email: str = typer.Argument(..., help="Email address of the member to export"),
    data_file: Optional[str] = typer.Option(
        None, "--data", help="Host data file (JSON)"
    ),
    only: Optional[List[str]] = typer.Option(
        None, "--only", help="Exporter key to run; repeat for several"
    ),
    view: bool = typer.Option(False, "--view", help="Display instead of saving"),
    output_dir: Optional[str] = typer.Option(
        None, "--dir", help="Output directory for the JSON report"
    ),
    output_file: Optional[str] = typer.Option(
        None, "--file", help="Output filename (without .json extension)"
    ),
    max_pages: int = typer.Option(
        DEFAULT_MAX_PAGES, "--max-pages", help="Page limit per exporter"
    ),
) -> None:
    """Run the exporters for one email address"""
    logger = get_logger("bpdx.commands.export")
    config_store = ConfigStore()
    data_file = resolve_data_file(data_file, config_store)

    logger.info(f"Starting export run for {email}")
    try:
        exporters = load_exporters(data_file)
        if not exporters:
            warning("No components are active; nothing to export")
            return

        runner = ExportRunner(exporters, max_pages=max_pages, show_progress=not view)
        report = runner.run(email, only=only)

        if view:
            ViewRenderer.display_report(report)
            return

        saved_to = FileSaver.save_to_local(
            report,
            output_dir=output_dir or config_store.get_setting("output_dir"),
            output_file=output_file,
        )
        display_report_summary(report["metadata"], saved_to)
        success(f"Exported {report['metadata']['total_items']} items")
        logger.info("Export run completed successfully")

    except Exception as e:
        logger.error(f"Export failed: {str(e)}")
        error(f"Export failed: {str(e)}")
        raise typer.Exit(1)


@app.command("list")
def list_exporters(
    data_file: Optional[str] = typer.Option(
        None, "--data", help="Host data file (JSON)"
    ),
) -> None:
    """List the exporters registered for the host's active components"""
    logger = get_logger("bpdx.commands.export")
    data_file = resolve_data_file(data_file, ConfigStore())

    try:
        exporters = load_exporters(data_file)
    except Exception as e:
        logger.error(f"Failed to load exporters: {str(e)}")
        error(f"Failed to load exporters: {str(e)}")
        raise typer.Exit(1)

    if not exporters:
        warning("No components are active; no exporters registered")
        return

    table = create_table(
        "Registered Exporters",
        ["Key", "Name", "Batch Size"],
        styles=["cyan", "white", "green"],
    )
    for key, registration in exporters.items():
        batch_size = getattr(registration.callback, "batch_size", None)
        table.add_row(key, registration.friendly_name, str(batch_size or "-"))
    console.print(table)
