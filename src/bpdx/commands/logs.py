"""
Log management commands for BPDX.

Shows recent log lines (optionally only the page records of one
exporter), describes the logging setup, and removes rotated files.
"""

import time
from datetime import datetime
from typing import List, Optional

import typer
from rich.syntax import Syntax

from bpdx.constants import (
    EXPORTER_KEY_PREFIX,
    LOG_APP_NAME,
    LOG_FILE_NAME,
    LOG_LINES_TO_SHOW,
    LOG_RETENTION_DAYS,
)
from bpdx.logging import get_log_config, get_logger, setup_logging
from bpdx.logging.config import get_log_directory, get_log_file_path
from bpdx.logging.utils import cleanup_old_logs, format_size
from bpdx.utils.console import console, create_table, error, info, success, warning

app = typer.Typer(help="Manage BPDX logs")


def line_matches(line: str, level: Optional[str], exporter: Optional[str]) -> bool:
    """Whether a log line passes the level and exporter filters"""
    if level and level.upper() not in line:
        return False
    if exporter:
        # Page records carry the unprefixed exporter key
        if exporter.startswith(EXPORTER_KEY_PREFIX):
            exporter = exporter[len(EXPORTER_KEY_PREFIX):]
        if f"] {exporter} page=" not in line:
            return False
    return True


def select_lines(
    all_lines: List[str], count: int, level: Optional[str], exporter: Optional[str]
) -> List[str]:
    """Last ``count`` lines passing the filters"""
    matching = [line for line in all_lines if line_matches(line, level, exporter)]
    return matching[-count:] if count > 0 else []


@app.command("show")
def show_logs(
    lines: int = typer.Option(
        LOG_LINES_TO_SHOW, "--lines", "-n", help="Number of lines to show"
    ),
    follow: bool = typer.Option(False, "--follow", "-f", help="Follow log output"),
    level: Optional[str] = typer.Option(
        None, "--level", help="Filter by log level (DEBUG, INFO, WARNING, ERROR)"
    ),
    exporter: Optional[str] = typer.Option(
        None, "--exporter", help="Only page records of this exporter key"
    ),
) -> None:
    """Show recent log entries"""
    setup_logging()
    logger = get_logger("bpdx.commands.logs")

    try:
        log_file = get_log_file_path(get_log_config())

        if not log_file.exists():
            warning(
                f"No log file found. Run some {LOG_APP_NAME} commands to generate logs."
            )
            return

        with open(log_file, "r", encoding="utf-8") as f:
            display_lines = select_lines(f.readlines(), lines, level, exporter)

        if not display_lines:
            info("No log entries found matching the criteria.")
            return

        console.print(
            Syntax("".join(display_lines), "log", theme="monokai", line_numbers=False)
        )

        if follow:
            info("Following log file... (Press Ctrl+C to stop)")
            try:
                with open(log_file, "r", encoding="utf-8") as f:
                    f.seek(0, 2)
                    while True:
                        line = f.readline()
                        if not line:
                            time.sleep(0.1)
                        elif line_matches(line, level, exporter):
                            console.print(line.rstrip())
            except KeyboardInterrupt:
                info("\nStopped following logs.")

    except OSError as e:
        logger.error(f"Failed to show logs: {str(e)}")
        error(f"Failed to show logs: {str(e)}")
        raise typer.Exit(1)


@app.command("info")
def log_info() -> None:
    """Show log configuration and file information"""
    setup_logging()
    logger = get_logger("bpdx.commands.logs")

    try:
        config = get_log_config()
        log_file = get_log_file_path(config)
        log_dir = get_log_directory()

        table = create_table(
            f"{LOG_APP_NAME} Log Information", ["Setting", "Value"], styles=["cyan"]
        )
        table.add_row("Log Directory", str(log_dir))
        table.add_row("Log File", str(log_file))
        table.add_row("Log Level", config.default_level.value)
        table.add_row("Page Records", "On" if config.log_export_pages else "Off")
        table.add_row("Email Masking", "On" if config.mask_email_addresses else "Off")
        table.add_row("Retention Days", str(config.log_retention_days))

        if log_file.exists():
            stat = log_file.stat()
            table.add_row("Current Size", format_size(stat.st_size))
            modified = datetime.fromtimestamp(stat.st_mtime)
            table.add_row("Last Modified", modified.strftime("%Y-%m-%d %H:%M:%S"))
        else:
            table.add_row("Current Size", "File not found")
            table.add_row("Last Modified", "N/A")

        rotated_files = list(log_dir.glob(f"{LOG_FILE_NAME}.log.*"))
        table.add_row("Rotated Files", str(len(rotated_files)))

        console.print(table)

    except OSError as e:
        logger.error(f"Failed to show log info: {str(e)}")
        error(f"Failed to show log info: {str(e)}")
        raise typer.Exit(1)


@app.command("clean")
def clean_logs(
    days: int = typer.Option(
        LOG_RETENTION_DAYS, "--days", help="Remove rotated logs older than this"
    ),
) -> None:
    """Remove rotated log files past the retention period"""
    setup_logging()
    logger = get_logger("bpdx.commands.logs")

    try:
        removed = cleanup_old_logs(get_log_directory(), retention_days=days)
    except OSError as e:
        logger.error(f"Failed to clean logs: {str(e)}")
        error(f"Failed to clean logs: {str(e)}")
        raise typer.Exit(1)

    logger.info(f"Removed {removed} rotated log files older than {days} days")
    success(f"Removed {removed} rotated log files")
