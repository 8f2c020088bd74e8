"""
Settings commands.

Stores defaults used by the other commands in the user's config
directory.
"""

from typing import Optional

import typer

from bpdx.logging import LogLevel, get_logger
from bpdx.utils.config_store import ConfigStore
from bpdx.utils.console import display_panel, error, success, warning

app = typer.Typer(help="Manage BPDX settings")


@app.command("set")
def set_config(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"
    ),
    data_file: Optional[str] = typer.Option(
        None, "--data-file", help="Default host data file"
    ),
    output_dir: Optional[str] = typer.Option(
        None, "--output-dir", help="Default output directory for reports"
    ),
) -> None:
    """Update stored settings"""
    logger = get_logger("bpdx.commands.config")

    if log_level:
        log_level = log_level.upper()
        if log_level not in [lev.value for lev in LogLevel]:
            error(f"Invalid log level: {log_level}")
            raise typer.Exit(1)

    if not any([log_level, data_file, output_dir]):
        warning("Nothing to update")
        return

    try:
        ConfigStore().save_settings(
            {"log_level": log_level, "data_file": data_file, "output_dir": output_dir}
        )
    except (OSError, ValueError) as e:
        logger.error(f"Failed to save settings: {str(e)}")
        error(f"Failed to save settings: {str(e)}")
        raise typer.Exit(1)

    logger.info("Settings updated")
    success("Settings updated")


@app.command("show")
def show_config() -> None:
    """Show stored settings"""
    settings = ConfigStore().get_settings()
    if not settings:
        warning("No settings stored")
        return

    text = "\n".join(f"{key}: {value}" for key, value in settings.items())
    display_panel(text, "BPDX Settings", "blue")
