import typer

from bpdx.commands import config, export, logs
from bpdx.constants import TOOL_VERSION
from bpdx.logging import LogConfig, LogLevel, get_log_config, get_logger, setup_logging

app = typer.Typer(
    help="[bold blue]BPDX[/bold blue] - BuddyPress Personal Data Exporters",
    rich_markup_mode="rich",
)

app.add_typer(export.app, name="export")
app.add_typer(config.app, name="config")
app.add_typer(logs.app, name="logs")


def _show_version(value: bool):
    if value:
        typer.echo(f"bpdx {TOOL_VERSION}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log at DEBUG level and echo INFO to stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """
    [bold blue]BPDX[/bold blue] - BuddyPress Personal Data Exporters

    Export everything a community site stores about a member.
    """
    if verbose:
        current = get_log_config()
        setup_logging(
            LogConfig(
                default_level=LogLevel.DEBUG,
                console_level=LogLevel.INFO,
                log_export_pages=current.log_export_pages,
                mask_email_addresses=current.mask_email_addresses,
            ),
            force_reconfigure=True,
        )
    if not ctx.invoked_subcommand:
        typer.echo("Welcome to BPDX! Export a member's data with: bpdx export run EMAIL")
        typer.echo("To see every command type bpdx --help")


def main():
    setup_logging()
    logger = get_logger("bpdx.main")
    logger.info(f"BPDX {TOOL_VERSION} started")

    try:
        app()
    except Exception as e:
        logger.error(f"Unhandled exception in main: {str(e)}")
        raise
    finally:
        logger.info("BPDX finished")


if __name__ == "__main__":
    main()
