# src/catchdisc/cli/config_cmds.py

from pathlib import Path

import click
import structlog

from catchdisc.cli.utils import logging_options, setup_logging_from_context
from catchdisc.config import load_settings
from catchdisc.exceptions import ConfigurationError
from catchdisc.telemetry import StructLogger

# Import rich if available for pretty printing
try:
    from rich.pretty import pretty_repr

    RICH_AVAILABLE = True
except ImportError:
    RICH_AVAILABLE = False

log: StructLogger = structlog.get_logger("cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting and validating discovery settings."""
    pass


@config_cli.command(name="show")
@click.option(
    "-c",
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=Path("catchdisc.toml"),
    show_default=True,
    envvar="CATCHDISC_CONF",
    help="Path to the catchdisc settings file (env var CATCHDISC_CONF).",
    show_envvar=True,
)
@logging_options
@click.pass_context
def show_config(ctx: click.Context, config_path: Path, **kwargs):
    """Load, validate, and display the discovery settings."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )
    log.info("Executing 'config show' command", config_path=str(config_path))

    try:
        settings = load_settings(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate settings", error=str(e))
        click.echo(f"Error: Configuration problem in '{config_path}':\n{e}", err=True)
        ctx.exit(1)

    if RICH_AVAILABLE:
        click.echo(pretty_repr(settings, expand_all=True))
    else:
        click.echo(repr(settings))

    if not settings.has_valid_discovery_commandline:
        log.warning(
            "Discovery command line does not request a test listing; discovery will be skipped.",
            commandline=settings.discover_commandline,
        )
