# src/catchdisc/cli/utils.py

import logging
from pathlib import Path
from typing import Any

import click
import structlog

from catchdisc.config import DiscoverySettings, read_settings_table, settings_from_mapping
from catchdisc.telemetry.logger import setup_logging as core_setup_logging

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="CATCHDISC_LOG_LEVEL",
        help="Set the application logging level.",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="CATCHDISC_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="CATCHDISC_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def setup_logging_from_context(
    ctx: click.Context,
    local_log_level: str | None = None,
    local_log_file: str | None = None,
    local_json_logs: bool | None = None,
    default_log_level: str = "WARNING",
) -> None:
    """
    Setup logging using context values, allowing local overrides.
    """
    obj = ctx.obj or {}
    log_level_str = local_log_level or obj.get("LOG_LEVEL") or default_log_level
    log_file_path = local_log_file or obj.get("LOG_FILE")
    use_json_logs = local_json_logs if local_json_logs is not None else obj.get("JSON_LOGS", False)

    numeric_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
        log_level_str = "WARNING"

    core_setup_logging(
        level=numeric_level,
        json_logs=use_json_logs,
        log_file=log_file_path,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )


def build_settings(config_path: Path | None, overrides: dict[str, Any]) -> DiscoverySettings:
    """
    Merges command line overrides onto the keys set in the settings file.

    Overrides set to None are ignored. `use_xml_discovery` and
    `name_only_discovery` are derived from the final command line only when
    neither the file nor the command line sets them.

    Raises:
        ConfigurationError: The file or the merged values are invalid.
    """
    values: dict[str, Any] = {}
    if config_path is not None:
        values = read_settings_table(config_path)
        # Report problems in the file against the file, before merging.
        settings_from_mapping(values, origin=str(config_path))
    values.update({key: value for key, value in overrides.items() if value is not None})
    return settings_from_mapping(values, origin="command line")
