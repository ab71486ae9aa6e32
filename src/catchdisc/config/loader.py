#
# config/loader.py
#
"""
Loads discovery settings from a TOML file.
"""

import tomllib
from pathlib import Path
from typing import Any

import attrs
import structlog

from catchdisc.config.models import DiscoverySettings
from catchdisc.exceptions import ConfigurationError

log = structlog.get_logger("config.loader")

SETTINGS_TABLE = "discovery"
_FIELD_NAMES = frozenset(a.name for a in attrs.fields(DiscoverySettings))


def _normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in data.items()}


def settings_from_mapping(data: dict[str, Any], origin: str = "<mapping>") -> DiscoverySettings:
    """Builds settings from a mapping, accepting kebab-case or snake_case keys."""
    normalized = _normalize_keys(data)
    unknown = sorted(set(normalized) - _FIELD_NAMES)
    if unknown:
        raise ConfigurationError(f"Unknown discovery setting(s) in {origin}: {', '.join(unknown)}")
    try:
        return DiscoverySettings(**normalized)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid discovery settings in {origin}: {e}") from e


def read_settings_table(config_path: Path) -> dict[str, Any]:
    """
    Returns the keys set in the [discovery] table of a TOML file, snake_cased.

    Raises:
        ConfigurationError: The file is unreadable, is not valid TOML, or the
            table is not a table.
    """
    try:
        with open(config_path, "rb") as f:
            document = tomllib.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{config_path}': {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in '{config_path}': {e}") from e

    table = document.get(SETTINGS_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigurationError(f"'{SETTINGS_TABLE}' in '{config_path}' must be a table")
    return _normalize_keys(table)


def load_settings(config_path: Path) -> DiscoverySettings:
    """
    Reads the [discovery] table of a TOML file.

    A file without the table yields default settings.

    Raises:
        ConfigurationError: The file is unreadable, is not valid TOML, or holds
            unknown keys or invalid values.
    """
    load_log = log.bind(config_path=str(config_path))
    load_log.debug("Loading discovery settings")

    settings = settings_from_mapping(read_settings_table(config_path), origin=str(config_path))
    load_log.info(
        "Discovery settings loaded",
        commandline=settings.discover_commandline,
        xml=settings.use_xml_discovery,
        name_only=settings.name_only_discovery,
    )
    return settings


# 🔼⚙️
