#
# config/models.py
#
"""
Attrs-based data model for catchdisc discovery settings.
"""

import re
from typing import Any

from attrs import define, field

from catchdisc.models import LoggingLevel

# Command line options that make a test executable list its tests.
_RGX_VALID_DISCOVERY_COMMANDLINE = re.compile(
    r"(^|\s)(-l|--list-tests|--list-test-names-only|--discover)(\s|$)"
)
_RGX_XML_REPORTER = re.compile(r"(^|\s)(-r\s+|--reporter\s+|--reporter=)xml(\s|$)")
_RGX_NAME_ONLY = re.compile(r"(^|\s)--list-test-names-only(\s|$)")


def _validate_non_negative_int(inst: Any, attr: Any, value: int) -> None:
    """Validator ensures integer is zero or positive."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Field '{attr.name}' must be a non-negative integer, got {value!r}")


@define(frozen=True, slots=True)
class DiscoverySettings:
    """Settings consumed read-only by the discovery engine."""

    disabled: bool = field(default=False)
    discover_commandline: str = field(default="--list-tests")
    # Milliseconds; 0 waits forever.
    discover_timeout: int = field(default=1000, validator=_validate_non_negative_int)
    filename_filter: str = field(default=".*")
    include_hidden: bool = field(default=True)
    logging_level: LoggingLevel = field(default=LoggingLevel.NORMAL, converter=LoggingLevel.parse)
    use_xml_discovery: bool = field()
    name_only_discovery: bool = field()

    @use_xml_discovery.default
    def _default_use_xml_discovery(self) -> bool:
        return _RGX_XML_REPORTER.search(self.discover_commandline) is not None

    @name_only_discovery.default
    def _default_name_only_discovery(self) -> bool:
        return _RGX_NAME_ONLY.search(self.discover_commandline) is not None

    @property
    def has_valid_discovery_commandline(self) -> bool:
        return _RGX_VALID_DISCOVERY_COMMANDLINE.search(self.discover_commandline) is not None

    @property
    def timeout_seconds(self) -> float | None:
        """Timeout as asyncio expects it, or None for an unbounded wait."""
        if self.discover_timeout <= 0:
            return None
        return self.discover_timeout / 1000.0


# 🔼⚙️
