#
# src/catchdisc/discovery/validator.py
#
"""
Checks whether a candidate file is a test executable worth running.
"""
import os
import re
from pathlib import Path

import structlog

from catchdisc.discovery.log import DiscoveryLog

log = structlog.get_logger("discovery.validator")


class SourceValidator:
    """Accepts existing files whose stem matches the filename filter."""

    def __init__(self, filename_filter: str, discovery_log: DiscoveryLog):
        self.filename_filter = filename_filter
        self._dlog = discovery_log

    def check(self, source: str | os.PathLike[str]) -> bool:
        try:
            name = Path(source).stem

            self._dlog.debug(f"CheckSource name: {name}\n")

            return re.search(self.filename_filter, name) is not None and os.path.isfile(source)
        except (re.error, TypeError, ValueError, OSError) as e:
            log.debug("Source check failed", source=str(source), error=str(e))
            self._dlog.debug(f"CheckSource Exception: {e}\n")

        return False

# 🔼⚙️
