#
# src/catchdisc/discovery/log.py
#
"""
Leveled, append-only log buffer filled during one discovery run.
"""
import io

from catchdisc.models import LoggingLevel


class DiscoveryLog:
    """
    Collects discovery messages at or below the configured verbosity.

    Messages are stored verbatim; callers terminate them with a newline.
    """

    def __init__(self, level: LoggingLevel = LoggingLevel.NORMAL):
        self.level = level
        self._buffer = io.StringIO()

    def reset(self) -> None:
        self._buffer = io.StringIO()

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def enabled_for(self, level: LoggingLevel) -> bool:
        return level is not LoggingLevel.QUIET and self.level >= level

    def write(self, level: LoggingLevel, msg: str) -> None:
        if self.enabled_for(level):
            self._buffer.write(msg)

    def normal(self, msg: str) -> None:
        self.write(LoggingLevel.NORMAL, msg)

    def verbose(self, msg: str) -> None:
        self.write(LoggingLevel.VERBOSE, msg)

    def debug(self, msg: str) -> None:
        self.write(LoggingLevel.DEBUG, msg)

# 🔼⚙️
