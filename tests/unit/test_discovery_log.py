"""Tests for the leveled discovery log."""

import pytest

from catchdisc.discovery import DiscoveryLog
from catchdisc.models import LoggingLevel


def _fill(dlog: DiscoveryLog) -> str:
    dlog.normal("normal\n")
    dlog.verbose("verbose\n")
    dlog.debug("debug\n")
    return dlog.getvalue()


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (LoggingLevel.QUIET, ""),
        (LoggingLevel.NORMAL, "normal\n"),
        (LoggingLevel.VERBOSE, "normal\nverbose\n"),
        (LoggingLevel.DEBUG, "normal\nverbose\ndebug\n"),
    ],
)
def test_level_filtering(level: LoggingLevel, expected: str) -> None:
    assert _fill(DiscoveryLog(level)) == expected


def test_reset_clears_buffer() -> None:
    dlog = DiscoveryLog(LoggingLevel.DEBUG)
    dlog.debug("first run\n")

    dlog.reset()
    dlog.normal("second run\n")

    assert dlog.getvalue() == "second run\n"


def test_messages_are_kept_verbatim() -> None:
    dlog = DiscoveryLog(LoggingLevel.NORMAL)
    dlog.normal("no newline")
    dlog.normal(" appended\n")

    assert dlog.getvalue() == "no newline appended\n"
