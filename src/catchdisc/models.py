#
# src/catchdisc/models.py
#
"""
Value records shared by the discovery pipeline.
"""
from enum import Enum, IntEnum
from typing import Any

from attrs import define, field


class LoggingLevel(IntEnum):
    """Verbosity of the discovery log. Higher levels include all lower ones."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3

    @classmethod
    def parse(cls, value: "str | int | LoggingLevel") -> "LoggingLevel":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(
                f"Invalid logging level '{value}'. Must be one of {[lvl.name for lvl in cls]}."
            ) from None


class DiscoveryIssue(Enum):
    """Why a source produced no (or fewer) test cases."""

    MISSING_SOURCE = "missing_source"
    REJECTED_SOURCE = "rejected_source"
    TIMEOUT = "timeout"
    PROCESS_ERROR = "process_error"
    LAUNCH_ERROR = "launch_error"
    EMPTY_OUTPUT = "empty_output"
    MALFORMED_XML = "malformed_xml"
    UNRECOGNIZED_PROTOCOL = "unrecognized_protocol"


def _validate_non_empty(inst: Any, attr: Any, value: str) -> None:
    if not value:
        raise ValueError(f"TestCase field '{attr.name}' must be a non-empty string")


def _validate_tags(inst: Any, attr: Any, value: tuple[str, ...]) -> None:
    for tag in value:
        if "[" in tag or "]" in tag:
            raise ValueError(f"Tag '{tag}' must not contain bracket characters")


def _validate_line(inst: Any, attr: Any, value: int | None) -> None:
    if value is not None and value < 0:
        raise ValueError(f"Line number must be non-negative, got {value}")


@define(frozen=True, slots=True)
class TestCase:
    """A single test case reported by a test executable."""

    __test__ = False  # not a pytest test class

    name: str = field(validator=_validate_non_empty)
    source: str = field(validator=_validate_non_empty)
    filename: str | None = field(default=None, kw_only=True)
    line: int | None = field(default=None, kw_only=True, validator=_validate_line)
    tags: tuple[str, ...] = field(default=(), kw_only=True, converter=tuple, validator=_validate_tags)


@define(frozen=True, slots=True)
class SourceReport:
    """Outcome of discovery for one source."""

    source: str
    test_count: int = field(default=0)
    issue: DiscoveryIssue | None = field(default=None)

    @property
    def ok(self) -> bool:
        return self.issue is None


@define(frozen=True, slots=True)
class DiscoveryResult:
    """Everything a single `get_tests` call produces."""

    tests: list[TestCase] = field(factory=list)
    log: str = field(default="")
    reports: list[SourceReport] = field(factory=list)

    @property
    def count(self) -> int:
        return len(self.tests)


# 🔼⚙️
