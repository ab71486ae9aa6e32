#
# tests/unit/test_models.py
#
"""
Tests for the discovery value records.
"""

import attrs
import pytest

from catchdisc.models import DiscoveryIssue, DiscoveryResult, LoggingLevel, SourceReport, TestCase


class TestTestCase:
    def test_defaults(self) -> None:
        testcase = TestCase("Name", "/bin/tests")

        assert testcase.filename is None
        assert testcase.line is None
        assert testcase.tags == ()

    def test_tags_are_stored_as_tuple_in_order(self) -> None:
        testcase = TestCase("Name", "/bin/tests", tags=["b", "a"])

        assert testcase.tags == ("b", "a")

    @pytest.mark.parametrize("field_name", ["name", "source"])
    def test_rejects_empty_required_fields(self, field_name: str) -> None:
        kwargs = {"name": "Name", "source": "/bin/tests", field_name: ""}
        with pytest.raises(ValueError, match=field_name):
            TestCase(**kwargs)

    def test_rejects_bracketed_tags(self) -> None:
        with pytest.raises(ValueError, match="bracket"):
            TestCase("Name", "/bin/tests", tags=["[tag]"])

    def test_rejects_negative_line(self) -> None:
        with pytest.raises(ValueError):
            TestCase("Name", "/bin/tests", line=-1)

    def test_is_immutable(self) -> None:
        testcase = TestCase("Name", "/bin/tests")
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            testcase.name = "Other"  # type: ignore[misc]


class TestLoggingLevel:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("debug", LoggingLevel.DEBUG),
            ("Normal", LoggingLevel.NORMAL),
            (" VERBOSE ", LoggingLevel.VERBOSE),
            (0, LoggingLevel.QUIET),
            (LoggingLevel.NORMAL, LoggingLevel.NORMAL),
        ],
    )
    def test_parse(self, value, expected: LoggingLevel) -> None:
        assert LoggingLevel.parse(value) is expected

    def test_parse_rejects_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Invalid logging level"):
            LoggingLevel.parse("chatty")

    def test_levels_are_ordered(self) -> None:
        assert LoggingLevel.QUIET < LoggingLevel.NORMAL < LoggingLevel.VERBOSE < LoggingLevel.DEBUG


def test_result_count_matches_tests() -> None:
    result = DiscoveryResult(
        tests=[TestCase("A", "/x"), TestCase("B", "/x")],
        reports=[SourceReport("/x", test_count=2), SourceReport("/y", issue=DiscoveryIssue.TIMEOUT)],
    )

    assert result.count == 2
    assert result.reports[0].ok
    assert not result.reports[1].ok
