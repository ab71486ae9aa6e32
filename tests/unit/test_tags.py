#
# tests/unit/test_tags.py
#
"""
Tests for tag extraction and hidden-test filtering.
"""

import pytest

from catchdisc.discovery.tags import HiddenTestFilter, extract_tags, is_hidden_tag, is_tag_group
from catchdisc.models import TestCase


@pytest.mark.parametrize(
    ("tagstr", "expected"),
    [
        ("", []),
        ("[a]", ["a"]),
        ("[a][b][c]", ["a", "b", "c"]),
        ("[with space][x]", ["with space", "x"]),
        ("[.][slow]", [".", "slow"]),
        ("[a][b", ["a"]),
        ("a][b]", ["b"]),
        ("[][a]", ["a"]),
    ],
)
def test_extract_tags(tagstr: str, expected: list[str]) -> None:
    assert extract_tags(tagstr) == expected


@pytest.mark.parametrize("tag", [".", ".integration", "!hide"])
def test_hidden_tags(tag: str) -> None:
    assert is_hidden_tag(tag)


@pytest.mark.parametrize("tag", ["hide", "slow", "!hideme", "a.b", "!mayfail"])
def test_visible_tags(tag: str) -> None:
    assert not is_hidden_tag(tag)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("[a]", True), ("[a][b c]", True), ("[a] trailing", False), ("name", False), ("[]", False)],
)
def test_is_tag_group(text: str, expected: bool) -> None:
    assert is_tag_group(text) is expected


class TestHiddenTestFilter:
    def test_excludes_hidden_when_not_included(self) -> None:
        hidden_filter = HiddenTestFilter(include_hidden=False)

        assert not hidden_filter.can_add(TestCase("A", "/x", tags=["slow", "."]))
        assert not hidden_filter.can_add(TestCase("B", "/x", tags=["!hide"]))
        assert hidden_filter.can_add(TestCase("C", "/x", tags=["slow"]))
        assert hidden_filter.can_add(TestCase("D", "/x"))

    def test_includes_everything_when_included(self) -> None:
        hidden_filter = HiddenTestFilter(include_hidden=True)

        assert hidden_filter.can_add(TestCase("A", "/x", tags=["."]))
        assert hidden_filter.can_add(TestCase("C", "/x", tags=["slow"]))

    def test_filter_preserves_order(self) -> None:
        hidden_filter = HiddenTestFilter(include_hidden=False)
        cases = [
            TestCase("one", "/x"),
            TestCase("two", "/x", tags=[".wip"]),
            TestCase("three", "/x", tags=["fast"]),
        ]

        assert [case.name for case in hidden_filter.filter(cases)] == ["one", "three"]
