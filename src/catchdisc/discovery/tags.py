#
# src/catchdisc/discovery/tags.py
#
"""
Tag string parsing and hidden-test filtering shared by both listing formats.
"""
import re
from collections.abc import Iterable

from catchdisc.models import TestCase

_RGX_TAG = re.compile(r"\[([^\[\]]+)\]")
# Catch2 hides test cases tagged with a leading '.' (e.g. "[.]", "[.slow]") or "[!hide]".
_RGX_HIDDEN_TAG = re.compile(r"^\.|^!hide$")
_RGX_TAG_GROUP = re.compile(r"^(?:\[[^\[\]]+\])+$")


def extract_tags(tagstr: str) -> list[str]:
    """
    Splits "[a][b][c]" into ["a", "b", "c"].

    Unbalanced or empty brackets are skipped, so malformed input yields
    whatever complete tags it holds.
    """
    return _RGX_TAG.findall(tagstr)


def is_hidden_tag(tag: str) -> bool:
    return _RGX_HIDDEN_TAG.match(tag) is not None


def is_tag_group(text: str) -> bool:
    """True when `text` consists solely of one or more bracketed tags."""
    return _RGX_TAG_GROUP.match(text) is not None


class HiddenTestFilter:
    """Decides whether a discovered test case is reported."""

    def __init__(self, include_hidden: bool):
        self.include_hidden = include_hidden

    def can_add(self, testcase: TestCase) -> bool:
        if self.include_hidden:
            return True
        return not any(is_hidden_tag(tag) for tag in testcase.tags)

    def filter(self, testcases: Iterable[TestCase]) -> list[TestCase]:
        return [testcase for testcase in testcases if self.can_add(testcase)]

# 🔼⚙️
