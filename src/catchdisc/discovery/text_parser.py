#
# src/catchdisc/discovery/text_parser.py
#
"""
Parser for the plain-text test listing printed by `--list-tests`.

The listing looks like::

    All available test cases:
      A test case name that is long enough to be wrapped by the printing tool at
        column width
          [tag1][tag2]

Case lines are indented by two spaces, wrapped name fragments by four and tag
lines by six. The producing tool breaks long words with a trailing '-' at a
fixed width; that hyphen is removed again when the fragment has exactly the
width at which the tool breaks.
"""
import re
from enum import Enum, auto

import structlog

from catchdisc.discovery.protocols import DiscoveryParser
from catchdisc.discovery.tags import HiddenTestFilter, extract_tags, is_tag_group
from catchdisc.exceptions import UnrecognizedProtocolError
from catchdisc.models import TestCase

log = structlog.get_logger("discovery.text_parser")

# Widths at which the listing tool breaks a word and appends '-'.
NAME_WRAP_WIDTH = 77
CONTINUATION_WRAP_WIDTH = 75
TAG_WRAP_WIDTH = 73

_RGX_BANNER = re.compile(r"^All available test cases:|^Matching test cases:")
_RGX_CASE_LINE = re.compile(r"^[ ]{2}([^ ].*)")
_RGX_CONTINUATION_LINE = re.compile(r"^[ ]{4}([^ ].*)")
_RGX_TAGS_LINE = re.compile(r"^[ ]{6}([^ ].*)")
_RGX_NEWLINE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Splits on any newline convention; a trailing newline does not add an empty line."""
    if not text:
        return []
    lines = _RGX_NEWLINE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def join_name_fragment(fragment: str, wrap_width: int) -> str:
    """Prepares a wrapped name fragment for the next one to be appended."""
    if fragment.endswith("-"):
        if len(fragment) == wrap_width:
            return fragment[: wrap_width - 1]
        return fragment
    return fragment + " "


def join_tag_fragment(fragment: str) -> str:
    """Prepares a wrapped tag fragment for the next one to be appended."""
    if fragment.endswith("]"):
        return fragment
    if fragment.endswith("-"):
        if len(fragment) == TAG_WRAP_WIDTH:
            return fragment[: TAG_WRAP_WIDTH - 1]
        return fragment
    return fragment + " "


class _ScanState(Enum):
    AWAITING_BANNER = auto()
    AWAITING_CASE = auto()
    IN_CONTINUATION = auto()
    IN_TAGS = auto()


class DefaultFormatParser(DiscoveryParser):
    """
    Parses the default text listing, or a bare list of names when `name_only` is set.
    """

    def __init__(self, hidden_filter: HiddenTestFilter, name_only: bool = False):
        self.hidden_filter = hidden_filter
        self.name_only = name_only

    def parse(self, output: str, source: str) -> list[TestCase]:
        lines = split_lines(output)
        if self.name_only:
            return self._parse_names(lines, source)
        if not lines:
            return []
        return self._parse_listing(lines, source)

    def _parse_names(self, lines: list[str], source: str) -> list[TestCase]:
        tests = [TestCase(line, source) for line in lines if line]
        return self.hidden_filter.filter(tests)

    def _parse_listing(self, lines: list[str], source: str) -> list[TestCase]:
        tests: list[TestCase] = []
        state = _ScanState.AWAITING_BANNER
        name = ""
        fragment: str | None = None
        tagstr = ""
        index = 0

        while True:
            line = lines[index] if index < len(lines) else None

            if state is _ScanState.AWAITING_BANNER:
                if line is None or not _RGX_BANNER.match(line):
                    raise UnrecognizedProtocolError("Listing does not start with a known banner", source=source)
                state = _ScanState.AWAITING_CASE
                index += 1

            elif state is _ScanState.AWAITING_CASE:
                if line is None:
                    break
                index += 1
                match = _RGX_CASE_LINE.match(line)
                if match:
                    name = match.group(1)
                    fragment = None
                    state = _ScanState.IN_CONTINUATION

            elif state is _ScanState.IN_CONTINUATION:
                content = self._continuation_content(line)
                if content is None:
                    if fragment is not None:
                        name += fragment
                    tagstr = ""
                    state = _ScanState.IN_TAGS
                    continue
                if fragment is None:
                    name = join_name_fragment(name, NAME_WRAP_WIDTH)
                else:
                    name += join_name_fragment(fragment, CONTINUATION_WRAP_WIDTH)
                fragment = content
                index += 1

            elif state is _ScanState.IN_TAGS:
                content = self._tag_content(line)
                if content is None:
                    testcase = TestCase(name, source, tags=extract_tags(tagstr))
                    if self.hidden_filter.can_add(testcase):
                        tests.append(testcase)
                    else:
                        log.debug("Skipping hidden test case", source=source, name=name)
                    state = _ScanState.AWAITING_CASE
                    continue
                tagstr += join_tag_fragment(content)
                index += 1

        return tests

    @staticmethod
    def _continuation_content(line: str | None) -> str | None:
        if line is None:
            return None
        match = _RGX_CONTINUATION_LINE.match(line)
        # A four-space line holding only tags ends the name instead of extending it,
        # so "  Test1\n    [tag1]" yields tags. The cost: a wrapped name whose tail is
        # only bracket groups ("  Other\n    [#45]") loses that tail to the tags.
        if match is None or is_tag_group(match.group(1)):
            return None
        return match.group(1)

    @staticmethod
    def _tag_content(line: str | None) -> str | None:
        if line is None:
            return None
        match = _RGX_TAGS_LINE.match(line)
        if match:
            return match.group(1)
        match = _RGX_CONTINUATION_LINE.match(line)
        if match and is_tag_group(match.group(1)):
            return match.group(1)
        return None

# 🔼⚙️
