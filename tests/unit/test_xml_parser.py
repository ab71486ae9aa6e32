#
# tests/unit/test_xml_parser.py
#
"""
Tests for the XML report parser.
"""

import pytest

from catchdisc.discovery import HiddenTestFilter, XmlReportParser
from catchdisc.exceptions import MalformedXmlError
from catchdisc.models import DiscoveryIssue

SOURCE = "/opt/tests/Catch_unit"

CATCH_REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<Catch name="Catch_unit">
  <Group name="Catch_unit">
    <TestCase name="Vectors resize" tags="[vector][.wip]" filename="/src/vector.cpp" line="12"/>
    <TestCase name="Factorials" tags="[math]" filename="/src/math.cpp" line="4"/>
    <OverallResults successes="0" failures="0" expectedFailures="0"/>
    <TestCase name="Untagged" filename="/src/misc.cpp" line="99"/>
  </Group>
  <OverallResults successes="0" failures="0" expectedFailures="0"/>
</Catch>
"""


@pytest.fixture
def parser(exclude_hidden: HiddenTestFilter) -> XmlReportParser:
    return XmlReportParser(exclude_hidden)


def test_nested_tag_elements(parser: XmlReportParser) -> None:
    output = '<Group><TestCase name="X" filename="f.cpp" line="10"><Tags><Tag>slow</Tag></Tags></TestCase></Group>'

    tests = parser.parse(output, SOURCE)

    assert len(tests) == 1
    assert tests[0].name == "X"
    assert tests[0].source == SOURCE
    assert tests[0].filename == "f.cpp"
    assert tests[0].line == 10
    assert tests[0].tags == ("slow",)


def test_attribute_style_report(parser: XmlReportParser) -> None:
    tests = parser.parse(CATCH_REPORT, SOURCE)

    assert [(t.name, t.filename, t.line, t.tags) for t in tests] == [
        ("Factorials", "/src/math.cpp", 4, ("math",)),
        ("Untagged", "/src/misc.cpp", 99, ()),
    ]


def test_hidden_included_on_request(include_hidden: HiddenTestFilter) -> None:
    tests = XmlReportParser(include_hidden).parse(CATCH_REPORT, SOURCE)

    assert [t.name for t in tests] == ["Vectors resize", "Factorials", "Untagged"]
    assert tests[0].tags == ("vector", ".wip")


def test_element_style_report(parser: XmlReportParser) -> None:
    output = """<MatchingTests>
      <Group>
        <TestCase>
          <Name>Element style</Name>
          <ClassName/>
          <Tags>[a][b]</Tags>
          <SourceInfo>
            <File>/src/elements.cpp</File>
            <Line>7</Line>
          </SourceInfo>
        </TestCase>
      </Group>
    </MatchingTests>"""

    tests = parser.parse(output, SOURCE)

    assert [(t.name, t.filename, t.line, t.tags) for t in tests] == [
        ("Element style", "/src/elements.cpp", 7, ("a", "b")),
    ]


def test_optional_location(parser: XmlReportParser) -> None:
    tests = parser.parse('<Group><TestCase name="Bare"/></Group>', SOURCE)

    assert tests[0].filename is None
    assert tests[0].line is None


def test_invalid_line_is_ignored(parser: XmlReportParser) -> None:
    tests = parser.parse('<Group><TestCase name="Odd" line="abc"/></Group>', SOURCE)

    assert tests[0].line is None


def test_nameless_testcase_is_skipped(parser: XmlReportParser) -> None:
    tests = parser.parse('<Group><TestCase line="3"/><TestCase name="Named"/></Group>', SOURCE)

    assert [t.name for t in tests] == ["Named"]


def test_only_direct_testcase_children_are_read(parser: XmlReportParser) -> None:
    output = '<Group><Section><TestCase name="Nested"/></Section><TestCase name="Direct"/></Group>'

    assert [t.name for t in parser.parse(output, SOURCE)] == ["Direct"]


def test_hidden_marker_in_tag_elements(parser: XmlReportParser) -> None:
    output = '<Group><TestCase name="H"><Tags><Tag>!hide</Tag></Tags></TestCase></Group>'

    assert parser.parse(output, SOURCE) == []


def test_leading_bom_is_tolerated(parser: XmlReportParser) -> None:
    tests = parser.parse('\ufeff<Group><TestCase name="Bom"/></Group>', SOURCE)

    assert [t.name for t in tests] == ["Bom"]


@pytest.mark.parametrize(
    "output",
    [
        "",
        "All available test cases:\n  Test1\n",
        "<Group><TestCase name='unterminated'></Group>",
        "<Catch><OverallResults/></Catch>",
    ],
)
def test_malformed_or_groupless_output(parser: XmlReportParser, output: str) -> None:
    with pytest.raises(MalformedXmlError) as exc_info:
        parser.parse(output, SOURCE)

    assert exc_info.value.issue is DiscoveryIssue.MALFORMED_XML
    assert exc_info.value.source == SOURCE
