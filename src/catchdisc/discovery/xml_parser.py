#
# src/catchdisc/discovery/xml_parser.py
#
"""
Parser for the XML test listing.

Test cases are read from the first `Group` element. Both attribute style
(`<TestCase name=".." tags="[a][b]" filename=".." line=".."/>`) and element
style (`<Name>`, `<Tags>`, `<SourceInfo>`) are understood.
"""
import xml.etree.ElementTree as ET

import structlog

from catchdisc.discovery.protocols import DiscoveryParser
from catchdisc.discovery.tags import HiddenTestFilter, extract_tags
from catchdisc.exceptions import MalformedXmlError
from catchdisc.models import TestCase

log = structlog.get_logger("discovery.xml_parser")

NODE_GROUP = "Group"
NODE_TESTCASE = "TestCase"


def _child_text(node: ET.Element, path: str) -> str | None:
    child = node.find(path)
    if child is None or child.text is None:
        return None
    return child.text.strip()


def _parse_line(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        line = int(value)
    except ValueError:
        return None
    return line if line >= 0 else None


def read_tags(node: ET.Element) -> list[str]:
    """Collects tags from a `tags` attribute and/or a nested `Tags` element."""
    tags = extract_tags(node.get("tags", ""))
    tags_node = node.find("Tags")
    if tags_node is not None:
        tag_nodes = tags_node.findall("Tag")
        if tag_nodes:
            for tag_node in tag_nodes:
                text = (tag_node.text or "").strip()
                if text.startswith("["):
                    tags.extend(extract_tags(text))
                elif text and "[" not in text and "]" not in text:
                    tags.append(text)
        else:
            tags.extend(extract_tags(tags_node.text or ""))
    return tags


class XmlReportParser(DiscoveryParser):
    """Builds test cases from the `TestCase` children of the report's `Group`."""

    def __init__(self, hidden_filter: HiddenTestFilter):
        self.hidden_filter = hidden_filter

    def parse(self, output: str, source: str) -> list[TestCase]:
        try:
            root = ET.fromstring(output.lstrip("\ufeff \t\r\n"))
        except ET.ParseError as e:
            raise MalformedXmlError(f"Invalid XML: {e}", source=source, details=e) from e

        group = root if root.tag == NODE_GROUP else root.find(f".//{NODE_GROUP}")
        if group is None:
            raise MalformedXmlError(f"No {NODE_GROUP} element found", source=source)

        tests: list[TestCase] = []
        for node in group:
            if node.tag != NODE_TESTCASE:
                continue
            testcase = self._read_testcase(node, source)
            if testcase is None:
                continue
            if self.hidden_filter.can_add(testcase):
                tests.append(testcase)
            else:
                log.debug("Skipping hidden test case", source=source, name=testcase.name)
        return tests

    @staticmethod
    def _read_testcase(node: ET.Element, source: str) -> TestCase | None:
        name = node.get("name") or _child_text(node, "Name")
        if not name:
            log.debug("Skipping TestCase element without a name", source=source)
            return None
        filename = node.get("filename") or _child_text(node, "SourceInfo/File")
        line = _parse_line(node.get("line") or _child_text(node, "SourceInfo/Line"))
        return TestCase(
            name,
            source,
            filename=filename or None,
            line=line,
            tags=read_tags(node),
        )

# 🔼⚙️
