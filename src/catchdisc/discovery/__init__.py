#
# src/catchdisc/discovery/__init__.py
#
"""
Test discovery sub-package for catchdisc.
"""
from .engine import DiscoveryEngine
from .factory import get_parser
from .log import DiscoveryLog
from .protocols import DiscoveryParser, DiscoveryRunner, RunOutcome
from .subprocess_runner import SubprocessDiscoveryRunner
from .tags import HiddenTestFilter, extract_tags, is_hidden_tag
from .text_parser import DefaultFormatParser
from .validator import SourceValidator
from .xml_parser import XmlReportParser

__all__ = [
    "DefaultFormatParser",
    "DiscoveryEngine",
    "DiscoveryLog",
    "DiscoveryParser",
    "DiscoveryRunner",
    "HiddenTestFilter",
    "RunOutcome",
    "SourceValidator",
    "SubprocessDiscoveryRunner",
    "XmlReportParser",
    "extract_tags",
    "get_parser",
    "is_hidden_tag",
]

# 🔼⚙️
