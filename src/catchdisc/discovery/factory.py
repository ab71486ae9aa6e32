#
# src/catchdisc/discovery/factory.py
#
"""
Factory for creating the parser that matches the configured listing format.
"""
import structlog

from catchdisc.config.models import DiscoverySettings
from catchdisc.discovery.protocols import DiscoveryParser
from catchdisc.discovery.tags import HiddenTestFilter
from catchdisc.discovery.text_parser import DefaultFormatParser
from catchdisc.discovery.xml_parser import XmlReportParser

log = structlog.get_logger("discovery.factory")


def get_parser(settings: DiscoverySettings) -> DiscoveryParser:
    """
    Returns an XML or text parser sharing one hidden-test filter.
    """
    hidden_filter = HiddenTestFilter(settings.include_hidden)
    if settings.use_xml_discovery:
        log.debug("Using XML discovery parser")
        return XmlReportParser(hidden_filter)

    log.debug("Using default discovery parser", name_only=settings.name_only_discovery)
    return DefaultFormatParser(hidden_filter, name_only=settings.name_only_discovery)

# 🔼⚙️
