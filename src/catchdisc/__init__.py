#
# src/catchdisc/__init__.py
#
"""
catchdisc: discovers test cases exposed by self-describing test executables.
"""
from .discovery import DiscoveryEngine
from .models import DiscoveryIssue, DiscoveryResult, LoggingLevel, SourceReport, TestCase

__all__ = [
    "DiscoveryEngine",
    "DiscoveryIssue",
    "DiscoveryResult",
    "LoggingLevel",
    "SourceReport",
    "TestCase",
]

# 🔼⚙️
