#
# src/catchdisc/discovery/engine.py
#
"""
Coordinates discovery across a sequence of test executables.
"""
import asyncio
import os
from collections.abc import Iterable

import structlog

from catchdisc.config.models import DiscoverySettings
from catchdisc.discovery.factory import get_parser
from catchdisc.discovery.log import DiscoveryLog
from catchdisc.discovery.protocols import DiscoveryParser, DiscoveryRunner
from catchdisc.discovery.subprocess_runner import SubprocessDiscoveryRunner
from catchdisc.discovery.validator import SourceValidator
from catchdisc.exceptions import DiscoveryError, MalformedXmlError, ProcessLaunchError
from catchdisc.models import DiscoveryIssue, DiscoveryResult, SourceReport, TestCase
from catchdisc.telemetry import StructLogger

log: StructLogger = structlog.get_logger("discovery.engine")

Source = str | os.PathLike[str]


class DiscoveryEngine:
    """
    Runs each source in listing mode, one at a time, and collects its test cases.

    A failing source never stops the remaining ones; its problem is recorded
    in the discovery log and in its SourceReport.
    """

    def __init__(
        self,
        settings: DiscoverySettings | None = None,
        runner: DiscoveryRunner | None = None,
        parser: DiscoveryParser | None = None,
    ):
        self.settings = settings or DiscoverySettings()
        self._runner = runner or SubprocessDiscoveryRunner()
        self._parser = parser or get_parser(self.settings)
        self._dlog = DiscoveryLog(self.settings.logging_level)
        self._validator = SourceValidator(self.settings.filename_filter, self._dlog)
        self.log = ""

    async def get_tests(self, sources: Iterable[Source]) -> DiscoveryResult:
        self._dlog.reset()
        self.log = ""

        tests: list[TestCase] = []
        reports: list[SourceReport] = []

        if self.settings.disabled or not self.settings.has_valid_discovery_commandline:
            log.debug(
                "Discovery skipped",
                disabled=self.settings.disabled,
                commandline=self.settings.discover_commandline,
            )
            self._dlog.debug(
                "Test adapter disabled or invalid discovery commandline, "
                "should not be able to get here via Test Explorer\n"
            )
            self.log = self._dlog.getvalue()
            return DiscoveryResult(tests=tests, log=self.log, reports=reports)

        for source in sources:
            source = os.fspath(source)
            self._dlog.verbose(f"Source: {source}\n")
            if not os.path.isfile(source):
                self._dlog.verbose("  File not found.\n")
                report = SourceReport(source, issue=DiscoveryIssue.MISSING_SOURCE)
            elif self._validator.check(source):
                found, issue = await self._extract_test_cases(source)
                self._dlog.verbose(f"  Testcase count: {len(found)}\n")
                tests.extend(found)
                report = SourceReport(source, test_count=len(found), issue=issue)
            else:
                self._dlog.verbose("  Invalid source.\n")
                report = SourceReport(source, issue=DiscoveryIssue.REJECTED_SOURCE)
            reports.append(report)
            self._dlog.debug(f"  Accumulated Testcase count: {len(tests)}\n")
            log.info(
                "Source processed",
                source=source,
                test_count=report.test_count,
                issue=report.issue.value if report.issue else None,
                emoji_key="source",
            )

        self.log = self._dlog.getvalue()
        log.info("Discovery complete", sources=len(reports), test_count=len(tests))
        return DiscoveryResult(tests=tests, log=self.log, reports=reports)

    def get_tests_sync(self, sources: Iterable[Source]) -> DiscoveryResult:
        """Runs `get_tests` in a fresh event loop."""
        return asyncio.run(self.get_tests(sources))

    async def _extract_test_cases(self, source: str) -> tuple[list[TestCase], DiscoveryIssue | None]:
        try:
            outcome = await self._runner.run(
                source,
                self.settings.discover_commandline,
                self.settings.timeout_seconds,
                self._dlog,
            )
        except ProcessLaunchError as e:
            self._dlog.normal(f"  Error Occurred (could not start process): {e}\n")
            return [], e.issue

        if self.settings.use_xml_discovery:
            self._dlog.debug(f"  XML Discovery:\n{outcome.output}")
        else:
            self._dlog.debug(f"  Default Discovery:\n{outcome.output}")

        if outcome.issue is not None:
            return [], outcome.issue

        try:
            return self._parser.parse(outcome.output, source), None
        except MalformedXmlError as e:
            log.debug("Ignoring malformed XML output", source=source, error=str(e))
            self._dlog.debug(f"  Ignored XML parse error: {e}\n")
            return [], e.issue
        except DiscoveryError as e:
            log.debug("Unrecognized discovery output", source=source, error=str(e))
            return [], e.issue

# 🔼⚙️
