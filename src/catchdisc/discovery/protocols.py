#
# src/catchdisc/discovery/protocols.py
#
"""
Defines protocols and data structures for the discovery pipeline.
"""
from typing import Protocol, runtime_checkable

from attrs import define, field

from catchdisc.discovery.log import DiscoveryLog
from catchdisc.models import DiscoveryIssue, TestCase


@define(frozen=True, slots=True)
class RunOutcome:
    """
    Result of running a test executable with the discovery command line.

    `output` is the text to parse. It is empty whenever `issue` is set.
    """
    output: str = field(default="")
    issue: DiscoveryIssue | None = field(default=None)
    exit_code: int | None = field(default=None)
    stderr: str = field(default="")


@runtime_checkable
class DiscoveryRunner(Protocol):
    """
    Protocol for running a test executable in listing mode.
    """
    async def run(
        self,
        executable: str,
        commandline: str,
        timeout: float | None,
        discovery_log: DiscoveryLog,
    ) -> RunOutcome:
        """
        Runs `executable` with `commandline` and captures its listing.

        Args:
            executable: Path of the test executable.
            commandline: Discovery arguments, split without a shell.
            timeout: Seconds to wait for exit, or None to wait indefinitely.
            discovery_log: Sink for user-facing diagnostics.

        Raises:
            ProcessLaunchError: The executable could not be started.
        """
        ...


@runtime_checkable
class DiscoveryParser(Protocol):
    """
    Protocol for turning listing output into test cases.
    """
    def parse(self, output: str, source: str) -> list[TestCase]:
        """
        Raises:
            DiscoveryError: The output is not in the expected format.
        """
        ...

# 🔼⚙️
