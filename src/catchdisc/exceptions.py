# src/catchdisc/exceptions.py

"""
Custom exceptions for catchdisc.
"""

from catchdisc.models import DiscoveryIssue


class CatchdiscError(Exception):
    """Base class for all catchdisc errors."""

    pass


class ConfigurationError(CatchdiscError):
    """Raised when discovery settings cannot be loaded or are invalid."""

    pass


class DiscoveryError(CatchdiscError):
    """
    Base class for per-source discovery failures.

    These are raised inside the discovery pipeline and always recovered by the
    engine, which records the `issue` kind on the source's report.
    """

    issue: DiscoveryIssue = DiscoveryIssue.EMPTY_OUTPUT

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: Exception | None = None,
    ):
        self.source = source
        self.details = details
        full_message = message
        if source:
            full_message += f" (Source: '{source}')"
        super().__init__(full_message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class ProcessLaunchError(DiscoveryError):
    """The test executable could not be started."""

    issue = DiscoveryIssue.LAUNCH_ERROR


class UnrecognizedProtocolError(DiscoveryError):
    """The listing did not start with a known banner."""

    issue = DiscoveryIssue.UNRECOGNIZED_PROTOCOL


class MalformedXmlError(DiscoveryError):
    """The XML report could not be parsed or has no Group node."""

    issue = DiscoveryIssue.MALFORMED_XML


# 🔼⚙️
