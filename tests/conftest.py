import sys
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from catchdisc.config import DiscoverySettings
from catchdisc.discovery import DiscoveryLog, HiddenTestFilter
from catchdisc.models import LoggingLevel

ExecutableFactory = Callable[..., Path]


@pytest.fixture
def make_executable(tmp_path: Path) -> ExecutableFactory:
    """
    Returns a factory that writes an executable Python script acting as a test binary.

    The body is plain Python; `sys` and `time` are already imported.
    """
    if sys.platform == "win32":
        pytest.skip("Script executables with a shebang need a POSIX platform")

    def _make(name: str, body: str) -> Path:
        path = tmp_path / name
        script = f"#!{sys.executable}\nimport sys\nimport time\n" + textwrap.dedent(body)
        path.write_text(script, encoding="utf-8")
        path.chmod(0o755)
        return path

    return _make


@pytest.fixture
def listing_script() -> Callable[[str], str]:
    """Builds a script body that prints `text` to stdout verbatim."""

    def _body(text: str) -> str:
        return f"sys.stdout.write({text!r})\n"

    return _body


@pytest.fixture
def debug_log() -> DiscoveryLog:
    return DiscoveryLog(LoggingLevel.DEBUG)


@pytest.fixture
def exclude_hidden() -> HiddenTestFilter:
    return HiddenTestFilter(include_hidden=False)


@pytest.fixture
def include_hidden() -> HiddenTestFilter:
    return HiddenTestFilter(include_hidden=True)


@pytest.fixture
def default_settings() -> DiscoverySettings:
    return DiscoverySettings(logging_level=LoggingLevel.DEBUG, include_hidden=False)
