#
# src/catchdisc/discovery/subprocess_runner.py
#
"""
Runs test executables in listing mode using asyncio.subprocess.
"""
import asyncio
import shlex
import subprocess
import sys

import structlog

from catchdisc.discovery.log import DiscoveryLog
from catchdisc.discovery.protocols import DiscoveryRunner, RunOutcome
from catchdisc.exceptions import ProcessLaunchError
from catchdisc.models import DiscoveryIssue

log = structlog.get_logger("discovery.runner")

# Seconds to wait for pipes to close once the process has exited or was killed.
KILL_DRAIN_GRACE = 2.0
# Bytes per read while draining a pipe.
READ_CHUNK_SIZE = 65536


def split_commandline(commandline: str) -> list[str]:
    """Splits the discovery command line into arguments without invoking a shell."""
    return shlex.split(commandline, posix=sys.platform != "win32")


async def _drain(stream: asyncio.StreamReader | None, buffer: bytearray) -> None:
    """Reads `stream` into `buffer` until EOF; what was read survives cancellation."""
    if stream is None:
        return
    while True:
        chunk = await stream.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        buffer.extend(chunk)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class SubprocessDiscoveryRunner(DiscoveryRunner):
    """
    Implements the DiscoveryRunner protocol with asyncio.create_subprocess_exec.

    Standard output and standard error are drained by two concurrent tasks
    while the process runs, so neither pipe can fill up and block the child.
    """

    def __init__(self, kill_drain_grace: float = KILL_DRAIN_GRACE):
        self.kill_drain_grace = kill_drain_grace

    async def run(
        self,
        executable: str,
        commandline: str,
        timeout: float | None,
        discovery_log: DiscoveryLog,
    ) -> RunOutcome:
        runner_log = log.bind(source=executable, commandline=commandline, timeout=timeout)
        runner_log.debug("Starting discovery process")

        kwargs = {}
        if sys.platform == "win32":
            kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW

        try:
            process = await asyncio.create_subprocess_exec(
                executable,
                *split_commandline(commandline),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                **kwargs,
            )
        except ValueError as e:
            runner_log.error("Invalid discovery command line", error=str(e))
            raise ProcessLaunchError(f"Invalid discovery command line: {e}", source=executable, details=e) from e
        except OSError as e:
            runner_log.error("Failed to start discovery process", error=str(e))
            raise ProcessLaunchError(f"Failed to start process: {e}", source=executable, details=e) from e

        stdout_buffer = bytearray()
        stderr_buffer = bytearray()
        readers = {
            asyncio.create_task(_drain(process.stdout, stdout_buffer)),
            asyncio.create_task(_drain(process.stderr, stderr_buffer)),
        }
        # Process.wait() also waits for the pipes to close, which a grandchild can delay.
        exit_task = asyncio.create_task(process.wait())

        try:
            await asyncio.wait({exit_task}, timeout=timeout)
            timed_out = process.returncode is None
            if timed_out:
                self._kill(process)
            elif not exit_task.done():
                runner_log.debug("Process exited but its pipes are still open")
            await self._finish(process, exit_task, readers)
        except asyncio.CancelledError:
            self._kill(process)
            for task in (*readers, exit_task):
                task.cancel()
            self._close_transport(process)
            raise

        stdout = _decode(stdout_buffer)
        stderr = _decode(stderr_buffer)
        exit_code = process.returncode

        if timed_out:
            return self._timeout_outcome(executable, stdout, exit_code, discovery_log)

        runner_log.debug(
            "Discovery process finished",
            exit_code=exit_code,
            stdout_len=len(stdout),
            stderr_len=len(stderr),
        )

        if stderr:
            runner_log.warning("Discovery process wrote to standard error", exit_code=exit_code)
            discovery_log.normal(f"  Error Occurred (exit code {exit_code}):\n{stderr}")
            discovery_log.debug(f"  output:\n{stdout}")
            return RunOutcome(issue=DiscoveryIssue.PROCESS_ERROR, exit_code=exit_code, stderr=stderr)

        if not stdout:
            discovery_log.debug("  No output\n")
            return RunOutcome(issue=DiscoveryIssue.EMPTY_OUTPUT, exit_code=exit_code)

        return RunOutcome(output=stdout, exit_code=exit_code)

    async def _finish(
        self,
        process: asyncio.subprocess.Process,
        exit_task: asyncio.Task,
        readers: set[asyncio.Task],
    ) -> None:
        """Waits for the readers to hit EOF, then gives up on pipes a grandchild keeps open."""
        _, pending = await asyncio.wait(readers, timeout=self.kill_drain_grace)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
            # Closing the pipes lets Process.wait() complete.
            self._close_transport(process)

        _, pending = await asyncio.wait({exit_task}, timeout=self.kill_drain_grace)
        if pending:
            exit_task.cancel()
            await asyncio.gather(exit_task, return_exceptions=True)
        self._close_transport(process)

    def _timeout_outcome(
        self,
        executable: str,
        stdout: str,
        exit_code: int | None,
        discovery_log: DiscoveryLog,
    ) -> RunOutcome:
        log.warning(
            "Discovery timeout, process killed",
            source=executable,
            discarded_len=len(stdout),
            emoji_key="timeout",
        )
        discovery_log.normal(f"  Warning: Discovery timeout for {executable}\n")
        if not stdout:
            discovery_log.verbose("  Killed process. There was no output.\n")
        else:
            discovery_log.verbose(f"  Killed process. Threw away following output:\n{stdout}")
        return RunOutcome(issue=DiscoveryIssue.TIMEOUT, exit_code=exit_code)

    @staticmethod
    def _kill(process: asyncio.subprocess.Process) -> None:
        try:
            process.kill()
        except ProcessLookupError:
            pass

    @staticmethod
    def _close_transport(process: asyncio.subprocess.Process) -> None:
        # asyncio exposes no public way to release the pipes of a finished process.
        transport = getattr(process, "_transport", None)
        if transport is not None:
            transport.close()

# 🔼⚙️
