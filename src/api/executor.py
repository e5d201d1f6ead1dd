"""Execution capability: run a command, get back exit code and output streams."""

from __future__ import annotations

import asyncio
import logging
import shlex
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from errors import CapabilityAbsentError, MalformedOutputError, RemoteFailureError

log = logging.getLogger(__name__)

# Exit code reported when the command could not be spawned at all (as sh does)
SPAWN_FAILURE_EXIT_CODE = 127


@dataclass(frozen=True)
class ExecResult:
    """Outcome of one command invocation."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class Executor(ABC):
    """Runs an argument vector on the host with the privileges of the mount manager.

    Arguments are never concatenated into a shell line by callers; each element
    of argv reaches the remote program as one argument.
    """

    @abstractmethod
    async def run(self, argv: Sequence[str]) -> ExecResult:
        """Run argv and wait for it to finish."""
        ...


class SubprocessExecutor(Executor):
    """Executor backed by local subprocesses.

    With a wrapper such as ["su", "-c"], the argv is quoted with shlex.join and
    handed to the wrapper as a single script argument.
    """

    def __init__(self, wrapper: Sequence[str] | None = None) -> None:
        self.wrapper = list(wrapper) if wrapper else []

    def build_argv(self, argv: Sequence[str]) -> list[str]:
        """Return the argv actually spawned for a logical command."""
        if not self.wrapper:
            return list(argv)
        return [*self.wrapper, shlex.join(argv)]

    async def run(self, argv: Sequence[str]) -> ExecResult:
        cmd = self.build_argv(argv)
        log.debug(f"exec: {shlex.join(cmd)}")
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            log.warning(f"Failed to spawn {cmd[0]}: {e}")
            return ExecResult(SPAWN_FAILURE_EXIT_CODE, "", str(e))

        try:
            stdout, stderr = await proc.communicate()
        except asyncio.CancelledError:
            if proc.returncode is None:
                log.warning(f"Cancelled, killing {cmd[0]} (pid {proc.pid})")
                proc.kill()
                await proc.wait()
            raise
        result = ExecResult(
            exit_code=proc.returncode if proc.returncode is not None else SPAWN_FAILURE_EXIT_CODE,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
        log.debug(f"exit {result.exit_code}: {argv[0] if argv else ''}")
        return result


async def read_output(executor: Executor | None, argv: Sequence[str]) -> str:
    """Run a read command and return its stdout.

    Raises:
        CapabilityAbsentError: If there is no executor
        RemoteFailureError: If the command exits non-zero
        MalformedOutputError: If the command printed nothing
    """
    if executor is None:
        raise CapabilityAbsentError(f"run {argv[0]}")
    result = await executor.run(argv)
    if not result.ok:
        raise RemoteFailureError(f"run {argv[0]}", result.exit_code, result.stderr)
    if not result.stdout.strip():
        raise MalformedOutputError(f"{argv[0]} produced no output")
    return result.stdout


async def run_write(executor: Executor | None, argv: Sequence[str], action: str) -> ExecResult:
    """Run a write command, raising on any failure.

    Args:
        executor: Execution capability (None when absent)
        argv: Command to run
        action: Human description used in error messages (e.g. "save config")

    Raises:
        CapabilityAbsentError: If there is no executor
        RemoteFailureError: If the command exits non-zero (message carries stderr)
    """
    if executor is None:
        raise CapabilityAbsentError(action)
    result = await executor.run(argv)
    if not result.ok:
        log.error(f"Failed to {action}: exit {result.exit_code}: {result.stderr.strip()}")
        raise RemoteFailureError(action, result.exit_code, result.stderr)
    return result
