"""Shared fixtures for hmui tests."""

import json
from typing import Sequence

import pytest

from api import CommandSet, MockClient, RealClient
from api.executor import ExecResult, Executor
from settings import Settings

TEST_BINARY = "/data/adb/modules/hybrid_mount/hybrid-mount"
TEST_STATE_FILE = "/data/adb/meta-hybrid/run/daemon_state.json"


class FakeExecutor(Executor):
    """Scripted executor for tests.

    Responses are keyed by argv tuple. An exact match wins, then the longest
    scripted prefix; anything unscripted exits 1 with "not scripted" on stderr.
    Every invocation is recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, ...], ExecResult | Exception] = {}
        self.calls: list[list[str]] = []

    def script(self, argv: Sequence[str], stdout: str = "", exit_code: int = 0, stderr: str = "") -> None:
        self.responses[tuple(argv)] = ExecResult(exit_code, stdout, stderr)

    def script_json(self, argv: Sequence[str], value) -> None:
        self.script(argv, json.dumps(value))

    def fail(self, argv: Sequence[str], stderr: str = "error", exit_code: int = 1) -> None:
        self.script(argv, "", exit_code, stderr)

    def raise_on(self, argv: Sequence[str], exc: Exception) -> None:
        self.responses[tuple(argv)] = exc

    def was_called(self, prefix: Sequence[str]) -> bool:
        prefix = list(prefix)
        return any(call[: len(prefix)] == prefix for call in self.calls)

    def _lookup(self, key: tuple[str, ...]) -> ExecResult | Exception:
        if key in self.responses:
            return self.responses[key]
        prefixes = [k for k in self.responses if key[: len(k)] == k]
        if prefixes:
            return self.responses[max(prefixes, key=len)]
        return ExecResult(1, "", "not scripted")

    async def run(self, argv: Sequence[str]) -> ExecResult:
        self.calls.append(list(argv))
        response = self._lookup(tuple(argv))
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def settings():
    """Settings pointing at the default on-device paths."""
    return Settings(binary=TEST_BINARY, state_file=TEST_STATE_FILE)


@pytest.fixture
def commands(settings):
    return CommandSet.from_settings(settings)


@pytest.fixture
def executor():
    """A FakeExecutor with nothing scripted."""
    return FakeExecutor()


@pytest.fixture
def client(executor, settings):
    """RealClient wired to the FakeExecutor."""
    return RealClient(executor, settings)


@pytest.fixture
def offline_client(settings):
    """RealClient with no execution capability."""
    return RealClient(None, settings)


@pytest.fixture
def mock_client():
    """MockClient without simulated latency."""
    return MockClient(latency=0)
