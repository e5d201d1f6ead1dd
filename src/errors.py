"""Error taxonomy for the command channel client."""

from __future__ import annotations


class ClientError(Exception):
    """Base class for command channel failures."""


class CapabilityAbsentError(ClientError):
    """Raised when no privileged execution capability is available."""

    def __init__(self, operation: str = "") -> None:
        message = "No privileged execution capability available"
        if operation:
            message = f"{message} (cannot {operation})"
        super().__init__(message)


class RemoteFailureError(ClientError):
    """Raised when a remote command exits non-zero.

    The message always contains the remote stderr so callers can surface it.
    """

    def __init__(self, action: str, exit_code: int, stderr: str) -> None:
        self.action = action
        self.exit_code = exit_code
        self.stderr = stderr
        detail = stderr.strip() or f"exit code {exit_code}"
        super().__init__(f"Failed to {action}: {detail}")


class MalformedOutputError(ClientError):
    """Raised when command output cannot be parsed into the expected shape."""
