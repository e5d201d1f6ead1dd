"""Privileged execution capability detection for hmui."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.executor import Executor
    from settings import Settings

log = logging.getLogger(__name__)


def resolve_command_executable(cmd: str) -> Path | None:
    """Resolve a command name or path to its absolute executable path.

    Args:
        cmd: Executable name (searched on PATH) or absolute path

    Returns:
        Resolved Path to executable, or None if not found
    """
    if not cmd:
        return None

    if os.path.isabs(cmd):
        if os.path.isfile(cmd) and os.access(cmd, os.X_OK):
            return Path(cmd).resolve()
        return None

    resolved = shutil.which(cmd)
    return Path(resolved).resolve() if resolved else None


def find_root_wrapper(su_command: str = "su") -> list[str] | None:
    """Find how to run commands as root.

    Returns:
        [] when already root, [<su>, "-c"] when su is available,
        or None when there is no way to get privileges.
    """
    if os.geteuid() == 0:
        return []

    su_path = resolve_command_executable(su_command)
    if su_path:
        return [str(su_path), "-c"]

    return None


def detect_executor(settings: Settings) -> Executor | None:
    """Return a SubprocessExecutor with root privileges, or None if unavailable."""
    from api.executor import SubprocessExecutor

    wrapper = find_root_wrapper(settings.su_command)
    if wrapper is None:
        log.info(f"No root shell found ({settings.su_command} not on PATH)")
        return None

    if wrapper:
        log.info(f"Privileged commands via {wrapper[0]}")
    else:
        log.info("Running as root, executing commands directly")
    return SubprocessExecutor(wrapper)
