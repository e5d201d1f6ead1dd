"""Runtime settings resolved from the environment and CLI overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping

from constants import DEFAULT_BINARY, DEFAULT_STATE_FILE

log = logging.getLogger(__name__)

ENV_BINARY = "HMUI_BINARY"
ENV_STATE_FILE = "HMUI_STATE_FILE"
ENV_DEV = "HMUI_DEV"
ENV_SU = "HMUI_SU"
ENV_MOCK_LATENCY = "HMUI_MOCK_LATENCY"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Where the privileged binary lives and how to reach it."""

    binary: str = DEFAULT_BINARY
    state_file: str = DEFAULT_STATE_FILE
    dev_mode: bool = False  # Development build: always bind the mock client
    su_command: str = "su"
    mock_latency: float = 1.0

    @property
    def module_dir(self) -> str:
        """Directory containing the binary (and its module.prop)."""
        return self.binary.rsplit("/", 1)[0] if "/" in self.binary else "."


def _parse_latency(value: str | None) -> float:
    if value is None:
        return 1.0
    try:
        latency = float(value)
    except ValueError:
        log.warning(f"Ignoring invalid {ENV_MOCK_LATENCY}={value!r}")
        return 1.0
    return max(latency, 0.0)


def load_settings(env: Mapping[str, str] | None = None, **overrides) -> Settings:
    """Build Settings from environment variables, then apply overrides.

    Args:
        env: Environment mapping (defaults to os.environ)
        **overrides: Field values that win over the environment; None values are ignored

    Returns:
        Resolved Settings
    """
    if env is None:
        env = os.environ

    settings = Settings(
        binary=env.get(ENV_BINARY) or DEFAULT_BINARY,
        state_file=env.get(ENV_STATE_FILE) or DEFAULT_STATE_FILE,
        dev_mode=env.get(ENV_DEV, "").strip().lower() in _TRUTHY,
        su_command=env.get(ENV_SU) or "su",
        mock_latency=_parse_latency(env.get(ENV_MOCK_LATENCY)),
    )

    applied = {k: v for k, v in overrides.items() if v is not None}
    if applied:
        settings = replace(settings, **applied)
    return settings
