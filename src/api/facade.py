"""One-time binding between the real client and the mock client."""

from __future__ import annotations

import logging

from api.client import Client, RealClient
from api.executor import Executor
from api.mock import MockClient
from detection import detect_executor
from settings import Settings, load_settings

log = logging.getLogger(__name__)


def init_client(settings: Settings | None = None, executor: Executor | None = None) -> Client:
    """Detect the execution capability once and return the bound client.

    The mock is bound for development builds (settings.dev_mode) or when no
    privileged execution capability exists. The choice is final for the
    returned object; there is no way to re-bind it.

    Args:
        settings: Runtime settings (resolved from the environment if None)
        executor: Explicit execution capability; detected when None

    Returns:
        RealClient or MockClient
    """
    if settings is None:
        settings = load_settings()

    if settings.dev_mode:
        log.info("Development mode: using mock client")
        return MockClient(latency=settings.mock_latency)

    if executor is None:
        executor = detect_executor(settings)
    if executor is None:
        log.warning("No privileged execution capability, defaulting to mock client")
        return MockClient(latency=settings.mock_latency)

    log.info(f"Using real client ({type(executor).__name__})")
    return RealClient(executor, settings)
