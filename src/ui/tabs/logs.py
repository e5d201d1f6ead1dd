"""Logs tab composition."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Button, Static


def compose_logs_tab() -> ComposeResult:
    """Compose the logs tab content.

    Yields:
        Textual widgets for the logs tab
    """
    with Vertical(id="logs-tab-content"):
        yield Button("Refresh", id="refresh-logs-btn", variant="primary")
        with VerticalScroll(id="logs-scroll"):
            yield Static("", id="logs-view", markup=False)
