"""Modules tab composition."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, DataTable, Static

MODULE_COLUMNS = ("ID", "Name", "Version", "Mode", "Mounted", "Rules")


def compose_modules_tab() -> ComposeResult:
    """Compose the modules tab content.

    Yields:
        Textual widgets for the modules tab
    """
    with Vertical(id="modules-tab-content"):
        with Horizontal(classes="modules-actions"):
            yield Button("Refresh", id="refresh-modules-btn", variant="primary")
            yield Static("Select a module to edit its mount rules", id="modules-hint")
        yield DataTable(id="modules-table", cursor_type="row", zebra_stripes=True)
