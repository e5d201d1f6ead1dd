"""Config tab composition."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Checkbox, Input, Label, Select, Static

from constants import OVERLAY_MODES


def compose_config_tab() -> ComposeResult:
    """Compose the config tab content.

    Widget values are filled in by ConfigSyncManager once the config loads.

    Yields:
        Textual widgets for the config tab
    """
    with VerticalScroll(id="config-tab-content"):
        yield Label("Paths", classes="section-label")
        yield Label("Module directory", classes="field-label")
        yield Input(placeholder="/data/adb/modules", id="opt-moduledir")
        yield Label("Mount source", classes="field-label")
        yield Input(placeholder="KSU", id="opt-mountsource")
        yield Label("Extra partitions (comma separated)", classes="field-label")
        yield Input(placeholder="my_custom, mi_ext", id="opt-partitions")
        yield Label("Log file", classes="field-label")
        yield Input(placeholder="(none)", id="opt-logfile")

        yield Label("Storage", classes="section-label")
        yield Select(
            [(mode, mode) for mode in OVERLAY_MODES],
            value=OVERLAY_MODES[0],
            allow_blank=False,
            id="opt-overlay-mode",
        )

        yield Label("Unmount", classes="section-label")
        yield Checkbox("Disable umount", id="opt-disable-umount")
        yield Checkbox("Allow coexistence with other umount providers", id="opt-allow-coexistence")

        yield Label("HymoFS", classes="section-label")
        yield Checkbox("Debug logging", id="opt-hymofs-debug")
        yield Checkbox("Stealth mode", id="opt-hymofs-stealth")

        with Horizontal(id="config-buttons-row"):
            yield Button("Save [s]", id="save-config-btn", variant="success")
            yield Button("Reload [r]", id="reload-config-btn", variant="default")
            yield Button("Reset to defaults", id="reset-config-btn", variant="error")
            yield Static("", id="dirty-indicator")
