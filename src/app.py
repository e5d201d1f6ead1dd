"""Main TUI application for hmui."""

import asyncio
import logging
import os
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import (
    Button,
    Checkbox,
    DataTable,
    Input,
    Label,
    Select,
    Static,
    TabbedContent,
    TabPane,
)

from api import Client
from controller import (
    ConfigEventsMixin,
    ConfigSnapshot,
    ConfigSyncManager,
    ModuleEventsMixin,
    StatusEventsMixin,
)
from model import AppConfig, Module
from ui import (
    compose_config_tab,
    compose_logs_tab,
    compose_modules_tab,
    compose_status_tab,
)
from ui.ids import css
import ui.ids as ids

log = logging.getLogger(__name__)


def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "hmui"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "hmui.log"


def configure_logging() -> None:
    """Send all log records to the XDG state log file."""
    logging.basicConfig(
        filename=str(_get_log_path()),
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class HybridMountTUI(
    StatusEventsMixin,
    ConfigEventsMixin,
    ModuleEventsMixin,
    App,
):
    """TUI for inspecting and configuring the Hybrid Mount manager."""

    TITLE = "Hybrid Mount"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("r", "reload", "Reload", show=True),
        Binding("s", "save_config", "Save", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, client: Client, version: str = "0.0") -> None:
        super().__init__()
        self.client = client
        self.version = version
        self.config = AppConfig.defaults()
        self.modules: dict[str, Module] = {}
        self._snapshot = ConfigSnapshot()
        self._sync_manager: ConfigSyncManager | None = None
        # Held by config and rule writes; reads of the same data wait for it
        self._write_lock = asyncio.Lock()

    def compose(self) -> ComposeResult:
        log.info(f"compose() called, backend={self.client.backend}")

        yield Horizontal(
            Label(f"hmui - Hybrid Mount control panel v{self.version}", id=ids.HEADER_TITLE),
            Label(f"backend: {self.client.backend}", id=ids.BACKEND_LABEL),
            id=ids.HEADER_CONTAINER,
        )

        with TabbedContent(id=ids.MAIN_TABS):
            with TabPane("Status", id="status-tab"):
                yield from compose_status_tab()

            with TabPane("Config", id="config-tab"):
                yield from compose_config_tab()

            with TabPane("Modules", id="modules-tab"):
                yield from compose_modules_tab()

            with TabPane("Logs", id="logs-tab"):
                yield from compose_logs_tab()

        yield Horizontal(
            Static("", id=ids.STATUS_BAR, markup=False),
            Button("Quit [q]", id=ids.QUIT_BTN, variant="error"),
            id=ids.FOOTER_BUTTONS,
        )

    # =========================================================================
    # Status
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    # =========================================================================
    # Actions
    # =========================================================================

    def action_reload(self) -> None:
        """Reload everything from the device."""
        self.action_refresh_status()
        self.action_reload_config()
        self.action_refresh_modules()
        self.action_refresh_logs()

    # =========================================================================
    # Event Handlers - config widgets
    # =========================================================================

    @on(Checkbox.Changed)
    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        self.on_config_field_changed(event.checkbox.id)

    @on(Input.Changed)
    def on_input_changed(self, event: Input.Changed) -> None:
        self.on_config_field_changed(event.input.id)

    @on(Select.Changed)
    def on_select_changed(self, event: Select.Changed) -> None:
        self.on_config_field_changed(event.select.id)

    # =========================================================================
    # Mixin Handler Forwarding
    # =========================================================================
    # Textual's @on decorator only registers handlers defined on the class itself,
    # not on mixins. These forwarding handlers ensure events are routed to mixins.

    # Status handlers (from StatusEventsMixin)
    @on(Button.Pressed, css(ids.REFRESH_STATUS_BTN))
    def _on_refresh_status_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_refresh_status_pressed(event)

    @on(Button.Pressed, css(ids.REFRESH_LOGS_BTN))
    def _on_refresh_logs_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_refresh_logs_pressed(event)

    @on(Button.Pressed, css(ids.REBOOT_BTN))
    def _on_reboot_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_reboot_pressed(event)

    @on(Button.Pressed, css(ids.UNLOAD_HYMOFS_BTN))
    def _on_unload_hymofs_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_unload_hymofs_pressed(event)

    # Config handlers (from ConfigEventsMixin)
    @on(Button.Pressed, css(ids.SAVE_CONFIG_BTN))
    def _on_save_config_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_save_config_pressed(event)

    @on(Button.Pressed, css(ids.RELOAD_CONFIG_BTN))
    def _on_reload_config_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_reload_config_pressed(event)

    @on(Button.Pressed, css(ids.RESET_CONFIG_BTN))
    def _on_reset_config_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_reset_config_pressed(event)

    # Module handlers (from ModuleEventsMixin)
    @on(Button.Pressed, css(ids.REFRESH_MODULES_BTN))
    def _on_refresh_modules_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_refresh_modules_pressed(event)

    @on(DataTable.RowSelected, css(ids.MODULES_TABLE))
    def _on_module_row_selected(self, event: DataTable.RowSelected) -> None:
        """Forward to mixin handler."""
        self.on_module_selected(event)

    @on(Button.Pressed, css(ids.QUIT_BTN))
    def _on_quit_btn(self, event: Button.Pressed) -> None:
        self.exit()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        """Called when the app is mounted."""
        self.action_reload()
        # Focus the tab bar for keyboard navigation
        from textual.widgets import Tabs
        self.query_one(css(ids.MAIN_TABS)).query_one(Tabs).focus()
