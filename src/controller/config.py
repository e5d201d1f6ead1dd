"""Config tab event handlers: load, save, reload, reset."""

from __future__ import annotations

import logging
import asyncio
from typing import TYPE_CHECKING, Callable

from textual import on
from textual.css.query import NoMatches
from textual.widgets import Button, Static

from controller.sync import FIELD_MAPPINGS, ConfigSnapshot, ConfigSyncManager
from errors import ClientError
from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from api import Client
    from model import AppConfig

log = logging.getLogger(__name__)

CONFIG_WIDGET_IDS = frozenset(mapping.widget_id for mapping in FIELD_MAPPINGS)


class ConfigEventsMixin:
    """Mixin for config tab event handlers."""

    # Expected from App class
    client: Client
    config: AppConfig
    _snapshot: ConfigSnapshot
    _sync_manager: ConfigSyncManager | None
    _write_lock: asyncio.Lock
    query_one: Callable
    push_screen: Callable
    run_worker: Callable
    _set_status: Callable

    def _get_sync_manager(self) -> ConfigSyncManager:
        """Get or create the sync manager."""
        if self._sync_manager is None:
            self._sync_manager = ConfigSyncManager(self, self.config)
        return self._sync_manager

    @on(Button.Pressed, css(ids.SAVE_CONFIG_BTN))
    def on_save_config_pressed(self, event: Button.Pressed) -> None:
        self.action_save_config()

    @on(Button.Pressed, css(ids.RELOAD_CONFIG_BTN))
    def on_reload_config_pressed(self, event: Button.Pressed) -> None:
        self.action_reload_config()

    @on(Button.Pressed, css(ids.RESET_CONFIG_BTN))
    def on_reset_config_pressed(self, event: Button.Pressed) -> None:
        """Ask before replacing the config with generated defaults."""
        from ui.modals import ConfirmModal

        self.push_screen(
            ConfirmModal("Reset configuration to defaults?", confirm_label="Reset"),
            self._on_reset_confirmed,
        )

    def on_config_field_changed(self, widget_id: str | None) -> None:
        """Pull edits from a config widget into the record."""
        if widget_id not in CONFIG_WIDGET_IDS:
            return
        self._get_sync_manager().sync_config_from_ui()
        self._update_dirty_indicator()

    def action_save_config(self) -> None:
        # Writes are never cancelled by a later reload
        self.run_worker(self._save_config(), group="config-write")

    def action_reload_config(self) -> None:
        self.run_worker(self._load_config(), group="config", exclusive=True)

    def _on_reset_confirmed(self, confirmed: bool | None) -> None:
        if confirmed:
            self.run_worker(self._reset_config(), group="config-write")

    async def _load_config(self) -> None:
        """Fetch the config (never fails, falls back to defaults)."""
        self._set_status("Loading config...")
        async with self._write_lock:
            config = await self.client.load_config()
        self._apply_config(config)
        self._set_status("Config loaded")

    async def _save_config(self) -> None:
        self._get_sync_manager().sync_config_from_ui()
        config = self.config
        self._set_status("Saving config...")
        async with self._write_lock:
            try:
                await self.client.save_config(config)
            except ClientError as e:
                log.error(f"Save config failed: {e}")
                self._set_status(f"Error: {e}")
                return
        self._snapshot.capture(config)
        self._update_dirty_indicator()
        self._set_status("Config saved")

    async def _reset_config(self) -> None:
        self._set_status("Resetting config...")
        async with self._write_lock:
            try:
                await self.client.reset_config()
            except ClientError as e:
                log.error(f"Reset config failed: {e}")
                self._set_status(f"Error: {e}")
                return
            config = await self.client.load_config()
        self._apply_config(config)
        self._set_status("Config reset to defaults")

    def _apply_config(self, config: AppConfig) -> None:
        """Replace the working record and push it into the widgets."""
        self.config = config
        sync = self._get_sync_manager()
        sync.config = config
        sync.sync_ui_from_config()
        self._snapshot.capture(config)
        self._update_dirty_indicator()

    def _update_dirty_indicator(self) -> None:
        try:
            indicator = self.query_one(css(ids.DIRTY_INDICATOR), Static)
        except NoMatches:
            log.debug("dirty-indicator not found")
            return
        indicator.update("Unsaved changes" if self._snapshot.is_dirty(self.config) else "")
