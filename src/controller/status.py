"""Status and logs tab event handlers."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Callable

from textual import on
from textual.color import Color, ColorParseError
from textual.css.query import NoMatches
from textual.widgets import Button, Static

from errors import ClientError
from ui.ids import css
from ui.tabs import format_device, format_hymofs, format_storage, format_system_info
import ui.ids as ids

if TYPE_CHECKING:
    from api import Client

log = logging.getLogger(__name__)


class StatusEventsMixin:
    """Mixin for status, logs, reboot and HymoFS unload event handlers."""

    # Expected from App class
    client: Client
    query_one: Callable
    push_screen: Callable
    run_worker: Callable
    _set_status: Callable

    @on(Button.Pressed, css(ids.REFRESH_STATUS_BTN))
    def on_refresh_status_pressed(self, event: Button.Pressed) -> None:
        self.action_refresh_status()

    @on(Button.Pressed, css(ids.REFRESH_LOGS_BTN))
    def on_refresh_logs_pressed(self, event: Button.Pressed) -> None:
        self.action_refresh_logs()

    @on(Button.Pressed, css(ids.REBOOT_BTN))
    def on_reboot_pressed(self, event: Button.Pressed) -> None:
        from ui.modals import ConfirmModal

        self.push_screen(ConfirmModal("Reboot the device now?", confirm_label="Reboot"), self._on_reboot_confirmed)

    @on(Button.Pressed, css(ids.UNLOAD_HYMOFS_BTN))
    def on_unload_hymofs_pressed(self, event: Button.Pressed) -> None:
        from ui.modals import ConfirmModal

        self.push_screen(
            ConfirmModal("Unload the HymoFS kernel module?", confirm_label="Unload"),
            self._on_unload_hymofs_confirmed,
        )

    def action_refresh_status(self) -> None:
        self.run_worker(self._load_status(), group="status", exclusive=True)

    def action_refresh_logs(self) -> None:
        self.run_worker(self._load_logs(), group="logs", exclusive=True)

    def _on_reboot_confirmed(self, confirmed: bool | None) -> None:
        if confirmed:
            self.run_worker(self.client.reboot(), group="reboot")
            self._set_status("Reboot requested")

    def _on_unload_hymofs_confirmed(self, confirmed: bool | None) -> None:
        if confirmed:
            self.run_worker(self._unload_hymofs(), group="hymofs-write")

    async def _unload_hymofs(self) -> None:
        self._set_status("Unloading HymoFS...")
        try:
            await self.client.unload_hymofs()
        except ClientError as e:
            log.error(f"Unload HymoFS failed: {e}")
            self._set_status(f"Error: {e}")
            return
        system = await self.client.get_system_info()
        self._update_static(ids.HYMOFS_INFO, format_hymofs(system))
        self._set_status("HymoFS unloaded")

    def _update_static(self, widget_id: str, text: str) -> None:
        try:
            self.query_one(css(widget_id), Static).update(text)
        except NoMatches:
            log.debug(f"{widget_id} not found")

    async def _load_status(self) -> None:
        """Run the independent status queries concurrently and render them."""
        self._set_status("Refreshing status...")
        system, storage, device, version, accent = await asyncio.gather(
            self.client.get_system_info(),
            self.client.get_storage_usage(),
            self.client.get_device_status(),
            self.client.get_version(),
            self.client.fetch_system_color(),
        )
        self._update_static(ids.SYSTEM_INFO, format_system_info(system))
        self._update_static(ids.HYMOFS_INFO, format_hymofs(system))
        self._update_static(ids.STORAGE_INFO, format_storage(storage))
        self._update_static(ids.DEVICE_INFO, format_device(device))
        self._update_static(ids.VERSION_LABEL, f"v{version}")
        self._apply_accent(accent)
        self._set_status("Status refreshed")

    def _apply_accent(self, accent: str | None) -> None:
        try:
            swatch = self.query_one(css(ids.ACCENT_SWATCH), Static)
        except NoMatches:
            return
        if accent is None:
            swatch.update("accent: system default")
            return
        try:
            swatch.styles.background = Color.parse(accent)
        except ColorParseError:
            log.warning(f"Ignoring unparseable accent color {accent!r}")
            return
        swatch.update(f"accent: {accent}")

    async def _load_logs(self) -> None:
        text = await self.client.read_logs()
        self._update_static(ids.LOGS_VIEW, text or "(log is empty or unreadable)")
