"""Modules tab event handlers."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Callable

from rich.text import Text
from textual import on
from textual.css.query import NoMatches
from textual.widgets import Button, DataTable

from errors import ClientError
from ui.ids import css
from ui.tabs import MODULE_COLUMNS
import ui.ids as ids

if TYPE_CHECKING:
    from api import Client
    from model import Module, ModuleRules

log = logging.getLogger(__name__)


def summarize_rules(module: Module) -> str:
    """Short rules label for the table, e.g. 'magic +2'."""
    label = module.rules.default_mode.value
    if module.rules.paths:
        label += f" +{len(module.rules.paths)}"
    return label


class ModuleEventsMixin:
    """Mixin for modules tab event handlers."""

    # Expected from App class
    client: Client
    modules: dict[str, Module]
    _write_lock: asyncio.Lock
    query_one: Callable
    push_screen: Callable
    run_worker: Callable
    _set_status: Callable

    @on(Button.Pressed, css(ids.REFRESH_MODULES_BTN))
    def on_refresh_modules_pressed(self, event: Button.Pressed) -> None:
        self.action_refresh_modules()

    @on(DataTable.RowSelected, css(ids.MODULES_TABLE))
    def on_module_selected(self, event: DataTable.RowSelected) -> None:
        """Open the rules editor for the selected module."""
        from ui.modals import RulesModal

        module_id = event.row_key.value
        module = self.modules.get(module_id) if module_id is not None else None
        if module is None:
            log.debug(f"No module for row {module_id!r}")
            return
        self.push_screen(
            RulesModal(module),
            lambda rules: self._on_rules_result(module.id, rules),
        )

    def action_refresh_modules(self) -> None:
        self.run_worker(self._load_modules(), group="modules", exclusive=True)

    def _on_rules_result(self, module_id: str, rules: ModuleRules | None) -> None:
        if rules is not None:
            self.run_worker(self._save_rules(module_id, rules), group="modules-write")

    async def _load_modules(self) -> None:
        async with self._write_lock:
            modules = await self.client.scan_modules()
        self._show_modules(modules)

    def _show_modules(self, modules: list[Module]) -> None:
        self.modules = {module.id: module for module in modules}
        try:
            table = self.query_one(css(ids.MODULES_TABLE), DataTable)
        except NoMatches:
            log.debug("modules-table not found")
            return
        if not table.columns:
            table.add_columns(*MODULE_COLUMNS)
        table.clear()
        for module in modules:
            # Device strings are shown literally
            table.add_row(
                Text(module.id),
                Text(module.name),
                Text(module.version),
                Text(module.mode),
                "yes" if module.is_mounted else "no",
                summarize_rules(module),
                key=module.id,
            )
        self._set_status(f"{len(modules)} modules")

    async def _save_rules(self, module_id: str, rules: ModuleRules) -> None:
        self._set_status(f"Saving rules for {module_id}...")
        async with self._write_lock:
            try:
                await self.client.save_module_rules(module_id, rules)
            except ClientError as e:
                log.error(f"Save rules for {module_id} failed: {e}")
                self._set_status(f"Error: {e}")
                return
            modules = await self.client.scan_modules()
        self._show_modules(modules)
        self._set_status(f"Rules saved for {module_id}")
