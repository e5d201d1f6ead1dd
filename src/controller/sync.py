"""ConfigSyncManager: bidirectional UI <-> AppConfig synchronization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from textual.css.query import NoMatches
from textual.widgets import Checkbox, Input, Select

from api.codec import canonical_json
from constants import OVERLAY_MODES
import ui.ids as ids

if TYPE_CHECKING:
    from textual.app import App

    from model import AppConfig

log = logging.getLogger(__name__)


def _split_partitions(value: str) -> list[str]:
    """'a, b,,c' -> ['a', 'b', 'c']"""
    return [part.strip() for part in value.split(",") if part.strip()]


def _join_partitions(value: list[str]) -> str:
    return ", ".join(value)


def _optional_str(value: str) -> str | None:
    stripped = value.strip()
    return stripped or None


def _overlay_mode(value: Any) -> str | None:
    return value if value in OVERLAY_MODES else None


class ConfigSnapshot:
    """Baseline of the last loaded or saved config, for dirty tracking."""

    def __init__(self) -> None:
        self._baseline: str | None = None

    @property
    def has_baseline(self) -> bool:
        return self._baseline is not None

    def capture(self, config: AppConfig) -> None:
        self._baseline = canonical_json(config.to_dict())

    def is_dirty(self, config: AppConfig) -> bool:
        """True when config differs by value from the captured baseline."""
        if self._baseline is None:
            return False
        return canonical_json(config.to_dict()) != self._baseline


@dataclass
class FieldMapping:
    """Maps a UI widget to an AppConfig field."""

    widget_id: str
    config_field: str
    widget_type: type  # Checkbox, Input or Select
    value_transform: Callable[[Any], Any] | None = None  # UI value -> config value
    inverse_transform: Callable[[Any], Any] | None = None  # config value -> UI value


FIELD_MAPPINGS: list[FieldMapping] = [
    FieldMapping(ids.OPT_MODULEDIR, "moduledir", Input, lambda v: v.strip()),
    FieldMapping(ids.OPT_MOUNTSOURCE, "mountsource", Input, lambda v: v.strip()),
    FieldMapping(ids.OPT_PARTITIONS, "partitions", Input, _split_partitions, _join_partitions),
    FieldMapping(ids.OPT_LOGFILE, "logfile", Input, _optional_str),
    FieldMapping(ids.OPT_OVERLAY_MODE, "overlay_mode", Select, _overlay_mode),
    FieldMapping(ids.OPT_DISABLE_UMOUNT, "disable_umount", Checkbox),
    FieldMapping(ids.OPT_ALLOW_COEXISTENCE, "allow_umount_coexistence", Checkbox),
    FieldMapping(ids.OPT_HYMOFS_DEBUG, "hymofs_debug", Checkbox),
    FieldMapping(ids.OPT_HYMOFS_STEALTH, "hymofs_stealth", Checkbox),
]

# Inputs whose blank value is meaningful (no log file) rather than "skip"
_NULLABLE_FIELDS = {"logfile"}


class ConfigSyncManager:
    """Manages bidirectional UI <-> AppConfig synchronization.

    1. **UI -> Config** (sync_config_from_ui): read widget values into the
       config record. Call before saving.

    2. **Config -> UI** (sync_ui_from_config): push record values into the
       widgets. Call after load, reload or reset.

    Widgets are cached after the first lookup; call clear_cache() if the
    config tab is remounted.
    """

    def __init__(self, app: App, config: AppConfig) -> None:
        self.app = app
        self.config = config
        self._widget_cache: dict[str, Any] = {}

    def get_widget(self, widget_id: str, widget_type: type) -> Any | None:
        """Get a widget by ID, using cache if available."""
        if widget_id in self._widget_cache:
            return self._widget_cache[widget_id]
        try:
            widget = self.app.query_one(f"#{widget_id}", widget_type)
            self._widget_cache[widget_id] = widget
            return widget
        except NoMatches:
            return None

    def sync_config_from_ui(self) -> None:
        """Read all UI widgets and update config."""
        for mapping in FIELD_MAPPINGS:
            widget = self.get_widget(mapping.widget_id, mapping.widget_type)
            if widget is None:
                continue

            value = widget.value
            if mapping.widget_type is Checkbox and not value:
                if getattr(self.config, mapping.config_field) is None:
                    continue  # unset optional flag stays unset
            if mapping.value_transform:
                value = mapping.value_transform(value)
                if value is None and mapping.config_field not in _NULLABLE_FIELDS:
                    continue  # Skip invalid values
            setattr(self.config, mapping.config_field, value)

    def sync_ui_from_config(self) -> None:
        """Read config and update all UI widgets."""
        for mapping in FIELD_MAPPINGS:
            widget = self.get_widget(mapping.widget_id, mapping.widget_type)
            if widget is None:
                continue

            value = getattr(self.config, mapping.config_field)
            if mapping.inverse_transform:
                value = mapping.inverse_transform(value)

            if mapping.widget_type is Checkbox:
                widget.value = bool(value)
            elif mapping.widget_type is Select:
                if value in OVERLAY_MODES:
                    widget.value = value
                else:
                    log.warning(f"Unsupported {mapping.config_field} {value!r}, leaving selector unchanged")
            else:
                widget.value = str(value) if value is not None else ""

    def clear_cache(self) -> None:
        """Clear the widget cache (call when widgets are remounted)."""
        self._widget_cache.clear()
