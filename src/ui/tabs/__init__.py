"""Tab modules for the hmui TUI."""

from ui.tabs.config import compose_config_tab
from ui.tabs.logs import compose_logs_tab
from ui.tabs.modules import MODULE_COLUMNS, compose_modules_tab
from ui.tabs.status import (
    compose_status_tab,
    format_device,
    format_hymofs,
    format_storage,
    format_system_info,
)

__all__ = [
    "MODULE_COLUMNS",
    "compose_config_tab",
    "compose_logs_tab",
    "compose_modules_tab",
    "compose_status_tab",
    "format_device",
    "format_hymofs",
    "format_storage",
    "format_system_info",
]
