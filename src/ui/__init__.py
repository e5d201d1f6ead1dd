"""UI module containing widgets, styles, modals and tab compositions."""

from ui.widgets import InfoCard, RuleRow, mode_options
from ui.tabs import (
    compose_config_tab,
    compose_logs_tab,
    compose_modules_tab,
    compose_status_tab,
)
from ui import ids

__all__ = [
    # Widgets
    "InfoCard",
    "RuleRow",
    "mode_options",
    # Tab composers
    "compose_config_tab",
    "compose_logs_tab",
    "compose_modules_tab",
    "compose_status_tab",
]
