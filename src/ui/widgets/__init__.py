"""Custom Textual widgets for hmui."""

from ui.widgets.rules import RuleRow, mode_options
from ui.widgets.status import InfoCard

__all__ = [
    "InfoCard",
    "RuleRow",
    "mode_options",
]
