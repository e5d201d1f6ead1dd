"""Rule editing widget: RuleRow."""

from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Select, Static

from model import MountMode


def mode_options() -> list[tuple[str, str]]:
    """Select options for every mount mode."""
    return [(mode.value, mode.value) for mode in MountMode]


class RuleRow(Container):
    """A row representing one path override of a module's rules."""

    def __init__(
        self,
        path: str,
        mode: MountMode,
        on_change: Callable[[str, MountMode], None],
        on_remove: Callable[["RuleRow"], None],
    ) -> None:
        super().__init__()
        self.path = path
        self.mode = mode
        self._on_change = on_change
        self._on_remove = on_remove

    def compose(self) -> ComposeResult:
        with Horizontal(classes="rule-row"):
            yield Static(self.path, classes="rule-path", markup=False)
            yield Select(
                mode_options(),
                value=self.mode.value,
                allow_blank=False,
                classes="rule-mode-select",
            )
            yield Button("x", classes="rule-remove-btn", variant="error")

    @on(Select.Changed, ".rule-mode-select")
    def on_mode_changed(self, event: Select.Changed) -> None:
        event.stop()
        if isinstance(event.value, str):
            self.mode = MountMode(event.value)
            self._on_change(self.path, self.mode)

    @on(Button.Pressed, ".rule-remove-btn")
    def on_remove_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_remove(self)
