"""Modal dialogs: confirmation and module rules editor."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static

from model import Module, ModuleRules, MountMode
from ui.ids import css
from ui.widgets import RuleRow, mode_options
import ui.ids as ids


class ConfirmModal(ModalScreen[bool]):
    """Yes/no question; dismisses with True only on confirm."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, message: str, confirm_label: str = "Confirm") -> None:
        super().__init__()
        self.message = message
        self.confirm_label = confirm_label

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.CONFIRM_MODAL):
            yield Label(self.message, id="modal-title")
            with Horizontal(id="modal-buttons"):
                yield Button("Cancel", id=ids.CONFIRM_NO_BTN, variant="default")
                yield Button(self.confirm_label, id=ids.CONFIRM_YES_BTN, variant="error")

    def action_cancel(self) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.CONFIRM_NO_BTN))
    def on_no(self, event: Button.Pressed) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.CONFIRM_YES_BTN))
    def on_yes(self, event: Button.Pressed) -> None:
        self.dismiss(True)


class RulesModal(ModalScreen[ModuleRules | None]):
    """Editor for one module's default mount mode and per-path overrides.

    Dismisses with the edited ModuleRules on save, None on cancel. The
    module passed in is never modified.
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, module: Module) -> None:
        super().__init__()
        self.module = module
        self._default_mode = module.rules.default_mode
        self._paths: dict[str, MountMode] = dict(module.rules.paths)

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.RULES_MODAL):
            yield Label(f"Mount rules: {self.module.name or self.module.id}", id="modal-title", markup=False)
            if self.module.description:
                yield Static(self.module.description, classes="modal-description", markup=False)
            yield Label("Default mode", classes="field-label")
            yield Select(
                mode_options(),
                value=self._default_mode.value,
                allow_blank=False,
                id=ids.RULES_DEFAULT_MODE,
            )
            yield Label("Path overrides", classes="field-label")
            with VerticalScroll(id=ids.RULES_PATHS_LIST):
                for path, mode in self._paths.items():
                    yield RuleRow(path, mode, self._set_path_mode, self._remove_row)
            with Horizontal(classes="add-rule-row"):
                yield Input(placeholder="system/app/Example", id=ids.RULE_PATH_INPUT)
                yield Select(
                    mode_options(),
                    value=MountMode.MAGIC.value,
                    allow_blank=False,
                    id=ids.RULE_MODE_SELECT,
                )
                yield Button("Add", id=ids.ADD_RULE_BTN, variant="primary")
            with Horizontal(id="modal-buttons"):
                yield Button("Cancel", id=ids.RULES_CANCEL_BTN, variant="default")
                yield Button("Save", id=ids.RULES_SAVE_BTN, variant="success")

    @property
    def rules(self) -> ModuleRules:
        """The rules as currently edited."""
        return ModuleRules(default_mode=self._default_mode, paths=dict(self._paths))

    def _set_path_mode(self, path: str, mode: MountMode) -> None:
        self._paths[path] = mode

    def _remove_row(self, row: RuleRow) -> None:
        self._paths.pop(row.path, None)
        row.remove()

    def _add_rule(self) -> None:
        path_input = self.query_one(css(ids.RULE_PATH_INPUT), Input)
        path = path_input.value.strip().strip("/")
        if not path:
            return
        if path in self._paths:
            self.notify(f"{path} already has a rule", severity="warning")
            return
        mode_value = self.query_one(css(ids.RULE_MODE_SELECT), Select).value
        mode = MountMode(mode_value) if isinstance(mode_value, str) else MountMode.MAGIC
        self._paths[path] = mode
        self.query_one(css(ids.RULES_PATHS_LIST), VerticalScroll).mount(
            RuleRow(path, mode, self._set_path_mode, self._remove_row)
        )
        path_input.value = ""

    def action_cancel(self) -> None:
        self.dismiss(None)

    @on(Select.Changed, css(ids.RULES_DEFAULT_MODE))
    def on_default_mode_changed(self, event: Select.Changed) -> None:
        if isinstance(event.value, str):
            self._default_mode = MountMode(event.value)

    @on(Button.Pressed, css(ids.ADD_RULE_BTN))
    def on_add_rule(self, event: Button.Pressed) -> None:
        self._add_rule()

    @on(Input.Submitted, css(ids.RULE_PATH_INPUT))
    def on_rule_path_submitted(self, event: Input.Submitted) -> None:
        self._add_rule()

    @on(Button.Pressed, css(ids.RULES_CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.RULES_SAVE_BTN))
    def on_save(self, event: Button.Pressed) -> None:
        self.dismiss(self.rules)
