"""Status display widget: InfoCard."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, Static


class InfoCard(Vertical):
    """A titled card with a body that is replaced on refresh."""

    def __init__(self, title: str, body_id: str, body: str = "Loading...") -> None:
        super().__init__(classes="info-card")
        self.title = title
        self.body_id = body_id
        self.body = body

    def compose(self) -> ComposeResult:
        yield Label(self.title, classes="section-label")
        yield Static(self.body, id=self.body_id, classes="info-body", markup=False)
