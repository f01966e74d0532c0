"""Modal dialogs for the Textual paste formatter."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class ConfirmPasteScreen(ModalScreen[bool]):
    """Ask before inserting formatted text. Escape counts as "No"."""

    BINDINGS = [("escape", "decline", "No")]

    def __init__(self, prompt: str) -> None:
        super().__init__()
        self._prompt = prompt

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Paste formatted text?", classes="modal-title"),
            Static(self._prompt, classes="modal-body"),
            Horizontal(
                Button("Yes", id="paste-yes", variant="success"),
                Button("No", id="paste-no", variant="error"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--confirm",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "paste-yes")

    def action_decline(self) -> None:
        self.dismiss(False)


class ResetSettingsScreen(ModalScreen[bool]):
    """Confirm restoring default settings."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Reset settings?", classes="modal-title"),
            Static("Confirmation, size limit, and replacements return to defaults.", classes="modal-body"),
            Horizontal(
                Button("Reset", id="reset-confirm", variant="warning"),
                Button("Cancel", id="reset-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--confirm",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "reset-confirm":
            self.dismiss(True)
        else:
            self.dismiss(False)

    def action_cancel(self) -> None:
        self.dismiss(False)
