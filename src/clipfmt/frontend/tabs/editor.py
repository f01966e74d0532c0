"""Editor tab: a text area whose pastes go through the formatter."""

from __future__ import annotations

import logging

from textual import events
from textual.containers import Container
from textual.message import Message
from textual.widgets import Static, TextArea
from textual.worker import Worker, WorkerState

from clipfmt.core.processor import PasteOutcome

LOGGER = logging.getLogger(__name__)

PASTE_GROUP = "paste"

OUTCOME_LABELS = {
    PasteOutcome.DELIVERED: "last paste: formatted and inserted",
    PasteOutcome.NO_TEXT: "last paste: no text on the clipboard",
    PasteOutcome.TOO_LARGE: "last paste: rejected, text too large",
    PasteOutcome.DECLINED: "last paste: cancelled",
}


class FormattingTextArea(TextArea):
    """TextArea that hands every paste to the app's PasteController."""

    class PasteFinished(Message):
        def __init__(self, outcome: PasteOutcome | None) -> None:
            super().__init__()
            self.outcome = outcome

    async def _on_paste(self, event: events.Paste) -> None:
        if self.read_only:
            return
        self._route_paste(event)

    def action_paste(self) -> None:
        if self.read_only:
            return
        self._route_paste(events.Paste(self.app.clipboard))

    def _route_paste(self, event: events.Paste) -> None:
        controller = self.app.controller
        # Intercept synchronously so the default insert never sees the event.
        operation = controller.intercept(event)
        self.run_worker(
            controller.complete(operation),
            group=PASTE_GROUP,
            exit_on_error=False,
        )

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.worker.group != PASTE_GROUP:
            return
        if event.state == WorkerState.SUCCESS:
            self.post_message(self.PasteFinished(event.worker.result))
        elif event.state == WorkerState.ERROR:
            LOGGER.error("Paste failed", exc_info=event.worker.error)
            self.app.notify("Paste failed, see the log for details.", severity="error")
            self.post_message(self.PasteFinished(None))


class EditorTab(Container):
    def compose(self):
        yield Static(
            "Paste into the editor: math delimiters and replacements are applied first.",
            classes="subtle",
            markup=False,
        )
        yield FormattingTextArea(id="editor-input", show_line_numbers=True)
        yield Static("last paste: -", id="editor-status", classes="subtle")

    def on_formatting_text_area_paste_finished(self, event: FormattingTextArea.PasteFinished) -> None:
        status = self.query_one("#editor-status", Static)
        status.update(OUTCOME_LABELS.get(event.outcome, "last paste: failed"))
