"""Textual adapters: paste events, the editor text area, modals, and toasts."""

from __future__ import annotations

import asyncio
from typing import Optional

from textual import events
from textual.app import App
from textual.widgets import TextArea

from clipfmt.frontend.modals import ConfirmPasteScreen


class PasteEventClipboard:
    """Reads the text carried by a Textual ``Paste`` event."""

    def claim(self, event: events.Paste) -> None:
        # Stops TextArea's own _on_paste from inserting the raw text.
        event.prevent_default()
        event.stop()

    def extract_text(self, event: events.Paste) -> Optional[str]:
        return event.text or None


class TextAreaEditor:
    """Replaces the current selection of a TextArea."""

    def __init__(self, text_area: TextArea) -> None:
        self._text_area = text_area

    def replace_selection(self, text: str) -> None:
        selection = self._text_area.selection
        result = self._text_area.replace(
            text,
            selection.start,
            selection.end,
            maintain_selection_offset=False,
        )
        self._text_area.move_cursor(result.end_location)
        self._text_area.focus()


class ModalConfirmation:
    """Yes/no prompt backed by a ModalScreen.

    Dismissing the modal without choosing resolves to False.
    """

    def __init__(self, app: App) -> None:
        self._app = app

    async def ask(self, prompt: str) -> bool:
        answer: asyncio.Future[bool] = asyncio.get_running_loop().create_future()

        def _resolve(result: Optional[bool]) -> None:
            if not answer.done():
                answer.set_result(bool(result))

        self._app.push_screen(ConfirmPasteScreen(prompt), _resolve)
        return await answer


class AppNotifier:
    """Shows notices as Textual toasts."""

    def __init__(self, app: App, severity: str = "warning") -> None:
        self._app = app
        self._severity = severity

    def notify(self, message: str) -> None:
        self._app.notify(message, severity=self._severity, markup=False)
