"""Core paste handling pipeline.

This module is host-agnostic. It only relies on ports for the clipboard,
editor, confirmation prompt, and notices, enabling other frontends without
changes here.

The pipeline enforces a strict order:
1) Claim the paste event and capture its plain text
2) Fast-exit when there is no text
3) Size guard
4) Normalize + custom replacements
5) Optional confirmation
6) Replace the editor selection
"""

from __future__ import annotations

from dataclasses import dataclass
import enum
import logging
from typing import Any, Optional

from clipfmt.core.config import Configuration
from clipfmt.core.errors import NoClipboardText, TextTooLarge
from clipfmt.core.ports import ClipboardPort, ConfirmationPort, EditorSink, NotifierPort
from clipfmt.core.rules_engine import TextTransformer
from clipfmt.core.size_guard import SizeGuard

LOGGER = logging.getLogger(__name__)

CONFIRM_PROMPT = "Do you want to paste the formatted text?"


class PasteState(enum.Enum):
    IDLE = "idle"
    CAPTURED = "captured"
    SIZE_CHECKED = "size_checked"
    TRANSFORMED = "transformed"
    CONFIRM_PENDING = "confirm_pending"
    DELIVERED = "delivered"


class PasteOutcome(enum.Enum):
    DELIVERED = "delivered"
    NO_TEXT = "no_text"
    TOO_LARGE = "too_large"
    DECLINED = "declined"


@dataclass
class PasteOperation:
    """One in-flight paste, with the config snapshot it started with."""

    config: Configuration
    raw_text: Optional[str]
    state: PasteState = PasteState.CAPTURED
    formatted_text: Optional[str] = None
    outcome: Optional[PasteOutcome] = None

    def advance(self, state: PasteState) -> None:
        LOGGER.debug("Paste %s -> %s", self.state.value, state.value)
        self.state = state

    def finish(self, outcome: PasteOutcome) -> PasteOutcome:
        if outcome is not PasteOutcome.DELIVERED:
            self.advance(PasteState.IDLE)
        self.outcome = outcome
        return outcome


class PasteController:
    """Orchestrates capture, size check, formatting, confirmation, and delivery."""

    def __init__(
        self,
        config: Configuration,
        clipboard: ClipboardPort,
        editor: EditorSink,
        confirmation: ConfirmationPort,
        notifier: NotifierPort,
    ) -> None:
        self._config = config
        self._clipboard = clipboard
        self._editor = editor
        self._confirmation = confirmation
        self._notifier = notifier

    @property
    def config(self) -> Configuration:
        return self._config

    def reconfigure(self, config: Configuration) -> None:
        """Swap the configuration; pastes already in flight keep their snapshot."""

        self._config = config

    def intercept(self, event: Any) -> PasteOperation:
        """Claim the paste event and capture its text.

        Must run synchronously inside the host's event handler, before the
        host's own paste handling gets a chance to run.
        """

        self._clipboard.claim(event)
        return PasteOperation(config=self._config, raw_text=self._clipboard.extract_text(event))

    async def complete(self, operation: PasteOperation) -> PasteOutcome:
        """Run the rest of the pipeline for an intercepted paste."""

        try:
            formatted = self._prepare(operation)
        except NoClipboardText as exc:
            LOGGER.info("Paste aborted: no plain text on the clipboard")
            self._notifier.notify(str(exc))
            return operation.finish(PasteOutcome.NO_TEXT)
        except TextTooLarge as exc:
            LOGGER.info("Paste aborted: %s characters exceeds limit of %s", exc.length, exc.limit)
            self._notifier.notify(str(exc))
            return operation.finish(PasteOutcome.TOO_LARGE)

        if operation.config.confirm_before_paste:
            operation.advance(PasteState.CONFIRM_PENDING)
            if not await self._confirmation.ask(CONFIRM_PROMPT):
                LOGGER.info("Paste declined by user")
                return operation.finish(PasteOutcome.DECLINED)

        self._editor.replace_selection(formatted)
        operation.advance(PasteState.DELIVERED)
        LOGGER.info("Pasted %s formatted characters", len(formatted))
        return operation.finish(PasteOutcome.DELIVERED)

    async def handle(self, event: Any) -> PasteOutcome:
        """Intercept and process one paste event."""

        return await self.complete(self.intercept(event))

    @staticmethod
    def _prepare(operation: PasteOperation) -> str:
        text = operation.raw_text
        if not text:
            raise NoClipboardText()

        SizeGuard(operation.config.max_text_size).check(text)
        operation.advance(PasteState.SIZE_CHECKED)

        formatted = TextTransformer(operation.config.rules).transform(text)
        operation.formatted_text = formatted
        operation.advance(PasteState.TRANSFORMED)
        return formatted
