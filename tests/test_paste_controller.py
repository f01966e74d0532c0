from __future__ import annotations

import asyncio
from typing import Optional

from clipfmt.core.config import Configuration
from clipfmt.core.processor import (
    CONFIRM_PROMPT,
    PasteController,
    PasteOutcome,
    PasteState,
)
from clipfmt.core.rules_engine import build_rules


class FakePasteEvent:
    def __init__(self, text: Optional[str]) -> None:
        self.text = text
        self.claimed = False


class FakeClipboard:
    def claim(self, event: FakePasteEvent) -> None:
        event.claimed = True

    def extract_text(self, event: FakePasteEvent) -> Optional[str]:
        return event.text


class FakeEditor:
    def __init__(self) -> None:
        self.inserted: list[str] = []

    def replace_selection(self, text: str) -> None:
        self.inserted.append(text)


class FakeConfirmation:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.prompts: list[str] = []

    async def ask(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer


class FakeNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


def _controller(
    config: Configuration,
    *,
    answer: bool = True,
) -> tuple[PasteController, FakeEditor, FakeConfirmation, FakeNotifier]:
    editor = FakeEditor()
    confirmation = FakeConfirmation(answer)
    notifier = FakeNotifier()
    controller = PasteController(
        config=config,
        clipboard=FakeClipboard(),
        editor=editor,
        confirmation=confirmation,
        notifier=notifier,
    )
    return controller, editor, confirmation, notifier


def test_default_config_formats_end_to_end() -> None:
    controller, editor, confirmation, notifier = _controller(Configuration())
    event = FakePasteEvent("# Note on Widgets has [Intermediate] content \\(E=mc^2\\)")

    outcome = asyncio.run(controller.handle(event))

    assert outcome is PasteOutcome.DELIVERED
    assert event.claimed
    assert editor.inserted == ["# Widgets has [Basic] content $E=mc^2$"]
    assert not confirmation.prompts
    assert not notifier.messages


def test_missing_text_notifies_and_inserts_nothing() -> None:
    controller, editor, _, notifier = _controller(Configuration())
    event = FakePasteEvent(None)

    outcome = asyncio.run(controller.handle(event))

    assert outcome is PasteOutcome.NO_TEXT
    assert event.claimed
    assert editor.inserted == []
    assert notifier.messages == ["No text found on the clipboard."]


def test_empty_string_counts_as_missing_text() -> None:
    controller, editor, _, notifier = _controller(Configuration())
    outcome = asyncio.run(controller.handle(FakePasteEvent("")))
    assert outcome is PasteOutcome.NO_TEXT
    assert editor.inserted == []


def test_oversized_text_is_rejected_before_confirmation() -> None:
    config = Configuration(confirm_before_paste=True, max_text_size=5)
    controller, editor, confirmation, notifier = _controller(config)

    outcome = asyncio.run(controller.handle(FakePasteEvent("123456")))

    assert outcome is PasteOutcome.TOO_LARGE
    assert editor.inserted == []
    assert not confirmation.prompts
    assert notifier.messages == ["Text is too large to format."]


def test_text_at_limit_is_pasted() -> None:
    controller, editor, _, _ = _controller(Configuration(max_text_size=5, rules=()))
    outcome = asyncio.run(controller.handle(FakePasteEvent("12345")))
    assert outcome is PasteOutcome.DELIVERED
    assert editor.inserted == ["12345"]


def test_declined_confirmation_leaves_document_untouched() -> None:
    config = Configuration(confirm_before_paste=True)
    controller, editor, confirmation, notifier = _controller(config, answer=False)

    outcome = asyncio.run(controller.handle(FakePasteEvent("\\(x\\)")))

    assert outcome is PasteOutcome.DECLINED
    assert confirmation.prompts == [CONFIRM_PROMPT]
    assert editor.inserted == []
    assert not notifier.messages


def test_accepted_confirmation_inserts_formatted_text() -> None:
    config = Configuration(confirm_before_paste=True)
    controller, editor, confirmation, _ = _controller(config, answer=True)

    outcome = asyncio.run(controller.handle(FakePasteEvent("\\[ y \\]")))

    assert outcome is PasteOutcome.DELIVERED
    assert confirmation.prompts == [CONFIRM_PROMPT]
    assert editor.inserted == ["$$y$$"]


def test_operation_tracks_states() -> None:
    controller, _, _, _ = _controller(Configuration(confirm_before_paste=True))
    operation = controller.intercept(FakePasteEvent("\\(x\\)"))
    assert operation.state is PasteState.CAPTURED

    asyncio.run(controller.complete(operation))

    assert operation.state is PasteState.DELIVERED
    assert operation.formatted_text == "$x$"
    assert operation.outcome is PasteOutcome.DELIVERED


def test_rejected_operation_returns_to_idle() -> None:
    controller, _, _, _ = _controller(Configuration(max_text_size=1))
    operation = controller.intercept(FakePasteEvent("too long"))
    asyncio.run(controller.complete(operation))
    assert operation.state is PasteState.IDLE
    assert operation.formatted_text is None


def test_reconfigure_does_not_affect_intercepted_paste() -> None:
    controller, editor, _, _ = _controller(Configuration(rules=()))
    operation = controller.intercept(FakePasteEvent("X"))

    controller.reconfigure(Configuration(rules=tuple(build_rules([{"from": "X", "to": "Y"}]))))
    asyncio.run(controller.complete(operation))
    asyncio.run(controller.handle(FakePasteEvent("X")))

    assert editor.inserted == ["X", "Y"]
