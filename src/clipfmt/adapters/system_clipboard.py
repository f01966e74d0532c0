"""System clipboard and console adapters for the one-shot ``format`` command."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any, Optional, TextIO

import pyperclip

LOGGER = logging.getLogger(__name__)


class SystemClipboard:
    """Clipboard source and sink backed by pyperclip.

    The command line has no paste event to suppress, so ``claim`` is a no-op
    and ``extract_text`` ignores the event it is given.
    """

    def claim(self, event: Any) -> None:
        return None

    def extract_text(self, event: Any) -> Optional[str]:
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            LOGGER.warning("Clipboard is not available: %s", exc)
            return None
        return text or None

    def replace_selection(self, text: str) -> None:
        pyperclip.copy(text)


class StreamSink:
    """Writes formatted text to a stream instead of the clipboard."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def replace_selection(self, text: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(text)
        if not text.endswith("\n"):
            stream.write("\n")
        stream.flush()


class ConsoleConfirmation:
    """Asks on stdin; EOF or anything but yes counts as no."""

    async def ask(self, prompt: str) -> bool:
        try:
            answer = await asyncio.to_thread(input, f"{prompt} [y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in {"y", "yes"}


class ConsoleNotifier:
    def notify(self, message: str) -> None:
        print(message, file=sys.stderr)
