"""Size guard applied before any formatting work."""

from __future__ import annotations

from clipfmt.core.errors import TextTooLarge


class SizeGuard:
    """Reject clipboard payloads longer than ``max_text_size`` characters."""

    def __init__(self, max_text_size: int) -> None:
        self.max_text_size = max_text_size

    def accepts(self, text: str) -> bool:
        # Equal to the limit is still accepted.
        return len(text) <= self.max_text_size

    def check(self, text: str) -> None:
        if not self.accepts(text):
            raise TextTooLarge(len(text), self.max_text_size)
