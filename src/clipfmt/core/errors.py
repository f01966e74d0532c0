"""clipfmt error hierarchy.

All project exceptions inherit from ClipFmtError. The paste controller
handles its own subclasses; the rest reach the caller.

    ClipFmtError
    ├── NoClipboardText
    ├── TextTooLarge
    ├── InvalidRuleConfiguration
    └── SettingsStorageError
"""

from __future__ import annotations


class ClipFmtError(Exception):
    """Base class for all clipfmt errors."""


class NoClipboardText(ClipFmtError):
    """The paste carried no plain-text payload."""

    def __init__(self) -> None:
        super().__init__("No text found on the clipboard.")


class TextTooLarge(ClipFmtError):
    """The clipboard text exceeds the configured size limit."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__("Text is too large to format.")
        self.length = length
        self.limit = limit


class InvalidRuleConfiguration(ClipFmtError):
    """A replacement rule list has an invalid structure."""


class SettingsStorageError(ClipFmtError):
    """Persisted settings could not be written."""
