"""Ports (interfaces) used by the core paste pipeline.

Ports define the minimal contracts for the host editor, clipboard, prompts,
notices, and settings storage so that the core can be reused with different
frontends.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol


class ClipboardPort(Protocol):
    """Access to the payload of a paste-triggering event."""

    def claim(self, event: Any) -> None:
        """Take ownership of the event so the host's default paste does not run."""
        ...

    def extract_text(self, event: Any) -> Optional[str]:
        ...


class EditorSink(Protocol):
    """Target document for formatted text."""

    def replace_selection(self, text: str) -> None:
        ...


class ConfirmationPort(Protocol):
    """Yes/no prompt shown before delivery."""

    async def ask(self, prompt: str) -> bool:
        ...


class NotifierPort(Protocol):
    """Fire-and-forget user notices."""

    def notify(self, message: str) -> None:
        ...


class SettingsStoragePort(Protocol):
    """Host storage for the persisted settings object."""

    def read(self) -> Optional[dict[str, Any]]:
        ...

    def write(self, data: dict[str, Any]) -> None:
        ...
