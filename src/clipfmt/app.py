"""Application entry point for clipfmt."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.console import Console
from rich.text import Text

from clipfmt import __version__, settings
from clipfmt.adapters.json_storage import JsonFileStorage
from clipfmt.adapters.system_clipboard import (
    ConsoleConfirmation,
    ConsoleNotifier,
    StreamSink,
    SystemClipboard,
)
from clipfmt.core.processor import PasteController, PasteOutcome
from clipfmt.core.settings_store import SettingsStore, config_to_dict
from clipfmt.frontend.constants import BRAND_COLOR

NAME = "CLIPFMT"


def _print_banner() -> None:
    console = Console(stderr=True)
    console.print(
        Text.assemble(
            (f" {NAME} ", f"bold white on {BRAND_COLOR}"),
            (f"  paste formatter v{__version__}", "bold"),
        )
    )


def _configure_logging(tui: bool = False) -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        if tui:
            # stderr belongs to the terminal UI while it runs.
            from textual.logging import TextualHandler

            console_handler: logging.Handler = TextualHandler()
        else:
            console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/clipfmt.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _settings_store(path: Optional[str]) -> SettingsStore:
    return SettingsStore(JsonFileStorage(path or settings.SETTINGS_PATH))


def _run(settings_path: Optional[str]) -> int:
    _print_banner()
    _configure_logging(tui=True)
    logger = logging.getLogger(__name__)
    logger.info("Starting clipfmt editor")

    from clipfmt.frontend.app import PasteFormatterApp

    PasteFormatterApp(settings_store=_settings_store(settings_path)).run()
    return 0


def _format(settings_path: Optional[str], to_stdout: bool) -> int:
    _configure_logging()
    store = _settings_store(settings_path)
    clipboard = SystemClipboard()
    controller = PasteController(
        config=store.load(),
        clipboard=clipboard,
        editor=StreamSink() if to_stdout else clipboard,
        confirmation=ConsoleConfirmation(),
        notifier=ConsoleNotifier(),
    )
    outcome = asyncio.run(controller.handle(None))
    if outcome is PasteOutcome.DELIVERED and not to_stdout:
        print("Formatted text copied to the clipboard.")
    return 0 if outcome in (PasteOutcome.DELIVERED, PasteOutcome.DECLINED) else 1


def _show_settings(settings_path: Optional[str]) -> int:
    _print_banner()
    store = _settings_store(settings_path)
    print(json.dumps(config_to_dict(store.load()), indent=2, ensure_ascii=False))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="clipfmt")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        help="Path to the settings JSON file (default: CLIPFMT_SETTINGS_PATH or ./clipfmt.json)",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Open the formatting editor")
    format_parser = subparsers.add_parser(
        "format",
        help="Format the system clipboard in place",
    )
    format_parser.add_argument(
        "--print",
        dest="to_stdout",
        action="store_true",
        help="Write the formatted text to stdout instead of the clipboard",
    )
    subparsers.add_parser("settings", help="Print the effective settings as JSON")

    args = parser.parse_args(argv)
    if args.command == "format":
        return _format(args.settings_path, args.to_stdout)
    if args.command == "settings":
        return _show_settings(args.settings_path)
    return _run(args.settings_path)


if __name__ == "__main__":
    raise SystemExit(main())
