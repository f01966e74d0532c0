"""Main Textual app for the clipfmt paste formatter."""

from __future__ import annotations

import logging
from typing import Any

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Center, Container, Horizontal, Vertical
from textual.widgets import ContentSwitcher, Footer, Static, Tab, Tabs

from clipfmt import __version__
from clipfmt.adapters.textual_host import (
    AppNotifier,
    ModalConfirmation,
    PasteEventClipboard,
    TextAreaEditor,
)
from clipfmt.core.config import Configuration
from clipfmt.core.errors import SettingsStorageError
from clipfmt.core.processor import PasteController
from clipfmt.core.settings_store import SettingsStore
from .constants import BRAND_COLOR
from .tabs.editor import EditorTab, FormattingTextArea
from .tabs.guide import GuideTab
from .tabs.settings import SettingsTab

LOGGER = logging.getLogger(__name__)


class PasteFormatterApp(App):
    """Editor with paste formatting, plus settings and guide tabs."""

    BINDINGS = [
        ("f1", "show_tab('editor')", "Editor"),
        ("f2", "show_tab('settings')", "Settings"),
        ("f3", "show_tab('guide')", "Guide"),
    ]

    CSS_PATH = "app.tcss"

    def __init__(self, settings_store: SettingsStore, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.settings_store = settings_store
        self.config: Configuration = settings_store.load()
        self.controller: PasteController | None = None

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                    yield Static(f"engine v{__version__}", classes="subtle")
                with Vertical(id="header-right"):
                    yield Static("", id="header-status", classes="subtle")

        with Container(id="tabs-bar"):
            with Center(id="tabs-center"):
                yield Tabs(
                    Tab("Editor", id="editor-tab"),
                    Tab("Settings", id="settings-tab"),
                    Tab("Guide", id="guide-tab"),
                    id="tabs",
                )

        with ContentSwitcher(id="content", initial="editor"):
            yield EditorTab(id="editor")
            yield SettingsTab(id="settings")
            yield GuideTab(id="guide")
        yield Footer()

    def on_mount(self) -> None:
        text_area = self.query_one("#editor", EditorTab).query_one(FormattingTextArea)
        self.controller = PasteController(
            config=self.config,
            clipboard=PasteEventClipboard(),
            editor=TextAreaEditor(text_area),
            confirmation=ModalConfirmation(self),
            notifier=AppNotifier(self),
        )
        self._refresh_header()
        text_area.focus()

    def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        tab_id = (event.tab.id or "").removesuffix("-tab")
        if tab_id:
            self._set_active_tab(tab_id)

    def action_show_tab(self, tab_id: str) -> None:
        self.query_one("#tabs", Tabs).active = f"{tab_id}-tab"

    def _set_active_tab(self, tab_id: str) -> None:
        switcher = self.query_one("#content", ContentSwitcher)
        switcher.current = tab_id

    def apply_config(self, config: Configuration) -> None:
        """Persist a new configuration and hand it to the controller."""

        if config == self.config:
            return
        self.config = config
        if self.controller is not None:
            self.controller.reconfigure(config)
        try:
            self.settings_store.save(config)
        except SettingsStorageError as exc:
            LOGGER.error("Could not save settings: %s", exc)
            self.notify(str(exc), severity="error", markup=False)
        self._refresh_header()

    def reset_config(self) -> None:
        self.apply_config(Configuration())
        self.notify("Settings reset to defaults.")

    def _refresh_header(self) -> None:
        status = self.query_one("#header-status", Static)
        confirm = "on" if self.config.confirm_before_paste else "off"
        status.update(
            f"confirm: {confirm}  limit: {self.config.max_text_size}  rules: {len(self.config.rules)}"
        )

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("CLIP", BRAND_COLOR),
            ("FMT > Paste Formatter", "bold"),
        )
