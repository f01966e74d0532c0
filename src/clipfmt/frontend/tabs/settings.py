"""Settings tab implementation."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

from rich.text import Text
from textual import on
from textual.containers import Container, Horizontal, ScrollableContainer, Vertical
from textual.widgets import Button, Input, Static, Switch, TextArea

from clipfmt.core.config import Configuration
from clipfmt.core.errors import InvalidRuleConfiguration
from clipfmt.core.rules_engine import TextTransformer
from clipfmt.frontend.modals import ResetSettingsScreen
from clipfmt.frontend.validators import (
    format_replacements,
    parse_max_text_size,
    parse_replacements,
)


class SettingsTab(Container):
    """Edit confirmation, size limit, and replacements; every change is saved."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._loading_form = False
        self._last_rules_error: Optional[str] = None

    def compose(self):
        with Horizontal(id="settings-body"):
            with ScrollableContainer(id="settings-left"):
                yield Static("Confirm before pasting", classes="form-label")
                yield Static(
                    "Enable a confirmation prompt before pasting formatted text.",
                    classes="form-help",
                )
                yield Switch(id="confirm-before-paste")
                yield Static("Maximum text size", classes="form-label")
                yield Static(
                    "Maximum size of text (in characters) that can be pasted and formatted.",
                    classes="form-help",
                )
                yield Input(placeholder="Enter a number", id="max-text-size")
                yield Static("Custom text replacements", classes="form-label")
                yield Static('JSON list of {"from": ..., "to": ...} objects.', classes="form-help", markup=False)
                yield TextArea(id="replacements")
                yield Static("", id="replacements-error", classes="settings-error")
                with Horizontal(id="settings-actions"):
                    yield Button("Reset to defaults", id="reset-settings", variant="warning")
            with Vertical(id="settings-right"):
                yield Static("Rule tester", id="tester-title")
                yield TextArea(id="tester-input")
                with Horizontal(id="tester-actions"):
                    yield Button("Preview", id="tester-run", variant="primary")
                yield Static("", id="tester-result")

    def on_mount(self) -> None:
        self.reload_from_config()

    def reload_from_config(self) -> None:
        config: Configuration = self.app.config
        self._loading_form = True
        # Programmatic updates must not echo back as edits.
        with self.prevent(Switch.Changed, Input.Changed, TextArea.Changed):
            self.query_one("#confirm-before-paste", Switch).value = config.confirm_before_paste
            self.query_one("#max-text-size", Input).value = str(config.max_text_size)
            self.query_one("#replacements", TextArea).text = format_replacements(config.rules)
        self._set_error("")
        self._last_rules_error = None
        self._loading_form = False

    @on(Switch.Changed, "#confirm-before-paste")
    def _on_confirm_changed(self, event: Switch.Changed) -> None:
        if self._loading_form:
            return
        self.app.apply_config(replace(self.app.config, confirm_before_paste=bool(event.value)))

    @on(Input.Changed, "#max-text-size")
    def _on_max_size_changed(self, event: Input.Changed) -> None:
        if self._loading_form:
            return
        self.app.apply_config(replace(self.app.config, max_text_size=parse_max_text_size(event.value)))

    @on(TextArea.Changed, "#replacements")
    def _on_replacements_changed(self, event: TextArea.Changed) -> None:
        if self._loading_form:
            return
        try:
            rules = parse_replacements(event.text_area.text)
        except InvalidRuleConfiguration as exc:
            message = str(exc)
            self._set_error(message)
            # Keystrokes produce many transient errors; toast only new ones.
            if message != self._last_rules_error:
                self.app.notify(message, severity="error", markup=False)
            self._last_rules_error = message
            return
        self._set_error("")
        self._last_rules_error = None
        self.app.apply_config(replace(self.app.config, rules=tuple(rules)))

    @on(Button.Pressed, "#reset-settings")
    def _on_reset_pressed(self) -> None:
        self.app.push_screen(ResetSettingsScreen(), self._handle_reset_choice)

    def _handle_reset_choice(self, confirmed: Optional[bool]) -> None:
        if not confirmed:
            return
        self.app.reset_config()
        self.reload_from_config()

    @on(Button.Pressed, "#tester-run")
    def _on_tester_run(self) -> None:
        sample = self.query_one("#tester-input", TextArea).text
        preview = TextTransformer(self.app.config.rules).transform(sample)
        self.query_one("#tester-result", Static).update(Text(preview))

    def _set_error(self, message: str) -> None:
        self.query_one("#replacements-error", Static).update(Text(message))
