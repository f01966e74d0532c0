from __future__ import annotations

import json

import pyperclip

from clipfmt.app import main


def test_settings_command_prints_effective_settings(tmp_path, capsys) -> None:
    path = tmp_path / "clipfmt.json"
    path.write_text(json.dumps({"maxTextSize": 99}), encoding="utf-8")

    assert main(["--settings", str(path), "settings"]) == 0

    printed = json.loads(capsys.readouterr().out)
    assert printed["maxTextSize"] == 99
    assert printed["confirmBeforePaste"] is False
    assert len(printed["customReplacements"]) == 3


def test_format_command_prints_formatted_clipboard(tmp_path, capsys, monkeypatch) -> None:
    monkeypatch.setattr(pyperclip, "paste", lambda: "[Advanced] \\[ x^2 \\]")

    assert main(["--settings", str(tmp_path / "missing.json"), "format", "--print"]) == 0

    assert capsys.readouterr().out == "[Basic] $$x^2$$\n"


def test_format_command_fails_on_oversized_text(tmp_path, capsys, monkeypatch) -> None:
    path = tmp_path / "clipfmt.json"
    path.write_text(json.dumps({"maxTextSize": 3}), encoding="utf-8")
    monkeypatch.setattr(pyperclip, "paste", lambda: "abcd")

    assert main(["--settings", str(path), "format", "--print"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Text is too large to format." in captured.err
