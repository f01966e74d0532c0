from __future__ import annotations

import json

import pytest

from clipfmt.core.errors import InvalidRuleConfiguration
from clipfmt.core.rules_engine import rules_to_config
from clipfmt.frontend.validators import (
    format_replacements,
    parse_max_text_size,
    parse_replacements,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1200", 1200),
        ("  75 ", 75),
        ("300 chars", 300),
        ("abc", 5000),
        ("", 5000),
        ("0", 5000),
        ("-4", 5000),
    ],
)
def test_parse_max_text_size(raw: str, expected: int) -> None:
    assert parse_max_text_size(raw) == expected


def test_parse_replacements_accepts_valid_json() -> None:
    rules = parse_replacements('[{"from": "a.b", "to": "Z"}]')
    assert rules_to_config(rules) == [{"from": "a.b", "to": "Z"}]


def test_parse_replacements_rejects_invalid_json() -> None:
    with pytest.raises(InvalidRuleConfiguration) as excinfo:
        parse_replacements('[{"from": "a", ')
    assert "Invalid JSON" in str(excinfo.value)


def test_parse_replacements_rejects_wrong_shape() -> None:
    with pytest.raises(InvalidRuleConfiguration):
        parse_replacements('{"from": "a", "to": "b"}')


def test_parse_replacements_rejects_empty_from() -> None:
    with pytest.raises(InvalidRuleConfiguration):
        parse_replacements('[{"from": "", "to": "x"}]')


def test_format_replacements_is_parseable() -> None:
    text = format_replacements(parse_replacements('[{"from": "é", "to": "e"}]'))
    assert "é" in text
    assert json.loads(text) == [{"from": "é", "to": "e"}]
