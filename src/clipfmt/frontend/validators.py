"""Validation helpers for settings editing."""

from __future__ import annotations

import json
import re

from clipfmt.core.config import DEFAULT_MAX_TEXT_SIZE
from clipfmt.core.errors import InvalidRuleConfiguration
from clipfmt.core.rules_engine import Rule, build_rules, rules_to_config

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_max_text_size(raw_value: str) -> int:
    """Parse the size field, resetting to the default on anything unusable.

    Only the leading integer counts, so "1200 chars" gives 1200.
    """

    match = _LEADING_INT.match(raw_value)
    if not match:
        return DEFAULT_MAX_TEXT_SIZE
    value = int(match.group(1))
    if value <= 0:
        return DEFAULT_MAX_TEXT_SIZE
    return value


def parse_replacements(raw_value: str) -> list[Rule]:
    try:
        loaded = json.loads(raw_value)
    except json.JSONDecodeError as exc:
        raise InvalidRuleConfiguration(f"Invalid JSON for custom replacements: {exc.msg}") from exc

    rules = build_rules(loaded)
    for index, rule in enumerate(rules, start=1):
        if not rule.source:
            raise InvalidRuleConfiguration(f"Replacement #{index} has an empty \"from\" string.")
    return rules


def format_replacements(rules: list[Rule] | tuple[Rule, ...]) -> str:
    return json.dumps(rules_to_config(rules), indent=2, ensure_ascii=False)
