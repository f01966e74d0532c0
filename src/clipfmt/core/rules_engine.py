"""Rule compilation and text rewriting logic (core domain)."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Any, Iterable, List

from clipfmt.core.errors import InvalidRuleConfiguration

LOGGER = logging.getLogger(__name__)

# Spaced variants run first so "\( x \)" does not keep its inner spaces.
# Inner matches never cross a line terminator, "\r" included.
BUILTIN_PATTERNS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"\\\( ([^\n\r\u2028\u2029]*?) \\\)"), r"$\1$"),
    (re.compile(r"\\\[ ([^\n\r\u2028\u2029]*?) \\\]"), r"$$\1$$"),
    (re.compile(r"\\\(([^\n\r\u2028\u2029]*?)\\\)"), r"$\1$"),
    (re.compile(r"\\\[([^\n\r\u2028\u2029]*?)\\\]"), r"$$\1$$"),
)


@dataclass(frozen=True)
class Rule:
    """Compiled literal replacement rule."""

    source: str
    replacement: str
    pattern: re.Pattern

    def to_config(self) -> dict[str, str]:
        return {"from": self.source, "to": self.replacement}


def compile_rule(source: str, replacement: str) -> Rule:
    """Compile a literal find/replace pair.

    An empty ``source`` matches at every position and inserts ``replacement``
    between each character; the settings validators reject it before it gets
    here.
    """

    return Rule(source=source, replacement=replacement, pattern=re.compile(re.escape(source)))


def build_rules(rules_config: Any) -> List[Rule]:
    """Validate raw ``[{"from": ..., "to": ...}]`` data and compile it.

    Raises InvalidRuleConfiguration on any structural problem so callers can
    reject the whole list rather than apply part of it.
    """

    if not isinstance(rules_config, list):
        raise InvalidRuleConfiguration("Replacements must be a list of {\"from\", \"to\"} objects.")

    compiled: List[Rule] = []
    for index, entry in enumerate(rules_config):
        if not isinstance(entry, dict):
            raise InvalidRuleConfiguration(f"Replacement #{index + 1} must be an object.")
        source = entry.get("from")
        replacement = entry.get("to")
        if not isinstance(source, str) or not isinstance(replacement, str):
            raise InvalidRuleConfiguration(f"Replacement #{index + 1} needs string \"from\" and \"to\" fields.")
        compiled.append(compile_rule(source, replacement))
    return compiled


def load_rules(rules_config: Any) -> List[Rule]:
    """Like build_rules, but falls back to an empty list on malformed data."""

    try:
        return build_rules(rules_config)
    except InvalidRuleConfiguration as exc:
        LOGGER.warning("Ignoring malformed replacement rules: %s", exc)
        return []


def rules_to_config(rules: Iterable[Rule]) -> list[dict[str, str]]:
    return [rule.to_config() for rule in rules]


def normalize(text: str) -> str:
    """Rewrite ``\\( \\)`` and ``\\[ \\]`` math delimiters to dollar notation."""

    for pattern, template in BUILTIN_PATTERNS:
        text = pattern.sub(template, text)
    return text


def apply_rules(text: str, rules: Iterable[Rule]) -> str:
    """Apply each rule in order; every rule sees the previous rule's output."""

    for rule in rules:
        # A callable replacement keeps backslashes in ``to`` literal.
        text = rule.pattern.sub(lambda _match, value=rule.replacement: value, text)
    return text


class TextTransformer:
    """Normalization pass followed by the custom replacement pass."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules = list(rules)

    def transform(self, text: str) -> str:
        return apply_rules(normalize(text), self._rules)
