"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from clipfmt.core.rules_engine import Rule, compile_rule

DEFAULT_CONFIRM_BEFORE_PASTE = False
DEFAULT_MAX_TEXT_SIZE = 5000
DEFAULT_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("[Intermediate]", "[Basic]"),
    ("[Advanced]", "[Basic]"),
    ("# Note on ", "# "),
)


def default_rules() -> tuple[Rule, ...]:
    return tuple(compile_rule(source, replacement) for source, replacement in DEFAULT_REPLACEMENTS)


@dataclass(frozen=True)
class Configuration:
    """Paste formatting settings read by the controller."""

    confirm_before_paste: bool = DEFAULT_CONFIRM_BEFORE_PASTE
    max_text_size: int = DEFAULT_MAX_TEXT_SIZE
    rules: tuple[Rule, ...] = field(default_factory=default_rules)

    def __post_init__(self) -> None:
        if isinstance(self.max_text_size, bool) or not isinstance(self.max_text_size, int):
            raise TypeError("max_text_size must be an int")
        if self.max_text_size <= 0:
            raise ValueError("max_text_size must be positive")
        object.__setattr__(self, "rules", tuple(self.rules))
