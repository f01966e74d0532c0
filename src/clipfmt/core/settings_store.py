"""Load and save paste settings over a storage port."""

from __future__ import annotations

import logging
from typing import Any

from clipfmt.core.config import (
    DEFAULT_CONFIRM_BEFORE_PASTE,
    DEFAULT_MAX_TEXT_SIZE,
    Configuration,
    default_rules,
)
from clipfmt.core.ports import SettingsStoragePort
from clipfmt.core.rules_engine import load_rules, rules_to_config

LOGGER = logging.getLogger(__name__)

CONFIRM_KEY = "confirmBeforePaste"
MAX_SIZE_KEY = "maxTextSize"
REPLACEMENTS_KEY = "customReplacements"


def config_to_dict(config: Configuration) -> dict[str, Any]:
    return {
        CONFIRM_KEY: config.confirm_before_paste,
        MAX_SIZE_KEY: config.max_text_size,
        REPLACEMENTS_KEY: rules_to_config(config.rules),
    }


def config_from_dict(data: Any) -> Configuration:
    """Merge persisted fields over the defaults, one field at a time.

    Fields with the wrong type fall back to their default instead of failing
    the whole load.
    """

    if not isinstance(data, dict):
        if data is not None:
            LOGGER.warning("Persisted settings are not an object, using defaults")
        return Configuration()

    confirm = data.get(CONFIRM_KEY, DEFAULT_CONFIRM_BEFORE_PASTE)
    if not isinstance(confirm, bool):
        LOGGER.warning("Invalid %s=%r, using default", CONFIRM_KEY, confirm)
        confirm = DEFAULT_CONFIRM_BEFORE_PASTE

    max_size = data.get(MAX_SIZE_KEY, DEFAULT_MAX_TEXT_SIZE)
    if isinstance(max_size, float) and max_size.is_integer():
        max_size = int(max_size)
    if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size <= 0:
        LOGGER.warning("Invalid %s=%r, using default", MAX_SIZE_KEY, max_size)
        max_size = DEFAULT_MAX_TEXT_SIZE

    if REPLACEMENTS_KEY in data:
        rules = tuple(load_rules(data[REPLACEMENTS_KEY]))
    else:
        rules = default_rules()

    return Configuration(confirm_before_paste=confirm, max_text_size=max_size, rules=rules)


class SettingsStore:
    """Persist the Configuration through a SettingsStoragePort."""

    def __init__(self, storage: SettingsStoragePort) -> None:
        self._storage = storage

    def load(self) -> Configuration:
        config = config_from_dict(self._storage.read())
        LOGGER.info(
            "Settings loaded: confirm=%s, max_text_size=%s, %s replacement rules",
            config.confirm_before_paste,
            config.max_text_size,
            len(config.rules),
        )
        return config

    def save(self, config: Configuration) -> None:
        self._storage.write(config_to_dict(config))
        LOGGER.debug("Settings saved")
