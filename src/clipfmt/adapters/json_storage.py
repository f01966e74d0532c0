"""JSON file adapter for persisted paste settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from clipfmt.core.errors import SettingsStorageError

LOGGER = logging.getLogger(__name__)


class JsonFileStorage:
    """Stores the settings object as a pretty-printed JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def read(self) -> Optional[dict[str, Any]]:
        try:
            loaded = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            LOGGER.info("No settings file at %s, using defaults", self.path)
            return None
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON (%s), using defaults", self.path, exc.msg)
            return None
        except OSError as exc:
            LOGGER.warning("Settings file %s is unreadable (%s), using defaults", self.path, exc.strerror or exc)
            return None
        if not isinstance(loaded, dict):
            LOGGER.warning("Settings file %s root must be an object, using defaults", self.path)
            return None
        return loaded

    def write(self, data: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise SettingsStorageError(f"save failed: {exc.strerror or exc}") from exc
