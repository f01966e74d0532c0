"""Static configuration for clipfmt.

Paste settings (confirmation, size limit, replacements) live in a JSON file
edited through the Settings tab. Process-level settings such as logging come
from the environment, optionally via a ``.env`` file.
"""

import os

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.getcwd())

# Where the persisted paste settings live.
SETTINGS_PATH = os.getenv("CLIPFMT_SETTINGS_PATH") or os.path.join(PROJECT_ROOT, "clipfmt.json")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes", "on")


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


# Logging configuration, same shape the logging setup in app.py expects.
LOGGING = {
    "enabled": _env_flag("CLIPFMT_LOG_ENABLED", True),
    "level": os.getenv("CLIPFMT_LOG_LEVEL", "INFO"),
    "console": _env_flag("CLIPFMT_LOG_CONSOLE", True),
    "file": {
        "enabled": _env_flag("CLIPFMT_LOG_FILE_ENABLED", False),
        "path": os.getenv("CLIPFMT_LOG_FILE", "logs/clipfmt.log"),
        "max_bytes": _env_int("CLIPFMT_LOG_MAX_BYTES", 5 * 1024 * 1024),
        "backup_count": _env_int("CLIPFMT_LOG_BACKUP_COUNT", 5),
    },
}
