from __future__ import annotations

import json
import logging
from pathlib import Path

from env_config import get_env

# Used when neither HANDOVER_DATA_DIR nor settings_local.json names a folder
DEFAULT_DATA_DIR = Path.home() / ".handover_report"

SETTINGS_FILE = "settings_local.json"

_LOGGER = logging.getLogger(__name__)


def _settings_data_dir(settings_path: Path) -> str | None:
    if not settings_path.exists():
        return None
    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            cfg = json.load(f)
        return cfg.get("DATA_DIR")
    except (OSError, ValueError, AttributeError) as e:
        _LOGGER.warning("Ignoring unreadable %s: %s", settings_path, e)
        return None


def get_data_dir() -> Path:
    """
    Base folder for logs and the print spool. The form itself is never saved.

    Lookup order: HANDOVER_DATA_DIR, then DATA_DIR in settings_local.json
    beside this file, then DEFAULT_DATA_DIR.
    """
    chosen = get_env("HANDOVER_DATA_DIR") or _settings_data_dir(
        Path(__file__).resolve().parent / SETTINGS_FILE
    )
    base = Path(chosen).expanduser() if chosen else DEFAULT_DATA_DIR

    for sub in ("logs", "print"):
        (base / sub).mkdir(parents=True, exist_ok=True)

    return base


def logs_dir() -> Path:
    """Rotating log files"""
    return get_data_dir() / "logs"


def print_dir() -> Path:
    """Generated print views (safe to empty at any time)"""
    return get_data_dir() / "print"
