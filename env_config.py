# env_config.py
import os
from dotenv import load_dotenv

# Picks up a .env next to the app (or in a parent folder) before config.py reads anything
load_dotenv()

_TRUE_WORDS = ("1", "true", "yes", "on")


def get_env(key: str, default: str = "") -> str:
    """Value of ``key``, or ``default`` when unset or blank."""
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_env_bool(key: str, default: bool = False) -> bool:
    raw = get_env(key).lower()
    if not raw:
        return default
    return raw in _TRUE_WORDS
