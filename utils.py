# utils.py
from __future__ import annotations

import locale
import logging
from datetime import datetime
from typing import Iterable, Sequence
from xml.sax.saxutils import escape as xml_escape

from config import TIMESTAMP_FORMAT

_LOGGER = logging.getLogger(__name__)


def clean_text(text) -> str:
    return (text or "").strip()


def toggle_item(items: Sequence[str], value: str) -> tuple[str, ...]:
    """
    Set-membership flip that keeps insertion order:
    present -> removed, absent -> appended.
    """
    if value in items:
        return tuple(s for s in items if s != value)
    return tuple(items) + (value,)


def catalog_order(selected: Iterable[str], catalog: Sequence[str]) -> list[str]:
    """
    Orders a selection the way the catalog lists it.
    Values the catalog does not know keep their selection order, after the rest.
    """
    chosen = list(dict.fromkeys(s for s in (selected or []) if s))
    known = [c for c in catalog if c in chosen]
    extra = [s for s in chosen if s not in catalog]
    return known + extra


def format_timestamp(now: datetime | None = None, fmt: str = TIMESTAMP_FORMAT) -> str:
    stamp = now if now is not None else datetime.now()
    return stamp.strftime(fmt)


def stamp_for_filename(now: datetime | None = None) -> str:
    stamp = now if now is not None else datetime.now()
    # microseconds so two prints in the same second get different names
    return stamp.strftime("%Y%m%d_%H%M%S_%f")


def html_multiline(text: str) -> str:
    """
    Escape for HTML and normalise line endings.
    Newlines are kept as-is (callers wrap the result in <pre>).
    """
    safe = xml_escape(text or "")
    return safe.replace("\r\n", "\n").replace("\r", "\n")


def use_system_locale() -> str | None:
    """
    Switch LC_TIME to the user's locale so "%c" timestamps read naturally.
    Returns the locale name, or None when the environment names one the
    system does not have (the C locale stays in effect).
    """
    try:
        return locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        _LOGGER.warning("Keeping the C locale for timestamps: %s", e)
        return None
