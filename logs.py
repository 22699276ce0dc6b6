from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from config import LOG_LEVEL, LOG_TO_CONSOLE
from paths import logs_dir

LOG_NAME = "handover"


def log_path() -> Path:
    return logs_dir() / f"{LOG_NAME}.log"


def get_logger(name: str = LOG_NAME) -> logging.Logger:
    """Install the file handler on the root logger (once) and return ``name``.

    Modules log through ``logging.getLogger(__name__)``; with the handler on
    the root logger every module ends up in the same rotating file.
    """
    logger = logging.getLogger(name)
    root = logging.getLogger()
    if any(getattr(h, "_handover", False) for h in root.handlers):
        return logger

    root.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    handler = logging.handlers.RotatingFileHandler(
        log_path(), maxBytes=1_500_000, backupCount=5, encoding="utf-8"
    )
    handler.setFormatter(formatter)
    handler._handover = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    if LOG_TO_CONSOLE:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(formatter)
        stream._handover = True  # type: ignore[attr-defined]
        root.addHandler(stream)

    return logger
