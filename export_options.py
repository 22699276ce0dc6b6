# export_options.py
"""
Export actions for the rendered report text.

Each action returns an ExportNotice; the window shows it. Nothing here touches
the store, so a failed export never changes the form.
"""
from __future__ import annotations

import logging
import webbrowser
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Protocol

from config import PRINT_KEEP_PAGES, REPORT_TITLE
from paths import print_dir
from utils import html_multiline, stamp_for_filename

_LOGGER = logging.getLogger(__name__)

PRINT_PREFIX = "handover_report_"


@dataclass(frozen=True, slots=True)
class ExportNotice:
    ok: bool
    title: str
    message: str


class Clipboard(Protocol):
    def clipboard_clear(self) -> None: ...

    def clipboard_append(self, text: str) -> None: ...


PRINT_TEMPLATE = """<html>
  <head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
      body {{
        font-family: Arial, sans-serif;
        line-height: 1.6;
        margin: 20px;
      }}
      h1 {{
        color: #2563eb;
        border-bottom: 1px solid #e5e7eb;
        padding-bottom: 10px;
      }}
      pre {{
        white-space: pre-wrap;
        font-family: Arial, sans-serif;
      }}
    </style>
  </head>
  <body onload="window.print()">
    <h1>{title}</h1>
    <pre>{body}</pre>
  </body>
</html>
"""


# -----------------------------
# Clipboard
# -----------------------------
def copy_to_clipboard(text: str, clipboard: Clipboard) -> ExportNotice:
    """``clipboard`` is normally the Tk root window."""
    try:
        clipboard.clipboard_clear()
        clipboard.clipboard_append(text)
    except Exception as e:  # tk.TclError, OSError
        _LOGGER.warning("Clipboard copy failed: %s", e)
        return ExportNotice(False, "Failed to copy", f"Could not copy to clipboard:\n\n{e}")

    _LOGGER.info("Report copied to clipboard (%d chars)", len(text))
    return ExportNotice(True, "Copied to clipboard", "Report has been copied to clipboard")


# -----------------------------
# Print view
# -----------------------------
def build_print_html(text: str, title: str = REPORT_TITLE) -> str:
    return PRINT_TEMPLATE.format(title=html_multiline(title), body=html_multiline(text))


def prune_print_pages(folder: Path, keep: int = PRINT_KEEP_PAGES) -> List[Path]:
    """Delete all but the newest ``keep`` print pages; returns what was removed."""
    pages = sorted(folder.glob(f"{PRINT_PREFIX}*.html"))
    stale = pages[:-keep] if keep > 0 else pages
    removed: List[Path] = []
    for page in stale:
        try:
            page.unlink()
        except OSError as e:
            _LOGGER.warning("Could not remove old print page %s: %s", page, e)
            continue
        removed.append(page)
    if removed:
        _LOGGER.debug("Pruned %d old print page(s) from %s", len(removed), folder)
    return removed


def write_print_file(
    text: str,
    title: str = REPORT_TITLE,
    out_dir: Optional[Path] = None,
    keep: int = PRINT_KEEP_PAGES,
) -> Path:
    folder = out_dir if out_dir is not None else print_dir()
    folder.mkdir(parents=True, exist_ok=True)

    stem = f"{PRINT_PREFIX}{stamp_for_filename()}"
    path = folder / f"{stem}.html"
    n = 1
    # "x" never overwrites an earlier page
    while True:
        try:
            with open(path, "x", encoding="utf-8") as f:
                f.write(build_print_html(text, title))
            break
        except FileExistsError:
            path = folder / f"{stem}_{n}.html"
            n += 1

    prune_print_pages(folder, keep=max(keep, 1))
    return path


def print_report(
    text: str,
    title: str = REPORT_TITLE,
    opener: Callable[[str], bool] = webbrowser.open,
    out_dir: Optional[Path] = None,
) -> ExportNotice:
    """
    Writes a minimal printable page and opens it; the page calls the
    platform print dialog on load.
    """
    failed = ExportNotice(False, "Print failed", "Could not open print window")
    try:
        path = write_print_file(text, title, out_dir)
        opened = opener(path.resolve().as_uri())
    except (OSError, webbrowser.Error) as e:
        _LOGGER.warning("Print view failed: %s", e)
        return failed

    if not opened:
        _LOGGER.warning("No browser accepted the print view %s", path)
        return failed

    _LOGGER.info("Print view opened: %s", path)
    return ExportNotice(True, "Print", f"Print view opened:\n{path}")


# -----------------------------
# PDF (placeholder)
# -----------------------------
def download_pdf() -> ExportNotice:
    _LOGGER.info("PDF download requested (not implemented)")
    return ExportNotice(
        False,
        "PDF Download",
        "PDF download is not implemented yet. Use Print and choose a PDF printer instead.",
    )


__all__ = [
    "Clipboard",
    "ExportNotice",
    "build_print_html",
    "copy_to_clipboard",
    "download_pdf",
    "print_report",
    "prune_print_pages",
    "write_print_file",
]
