"""Structured view serializer for the on-screen preview.

The output is a flat list of styled runs. ``preview_pane`` inserts them into a
``tk.Text`` with one tag per style; nothing here imports tkinter.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from models import ReportRecords
from report_render import Block, BulletList, Paragraph, ReportDocument, Subsection, render_sections

BULLET_GLYPH = "• "

# Style names shared with preview_pane.VIEW_STYLES
TAG_TITLE = "title"
TAG_TIMESTAMP = "timestamp"
TAG_HEADING = "heading"
TAG_SUBHEADING = "subheading"
TAG_LABEL = "label"
TAG_BULLET = "bullet"
TAG_BODY = "body"


@dataclass(frozen=True, slots=True)
class ViewRun:
    text: str
    tags: Tuple[str, ...] = (TAG_BODY,)


def _paragraph_runs(p: Paragraph, extra: Tuple[str, ...] = ()) -> List[ViewRun]:
    runs: List[ViewRun] = []
    if p.label:
        runs.append(ViewRun(f"{p.label}:", (TAG_LABEL,) + extra))
        runs.append(ViewRun(f" {p.text}\n", (TAG_BODY,) + extra))
    else:
        runs.append(ViewRun(f"{p.text}\n", (TAG_BODY,) + extra))
    return runs


def _block_runs(block: Block) -> List[ViewRun]:
    if isinstance(block, Paragraph):
        return _paragraph_runs(block)

    if isinstance(block, BulletList):
        return [ViewRun(f"{BULLET_GLYPH}{item}\n", (TAG_BULLET,)) for item in block.items]

    if isinstance(block, Subsection):
        # status words sit on the title line ("Renal: Normal"); details go below
        children = block.blocks
        if len(children) == 1 and isinstance(children[0], Paragraph) and not children[0].label:
            return [
                ViewRun(f"{block.title}:", (TAG_SUBHEADING,)),
                ViewRun(f" {children[0].text}\n", (TAG_BODY,)),
            ]
        runs = [ViewRun(f"{block.title}\n", (TAG_SUBHEADING,))]
        for child in children:
            runs.extend(_block_runs(child))
        return runs

    raise TypeError(f"Unsupported block: {type(block).__name__}")


def render_view(document: ReportDocument) -> List[ViewRun]:
    runs: List[ViewRun] = [
        ViewRun(f"{document.title}\n", (TAG_TITLE,)),
        ViewRun(f"{document.timestamp}\n", (TAG_TIMESTAMP,)),
    ]
    for section in document.sections:
        runs.append(ViewRun("\n"))
        runs.append(ViewRun(f"{section.heading}\n", (TAG_HEADING,)))
        for block in section.blocks:
            runs.extend(_block_runs(block))
    return runs


def report_view(records: ReportRecords, now: Optional[datetime] = None) -> List[ViewRun]:
    """Shortcut: records -> tree -> styled runs."""
    return render_view(render_sections(records, now=now))


def plain_text(runs: List[ViewRun]) -> str:
    return "".join(r.text for r in runs)


__all__ = [
    "BULLET_GLYPH",
    "TAG_BODY",
    "TAG_BULLET",
    "TAG_HEADING",
    "TAG_LABEL",
    "TAG_SUBHEADING",
    "TAG_TIMESTAMP",
    "TAG_TITLE",
    "ViewRun",
    "plain_text",
    "render_view",
    "report_view",
]
