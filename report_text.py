"""Flat-text serializer for copy / print / export."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence

from models import ReportRecords
from report_render import Block, BulletList, Paragraph, ReportDocument, Subsection, render_sections

BULLET = "- "


def _paragraph_line(p: Paragraph) -> str:
    return f"{p.label}: {p.text}" if p.label else p.text


def _block_lines(block: Block, nested: bool = False) -> List[str]:
    if isinstance(block, Paragraph):
        line = _paragraph_line(block)
        # inside a body system every detail is a bullet, status words included
        return [f"{BULLET}{line}" if nested else line]

    if isinstance(block, BulletList):
        return [f"{BULLET}{item}" for item in block.items]

    if isinstance(block, Subsection):
        lines = [block.title]
        for child in block.blocks:
            lines.extend(_block_lines(child, nested=True))
        return lines

    raise TypeError(f"Unsupported block: {type(block).__name__}")


def section_lines(blocks: Sequence[Block]) -> List[str]:
    lines: List[str] = []
    for block in blocks:
        lines.extend(_block_lines(block))
    return lines


def render_text(document: ReportDocument) -> str:
    lines: List[str] = [document.title.upper(), document.timestamp]
    for section in document.sections:
        lines.append("")
        lines.append(section.heading.upper())
        lines.extend(section_lines(section.blocks))
    return "\n".join(lines)


def report_text(records: ReportRecords, now: Optional[datetime] = None) -> str:
    """Shortcut: records -> tree -> text."""
    return render_text(render_sections(records, now=now))


__all__ = ["BULLET", "render_text", "report_text", "section_lines"]
