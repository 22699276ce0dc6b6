"""Canonical report assembly.

``render_sections`` is the only place that decides *what* the report says.
``report_text`` and ``report_view`` only decide how it looks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence, Tuple, Union

from config import (
    ASSESSMENT_FALLBACKS,
    COMMON_SYMPTOMS,
    HEADING_ASSESSMENT,
    HEADING_HANDOVER,
    HEADING_INTERVENTIONS,
    HEADING_OBJECTIVE,
    HEADING_PLANNING,
    HEADING_SUBJECTIVE,
    INTERVENTION_FALLBACKS,
    NO_HANDOVER_TEXT,
    OBJECTIVE_ABNORMAL_EMPTY_TEXT,
    OBJECTIVE_STATUS_LABELS,
    PLANNING_FALLBACKS,
    REPORT_TITLE,
    STANDARD_ASSESSMENTS,
    STANDARD_INTERVENTIONS,
    STANDARD_PLANS,
    SUBJECTIVE_NIL_TEXT,
    SUBJECTIVE_OBTAINED_TEXT,
)
from models import ChecklistData, PatientInfo, ReportRecords, SubjectiveData, SystemData
from utils import catalog_order, clean_text, format_timestamp


# -----------------------------
# Document tree
# -----------------------------
@dataclass(frozen=True, slots=True)
class Paragraph:
    text: str
    # Emphasised lead-in, rendered as "label: text"
    label: str = ""


@dataclass(frozen=True, slots=True)
class BulletList:
    items: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Subsection:
    title: str
    blocks: Tuple["Block", ...]


Block = Union[Paragraph, BulletList, Subsection]


@dataclass(frozen=True, slots=True)
class Section:
    heading: str
    blocks: Tuple[Block, ...] = ()


@dataclass(frozen=True, slots=True)
class ReportDocument:
    title: str
    timestamp: str
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    def section(self, heading: str) -> Section:
        for s in self.sections:
            if s.heading == heading:
                return s
        raise KeyError(heading)


# -----------------------------
# Section builders
# -----------------------------
def handover_blocks(info: PatientInfo) -> Tuple[Block, ...]:
    role = clean_text(info.received_from.role)
    name = clean_text(info.received_from.name)
    if not role and not name:
        return (Paragraph(NO_HANDOVER_TEXT),)
    who = " ".join(s for s in (role, name) if s)
    return (Paragraph(who, label="Received from"),)


def subjective_blocks(data: SubjectiveData) -> Tuple[Block, ...]:
    if data.subjective_type == "nil":
        return (Paragraph(SUBJECTIVE_NIL_TEXT),)
    if data.subjective_type == "obtained":
        return (Paragraph(SUBJECTIVE_OBTAINED_TEXT),)

    out: List[Block] = []
    symptoms = catalog_order(data.common_symptoms, COMMON_SYMPTOMS)
    if symptoms:
        out.append(Paragraph(", ".join(symptoms), label="Reported symptoms"))
    text = clean_text(data.custom_text)
    if text:
        out.append(Paragraph(text))
    # custom with nothing filled in stays blank
    return tuple(out)


def system_blocks(system: SystemData) -> Tuple[Block, ...]:
    if system.status != "abnormal":
        return (Paragraph(OBJECTIVE_STATUS_LABELS.get(system.status, "Not assessed")),)

    items: List[str] = list(catalog_order(system.symptoms, system.symptom_catalog()))
    items.extend(clean_text(value) for _, value in system.field_values() if clean_text(value))
    notes = clean_text(system.notes)
    if notes:
        items.append(notes)

    if not items:
        return (Paragraph(OBJECTIVE_ABNORMAL_EMPTY_TEXT),)
    return (BulletList(tuple(items)),)


def objective_blocks(records: ReportRecords) -> Tuple[Block, ...]:
    return tuple(
        Subsection(system.TITLE, system_blocks(system))
        for system in records.objective.systems()
    )


def checklist_blocks(
    data: ChecklistData,
    catalog: Sequence[str],
    fallbacks: Tuple[str, str],
) -> Tuple[Block, ...]:
    none_selected, none_provided = fallbacks
    if data.entry_type == "standard":
        items = catalog_order(data.standard_items, catalog)
        if not items:
            return (Paragraph(none_selected),)
        return (BulletList(tuple(items)),)

    # custom text goes out verbatim; only a truly empty box falls back
    if not data.custom_text:
        return (Paragraph(none_provided),)
    return (Paragraph(data.custom_text),)


# -----------------------------
# Entry point
# -----------------------------
def render_sections(
    records: ReportRecords,
    now: Optional[datetime] = None,
    title: str = REPORT_TITLE,
) -> ReportDocument:
    """
    Maps the six section records to the report tree.

    Pure apart from the clock: pass ``now`` to pin the timestamp.
    """
    sections = (
        Section(HEADING_HANDOVER, handover_blocks(records.patient_info)),
        Section(HEADING_SUBJECTIVE, subjective_blocks(records.subjective)),
        Section(HEADING_OBJECTIVE, objective_blocks(records)),
        Section(
            HEADING_ASSESSMENT,
            checklist_blocks(records.assessment, STANDARD_ASSESSMENTS, ASSESSMENT_FALLBACKS),
        ),
        Section(
            HEADING_PLANNING,
            checklist_blocks(records.planning, STANDARD_PLANS, PLANNING_FALLBACKS),
        ),
        Section(
            HEADING_INTERVENTIONS,
            checklist_blocks(records.intervention, STANDARD_INTERVENTIONS, INTERVENTION_FALLBACKS),
        ),
    )
    return ReportDocument(title=title, timestamp=format_timestamp(now), sections=sections)


__all__ = [
    "Block",
    "BulletList",
    "Paragraph",
    "ReportDocument",
    "Section",
    "Subsection",
    "checklist_blocks",
    "handover_blocks",
    "objective_blocks",
    "render_sections",
    "subjective_blocks",
    "system_blocks",
]
