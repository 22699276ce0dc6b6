# editors.py
"""
Section editors.

Each editor keeps its own copy of one section record, changes it through small
field-level operations and hands the *whole* new record to ``on_change`` after
every change. The store never sees partial updates.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Generic, Optional, TypeVar

from config import ENTRY_TYPES, OBJECTIVE_STATUSES, SUBJECTIVE_TYPES
from models import (
    AssessmentData,
    ChecklistData,
    InterventionData,
    ObjectiveData,
    PatientInfo,
    PlanningData,
    SubjectiveData,
    SystemData,
)
from utils import toggle_item

_LOGGER = logging.getLogger(__name__)

R = TypeVar("R")


class SectionEditor(Generic[R]):
    def __init__(self, record: R, on_change: Optional[Callable[[R], None]] = None):
        self._record = record
        self.on_change = on_change

    @property
    def record(self) -> R:
        return self._record

    def load(self, record: R) -> None:
        """Replace the local copy without notifying (e.g. after a store reset)."""
        self._record = record

    def _commit(self, record: R) -> R:
        self._record = record
        if callable(self.on_change):
            self.on_change(record)
        return record


# -----------------------------
# Handover
# -----------------------------
class PatientInfoEditor(SectionEditor[PatientInfo]):
    def __init__(self, record: PatientInfo | None = None, on_change=None):
        super().__init__(record or PatientInfo(), on_change)

    def set_role(self, role: str) -> PatientInfo:
        rf = replace(self._record.received_from, role=role or "")
        return self._commit(replace(self._record, received_from=rf))

    def set_name(self, name: str) -> PatientInfo:
        # free text allowed (the "other" caregiver path)
        rf = replace(self._record.received_from, name=name or "")
        return self._commit(replace(self._record, received_from=rf))


# -----------------------------
# Subjective
# -----------------------------
class SubjectiveEditor(SectionEditor[SubjectiveData]):
    def __init__(self, record: SubjectiveData | None = None, on_change=None):
        super().__init__(record or SubjectiveData(), on_change)

    def set_type(self, subjective_type: str) -> SubjectiveData:
        if subjective_type not in SUBJECTIVE_TYPES:
            raise ValueError(f"Unknown subjective type: {subjective_type!r}")
        return self._commit(replace(self._record, subjective_type=subjective_type))

    def toggle_symptom(self, symptom: str) -> SubjectiveData:
        symptoms = toggle_item(self._record.common_symptoms, symptom)
        return self._commit(replace(self._record, common_symptoms=symptoms))

    def set_custom_text(self, text: str) -> SubjectiveData:
        return self._commit(replace(self._record, custom_text=text or ""))


# -----------------------------
# Objective
# -----------------------------
class ObjectiveEditor(SectionEditor[ObjectiveData]):
    """
    All six body systems live in one record; each change still emits the
    full ObjectiveData.
    """

    def __init__(self, record: ObjectiveData | None = None, on_change=None):
        super().__init__(record or ObjectiveData(), on_change)

    def _update_system(self, system: SystemData) -> ObjectiveData:
        return self._commit(self._record.with_system(system))

    def set_status(self, system: str, status: str) -> ObjectiveData:
        if status not in OBJECTIVE_STATUSES:
            raise ValueError(f"Unknown objective status: {status!r}")
        current = self._record.system(system)
        # Leaving "abnormal" drops the symptom picks for good.
        symptoms = current.symptoms if status == "abnormal" else ()
        if current.symptoms and not symptoms:
            _LOGGER.debug("Cleared %d %s symptom(s) on status %s", len(current.symptoms), system, status)
        return self._update_system(replace(current, status=status, symptoms=symptoms))

    def toggle_symptom(self, system: str, symptom: str) -> ObjectiveData:
        current = self._record.system(system)
        return self._update_system(replace(current, symptoms=toggle_item(current.symptoms, symptom)))

    def set_notes(self, system: str, notes: str) -> ObjectiveData:
        current = self._record.system(system)
        return self._update_system(replace(current, notes=notes or ""))

    def set_field(self, system: str, field_name: str, value: str) -> ObjectiveData:
        current = self._record.system(system)
        if field_name not in current.field_names():
            raise KeyError(f"{system} has no field {field_name!r}")
        return self._update_system(replace(current, **{field_name: value or ""}))


# -----------------------------
# Assessment / Planning / Interventions
# -----------------------------
C = TypeVar("C", bound=ChecklistData)


class ChecklistEditor(SectionEditor[C]):
    """
    Standard checklist vs custom text. Switching type keeps both the
    checked items and the typed text.
    """

    def set_type(self, entry_type: str) -> C:
        if entry_type not in ENTRY_TYPES:
            raise ValueError(f"Unknown entry type: {entry_type!r}")
        return self._commit(replace(self._record, entry_type=entry_type))

    def toggle_item(self, item: str) -> C:
        items = toggle_item(self._record.standard_items, item)
        return self._commit(replace(self._record, standard_items=items))

    def set_custom_text(self, text: str) -> C:
        return self._commit(replace(self._record, custom_text=text or ""))


class AssessmentEditor(ChecklistEditor[AssessmentData]):
    def __init__(self, record: AssessmentData | None = None, on_change=None):
        super().__init__(record or AssessmentData(), on_change)


class PlanningEditor(ChecklistEditor[PlanningData]):
    def __init__(self, record: PlanningData | None = None, on_change=None):
        super().__init__(record or PlanningData(), on_change)


class InterventionEditor(ChecklistEditor[InterventionData]):
    def __init__(self, record: InterventionData | None = None, on_change=None):
        super().__init__(record or InterventionData(), on_change)
