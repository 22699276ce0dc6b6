"""Central store for the six section records."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List

from models import (
    AssessmentData,
    InterventionData,
    ObjectiveData,
    PatientInfo,
    PlanningData,
    ReportRecords,
    SubjectiveData,
)

_LOGGER = logging.getLogger(__name__)

Listener = Callable[[ReportRecords], None]


class ReportStore:
    """
    Holds the current record of each section.

    Setters replace a whole section (last writer wins); nothing here checks
    one section against another. Pass the instance to whatever needs it.
    """

    def __init__(self, records: ReportRecords | None = None):
        self._records = records or ReportRecords.defaults()
        self._listeners: List[Listener] = []

    # ---------- reads ----------
    def snapshot(self) -> ReportRecords:
        return self._records

    @property
    def patient_info(self) -> PatientInfo:
        return self._records.patient_info

    @property
    def subjective(self) -> SubjectiveData:
        return self._records.subjective

    @property
    def objective(self) -> ObjectiveData:
        return self._records.objective

    @property
    def assessment(self) -> AssessmentData:
        return self._records.assessment

    @property
    def planning(self) -> PlanningData:
        return self._records.planning

    @property
    def intervention(self) -> InterventionData:
        return self._records.intervention

    # ---------- setters ----------
    def update_patient_info(self, data: PatientInfo) -> None:
        self._set(patient_info=data)

    def update_subjective(self, data: SubjectiveData) -> None:
        self._set(subjective=data)

    def update_objective(self, data: ObjectiveData) -> None:
        self._set(objective=data)

    def update_assessment(self, data: AssessmentData) -> None:
        self._set(assessment=data)

    def update_planning(self, data: PlanningData) -> None:
        self._set(planning=data)

    def update_intervention(self, data: InterventionData) -> None:
        self._set(intervention=data)

    def reset_form(self) -> None:
        _LOGGER.info("Report form reset to defaults")
        self._records = ReportRecords.defaults()
        self._notify()

    # ---------- listeners ----------
    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ---------- internals ----------
    def _set(self, **section) -> None:
        self._records = replace(self._records, **section)
        _LOGGER.debug("Updated section %s", ", ".join(section))
        self._notify()

    def _notify(self) -> None:
        snapshot = self._records
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                _LOGGER.exception("Store listener %r failed", listener)
                raise
