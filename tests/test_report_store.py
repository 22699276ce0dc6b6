"""Central store tests."""

from __future__ import annotations

import unittest

from editors import ObjectiveEditor, SubjectiveEditor
from models import (
    AssessmentData,
    PatientInfo,
    PlanningData,
    ReceivedFrom,
    ReportRecords,
    SubjectiveData,
)
from report_store import ReportStore


class ReportStoreTests(unittest.TestCase):
    def test_starts_with_defaults(self) -> None:
        self.assertEqual(ReportStore().snapshot(), ReportRecords.defaults())

    def test_setters_replace_one_section(self) -> None:
        store = ReportStore()
        info = PatientInfo(ReceivedFrom("RN", "Seretse"))
        store.update_patient_info(info)
        store.update_planning(PlanningData("custom", (), "Review at 14:00"))

        self.assertEqual(store.patient_info, info)
        self.assertEqual(store.planning.custom_text, "Review at 14:00")
        self.assertEqual(store.subjective, SubjectiveData())

    def test_last_writer_wins(self) -> None:
        store = ReportStore()
        store.update_assessment(AssessmentData("standard", ("Patient stable",), ""))
        store.update_assessment(AssessmentData("custom", (), "Improving"))
        self.assertEqual(store.assessment, AssessmentData("custom", (), "Improving"))

    def test_reset_restores_every_section(self) -> None:
        store = ReportStore()
        subj = SubjectiveEditor(on_change=store.update_subjective)
        obj = ObjectiveEditor(on_change=store.update_objective)
        subj.set_type("custom")
        subj.toggle_symptom("Pain")
        obj.set_status("skin", "abnormal")
        store.update_patient_info(PatientInfo(ReceivedFrom("CRN", "Toteng")))

        store.reset_form()

        self.assertEqual(store.snapshot(), ReportRecords.defaults())

    def test_listeners_get_snapshot_on_change_and_reset(self) -> None:
        store = ReportStore()
        seen = []
        store.subscribe(seen.append)

        store.update_subjective(SubjectiveData("obtained"))
        store.reset_form()

        self.assertEqual(len(seen), 2)
        self.assertEqual(seen[0].subjective.subjective_type, "obtained")
        self.assertEqual(seen[1], ReportRecords.defaults())

    def test_unsubscribe_stops_notifications(self) -> None:
        store = ReportStore()
        seen = []
        store.subscribe(seen.append)
        store.subscribe(seen.append)  # no double registration
        store.update_subjective(SubjectiveData("obtained"))
        store.unsubscribe(seen.append)
        store.update_subjective(SubjectiveData("nil"))
        self.assertEqual(len(seen), 1)

    def test_listener_errors_propagate(self) -> None:
        store = ReportStore()

        def broken(_records) -> None:
            raise RuntimeError("boom")

        store.subscribe(broken)
        with self.assertRaises(RuntimeError):
            store.update_subjective(SubjectiveData("obtained"))
        # the write itself still happened
        self.assertEqual(store.subjective.subjective_type, "obtained")


if __name__ == "__main__":
    unittest.main()
