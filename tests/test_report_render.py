"""Report tree tests (the one place the wording is decided)."""

from __future__ import annotations

import unittest
from datetime import datetime

import config
from models import (
    AssessmentData,
    CnsData,
    InterventionData,
    ObjectiveData,
    PatientInfo,
    PlanningData,
    ReceivedFrom,
    ReportRecords,
    RespiratoryData,
    SkinData,
    SubjectiveData,
)
from report_render import (
    BulletList,
    Paragraph,
    Subsection,
    checklist_blocks,
    handover_blocks,
    render_sections,
    subjective_blocks,
    system_blocks,
)
from utils import format_timestamp

FROZEN = datetime(2026, 10, 19, 7, 45, 0)


class SectionOrderTests(unittest.TestCase):
    def test_fixed_section_and_system_order(self) -> None:
        doc = render_sections(ReportRecords.defaults(), now=FROZEN)

        self.assertEqual(doc.title, config.REPORT_TITLE)
        self.assertEqual(doc.timestamp, format_timestamp(FROZEN))
        self.assertEqual(
            [s.heading for s in doc.sections],
            ["Handover Information", "Subjective", "Objective", "Assessment", "Planning", "Interventions"],
        )
        objective = doc.section("Objective")
        self.assertEqual(
            [sub.title for sub in objective.blocks],
            ["Respiratory", "Cardiovascular", "CNS", "GIT", "Renal", "Skin"],
        )

    def test_defaults_render_every_fallback(self) -> None:
        doc = render_sections(ReportRecords.defaults(), now=FROZEN)

        self.assertEqual(doc.section("Handover Information").blocks, (Paragraph("No handover information provided"),))
        self.assertEqual(doc.section("Subjective").blocks, (Paragraph("Nil subjective data reported."),))
        for sub in doc.section("Objective").blocks:
            self.assertEqual(sub.blocks, (Paragraph("Not assessed"),))
        self.assertEqual(doc.section("Assessment").blocks, (Paragraph("No assessments selected."),))
        self.assertEqual(doc.section("Planning").blocks, (Paragraph("No plans selected."),))
        self.assertEqual(doc.section("Interventions").blocks, (Paragraph("No interventions selected."),))

    def test_frozen_clock_is_deterministic(self) -> None:
        records = ReportRecords(subjective=SubjectiveData("custom", "x", ("Pain",)))
        self.assertEqual(render_sections(records, now=FROZEN), render_sections(records, now=FROZEN))

    def test_only_the_timestamp_moves_with_the_clock(self) -> None:
        records = ReportRecords.defaults()
        a = render_sections(records, now=FROZEN)
        b = render_sections(records, now=FROZEN.replace(hour=8))
        self.assertEqual(a.sections, b.sections)
        self.assertNotEqual(a.timestamp, b.timestamp)


class HandoverTests(unittest.TestCase):
    def test_role_and_name(self) -> None:
        blocks = handover_blocks(PatientInfo(ReceivedFrom("RN", "Seretse")))
        self.assertEqual(blocks, (Paragraph("RN Seretse", label="Received from"),))

    def test_name_only(self) -> None:
        blocks = handover_blocks(PatientInfo(ReceivedFrom("", "Kabelo")))
        self.assertEqual(blocks, (Paragraph("Kabelo", label="Received from"),))


class SubjectiveTests(unittest.TestCase):
    def test_obtained(self) -> None:
        self.assertEqual(
            subjective_blocks(SubjectiveData("obtained")),
            (Paragraph("Nil subjective data obtained."),),
        )

    def test_custom_symptoms_then_text(self) -> None:
        data = SubjectiveData("custom", "Denies other complaints", ("Pain", "Nausea"))
        self.assertEqual(
            subjective_blocks(data),
            (
                Paragraph("Pain, Nausea", label="Reported symptoms"),
                Paragraph("Denies other complaints"),
            ),
        )

    def test_custom_symptoms_follow_catalog_order(self) -> None:
        data = SubjectiveData("custom", "", ("Headache", "Pain"))
        self.assertEqual(
            subjective_blocks(data),
            (Paragraph("Pain, Headache", label="Reported symptoms"),),
        )

    def test_custom_text_only(self) -> None:
        data = SubjectiveData("custom", "Feels better", ())
        self.assertEqual(subjective_blocks(data), (Paragraph("Feels better"),))

    def test_custom_empty_is_blank(self) -> None:
        self.assertEqual(subjective_blocks(SubjectiveData("custom")), ())

    def test_inactive_custom_fields_are_ignored(self) -> None:
        data = SubjectiveData("nil", "ignored", ("Pain",))
        self.assertEqual(subjective_blocks(data), (Paragraph("Nil subjective data reported."),))


class ObjectiveTests(unittest.TestCase):
    def test_normal(self) -> None:
        self.assertEqual(system_blocks(CnsData(status="normal")), (Paragraph("Normal"),))

    def test_normal_ignores_details(self) -> None:
        data = RespiratoryData(status="normal", notes="n", respiration_rate="20")
        self.assertEqual(system_blocks(data), (Paragraph("Normal"),))

    def test_abnormal_without_details_falls_back(self) -> None:
        self.assertEqual(
            system_blocks(RespiratoryData(status="abnormal")),
            (Paragraph("Abnormal - No specific details provided"),),
        )

    def test_abnormal_whitespace_only_counts_as_empty(self) -> None:
        data = SkinData(status="abnormal", notes="   ", color=" ")
        self.assertEqual(system_blocks(data), (Paragraph(config.OBJECTIVE_ABNORMAL_EMPTY_TEXT),))

    def test_abnormal_symptoms_fields_then_notes(self) -> None:
        data = RespiratoryData(
            status="abnormal",
            symptoms=("Cough", "Dyspnea"),
            oxygen_delivery="2L NC",
            respiration_rate="24 breaths/min",
            notes="Productive, green sputum",
        )
        self.assertEqual(
            system_blocks(data),
            (
                BulletList(
                    (
                        "Dyspnea",
                        "Cough",
                        "24 breaths/min",
                        "2L NC",
                        "Productive, green sputum",
                    )
                ),
            ),
        )

    def test_objective_section_wraps_systems(self) -> None:
        records = ReportRecords(objective=ObjectiveData(cns=CnsData(status="abnormal", gcs="13/15")))
        doc = render_sections(records, now=FROZEN)
        cns = doc.section("Objective").blocks[2]
        self.assertEqual(cns, Subsection("CNS", (BulletList(("13/15",)),)))


class ChecklistTests(unittest.TestCase):
    def test_standard_empty(self) -> None:
        doc = render_sections(ReportRecords(assessment=AssessmentData("standard", ())), now=FROZEN)
        self.assertEqual(doc.section("Assessment").blocks, (Paragraph("No assessments selected."),))

    def test_standard_in_catalog_order(self) -> None:
        data = PlanningData("standard", ("Prepare for discharge", "Monitor vital signs"))
        self.assertEqual(
            checklist_blocks(data, config.STANDARD_PLANS, config.PLANNING_FALLBACKS),
            (BulletList(("Monitor vital signs", "Prepare for discharge")),),
        )

    def test_custom_verbatim(self) -> None:
        data = InterventionData("custom", ("Monitored vital signs",), "IV cannula resited\nflushed")
        self.assertEqual(
            checklist_blocks(data, config.STANDARD_INTERVENTIONS, config.INTERVENTION_FALLBACKS),
            (Paragraph("IV cannula resited\nflushed"),),
        )

    def test_custom_whitespace_is_kept_verbatim(self) -> None:
        data = AssessmentData("custom", (), "   ")
        self.assertEqual(
            checklist_blocks(data, config.STANDARD_ASSESSMENTS, config.ASSESSMENT_FALLBACKS),
            (Paragraph("   "),),
        )

    def test_custom_empty_fallbacks(self) -> None:
        records = ReportRecords(
            assessment=AssessmentData("custom"),
            planning=PlanningData("custom"),
            intervention=InterventionData("custom"),
        )
        doc = render_sections(records, now=FROZEN)
        self.assertEqual(doc.section("Assessment").blocks, (Paragraph("No assessment provided."),))
        self.assertEqual(doc.section("Planning").blocks, (Paragraph("No plan provided."),))
        self.assertEqual(doc.section("Interventions").blocks, (Paragraph("No interventions provided."),))


if __name__ == "__main__":
    unittest.main()
