"""Section record shapes."""

from __future__ import annotations

import dataclasses
import unittest

from config import SYSTEM_ORDER, SYSTEM_SYMPTOMS
from models import SYSTEM_TYPES, ObjectiveData, RenalData, ReportRecords, RespiratoryData


class ObjectiveDataTests(unittest.TestCase):
    def test_systems_in_fixed_order(self) -> None:
        self.assertEqual([s.SYSTEM for s in ObjectiveData().systems()], list(SYSTEM_ORDER))

    def test_every_system_has_a_catalog_and_schema(self) -> None:
        for key, cls in SYSTEM_TYPES.items():
            self.assertEqual(cls.symptom_catalog(), SYSTEM_SYMPTOMS[key])
            self.assertTrue(cls.FIELDS, key)

    def test_unknown_system(self) -> None:
        with self.assertRaises(KeyError):
            ObjectiveData().system("hepatic")

    def test_with_system_swaps_only_that_system(self) -> None:
        before = ObjectiveData()
        after = before.with_system(RenalData(status="normal"))
        self.assertEqual(after.renal.status, "normal")
        self.assertEqual(after.skin, before.skin)
        self.assertEqual(before.renal.status, "not-assessed")

    def test_field_values_follow_schema(self) -> None:
        data = RespiratoryData(respiration_rate="18", oxygen_delivery="Room air")
        self.assertEqual(
            data.field_values(),
            [("Respiration Rate", "18"), ("Oxygen Saturation", ""), ("Oxygen Delivery", "Room air")],
        )


class RecordTests(unittest.TestCase):
    def test_records_are_immutable(self) -> None:
        records = ReportRecords.defaults()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            records.subjective = None  # type: ignore[misc]

    def test_defaults(self) -> None:
        records = ReportRecords.defaults()
        self.assertEqual(records.subjective.subjective_type, "nil")
        self.assertEqual(records.assessment.entry_type, "standard")
        self.assertEqual(records.patient_info.received_from.name, "")
        for system in records.objective.systems():
            self.assertEqual(system.status, "not-assessed")


if __name__ == "__main__":
    unittest.main()
