"""Section records for the handover report.

Every record is immutable; editors build a new record for each change and the
store swaps it in whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Dict, Literal, Tuple

from config import SYSTEM_ORDER, SYSTEM_SYMPTOMS

SubjectiveType = Literal["nil", "obtained", "custom"]
ObjectiveStatus = Literal["normal", "abnormal", "not-assessed"]
EntryType = Literal["standard", "custom"]


# -----------------------------
# Handover
# -----------------------------
@dataclass(frozen=True, slots=True)
class ReceivedFrom:
    role: str = ""
    name: str = ""


@dataclass(frozen=True, slots=True)
class PatientInfo:
    received_from: ReceivedFrom = field(default_factory=ReceivedFrom)


# -----------------------------
# Subjective
# -----------------------------
@dataclass(frozen=True, slots=True)
class SubjectiveData:
    subjective_type: SubjectiveType = "nil"
    custom_text: str = ""
    common_symptoms: Tuple[str, ...] = ()


# -----------------------------
# Objective (one variant per body system)
# -----------------------------
@dataclass(frozen=True, slots=True)
class SystemData:
    """Fields every body system shares. Subclasses add their own schema."""

    SYSTEM: ClassVar[str] = ""
    TITLE: ClassVar[str] = ""
    # "Vital Signs" or "Assessments": heading for the schema fields in the editor
    FIELD_GROUP: ClassVar[str] = ""
    # (attribute, label) in report order
    FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = ()

    status: ObjectiveStatus = "not-assessed"
    notes: str = ""
    symptoms: Tuple[str, ...] = ()

    @classmethod
    def symptom_catalog(cls) -> list[str]:
        return SYSTEM_SYMPTOMS[cls.SYSTEM]

    @classmethod
    def field_names(cls) -> list[str]:
        return [name for name, _ in cls.FIELDS]

    def field_values(self) -> list[tuple[str, str]]:
        """(label, value) for each schema field, in schema order."""
        return [(label, getattr(self, name)) for name, label in self.FIELDS]


@dataclass(frozen=True, slots=True)
class RespiratoryData(SystemData):
    SYSTEM: ClassVar[str] = "respiratory"
    TITLE: ClassVar[str] = "Respiratory"
    FIELD_GROUP: ClassVar[str] = "Vital Signs"
    FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("respiration_rate", "Respiration Rate"),
        ("oxygen_saturation", "Oxygen Saturation"),
        ("oxygen_delivery", "Oxygen Delivery"),
    )

    respiration_rate: str = ""
    oxygen_saturation: str = ""
    oxygen_delivery: str = ""


@dataclass(frozen=True, slots=True)
class CardiovascularData(SystemData):
    SYSTEM: ClassVar[str] = "cardiovascular"
    TITLE: ClassVar[str] = "Cardiovascular"
    FIELD_GROUP: ClassVar[str] = "Vital Signs"
    FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("blood_pressure", "Blood Pressure"),
        ("heart_rate", "Heart Rate"),
        ("rhythm", "Rhythm"),
    )

    blood_pressure: str = ""
    heart_rate: str = ""
    rhythm: str = ""


@dataclass(frozen=True, slots=True)
class CnsData(SystemData):
    SYSTEM: ClassVar[str] = "cns"
    TITLE: ClassVar[str] = "CNS"
    FIELD_GROUP: ClassVar[str] = "Assessments"
    FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("gcs", "GCS"),
        ("pupils", "Pupils"),
        ("motor_response", "Motor Response"),
    )

    gcs: str = ""
    pupils: str = ""
    motor_response: str = ""


@dataclass(frozen=True, slots=True)
class GitData(SystemData):
    SYSTEM: ClassVar[str] = "git"
    TITLE: ClassVar[str] = "GIT"
    FIELD_GROUP: ClassVar[str] = "Assessments"
    FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("bowel_sounds", "Bowel Sounds"),
        ("last_bowel_movement", "Last Bowel Movement"),
    )

    bowel_sounds: str = ""
    last_bowel_movement: str = ""


@dataclass(frozen=True, slots=True)
class RenalData(SystemData):
    SYSTEM: ClassVar[str] = "renal"
    TITLE: ClassVar[str] = "Renal"
    FIELD_GROUP: ClassVar[str] = "Assessments"
    FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("urine_output", "Urine Output"),
        ("urine_color", "Urine Color"),
    )

    urine_output: str = ""
    urine_color: str = ""


@dataclass(frozen=True, slots=True)
class SkinData(SystemData):
    SYSTEM: ClassVar[str] = "skin"
    TITLE: ClassVar[str] = "Skin"
    FIELD_GROUP: ClassVar[str] = "Assessments"
    FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("color", "Color"),
        ("temperature", "Temperature"),
        ("turgor", "Turgor"),
    )

    color: str = ""
    temperature: str = ""
    turgor: str = ""


SYSTEM_TYPES: Dict[str, type] = {
    cls.SYSTEM: cls
    for cls in (RespiratoryData, CardiovascularData, CnsData, GitData, RenalData, SkinData)
}


@dataclass(frozen=True, slots=True)
class ObjectiveData:
    respiratory: RespiratoryData = field(default_factory=RespiratoryData)
    cardiovascular: CardiovascularData = field(default_factory=CardiovascularData)
    cns: CnsData = field(default_factory=CnsData)
    git: GitData = field(default_factory=GitData)
    renal: RenalData = field(default_factory=RenalData)
    skin: SkinData = field(default_factory=SkinData)

    def system(self, key: str) -> SystemData:
        if key not in SYSTEM_TYPES:
            raise KeyError(f"Unknown body system: {key!r}")
        return getattr(self, key)

    def systems(self) -> list[SystemData]:
        return [getattr(self, key) for key in SYSTEM_ORDER]

    def with_system(self, data: SystemData) -> "ObjectiveData":
        return replace(self, **{data.SYSTEM: data})


# -----------------------------
# Assessment / Planning / Interventions
# -----------------------------
@dataclass(frozen=True, slots=True)
class ChecklistData:
    """Standard-vs-custom section. Both branches survive a type switch."""

    entry_type: EntryType = "standard"
    standard_items: Tuple[str, ...] = ()
    custom_text: str = ""


@dataclass(frozen=True, slots=True)
class AssessmentData(ChecklistData):
    pass


@dataclass(frozen=True, slots=True)
class PlanningData(ChecklistData):
    pass


@dataclass(frozen=True, slots=True)
class InterventionData(ChecklistData):
    pass


# -----------------------------
# Aggregate
# -----------------------------
@dataclass(frozen=True, slots=True)
class ReportRecords:
    patient_info: PatientInfo = field(default_factory=PatientInfo)
    subjective: SubjectiveData = field(default_factory=SubjectiveData)
    objective: ObjectiveData = field(default_factory=ObjectiveData)
    assessment: AssessmentData = field(default_factory=AssessmentData)
    planning: PlanningData = field(default_factory=PlanningData)
    intervention: InterventionData = field(default_factory=InterventionData)

    @classmethod
    def defaults(cls) -> "ReportRecords":
        return cls()


__all__ = [
    "AssessmentData",
    "CardiovascularData",
    "ChecklistData",
    "CnsData",
    "EntryType",
    "GitData",
    "InterventionData",
    "ObjectiveData",
    "ObjectiveStatus",
    "PatientInfo",
    "PlanningData",
    "ReceivedFrom",
    "RenalData",
    "ReportRecords",
    "RespiratoryData",
    "SYSTEM_TYPES",
    "SkinData",
    "SubjectiveData",
    "SubjectiveType",
    "SystemData",
]
