# config.py
from env_config import get_env, get_env_bool


# ----------------- REPORT -----------------
REPORT_TITLE = get_env("REPORT_TITLE", "Nursing Progress Report")

# "%c" is the locale's date/time representation
TIMESTAMP_FORMAT = get_env("TIMESTAMP_FORMAT", "%c")

LOG_LEVEL = get_env("HANDOVER_LOG_LEVEL", "INFO")

# Mirror log records to stderr (handy when launched from a terminal)
LOG_TO_CONSOLE = get_env_bool("HANDOVER_LOG_CONSOLE", False)

# Print views kept in the spool folder; older pages are removed on each print
PRINT_KEEP_PAGES = 20


# ----------------- SECTION HEADINGS -----------------
HEADING_HANDOVER = "Handover Information"
HEADING_SUBJECTIVE = "Subjective"
HEADING_OBJECTIVE = "Objective"
HEADING_ASSESSMENT = "Assessment"
HEADING_PLANNING = "Planning"
HEADING_INTERVENTIONS = "Interventions"


# ----------------- HANDOVER -----------------
HANDOVER_ROLES = [
    ("RN", "RN (Registered Nurse)"),
    ("Student Nurse", "Student Nurse"),
    ("CRN", "CRN (Clinical Registered Nurse)"),
    ("Physician", "Physician"),
    ("Other", "Other"),
]

CAREGIVER_NAMES = ["Seretse", "Tshambani", "Toteng"]

# Picker value that switches the name field to free text
OTHER_NAME = "other"

NO_HANDOVER_TEXT = "No handover information provided"


# ----------------- SUBJECTIVE -----------------
SUBJECTIVE_TYPES = ["nil", "obtained", "custom"]

SUBJECTIVE_TYPE_LABELS = {
    "nil": "Nil subjective",
    "obtained": "Nil obtained",
    "custom": "Custom subjective data",
}

SUBJECTIVE_NIL_TEXT = "Nil subjective data reported."
SUBJECTIVE_OBTAINED_TEXT = "Nil subjective data obtained."

COMMON_SYMPTOMS = [
    "Pain",
    "Shortness of breath",
    "Nausea",
    "Vomiting",
    "Dizziness",
    "Fatigue",
    "Anxiety",
    "Insomnia",
    "Loss of appetite",
    "Headache",
]


# ----------------- OBJECTIVE -----------------
OBJECTIVE_STATUSES = ["normal", "abnormal", "not-assessed"]

OBJECTIVE_STATUS_LABELS = {
    "normal": "Normal",
    "abnormal": "Abnormal",
    "not-assessed": "Not assessed",
}

OBJECTIVE_ABNORMAL_EMPTY_TEXT = "Abnormal - No specific details provided"

# IMPORTANT: system order here is the report order.
SYSTEM_SYMPTOMS = {
    "respiratory": [
        "Dyspnea",
        "Tachypnea",
        "Wheezing",
        "Crackles",
        "Decreased breath sounds",
        "Cough",
        "Sputum production",
        "Accessory muscle use",
        "Nasal flaring",
        "Barrel chest",
    ],
    "cardiovascular": [
        "Tachycardia",
        "Bradycardia",
        "Hypertension",
        "Hypotension",
        "Irregular rhythm",
        "Edema",
        "Chest pain",
        "Palpitations",
        "Murmur",
        "Cyanosis",
        "Capillary refill >3s",
    ],
    "cns": [
        "Altered consciousness",
        "Confusion",
        "Agitation",
        "Seizures",
        "Pupil abnormalities",
        "Motor weakness",
        "Sensory deficit",
        "Aphasia",
        "Dysarthria",
        "Ataxia",
        "Tremor",
    ],
    "git": [
        "Abdominal distention",
        "Bowel sounds abnormal",
        "Constipation",
        "Diarrhea",
        "Nausea",
        "Vomiting",
        "Abdominal pain",
        "Melena",
        "Hematemesis",
        "Jaundice",
    ],
    "renal": [
        "Oliguria",
        "Polyuria",
        "Hematuria",
        "Dysuria",
        "Incontinence",
        "Retention",
        "Flank pain",
        "Cloudy urine",
        "Foul-smelling urine",
    ],
    "skin": [
        "Rash",
        "Pallor",
        "Cyanosis",
        "Jaundice",
        "Pressure injury",
        "Wound",
        "Edema",
        "Dry skin",
        "Diaphoresis",
        "Poor turgor",
        "Bruising",
    ],
}

SYSTEM_ORDER = list(SYSTEM_SYMPTOMS)

# Entry hints shown beside each system-specific field
FIELD_PLACEHOLDERS = {
    "respiration_rate": "e.g., 16 breaths/min",
    "oxygen_saturation": "e.g., 98% on RA",
    "oxygen_delivery": "e.g., 2L NC",
    "blood_pressure": "e.g., 120/80 mmHg",
    "heart_rate": "e.g., 72 bpm, regular",
    "rhythm": "e.g., Regular, NSR",
    "gcs": "e.g., 15/15",
    "pupils": "e.g., PEARL 3mm",
    "motor_response": "e.g., 5/5 all extremities",
    "bowel_sounds": "e.g., Active in all 4 quadrants",
    "last_bowel_movement": "e.g., Today, formed",
    "urine_output": "e.g., 50ml/hr",
    "urine_color": "e.g., Clear yellow",
    "color": "e.g., Pink",
    "temperature": "e.g., Warm",
    "turgor": "e.g., Good, <3 seconds",
}


# ----------------- ASSESSMENT / PLANNING / INTERVENTIONS -----------------
ENTRY_TYPES = ["standard", "custom"]

STANDARD_ASSESSMENTS = [
    "Patient stable",
    "Patient improving",
    "Patient deteriorating",
    "Respiratory distress",
    "Hemodynamically unstable",
    "Altered mental status",
    "Pain not controlled",
    "Risk for falls",
    "Risk for pressure injury",
    "Risk for infection",
]

STANDARD_PLANS = [
    "Continue current treatment plan",
    "Monitor vital signs",
    "Administer medications as ordered",
    "Encourage oral intake",
    "Encourage ambulation",
    "Implement fall precautions",
    "Implement pressure injury prevention",
    "Educate patient/family",
    "Consult with physician",
    "Prepare for discharge",
]

STANDARD_INTERVENTIONS = [
    "Administered medications as ordered",
    "Monitored vital signs",
    "Provided oxygen therapy",
    "Performed wound care",
    "Assisted with activities of daily living",
    "Provided pain management",
    "Implemented fall precautions",
    "Implemented pressure injury prevention",
    "Provided patient education",
    "Coordinated with healthcare team",
]

# (empty standard list, empty custom text)
ASSESSMENT_FALLBACKS = ("No assessments selected.", "No assessment provided.")
PLANNING_FALLBACKS = ("No plans selected.", "No plan provided.")
INTERVENTION_FALLBACKS = ("No interventions selected.", "No interventions provided.")


# ----------------- NAV / UI PAGES -----------------
UI_PAGES = [
    "Handover",
    "Subjective",
    "Objective",
    "Assessment",
    "Planning",
    "Interventions",
]
