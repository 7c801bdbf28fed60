"""Static description of every field collected by the survey form."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

TEXT = "text"
TEL = "tel"
EMAIL = "email"
INTEGER = "integer"
NUMBER = "number"
SELECT = "select"
TEXTAREA = "textarea"

NUMERIC_KINDS = (INTEGER, NUMBER)

FACILITY_TYPES: List[Tuple[str, str]] = [
    ("hospital", "Hospital"),
    ("clinic", "Clinic"),
    ("medical_center", "Medical Center"),
    ("cancer_center", "Cancer Center"),
    ("research_institute", "Research Institute"),
]

STATES: List[Tuple[str, str]] = [
    ("maharashtra", "Maharashtra"),
    ("karnataka", "Karnataka"),
    ("tamil_nadu", "Tamil Nadu"),
    ("gujarat", "Gujarat"),
    ("delhi", "Delhi"),
    ("west_bengal", "West Bengal"),
    ("rajasthan", "Rajasthan"),
    ("uttar_pradesh", "Uttar Pradesh"),
]


@dataclass(frozen=True)
class FieldSpec:
    """One labelled input of the survey form."""

    name: str
    label: str
    section: str
    kind: str = TEXT
    required: bool = False
    placeholder: str = ""
    options: Optional[Tuple[Tuple[str, str], ...]] = None

    @property
    def is_numeric(self) -> bool:
        return self.kind in NUMERIC_KINDS

    def option_label(self, value: Optional[str]) -> str:
        """Return the human label for a select value, or the value itself."""

        if not value:
            return ""
        for option_value, option_label in self.options or ():
            if option_value == value:
                return option_label
        return value


SALESPERSON = "Sales Representative Information"
FACILITY = "Physician & Facility Information"
VOLUME = "BMT Patient Volume Information"
DISEASES = "Disease Categories (Monthly Patient Count)"
ADDITIONAL = "Additional Information"

SECTIONS = [SALESPERSON, FACILITY, VOLUME, DISEASES, ADDITIONAL]

SURVEY_FIELDS: List[FieldSpec] = [
    FieldSpec("salesperson_name", "Salesperson Name", SALESPERSON, required=True, placeholder="Enter your full name"),
    FieldSpec("salesperson_contact", "Contact Number", SALESPERSON, kind=TEL, placeholder="Enter your contact number"),
    FieldSpec("salesperson_email", "Email Address", SALESPERSON, kind=EMAIL, placeholder="Enter your email address"),
    FieldSpec("territory", "Territory/Region", SALESPERSON, placeholder="Enter your assigned territory"),
    FieldSpec("physician_name", "Physician Name", FACILITY, required=True, placeholder="Enter doctor's full name"),
    FieldSpec(
        "physician_specialization",
        "Specialization",
        FACILITY,
        placeholder="e.g., Hematologist, Oncologist",
    ),
    FieldSpec("facility_name", "Facility Name", FACILITY, required=True, placeholder="Enter hospital/clinic name"),
    FieldSpec(
        "facility_type",
        "Facility Type",
        FACILITY,
        kind=SELECT,
        required=True,
        options=tuple(FACILITY_TYPES),
    ),
    FieldSpec("city", "City", FACILITY, required=True, placeholder="Enter city name"),
    FieldSpec("state", "State", FACILITY, kind=SELECT, required=True, options=tuple(STATES)),
    FieldSpec("facility_contact", "Contact Number", FACILITY, kind=TEL, placeholder="Enter facility contact number"),
    FieldSpec("facility_email", "Email Address", FACILITY, kind=EMAIL, placeholder="Enter facility email"),
    FieldSpec(
        "monthly_bmt_patients",
        "Monthly BMT Patients",
        VOLUME,
        kind=INTEGER,
        required=True,
        placeholder="Enter monthly patient count",
    ),
    FieldSpec(
        "annual_bmt_patients",
        "Annual BMT Patients",
        VOLUME,
        kind=INTEGER,
        required=True,
        placeholder="Enter annual patient count",
    ),
    FieldSpec("autologous_percentage", "Autologous BMT (%)", VOLUME, kind=NUMBER, placeholder="Enter percentage"),
    FieldSpec("allogeneic_percentage", "Allogeneic BMT (%)", VOLUME, kind=NUMBER, placeholder="Enter percentage"),
    FieldSpec("average_patient_age", "Average Patient Age", VOLUME, kind=NUMBER, placeholder="Enter average age"),
    FieldSpec("pediatric_percentage", "Pediatric Patients (%)", VOLUME, kind=NUMBER, placeholder="Enter percentage"),
    FieldSpec("all_patients", "Acute Lymphoblastic Leukemia", DISEASES, kind=INTEGER, placeholder="Enter count"),
    FieldSpec("aml_patients", "Acute Myeloid Leukemia", DISEASES, kind=INTEGER, placeholder="Enter count"),
    FieldSpec("cll_patients", "Chronic Lymphocytic Leukemia", DISEASES, kind=INTEGER, placeholder="Enter count"),
    FieldSpec("cml_patients", "Chronic Myeloid Leukemia", DISEASES, kind=INTEGER, placeholder="Enter count"),
    FieldSpec("multiple_myeloma_patients", "Multiple Myeloma", DISEASES, kind=INTEGER, placeholder="Enter count"),
    FieldSpec("lymphoma_patients", "Lymphoma", DISEASES, kind=INTEGER, placeholder="Enter count"),
    FieldSpec("aplastic_anemia_patients", "Aplastic Anemia", DISEASES, kind=INTEGER, placeholder="Enter count"),
    FieldSpec("other_blood_disorders", "Other Blood Disorders", DISEASES, kind=INTEGER, placeholder="Enter count"),
    FieldSpec("solid_tumor_patients", "Solid Tumors", DISEASES, kind=INTEGER, placeholder="Enter count"),
    FieldSpec(
        "treatment_protocols",
        "Current Treatment Protocols",
        ADDITIONAL,
        kind=TEXTAREA,
        placeholder="Describe current treatment protocols and standards",
    ),
    FieldSpec(
        "challenges",
        "Key Challenges Faced",
        ADDITIONAL,
        kind=TEXTAREA,
        placeholder="Describe main challenges in BMT treatment",
    ),
    FieldSpec(
        "new_therapy_interest",
        "Interest in New Therapies",
        ADDITIONAL,
        kind=TEXTAREA,
        placeholder="Level of interest in innovative treatment options",
    ),
    FieldSpec(
        "additional_notes",
        "Additional Notes",
        ADDITIONAL,
        kind=TEXTAREA,
        placeholder="Any other relevant information",
    ),
]

FIELDS_BY_NAME: Dict[str, FieldSpec] = {field.name: field for field in SURVEY_FIELDS}
FIELD_NAMES: List[str] = [field.name for field in SURVEY_FIELDS]
REQUIRED_FIELDS: List[str] = [field.name for field in SURVEY_FIELDS if field.required]


def fields_in_section(section: str) -> List[FieldSpec]:
    """Return the fields rendered under a form section, in display order."""

    return [field for field in SURVEY_FIELDS if field.section == section]
