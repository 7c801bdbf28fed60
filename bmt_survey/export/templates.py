"""Mapping utilities to align survey records with the spreadsheet layout."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Tuple

from bmt_survey.core.models import SurveyRecord

EXPORT_COLUMNS: List[Tuple[str, str]] = [
    ("Submission Date", "submission_date"),
    ("Salesperson Name", "salesperson_name"),
    ("Salesperson Contact", "salesperson_contact"),
    ("Salesperson Email", "salesperson_email"),
    ("Territory", "territory"),
    ("Physician Name", "physician_name"),
    ("Physician Specialization", "physician_specialization"),
    ("Facility Name", "facility_name"),
    ("Facility Type", "facility_type"),
    ("City", "city"),
    ("State", "state"),
    ("Facility Contact", "facility_contact"),
    ("Facility Email", "facility_email"),
    ("Monthly BMT Patients", "monthly_bmt_patients"),
    ("Annual BMT Patients", "annual_bmt_patients"),
    ("Autologous BMT %", "autologous_percentage"),
    ("Allogeneic BMT %", "allogeneic_percentage"),
    ("Average Patient Age", "average_patient_age"),
    ("Pediatric Patients %", "pediatric_percentage"),
    ("ALL Patients", "all_patients"),
    ("AML Patients", "aml_patients"),
    ("CLL Patients", "cll_patients"),
    ("CML Patients", "cml_patients"),
    ("Multiple Myeloma", "multiple_myeloma_patients"),
    ("Lymphoma", "lymphoma_patients"),
    ("Aplastic Anemia", "aplastic_anemia_patients"),
    ("Other Blood Disorders", "other_blood_disorders"),
    ("Solid Tumors", "solid_tumor_patients"),
    ("Treatment Protocols", "treatment_protocols"),
    ("Challenges", "challenges"),
    ("New Therapy Interest", "new_therapy_interest"),
    ("Additional Notes", "additional_notes"),
]

EXPORT_HEADERS: List[str] = [header for header, _ in EXPORT_COLUMNS]


def normalize_date(raw: str | None) -> str:
    """Reduce a stored timestamp to ``YYYY-MM-DD``; unknown formats pass through."""

    if not raw:
        return ""
    text = str(raw).strip()
    if "T" in text and len(text.split("T", 1)[0]) == 10:
        text = text.split("T", 1)[0]
    formats = [
        "%Y-%m-%d",
        "%Y/%m/%d",
        "%d/%m/%Y",
        "%Y-%m-%d %H:%M:%S",
    ]
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).strftime("%Y-%m-%d")
        except ValueError:
            continue
    return text


def record_to_export_row(record: SurveyRecord) -> Dict[str, Any]:
    """Convert a SurveyRecord into the human-labelled spreadsheet row."""

    values = record.to_dict()
    row: Dict[str, Any] = {}
    for header, attribute in EXPORT_COLUMNS:
        if attribute == "submission_date":
            row[header] = normalize_date(record.submission_date)
        else:
            row[header] = values.get(attribute)
    return row


def records_to_export_rows(records: Iterable[SurveyRecord]) -> List[Dict[str, Any]]:
    """Convert an iterable of SurveyRecord objects into spreadsheet rows."""

    return [record_to_export_row(record) for record in records]
