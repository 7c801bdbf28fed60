"""Summary figures and table rows derived from fetched survey records."""
from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List

from bmt_survey.core.models import DashboardStats, SurveyRecord
from bmt_survey.core.schema import FIELDS_BY_NAME
from bmt_survey.export.templates import normalize_date

EMPTY_TABLE_MESSAGE = "No survey data available. Start by submitting your first survey."

TABLE_HEADERS = [
    "Date",
    "Salesperson",
    "Physician",
    "Facility",
    "Location",
    "Monthly Patients",
    "Annual Patients",
]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_stats(records: Iterable[SurveyRecord]) -> DashboardStats:
    """Count surveys, patients and distinct facilities for the summary cards."""

    records = list(records)
    total_patients = sum(record.monthly_bmt_patients or 0 for record in records)
    # Absent and empty names collapse into one distinct facility.
    facilities = {record.facility_name or None for record in records}
    facilities_count = len(facilities)
    average = _round_half_up(total_patients / facilities_count) if facilities_count else 0
    return DashboardStats(
        total_surveys=len(records),
        total_patients=int(total_patients),
        facilities_count=facilities_count,
        avg_patients_per_facility=average,
    )


def facility_type_label(value: str | None) -> str:
    return FIELDS_BY_NAME["facility_type"].option_label(value) if value else ""


def state_label(value: str | None) -> str:
    return FIELDS_BY_NAME["state"].option_label(value) if value else ""


def _with_detail(primary: str | None, detail: str | None) -> str:
    primary = primary or ""
    return f"{primary} ({detail})" if detail else primary


def table_row(record: SurveyRecord) -> Dict[str, Any]:
    """Flatten one record into the dashboard table columns."""

    location = ", ".join(part for part in (record.city, state_label(record.state)) if part)
    return {
        "Date": normalize_date(record.submission_date),
        "Salesperson": _with_detail(record.salesperson_name, record.territory),
        "Physician": _with_detail(record.physician_name, record.physician_specialization),
        "Facility": _with_detail(record.facility_name, facility_type_label(record.facility_type)),
        "Location": location,
        "Monthly Patients": record.monthly_bmt_patients or 0,
        "Annual Patients": record.annual_bmt_patients or 0,
    }


def table_rows(records: Iterable[SurveyRecord]) -> List[Dict[str, Any]]:
    """Convert records to dictionaries for tabular rendering."""

    return [table_row(record) for record in records]
