"""Data models for survey submissions and the dashboard summary."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Union

Number = Union[int, float]


@dataclass
class RawSubmission:
    """Untyped form input exactly as entered, keyed by field name."""

    values: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawSubmission":
        return cls(values=dict(data))

    def get(self, name: str) -> str:
        """Return the trimmed text for a field; missing or ``None`` becomes ``""``."""

        value = self.values.get(name)
        if value is None:
            return ""
        return str(value).strip()


@dataclass(frozen=True)
class FieldError:
    """A human-readable validation message bound to one form field."""

    field: str
    message: str


@dataclass
class SurveyRecord:
    """One validated BMT market survey questionnaire."""

    salesperson_name: str
    physician_name: str
    facility_name: str
    facility_type: str
    city: str
    state: str
    monthly_bmt_patients: Optional[int] = None
    annual_bmt_patients: Optional[int] = None
    salesperson_contact: Optional[str] = None
    salesperson_email: Optional[str] = None
    territory: Optional[str] = None
    physician_specialization: Optional[str] = None
    facility_contact: Optional[str] = None
    facility_email: Optional[str] = None
    autologous_percentage: Optional[Number] = None
    allogeneic_percentage: Optional[Number] = None
    average_patient_age: Optional[Number] = None
    pediatric_percentage: Optional[Number] = None
    all_patients: Optional[int] = None
    aml_patients: Optional[int] = None
    cll_patients: Optional[int] = None
    cml_patients: Optional[int] = None
    multiple_myeloma_patients: Optional[int] = None
    lymphoma_patients: Optional[int] = None
    aplastic_anemia_patients: Optional[int] = None
    other_blood_disorders: Optional[int] = None
    solid_tumor_patients: Optional[int] = None
    treatment_protocols: Optional[str] = None
    challenges: Optional[str] = None
    new_therapy_interest: Optional[str] = None
    additional_notes: Optional[str] = None
    submission_date: Optional[str] = None
    created_at: Optional[str] = None
    id: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dictionary representation including the store id."""

        return asdict(self)

    def to_payload(self) -> Dict[str, Any]:
        """Return the column mapping sent to the store on insert.

        The identifier is assigned by the store and is never sent.
        """

        payload = self.to_dict()
        payload.pop("id", None)
        return payload

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SurveyRecord":
        """Build a record from a store row, ignoring columns the model does not know."""

        known = {item.name for item in fields(cls)}
        values = {key: value for key, value in row.items() if key in known}
        for required in ("salesperson_name", "physician_name", "facility_name", "facility_type", "city", "state"):
            values.setdefault(required, "")
        return cls(**values)


@dataclass(frozen=True)
class DashboardStats:
    """Aggregate figures shown above the dashboard table."""

    total_surveys: int = 0
    total_patients: int = 0
    facilities_count: int = 0
    avg_patients_per_facility: int = 0


@dataclass
class ValidationResult:
    """Outcome of converting a raw submission: a record or field errors, never both."""

    record: Optional[SurveyRecord] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.record is not None and not self.errors

    def error_map(self) -> Dict[str, str]:
        """Return the first message per field, ready to show inline."""

        messages: Dict[str, str] = {}
        for error in self.errors:
            messages.setdefault(error.field, error.message)
        return messages
