"""Tests for record conversion helpers and the static field schema."""
from bmt_survey.core.models import FieldError, RawSubmission, SurveyRecord, ValidationResult
from bmt_survey.core.schema import FACILITY_TYPES, FIELD_NAMES, FIELDS_BY_NAME, REQUIRED_FIELDS, STATES


def test_schema_lists_every_record_column():
    record_columns = set(SurveyRecord.__dataclass_fields__) - {"id", "submission_date", "created_at"}

    assert set(FIELD_NAMES) == record_columns


def test_required_fields_match_survey_rules():
    assert REQUIRED_FIELDS == [
        "salesperson_name",
        "physician_name",
        "facility_name",
        "facility_type",
        "city",
        "state",
        "monthly_bmt_patients",
        "annual_bmt_patients",
    ]


def test_enumerations():
    assert [value for value, _ in FACILITY_TYPES] == [
        "hospital",
        "clinic",
        "medical_center",
        "cancer_center",
        "research_institute",
    ]
    assert len(STATES) == 8
    assert FIELDS_BY_NAME["state"].option_label("west_bengal") == "West Bengal"
    assert FIELDS_BY_NAME["state"].option_label("unknown") == "unknown"


def test_raw_submission_get_trims_and_stringifies():
    raw = RawSubmission.from_mapping({"city": "  Pune ", "monthly_bmt_patients": 10, "territory": None})

    assert raw.get("city") == "Pune"
    assert raw.get("monthly_bmt_patients") == "10"
    assert raw.get("territory") == ""
    assert raw.get("missing") == ""


def test_from_row_ignores_unknown_columns_and_fills_required():
    record = SurveyRecord.from_row({"id": 7, "facility_name": "Clinic A", "unexpected": True})

    assert record.id == 7
    assert record.facility_name == "Clinic A"
    assert record.salesperson_name == ""
    assert record.monthly_bmt_patients is None


def test_to_payload_drops_id(make_record):
    payload = make_record(id=3).to_payload()

    assert "id" not in payload
    assert payload["city"] == "Pune"


def test_validation_result_error_map_keeps_first_message():
    result = ValidationResult(
        errors=[FieldError("city", "City is required"), FieldError("city", "second")]
    )

    assert not result.ok
    assert result.error_map() == {"city": "City is required"}
