"""Tests for the survey form submit, clear and sample export workflow."""
import json

from bmt_survey.core.feedback import ERROR, SUCCESS
from bmt_survey.forms.controller import (
    IDLE,
    SAMPLE_EXPORTED,
    SUBMIT_FAILURE,
    SUBMIT_SUCCESS,
    SUBMITTING,
    SurveyForm,
)

from conftest import FIXED_NOW


def test_submit_inserts_record_and_resets_form(fake_store, fixed_clock, valid_input):
    form = SurveyForm(fake_store, clock=fixed_clock)

    assert form.submit(valid_input) is True

    assert len(fake_store.inserted) == 1
    record = fake_store.inserted[0]
    assert record.salesperson_name == "Jane"
    assert record.facility_name == "Clinic A"
    assert record.monthly_bmt_patients == 10
    assert record.annual_bmt_patients == 120
    assert record.submission_date == FIXED_NOW.isoformat()
    assert record.created_at == FIXED_NOW.isoformat()
    assert record.id is None
    assert all(value == "" for value in form.values.values())
    assert form.errors == {}
    assert form.state == IDLE
    assert form.feedback.drain() == [(SUBMIT_SUCCESS, SUCCESS)]


def test_invalid_input_never_reaches_store(fake_store, fixed_clock, valid_input):
    valid_input["monthly_bmt_patients"] = "lots"
    form = SurveyForm(fake_store, clock=fixed_clock)

    assert form.submit(valid_input) is False

    assert fake_store.inserted == []
    assert form.errors == {"monthly_bmt_patients": "Must be a number"}
    assert form.values["monthly_bmt_patients"] == "lots"
    assert len(form.feedback) == 0


def test_missing_required_fields_block_submission(fake_store, fixed_clock):
    form = SurveyForm(fake_store, clock=fixed_clock)

    assert form.submit({"salesperson_name": "Jane"}) is False

    assert fake_store.inserted == []
    assert "physician_name" in form.errors
    assert "salesperson_name" not in form.errors


def test_store_failure_keeps_values_for_retry(failing_store, fixed_clock, valid_input):
    form = SurveyForm(failing_store, clock=fixed_clock)

    assert form.submit(valid_input) is False

    assert form.values["facility_name"] == "Clinic A"
    assert form.state == IDLE
    assert form.feedback.drain() == [(SUBMIT_FAILURE, ERROR)]

    failing_store.fail = False
    assert form.submit() is True
    assert len(failing_store.inserted) == 1


def test_store_failure_is_logged(failing_store, fixed_clock, valid_input, caplog):
    form = SurveyForm(failing_store, clock=fixed_clock)
    caplog.set_level("ERROR")

    form.submit(valid_input)

    assert "Error submitting survey" in caplog.text


def test_submit_is_refused_while_in_flight(fake_store, fixed_clock, valid_input):
    form = SurveyForm(fake_store, clock=fixed_clock)
    form.state = SUBMITTING

    assert form.submit(valid_input) is False
    assert fake_store.inserted == []


def test_form_is_submitting_during_insert(fixed_clock, valid_input):
    observed = []

    class ObservingStore:
        def insert(self, record):
            observed.append(form.is_submitting)

        def list(self, order_by="created_at", descending=True):
            return []

    form = SurveyForm(ObservingStore(), clock=fixed_clock)
    form.submit(valid_input)

    assert observed == [True]
    assert not form.is_submitting


def test_clear_resets_values_and_errors(fake_store, fixed_clock, valid_input):
    form = SurveyForm(fake_store, clock=fixed_clock)
    form.update(valid_input)
    form.errors = {"city": "City is required"}

    form.clear()

    assert all(value == "" for value in form.values.values())
    assert form.errors == {}
    assert fake_store.inserted == []


def test_update_ignores_unknown_fields(fake_store):
    form = SurveyForm(fake_store)

    form.update({"city": "Pune", "unexpected": "x"})

    assert form.values["city"] == "Pune"
    assert "unexpected" not in form.values


def test_export_sample_builds_json_download(fake_store, fixed_clock):
    form = SurveyForm(fake_store, clock=fixed_clock)

    export = form.export_sample()

    assert export.filename == "survey_sample.json"
    assert export.mime == "application/json"
    payload = json.loads(export.data.decode("utf-8"))
    assert isinstance(payload, list) and len(payload) == 1
    sample = payload[0]
    assert sample["salesperson_name"] == "John Doe"
    assert sample["facility_type"] == "hospital"
    assert sample["monthly_bmt_patients"] == 25
    assert sample["annual_bmt_patients"] == 300
    assert sample["submission_date"] == FIXED_NOW.isoformat()
    assert fake_store.inserted == []
    assert form.feedback.drain() == [(SAMPLE_EXPORTED, SUCCESS)]
