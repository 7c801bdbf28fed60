"""Logging coverage to ensure failures are surfaced without stopping the app."""
import logging

import bmt_survey.core.logging as app_logging
from bmt_survey.dashboard.controller import Dashboard
from bmt_survey.forms.controller import SurveyForm
from bmt_survey.forms.validation import validate_submission
from bmt_survey.core.models import RawSubmission


def test_configure_logging_uses_env_level(monkeypatch):
    captured = {}

    def fake_basic_config(**kwargs):
        captured.update(kwargs)

    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(app_logging.logging, "basicConfig", fake_basic_config)

    app_logging.configure_logging()

    assert captured["level"] == "DEBUG"
    assert "%(name)s" in captured["format"]


def test_configure_logging_prefers_explicit_level(monkeypatch):
    captured = {}
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(app_logging.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    app_logging.configure_logging("warning")

    assert captured["level"] == "WARNING"


def test_rejected_input_is_logged(caplog):
    caplog.set_level(logging.INFO)

    validate_submission(RawSubmission())

    assert any("rejected" in message for message in caplog.messages)


def test_dashboard_logs_fetch_failure_and_continues(failing_store, caplog):
    caplog.set_level("ERROR")

    dashboard = Dashboard(failing_store)
    dashboard.load()

    assert dashboard.is_loading is False
    assert "Error fetching surveys" in caplog.text


def test_export_logs_saved_path(fake_store, make_record, fixed_clock, tmp_path, caplog):
    fake_store.records.append(make_record())
    dashboard = Dashboard(fake_store, clock=fixed_clock)
    dashboard.load()
    caplog.set_level("INFO")

    dashboard.export_to_excel(output_dir=tmp_path)

    assert any("Saved 1 survey rows" in message for message in caplog.messages)


def test_submit_success_does_not_log_errors(fake_store, valid_input, caplog):
    caplog.set_level("ERROR")

    SurveyForm(fake_store).submit(valid_input)

    assert caplog.text == ""
