"""Survey form state: field values, inline errors and the submit workflow."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional

from bmt_survey.core.feedback import FeedbackLog, utc_now
from bmt_survey.core.models import RawSubmission
from bmt_survey.core.schema import FIELD_NAMES
from bmt_survey.export.sinks import ExportFile, sample_export
from bmt_survey.forms.validation import stamp_record, validate_submission
from bmt_survey.store.supabase import SurveyStore, SurveyStoreError

logger = logging.getLogger(__name__)

IDLE = "idle"
SUBMITTING = "submitting"

SUBMIT_SUCCESS = "Survey submitted successfully!"
SUBMIT_FAILURE = "Failed to submit survey. Please try again."
SAMPLE_EXPORTED = "Sample data exported!"


def empty_values() -> Dict[str, Any]:
    return {name: "" for name in FIELD_NAMES}


class SurveyForm:
    """Collects one questionnaire and submits it to the injected store.

    Only one submission may be in flight; ``submit`` refuses to run while the
    form is ``submitting`` and the UI disables its submit button on
    ``is_submitting``.
    """

    def __init__(self, store: SurveyStore, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.store = store
        self.clock = clock or utc_now
        self.values: Dict[str, Any] = empty_values()
        self.errors: Dict[str, str] = {}
        self.state = IDLE
        self.feedback = FeedbackLog()

    @property
    def is_submitting(self) -> bool:
        return self.state == SUBMITTING

    def update(self, values: Mapping[str, Any]) -> None:
        """Copy entered values for known fields into the form."""

        for name, value in values.items():
            if name in self.values:
                self.values[name] = value

    def submit(self, raw: Optional[Mapping[str, Any]] = None) -> bool:
        """Validate, stamp and insert the current values; return ``True`` once stored."""

        if self.is_submitting:
            logger.warning("Ignoring submit while another submission is in flight")
            return False
        if raw is not None:
            self.update(raw)

        result = validate_submission(RawSubmission.from_mapping(self.values))
        if not result.ok:
            self.errors = result.error_map()
            return False

        self.errors = {}
        record = stamp_record(result.record, self.clock().isoformat())
        self.state = SUBMITTING
        try:
            self.store.insert(record)
        except SurveyStoreError:
            logger.exception("Error submitting survey for %s", record.facility_name)
            self.feedback.error(SUBMIT_FAILURE)
            return False
        finally:
            self.state = IDLE

        self.feedback.success(SUBMIT_SUCCESS)
        self.clear()
        return True

    def clear(self) -> None:
        """Reset every field without validating or persisting anything."""

        self.values = empty_values()
        self.errors = {}

    def export_sample(self) -> ExportFile:
        """Return the sample JSON download; never touches the store."""

        export = sample_export(self.clock())
        self.feedback.success(SAMPLE_EXPORTED)
        return export
