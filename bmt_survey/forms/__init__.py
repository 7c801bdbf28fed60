"""Survey form workflow and input validation."""
from bmt_survey.forms.controller import SurveyForm
from bmt_survey.forms.validation import normalize_submission, validate_submission

__all__ = ["SurveyForm", "normalize_submission", "validate_submission"]
