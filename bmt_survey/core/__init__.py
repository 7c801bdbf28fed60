"""Core building blocks for the survey application."""
from bmt_survey.core.feedback import FeedbackLog
from bmt_survey.core.logging import configure_logging
from bmt_survey.core.models import DashboardStats, FieldError, RawSubmission, SurveyRecord, ValidationResult
from bmt_survey.core.schema import SURVEY_FIELDS, FieldSpec

__all__ = [
    "configure_logging",
    "DashboardStats",
    "FeedbackLog",
    "FieldError",
    "FieldSpec",
    "RawSubmission",
    "SURVEY_FIELDS",
    "SurveyRecord",
    "ValidationResult",
]
