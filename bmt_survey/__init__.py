"""BMT market survey: data-entry form and submissions dashboard."""
from bmt_survey.core import (
    DashboardStats,
    RawSubmission,
    SurveyRecord,
    configure_logging,
)
from bmt_survey.dashboard import Dashboard, compute_stats
from bmt_survey.export import excel_export, records_to_export_rows, sample_export
from bmt_survey.forms import SurveyForm, validate_submission
from bmt_survey.store import SupabaseSurveyStore, SurveyStoreError, store_from_config

__all__ = [
    "Dashboard",
    "DashboardStats",
    "RawSubmission",
    "SupabaseSurveyStore",
    "SurveyForm",
    "SurveyRecord",
    "SurveyStoreError",
    "compute_stats",
    "configure_logging",
    "excel_export",
    "records_to_export_rows",
    "sample_export",
    "store_from_config",
    "validate_submission",
]
