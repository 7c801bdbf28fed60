"""Dashboard listing, statistics and export."""
from bmt_survey.dashboard.controller import Dashboard
from bmt_survey.dashboard.stats import compute_stats, table_rows

__all__ = ["Dashboard", "compute_stats", "table_rows"]
