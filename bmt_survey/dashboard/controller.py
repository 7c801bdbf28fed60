"""Dashboard state: fetched records, summary stats and spreadsheet export."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from bmt_survey.core.feedback import FeedbackLog, utc_now
from bmt_survey.core.models import DashboardStats, SurveyRecord
from bmt_survey.dashboard.stats import compute_stats, table_rows
from bmt_survey.export.sinks import ExportFile, excel_export
from bmt_survey.export.templates import records_to_export_rows
from bmt_survey.store.supabase import SurveyStore, SurveyStoreError

logger = logging.getLogger(__name__)

LOADING = "loading"
READY = "ready"

FETCH_FAILURE = "Failed to fetch survey data"
NO_DATA = "No data to export"
EXPORT_SUCCESS = "Data exported successfully!"


class Dashboard:
    """Lists every submitted survey, newest first, and exports the snapshot."""

    def __init__(self, store: SurveyStore, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.store = store
        self.clock = clock or utc_now
        self.state = LOADING
        self.records: List[SurveyRecord] = []
        self.stats = DashboardStats()
        self.feedback = FeedbackLog()

    @property
    def is_loading(self) -> bool:
        return self.state == LOADING

    def load(self) -> List[SurveyRecord]:
        """Fetch all records; a failed fetch leaves an empty, ready dashboard."""

        self.state = LOADING
        try:
            records = self.store.list(order_by="created_at", descending=True)
        except SurveyStoreError:
            logger.exception("Error fetching surveys")
            self.feedback.error(FETCH_FAILURE)
            records = []

        self.records = list(records)
        self.stats = compute_stats(self.records)
        self.state = READY
        return self.records

    def mark_stale(self) -> None:
        """Force the next render to fetch again, keeping the current rows until then."""

        self.state = LOADING

    def refresh(self) -> List[SurveyRecord]:
        return self.load()

    def table_rows(self) -> List[Dict[str, Any]]:
        return table_rows(self.records)

    def export_to_excel(self, output_dir: Optional[Path] = None) -> Optional[ExportFile]:
        """Build the dated spreadsheet from the loaded records.

        Returns ``None`` and queues an error notification when nothing is loaded.
        When ``output_dir`` is given the file is also written there.
        """

        if not self.records:
            self.feedback.error(NO_DATA)
            return None

        export = excel_export(records_to_export_rows(self.records), self.clock().date())
        if output_dir is not None:
            target = export.save(output_dir)
            logger.info("Saved %d survey rows to %s", len(self.records), target)
        self.feedback.success(EXPORT_SUCCESS)
        return export
