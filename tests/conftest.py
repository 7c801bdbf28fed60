"""Pytest configuration to make the local package importable without installation."""
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bmt_survey.core.models import SurveyRecord
from bmt_survey.store.supabase import SurveyStoreError

FIXED_NOW = datetime(2024, 5, 1, 9, 30, 0, tzinfo=timezone.utc)


class FakeSurveyStore:
    """In-memory stand-in for the hosted table used by form and dashboard tests."""

    def __init__(self, records: List[SurveyRecord] | None = None, fail: bool = False) -> None:
        self.records: List[SurveyRecord] = list(records or [])
        self.fail = fail
        self.inserted: List[SurveyRecord] = []
        self.list_calls: List[tuple[str, bool]] = []

    def insert(self, record: SurveyRecord) -> None:
        if self.fail:
            raise SurveyStoreError("store unavailable")
        self.inserted.append(record)
        self.records.append(record)

    def list(self, order_by: str = "created_at", descending: bool = True) -> List[SurveyRecord]:
        self.list_calls.append((order_by, descending))
        if self.fail:
            raise SurveyStoreError("store unavailable")
        return sorted(
            self.records,
            key=lambda record: getattr(record, order_by) or "",
            reverse=descending,
        )


@pytest.fixture
def fake_store() -> FakeSurveyStore:
    return FakeSurveyStore()


@pytest.fixture
def failing_store() -> FakeSurveyStore:
    return FakeSurveyStore(fail=True)


@pytest.fixture
def fixed_clock():
    """Clock returning a constant UTC timestamp."""

    return lambda: FIXED_NOW


@pytest.fixture
def valid_input() -> dict:
    """Raw form values that pass every validation rule."""

    return {
        "salesperson_name": "Jane",
        "physician_name": "Dr. X",
        "facility_name": "Clinic A",
        "facility_type": "clinic",
        "city": "Pune",
        "state": "maharashtra",
        "monthly_bmt_patients": "10",
        "annual_bmt_patients": "120",
    }


@pytest.fixture
def make_record():
    """Factory for stored records with sensible defaults."""

    def _make(**overrides) -> SurveyRecord:
        values = {
            "salesperson_name": "Jane",
            "physician_name": "Dr. X",
            "facility_name": "Clinic A",
            "facility_type": "clinic",
            "city": "Pune",
            "state": "maharashtra",
            "monthly_bmt_patients": 10,
            "annual_bmt_patients": 120,
            "submission_date": "2024-04-30T08:00:00+00:00",
            "created_at": "2024-04-30T08:00:00+00:00",
        }
        values.update(overrides)
        return SurveyRecord(**values)

    return _make
