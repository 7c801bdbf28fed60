"""HTTP client for the hosted ``bmt_surveys`` table (Supabase PostgREST API)."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

import requests

from bmt_survey.core.models import SurveyRecord
from bmt_survey.core.utils import get_config_value, load_env_file

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "bmt_surveys"
DEFAULT_TIMEOUT = 30.0
DEFAULT_STORE_ENV_FILE = Path("secrets/supabase.env")
_STORE_ENV_LOADED = False


class SurveyStoreError(RuntimeError):
    """Raised when the remote store rejects or cannot serve a request."""


class SurveyStore(Protocol):
    """The two remote operations the form and dashboard depend on."""

    def insert(self, record: SurveyRecord) -> None:
        ...

    def list(self, order_by: str = "created_at", descending: bool = True) -> List[SurveyRecord]:
        ...


def _ensure_store_env() -> None:
    """Populate store credentials from secrets/supabase.env once per process."""

    global _STORE_ENV_LOADED
    if _STORE_ENV_LOADED:
        return
    _STORE_ENV_LOADED = True

    env_path = Path(os.getenv("SUPABASE_ENV_FILE", DEFAULT_STORE_ENV_FILE))
    load_env_file(env_path)


class SupabaseSurveyStore:
    """Insert and list survey rows through the PostgREST endpoint of a Supabase project."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = DEFAULT_TABLE,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url or not api_key:
            raise SurveyStoreError("Supabase URL and access key are required")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.table = table
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def _headers(self, **extra: str) -> Dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        headers.update(extra)
        return headers

    def insert(self, record: SurveyRecord) -> None:
        """Store one record; the store assigns its ``id``."""

        try:
            response = self.session.post(
                self.endpoint,
                headers=self._headers(Prefer="return=minimal"),
                json=[record.to_payload()],
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise SurveyStoreError(f"Insert into {self.table} failed: {exc}") from exc
        logger.info("Inserted survey for facility %s", record.facility_name)

    def list(self, order_by: str = "created_at", descending: bool = True) -> List[SurveyRecord]:
        """Return every stored record ordered by a single column."""

        direction = "desc" if descending else "asc"
        try:
            response = self.session.get(
                self.endpoint,
                headers=self._headers(),
                params={"select": "*", "order": f"{order_by}.{direction}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            rows: Any = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise SurveyStoreError(f"Listing {self.table} failed: {exc}") from exc

        if not isinstance(rows, list):
            raise SurveyStoreError(f"Unexpected response listing {self.table}")
        logger.info("Fetched %d survey rows from %s", len(rows), self.table)
        return [SurveyRecord.from_row(row) for row in rows or []]


def store_from_config() -> SupabaseSurveyStore:
    """Build the store from Streamlit secrets, the environment or secrets/supabase.env."""

    _ensure_store_env()
    base_url = get_config_value("SUPABASE_URL")
    api_key = get_config_value("SUPABASE_ANON_KEY")
    if not base_url or not api_key:
        raise SurveyStoreError(
            "Set SUPABASE_URL and SUPABASE_ANON_KEY in Streamlit secrets, the environment or "
            f"{DEFAULT_STORE_ENV_FILE}"
        )

    table = get_config_value("SUPABASE_TABLE", DEFAULT_TABLE) or DEFAULT_TABLE
    raw_timeout = get_config_value("SUPABASE_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        logger.warning("Ignoring invalid SUPABASE_TIMEOUT %r", raw_timeout)
        timeout = DEFAULT_TIMEOUT

    return SupabaseSurveyStore(base_url, api_key, table=table, timeout=timeout)
