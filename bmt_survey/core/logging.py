"""Logging utilities shared across the survey application."""
from __future__ import annotations

import logging

from bmt_survey.core.utils import get_config_value


def configure_logging(level: str | None = None) -> None:
    """Initialize basic logging with a shared format and log level.

    The level can be provided directly or via the ``LOG_LEVEL`` setting
    (Streamlit secrets or environment, defaults to ``INFO``) so the form,
    the dashboard and the store client all emit the same message layout.
    """

    resolved_level = (level or get_config_value("LOG_LEVEL", "INFO") or "INFO").upper()
    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
