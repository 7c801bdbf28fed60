"""Streamlit helpers shared by the form and dashboard pages."""
from __future__ import annotations

from typing import Iterable

import streamlit as st

from bmt_survey.core.feedback import ERROR, SUCCESS, Feedback
from bmt_survey.store.supabase import SurveyStore, store_from_config

TOAST_ICONS = {SUCCESS: "✅", ERROR: "❌"}


def rerun_app() -> None:
    """Trigger a Streamlit rerun, compatible with newer and older APIs."""

    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if not rerun:
        raise RuntimeError("Streamlit does not expose a rerun helper.")
    rerun()


def session_store() -> SurveyStore:
    """Create the remote store once per browser session."""

    if "survey_store" not in st.session_state:
        st.session_state.survey_store = store_from_config()
    return st.session_state.survey_store


def show_feedback(items: Iterable[Feedback]) -> None:
    """Render queued notifications as transient toasts."""

    for message, level in items:
        st.toast(message, icon=TOAST_ICONS.get(level, "ℹ️"))
