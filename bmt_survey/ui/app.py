"""Streamlit entry point: survey form and submissions dashboard."""
from pathlib import Path

import streamlit as st

# Allow running via "streamlit run bmt_survey/ui/app.py" without installing the package
# by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from bmt_survey.core.logging import configure_logging
from bmt_survey.store.supabase import SurveyStoreError
from bmt_survey.ui import dashboard_page, form_page
from bmt_survey.ui.common import session_store

FORM_PAGE = "📝 Survey Form"
DASHBOARD_PAGE = "📊 Dashboard"

PAGES = {
    FORM_PAGE: form_page.render,
    DASHBOARD_PAGE: dashboard_page.render,
}
ON_ENTER = {DASHBOARD_PAGE: dashboard_page.on_enter}


def main() -> None:
    """Launch the two-page survey application."""

    configure_logging()
    st.set_page_config(page_title="BMT Market Survey", layout="wide", initial_sidebar_state="expanded")

    with st.sidebar:
        st.title("BMT Market Survey")
        page = st.radio("Navigate", options=list(PAGES), key="page_choice")

    try:
        store = session_store()
    except SurveyStoreError as exc:
        st.error(f"⚠️ {exc}")
        st.stop()

    if st.session_state.get("active_page") != page:
        st.session_state.active_page = page
        if page in ON_ENTER:
            ON_ENTER[page]()

    PAGES[page](store)


if __name__ == "__main__":
    main()
