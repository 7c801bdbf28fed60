"""Streamlit page that lists survey submissions and exports them."""
from __future__ import annotations

import streamlit as st

from bmt_survey.dashboard.controller import Dashboard
from bmt_survey.dashboard.stats import EMPTY_TABLE_MESSAGE, TABLE_HEADERS
from bmt_survey.store.supabase import SurveyStore
from bmt_survey.ui.common import show_feedback


def _session_dashboard(store: SurveyStore) -> Dashboard:
    """Create the dashboard once per session and fetch whenever it is stale."""

    if "dashboard" not in st.session_state:
        st.session_state.dashboard = Dashboard(store)
    dashboard = st.session_state.dashboard
    if dashboard.is_loading:
        with st.spinner("Loading survey submissions..."):
            dashboard.load()
    return dashboard


def on_enter() -> None:
    """Refetch on every visit so submissions made on the form page show up."""

    st.session_state.pop("excel_export", None)
    dashboard = st.session_state.get("dashboard")
    if dashboard is not None:
        dashboard.mark_stale()


def _stat_cards(dashboard: Dashboard) -> None:
    stats = dashboard.stats
    cards = st.columns(4)
    cards[0].metric("📄 Total Surveys", stats.total_surveys)
    cards[1].metric("👥 Monthly BMT Patients", stats.total_patients)
    cards[2].metric("🏥 Unique Facilities", stats.facilities_count)
    cards[3].metric("📈 Avg Patients/Facility", stats.avg_patients_per_facility)


def render(store: SurveyStore) -> None:
    """Draw the summary cards, the submissions table and the export controls."""

    dashboard = _session_dashboard(store)

    header_cols = st.columns([3, 1, 1])
    with header_cols[0]:
        st.header("Survey Dashboard")
        st.caption("Overview of BMT market survey responses")
    with header_cols[1]:
        if st.button("🔄 Refresh", type="secondary", use_container_width=True):
            st.session_state.pop("excel_export", None)
            with st.spinner("Loading survey submissions..."):
                dashboard.refresh()
    with header_cols[2]:
        if st.button("⬇️ Export to Excel", type="primary", use_container_width=True):
            st.session_state.excel_export = dashboard.export_to_excel()

    show_feedback(dashboard.feedback.drain())

    export = st.session_state.get("excel_export")
    if export is not None:
        st.download_button(
            f"Download {export.filename}",
            data=export.data,
            file_name=export.filename,
            mime=export.mime,
        )

    _stat_cards(dashboard)

    st.subheader("Recent Survey Submissions")
    rows = dashboard.table_rows()
    if rows:
        st.dataframe(
            rows,
            use_container_width=True,
            hide_index=True,
            column_order=TABLE_HEADERS,
        )
    else:
        st.info(EMPTY_TABLE_MESSAGE)
