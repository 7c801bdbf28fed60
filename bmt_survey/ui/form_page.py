"""Streamlit page that renders the BMT survey form."""
from __future__ import annotations

import logging
from typing import Any, Dict

import streamlit as st

from bmt_survey.core.schema import (
    DISEASES,
    SECTIONS,
    SELECT,
    TEXTAREA,
    VOLUME,
    FieldSpec,
    fields_in_section,
)
from bmt_survey.forms.controller import SurveyForm
from bmt_survey.store.supabase import SurveyStore
from bmt_survey.ui.common import rerun_app, show_feedback

logger = logging.getLogger(__name__)

WIDGET_PREFIX = "field_"
SUBMIT_FLAG = "submit_in_flight"


def _widget_key(spec: FieldSpec) -> str:
    return f"{WIDGET_PREFIX}{spec.name}"


def _session_form(store: SurveyStore) -> SurveyForm:
    if "survey_form" not in st.session_state:
        st.session_state.survey_form = SurveyForm(store)
    return st.session_state.survey_form


def _request_submit() -> None:
    """Mark a submission as in flight before the rerun that performs it."""

    if st.session_state.get(SUBMIT_FLAG):
        logger.info("Ignoring survey submit while another is in flight")
        return
    st.session_state[SUBMIT_FLAG] = True


def _reset_widgets() -> None:
    """Drop widget state so the next run renders empty inputs."""

    for key in [key for key in st.session_state.keys() if str(key).startswith(WIDGET_PREFIX)]:
        del st.session_state[key]


def _render_field(spec: FieldSpec, form: SurveyForm) -> Any:
    label = f"{spec.label} *" if spec.required else spec.label
    key = _widget_key(spec)
    current = form.values.get(spec.name, "")

    if spec.kind == SELECT:
        choices = [""] + [value for value, _ in spec.options or ()]
        index = choices.index(current) if current in choices else 0
        value = st.selectbox(
            label,
            options=choices,
            index=index,
            key=key,
            format_func=lambda option, spec=spec: spec.option_label(option) or f"Select {spec.label}",
        )
    elif spec.kind == TEXTAREA:
        value = st.text_area(label, value=str(current or ""), key=key, placeholder=spec.placeholder, height=90)
    else:
        value = st.text_input(label, value=str(current or ""), key=key, placeholder=spec.placeholder)

    message = form.errors.get(spec.name)
    if message:
        st.caption(f":red[{message}]")
    return value


def _render_section(section: str, form: SurveyForm) -> Dict[str, Any]:
    st.subheader(section)
    specs = fields_in_section(section)
    entered: Dict[str, Any] = {}

    if specs and specs[0].kind == TEXTAREA:
        for spec in specs:
            entered[spec.name] = _render_field(spec, form)
        return entered

    columns = st.columns(3 if section in {VOLUME, DISEASES} else 2)
    for index, spec in enumerate(specs):
        with columns[index % len(columns)]:
            entered[spec.name] = _render_field(spec, form)
    return entered


def render(store: SurveyStore) -> None:
    """Draw the survey form and handle submit, clear and sample export."""

    form = _session_form(store)
    in_flight = bool(st.session_state.get(SUBMIT_FLAG))

    st.header("BMT Patient Market Survey")
    st.caption(
        "Collect comprehensive data about Bone Marrow Transplant patient volumes and facility information"
    )
    show_feedback(form.feedback.drain())

    with st.form("survey_form_widget", clear_on_submit=False):
        entered: Dict[str, Any] = {}
        for section in SECTIONS:
            entered.update(_render_section(section, form))
            st.divider()

        action_cols = st.columns(2)
        with action_cols[0]:
            st.form_submit_button(
                "Submitting..." if in_flight else "💾 Submit Survey",
                key="submit_survey",
                on_click=_request_submit,
                type="primary",
                disabled=in_flight,
                use_container_width=True,
            )
        with action_cols[1]:
            cleared = st.form_submit_button("Clear Form", use_container_width=True)

    if in_flight:
        try:
            with st.spinner("Submitting..."):
                stored = form.submit(entered)
        finally:
            st.session_state[SUBMIT_FLAG] = False
        if stored:
            _reset_widgets()
        rerun_app()

    if cleared:
        form.clear()
        _reset_widgets()
        rerun_app()

    if st.button("⬇️ Export Sample", type="secondary"):
        st.session_state.sample_export = form.export_sample()
        show_feedback(form.feedback.drain())

    sample = st.session_state.get("sample_export")
    if sample is not None:
        st.download_button(
            f"Download {sample.filename}",
            data=sample.data,
            file_name=sample.filename,
            mime=sample.mime,
        )
