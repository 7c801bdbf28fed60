"""Streamlit pages for the survey application."""
