"""Settings lookup for the Supabase store and logging.

Values such as ``SUPABASE_URL``, ``SUPABASE_ANON_KEY`` and ``LOG_LEVEL`` come
from Streamlit secrets when the app is deployed, otherwise from the process
environment, which ``secrets/supabase.env`` can seed for local runs.
"""
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_config_value(key: str, default: str = "") -> str:
    """Return a store or logging setting, preferring Streamlit secrets.

    A hosted deployment keeps the Supabase credentials in ``st.secrets``; local
    runs read them from the environment. ``default`` applies when neither has
    the key, for example ``SUPABASE_TABLE`` falling back to ``bmt_surveys``.
    """
    try:
        import streamlit as st
        if key in st.secrets:
            return str(st.secrets[key])
    except (ImportError, FileNotFoundError, KeyError):
        pass

    return os.getenv(key, default)


def load_env_file(path: Path) -> None:
    """Seed ``os.environ`` from a ``KEY=value`` file such as ``secrets/supabase.env``.

    Blank lines and ``#`` comments are skipped and surrounding quotes are
    stripped. Variables already present in the environment win over the file,
    and a missing file is not an error.
    """
    if not path.exists():
        return

    try:
        with path.open(encoding="utf-8") as handle:
            for line in (raw.strip() for raw in handle):
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = (part.strip() for part in line.split("=", 1))
                if key and key not in os.environ:
                    os.environ[key] = value.strip('"').strip("'")
    except OSError as exc:
        logger.debug("Could not read store settings from %s: %s", path, exc)
