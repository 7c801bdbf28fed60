"""Remote persistence for survey records."""
from bmt_survey.store.supabase import (
    SupabaseSurveyStore,
    SurveyStore,
    SurveyStoreError,
    store_from_config,
)

__all__ = ["SupabaseSurveyStore", "SurveyStore", "SurveyStoreError", "store_from_config"]
