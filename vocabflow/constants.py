"""
VocabFlow Constants

Scheduling intervals and session parameters in one place.
"""

from datetime import timedelta

from vocabflow.schemas import MasteryLevel


# ---- Review Intervals ----
# An item is due once the time since its last review exceeds its interval.

REVIEW_INTERVALS = {
    MasteryLevel.NEW: timedelta(days=1),
    MasteryLevel.LEARNING: timedelta(days=3),
    MasteryLevel.MASTERED: timedelta(days=7),
}


# ---- Session Configuration ----

DAILY_QUOTA_SIZE = 3  # Items in a "daily quota" session


# ---- Storage ----

STORAGE_KEY = "vocabflow_data_v1"  # Base name of the JSON data file


# ---- Dictionary Lookup ----

DICTIONARY_API_BASE = "https://api.dictionaryapi.dev/api/v2/entries/en/"
MAX_DICTIONARY_MEANINGS = 3


# ---- AI Lookup ----

DEFAULT_AI_MODEL = "gpt-4o-2024-08-06"
AI_SEARCH_RESULTS = 3  # Suggestions per concept search


# ---- Analytics ----

FORECAST_DAYS = 7  # Days covered by the due forecast
