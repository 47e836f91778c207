"""
VocabFlow - personal vocabulary manager with spaced-repetition review.

Quick start:
    from vocabflow import create_item, create_session, SessionMode
    from vocabflow.store import get_store

    store = get_store()
    store.upsert(create_item("serendipity", user_meaning="a happy accident"))

    session = create_session(store, SessionMode.FULL_QUEUE)
    while not session.is_complete:
        session.reveal()
        session.record_outcome(remembered=True)
"""

from vocabflow.clock import Clock, FixedClock, SystemClock
from vocabflow.errors import (
    EnrichmentError,
    MissingApiKeyError,
    SessionError,
    SessionStateError,
    SessionUnavailableError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    VocabFlowError,
)
from vocabflow.library import create_item, edit_item, filter_items, mastery_counts
from vocabflow.review_session import ReviewSession, SessionState
from vocabflow.scheduling import get_due_items, is_due, next_mastery_level
from vocabflow.schemas import DictionaryData, DictionaryMeaning, MasteryLevel, VocabItem
from vocabflow.session_builder import (
    SessionMode,
    build_daily_quota,
    build_full_queue,
    create_session,
    is_mode_available,
)


__all__ = [
    # Models
    "VocabItem",
    "MasteryLevel",
    "DictionaryData",
    "DictionaryMeaning",

    # Scheduling
    "get_due_items",
    "is_due",
    "next_mastery_level",

    # Sessions
    "SessionMode",
    "SessionState",
    "ReviewSession",
    "build_full_queue",
    "build_daily_quota",
    "create_session",
    "is_mode_available",

    # Library
    "create_item",
    "edit_item",
    "filter_items",
    "mastery_counts",

    # Clocks
    "Clock",
    "SystemClock",
    "FixedClock",

    # Errors
    "VocabFlowError",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "SessionError",
    "SessionStateError",
    "SessionUnavailableError",
    "EnrichmentError",
    "MissingApiKeyError",
]
