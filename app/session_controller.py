"""
Session lifecycle helpers for Streamlit app.

The ReviewSession object lives in st.session_state.review_session; these
helpers create it, drive it from button clicks and tear it down.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_item_store
from vocabflow.errors import SessionUnavailableError, StoreError
from vocabflow.session_builder import SessionMode, create_session


def start_new_session(mode: SessionMode) -> None:
    """
    Start a new review session.
    """
    try:
        session = create_session(get_item_store(), mode)
    except SessionUnavailableError as exc:
        st.error(str(exc))
        return
    except StoreError as exc:
        st.error(f"Could not read your library: {exc}")
        return

    if session.is_complete:
        st.info("🎉 Nothing is due right now. Come back later!")
        return

    st.session_state.review_session = session
    st.session_state.session_mode = mode
    st.session_state.last_session_reviewed = 0
    st.session_state.last_session_remembered = 0


def reveal_answer() -> None:
    session = st.session_state.review_session
    if session is not None and not session.is_complete:
        session.reveal()


def process_outcome(remembered: bool) -> bool:
    """
    Record the learner's outcome and move to the next item.

    Returns:
        True if the outcome was saved, False if the write failed (the
        session stays on the same item so the learner can retry)
    """
    session = st.session_state.review_session
    if session is None:
        return False

    try:
        session.record_outcome(remembered)
    except StoreError as exc:
        print(f"[SESSION] Outcome not saved at position {session.position}: {exc}")
        st.error(f"Could not save your answer, please try again. ({exc})")
        return False

    if session.is_complete:
        end_session()
    return True


def end_session() -> None:
    """End the current session (recorded outcomes are already saved)."""
    session = st.session_state.review_session
    if session is not None:
        st.session_state.last_session_reviewed = session.reviewed_count
        st.session_state.last_session_remembered = session.remembered_count
    st.session_state.review_session = None
    st.session_state.session_mode = None
