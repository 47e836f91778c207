"""
Review page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import end_session, process_outcome, reveal_answer, start_new_session
from app.state import load_library
from app.ui import (
    render_card_back,
    render_card_front,
    render_feedback_buttons,
    render_session_complete,
    render_session_stats,
    render_word_details,
)
from vocabflow import config
from vocabflow.clock import default_clock
from vocabflow.scheduling import get_due_items
from vocabflow.session_builder import SessionMode, is_mode_available


def render_review_page() -> None:
    """
    Render the review flow (mode selection or active session).
    """
    if st.session_state.review_session is None:
        _render_intro_screen()
    else:
        _render_active_session()


def _render_intro_screen() -> None:
    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("📚 VocabFlow Review")
    if config.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test data (set TEST_MODE=false in .env for production)")

    render_session_complete()

    items = load_library()
    if items is None:
        return

    now = default_clock().now()
    due_count = len(get_due_items(items, now))

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Words", len(items))
    with col2:
        st.metric("Due now", due_count)

    st.markdown("### Choose a session")

    col1, col2 = st.columns(2)

    with col1:
        if st.button(
            "Review All Due",
            type="primary",
            use_container_width=True,
            help="Every due word, oldest review first",
        ):
            start_new_session(SessionMode.FULL_QUEUE)
            st.rerun()

    with col2:
        quota_size = config.get_daily_quota_size()
        if st.button(
            f"Daily {quota_size}",
            type="secondary",
            use_container_width=True,
            disabled=not is_mode_available(SessionMode.DAILY_QUOTA, items, now),
            help=f"{quota_size} random due words",
        ):
            start_new_session(SessionMode.DAILY_QUOTA)
            st.rerun()

    if due_count == 0 and items:
        st.info("🎉 All caught up! Nothing is due right now.")
    elif not items:
        st.info("Your library is empty. Add words on the Library tab.")


def _render_active_session() -> None:
    if render_session_stats():
        end_session()
        st.rerun()

    session = st.session_state.review_session
    item = session.current_item

    st.markdown("<br>", unsafe_allow_html=True)

    if not session.is_revealed:
        render_card_front(item)
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("Reveal Answer", use_container_width=True, type="primary"):
            reveal_answer()
            st.rerun()
    else:
        render_card_back(item)
        st.markdown("<br>", unsafe_allow_html=True)

        key_suffix = f"{st.session_state.session_mode.value}_{session.position}"
        outcome = render_feedback_buttons(key_suffix=key_suffix)
        if outcome is not None and process_outcome(outcome):
            st.rerun()

        st.markdown("<br>", unsafe_allow_html=True)
        render_word_details(item)

    if config.is_test_mode():
        st.caption("TEST MODE - Using test data")
