"""
Session Statistics UI

Renders progress metrics and controls.
"""

import streamlit as st


def render_session_stats() -> bool:
    """
    Render session progress metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    session = st.session_state.review_session
    if session is None or session.is_complete:
        return False

    col1, col2, col3, col4 = st.columns([2, 2, 2, 1])

    with col1:
        st.metric("Progress", f"{session.position}/{session.total}")

    with col2:
        st.metric("Remaining", session.remaining)

    with col3:
        if session.accuracy is not None:
            st.metric("Remembered", f"{session.accuracy * 100:.0f}%")

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Quit session", use_container_width=True):
            return True

    st.progress(session.position / session.total if session.total else 1.0)
    st.divider()
    return False


def render_session_complete():
    """Render session completion message."""
    reviewed = st.session_state.last_session_reviewed
    if reviewed > 0:
        st.success(f"🎉 Session complete! You reviewed {reviewed} words.")
        remembered = st.session_state.last_session_remembered
        st.info(f"Remembered: {remembered / reviewed * 100:.1f}%")
