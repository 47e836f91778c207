"""
Stats page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.state import load_library
from vocabflow.analytics import build_library_summary
from vocabflow.clock import default_clock


def render_stats_page() -> None:
    st.subheader("Library Stats")

    items = load_library()
    if items is None:
        return

    summary = build_library_summary(items, default_clock().now())

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Words", f"{summary.total:,}")
    with col2:
        st.metric("Due Now", f"{summary.due_now:,}")

    st.markdown("### Mastery")
    cols = st.columns(len(summary.by_mastery))
    for col, (level, count) in zip(cols, summary.by_mastery.items()):
        with col:
            st.metric(level, count)

    st.markdown("### Words Added")
    if summary.added_per_day.empty:
        st.info("No words added yet.")
    else:
        st.bar_chart(summary.added_per_day.rename("added").to_frame())

    st.markdown("### Due Forecast")
    if summary.due_forecast.sum() == 0:
        st.info("Nothing scheduled.")
    else:
        st.bar_chart(summary.due_forecast.rename("due").to_frame())
