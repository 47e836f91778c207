"""
Library page rendering: search, filter, add, edit and delete words.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_item_store, load_library
from app.ui import load_form, render_word_form
from vocabflow.clock import default_clock
from vocabflow.errors import StoreError
from vocabflow.library import filter_items, mastery_counts
from vocabflow.scheduling import is_due, next_due_at
from vocabflow.schemas import MasteryLevel


FILTER_OPTIONS = ["All"] + [level.value for level in MasteryLevel]


def render_library_page() -> None:
    items = load_library()
    if items is None:
        return

    counts = mastery_counts(items)

    st.subheader("My Library")
    cols = st.columns(len(counts))
    for col, (level, count) in zip(cols, counts.items()):
        with col:
            st.metric(level, count)

    _render_form_section(items)

    st.divider()

    col1, col2 = st.columns([3, 1])
    with col1:
        st.text_input("Search", key="library_search", placeholder="Word or meaning")
    with col2:
        st.selectbox("Mastery", FILTER_OPTIONS, key="mastery_filter")

    visible = filter_items(items, st.session_state.library_search, st.session_state.mastery_filter)
    if not visible:
        st.info("No words match." if items else "No words yet. Add your first one above.")
        return

    now = default_clock().now()
    for item in visible:
        _render_item_row(item, now)


def _render_form_section(items) -> None:
    # Widget values can only be reset before the widgets are drawn
    if st.session_state.pop("form_reset", False):
        load_form(None)

    editing_id = st.session_state.form_item_id
    existing = next((item for item in items if item.id == editing_id), None)

    title = f"✏️ Edit “{existing.word}”" if existing else "➕ Add a word"
    with st.expander(title, expanded=existing is not None):
        saved = render_word_form(existing)
        if existing is not None:
            st.button("Cancel edit", on_click=load_form, args=(None,))

    if saved is None:
        return

    try:
        get_item_store().upsert(saved)
    except StoreError as exc:
        st.error(f"Could not save “{saved.word}”: {exc}")
        return

    print(f"[LIBRARY] Saved {saved.word!r} ({saved.id})")
    st.session_state.form_reset = True
    st.rerun()


def _render_item_row(item, now) -> None:
    level = item.mastery_level.value if isinstance(item.mastery_level, MasteryLevel) else str(item.mastery_level)
    status = "🔔 due" if is_due(item, now) else f"next {next_due_at(item):%Y-%m-%d}"

    with st.container(border=True):
        col1, col2, col3 = st.columns([5, 1, 1])
        with col1:
            st.markdown(f"**{item.word}** · *{level}* · {status}")
            if item.user_meaning:
                st.caption(item.user_meaning)
        with col2:
            st.button("Edit", key=f"edit_{item.id}", on_click=load_form, args=(item,), use_container_width=True)
        with col3:
            if st.button("🗑️", key=f"delete_{item.id}", help="Delete", use_container_width=True):
                try:
                    get_item_store().delete(item.id)
                except StoreError as exc:
                    st.error(f"Could not delete “{item.word}”: {exc}")
                    return
                print(f"[LIBRARY] Deleted {item.word!r} ({item.id})")
                st.rerun()
