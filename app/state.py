"""
Streamlit session state and store initialization helpers.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from app.ui.word_form import load_form
from vocabflow.errors import StoreError
from vocabflow.schemas import VocabItem
from vocabflow.store import ItemStore, get_store


def get_item_store() -> ItemStore:
    """
    Item Store shared by every page (cached per Streamlit server).
    """
    @st.cache_resource
    def _get_item_store() -> ItemStore:
        return get_store()

    return _get_item_store()


def load_library() -> Optional[list[VocabItem]]:
    """
    Read the library for a page, reporting problems in the UI.

    Returns:
        Items (empty if stored data was corrupt), or None if the store
        could not be read at all
    """
    try:
        result = get_item_store().load()
    except StoreError as exc:
        st.error(f"Could not read your library, please reload the page. ({exc})")
        return None
    if result.recovered:
        st.warning(f"Your saved library could not be read and was treated as empty. ({result.error})")
    return result.items


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "review_session" not in st.session_state:
        st.session_state.review_session = None
    if "session_mode" not in st.session_state:
        st.session_state.session_mode = None
    if "last_session_reviewed" not in st.session_state:
        st.session_state.last_session_reviewed = 0
    if "last_session_remembered" not in st.session_state:
        st.session_state.last_session_remembered = 0
    if "library_search" not in st.session_state:
        st.session_state.library_search = ""
    if "mastery_filter" not in st.session_state:
        st.session_state.mastery_filter = "All"
    if "form_item_id" not in st.session_state:
        st.session_state.form_item_id = None
    if "form_word" not in st.session_state:
        load_form(None)
    if "concept_results" not in st.session_state:
        st.session_state.concept_results = []
    if "concept_query" not in st.session_state:
        st.session_state.concept_query = ""
    if "openai_api_key" not in st.session_state:
        st.session_state.openai_api_key = ""
