"""
Word Form UI

Add / edit form with dictionary and AI auto-fill.

Lookups run in button callbacks, so they can fill widget values before the
widgets are drawn on the next rerun.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import streamlit as st

from vocabflow import config, library
from vocabflow.enrichment import (
    apply_dictionary_defaults,
    fetch_dictionary_data,
    generate_collocations,
    generate_word_details,
)
from vocabflow.enrichment.ai_lookup import get_client
from vocabflow.errors import EnrichmentError
from vocabflow.schemas import VocabItem


FIELD_KEYS = {
    "word": "form_word",
    "user_meaning": "form_meaning",
    "context_sentence": "form_context",
    "notes": "form_notes",
    "collocations": "form_collocations",
}


def load_form(item: Optional[VocabItem]) -> None:
    """Populate form widgets from an item (or clear them for a new entry)."""
    st.session_state.form_item_id = item.id if item else None
    st.session_state.form_word = item.word if item else ""
    st.session_state.form_meaning = item.user_meaning if item else ""
    st.session_state.form_context = item.context_sentence if item else ""
    st.session_state.form_notes = item.notes if item else ""
    st.session_state.form_collocations = "\n".join(item.collocations) if item else ""
    st.session_state.form_dictionary = item.dictionary_data if item else None


def _ai_client():
    # Fresh client per call: each lookup runs in its own event loop
    return get_client(st.session_state.get("openai_api_key") or config.get_openai_api_key())


def _on_dictionary_lookup() -> None:
    word = st.session_state.form_word.strip()
    if not word:
        return
    try:
        data = asyncio.run(fetch_dictionary_data(word))
    except EnrichmentError as exc:
        st.session_state.form_message = ("warning", f"Dictionary lookup failed: {exc}")
        return
    if data is None:
        st.session_state.form_message = ("info", f"No dictionary entry for “{word}”.")
        return

    st.session_state.form_dictionary = data
    meaning, context = apply_dictionary_defaults(
        st.session_state.form_meaning,
        st.session_state.form_context,
        data,
    )
    st.session_state.form_meaning = meaning
    st.session_state.form_context = context


def _on_ai_fill() -> None:
    word = st.session_state.form_word.strip()
    if not word:
        return
    try:
        details = asyncio.run(generate_word_details(word, client=_ai_client()))
    except EnrichmentError as exc:
        st.session_state.form_message = ("warning", f"AI lookup failed: {exc}")
        return
    if not st.session_state.form_meaning.strip():
        st.session_state.form_meaning = details.definition
    if not st.session_state.form_context.strip():
        st.session_state.form_context = details.context


def _on_suggest_collocations() -> None:
    word = st.session_state.form_word.strip()
    if not word:
        return
    try:
        suggestions = asyncio.run(generate_collocations(word, client=_ai_client()))
    except EnrichmentError as exc:
        st.session_state.form_message = ("warning", f"AI lookup failed: {exc}")
        return
    current = [line for line in st.session_state.form_collocations.splitlines() if line.strip()]
    st.session_state.form_collocations = "\n".join(library.normalize_collocations(current + suggestions))


def _show_message() -> None:
    message = st.session_state.pop("form_message", None)
    if message:
        level, text = message
        getattr(st, level)(text)


def render_word_form(existing: Optional[VocabItem]) -> Optional[VocabItem]:
    """
    Render the add / edit form.

    Args:
        existing: Item being edited, or None for a new entry

    Returns:
        The item to save when the Save button was clicked, else None
    """
    _show_message()

    st.text_input("Word", key=FIELD_KEYS["word"], placeholder="e.g. serendipity")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.button("📘 Dictionary", on_click=_on_dictionary_lookup, use_container_width=True)
    with col2:
        st.button("✨ AI fill", on_click=_on_ai_fill, use_container_width=True)
    with col3:
        st.button("🔗 Collocations", on_click=_on_suggest_collocations, use_container_width=True)

    st.text_area("Meaning", key=FIELD_KEYS["user_meaning"], height=80)
    st.text_area("Context sentence", key=FIELD_KEYS["context_sentence"], height=80)
    st.text_area("Collocations (one per line)", key=FIELD_KEYS["collocations"], height=80)
    st.text_area("Notes", key=FIELD_KEYS["notes"], height=80)

    data = st.session_state.get("form_dictionary")
    if data is not None and data.phonetic:
        st.caption(f"Dictionary: {data.phonetic} · {len(data.meanings)} definition(s) cached")

    if not st.button("Save", type="primary", use_container_width=True):
        return None

    fields = {
        "word": st.session_state.form_word,
        "user_meaning": st.session_state.form_meaning,
        "context_sentence": st.session_state.form_context,
        "notes": st.session_state.form_notes,
        "collocations": st.session_state.form_collocations.splitlines(),
        "dictionary_data": data,
    }

    try:
        if existing is None:
            return library.create_item(**fields)
        return library.edit_item(existing, **fields)
    except ValueError as exc:
        st.error(str(exc))
        return None
