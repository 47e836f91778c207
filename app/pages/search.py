"""
AI concept search page: find English words for an idea and add them.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import streamlit as st

from app.state import get_item_store
from vocabflow import config
from vocabflow.enrichment import fetch_dictionary_data, search_words_for_concept
from vocabflow.enrichment.ai_lookup import get_client
from vocabflow.errors import EnrichmentError, StoreError
from vocabflow.library import create_item_from_search
from vocabflow.schemas import DictionaryData


def _lookup_dictionary(word: str) -> Optional[DictionaryData]:
    # Audio and phonetics are optional extras for a search result
    try:
        return asyncio.run(fetch_dictionary_data(word))
    except EnrichmentError as exc:
        print(f"[ENRICHMENT] Skipping dictionary data for {word!r}: {exc}")
        return None


def render_search_page() -> None:
    st.subheader("AI Search")
    st.caption("Describe an idea in any language and get English words or phrases for it.")

    concept = st.text_input("Concept", placeholder="e.g. 形容一个人很固执")

    if st.button("Search", type="primary", disabled=not concept.strip()):
        st.session_state.concept_query = concept
        try:
            client = get_client(st.session_state.openai_api_key or config.get_openai_api_key())
            with st.spinner("Searching..."):
                st.session_state.concept_results = asyncio.run(search_words_for_concept(concept, client=client))
        except EnrichmentError as exc:
            st.error(f"Search failed: {exc}")
            st.session_state.concept_results = []

    results = st.session_state.concept_results
    if not results:
        return

    for index, result in enumerate(results):
        with st.container(border=True):
            st.markdown(f"**{result.word}**")
            st.write(result.definition)
            st.caption(f"“{result.context}”")
            if st.button("➕ Add to library", key=f"add_result_{index}"):
                with st.spinner("Looking up pronunciation..."):
                    dictionary_data = _lookup_dictionary(result.word)
                item = create_item_from_search(
                    result,
                    st.session_state.get("concept_query", concept),
                    dictionary_data=dictionary_data,
                )
                try:
                    get_item_store().upsert(item)
                except StoreError as exc:
                    st.error(f"Could not save “{item.word}”: {exc}")
                    continue
                print(f"[LIBRARY] Added {item.word!r} from concept search")
                st.success(f"Added “{item.word}”.")
