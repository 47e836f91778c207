"""
Word Details UI

Renders dictionary data, collocations and notes for an item.
"""

import streamlit as st

from vocabflow.schemas import VocabItem


def render_word_details(item: VocabItem, expanded: bool = False):
    """
    Render word details expander.

    Args:
        item: Vocabulary item
        expanded: Open the expander initially
    """
    with st.expander("📖 Details", expanded=expanded):
        data = item.dictionary_data

        if data is not None:
            if data.phonetic:
                st.caption(f"**Pronunciation:** {data.phonetic}")
            if data.audio_url:
                st.audio(data.audio_url)
            if data.meanings:
                st.markdown("**Dictionary Definitions**")
                for meaning in data.meanings:
                    st.markdown(f"*({meaning.part_of_speech})* {meaning.definition}")
                    if meaning.example:
                        st.caption(f"“{meaning.example}”")

        if item.context_sentence:
            st.markdown("**Common Context**")
            st.write(item.context_sentence)

        if item.collocations:
            st.markdown("**Collocations**")
            st.write(" · ".join(item.collocations))

        if item.notes:
            st.markdown("**Notes**")
            st.write(item.notes)

        if data is None and not item.context_sentence and not item.collocations and not item.notes:
            st.info("No extra details recorded for this word yet.")

        st.caption(
            f"Added {item.created_at:%Y-%m-%d} · last reviewed {item.last_reviewed:%Y-%m-%d %H:%M} UTC"
        )
