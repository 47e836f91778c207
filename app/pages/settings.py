"""
Settings page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_item_store
from vocabflow import config
from vocabflow.errors import StoreError


def render_settings_page() -> None:
    st.subheader("Settings")

    st.markdown("### OpenAI")
    if config.get_openai_api_key():
        st.caption("Using OPENAI_API_KEY from the environment. A key entered here takes precedence.")
    st.text_input(
        "API key (kept for this browser session only)",
        key="openai_api_key",
        type="password",
    )
    st.caption(f"Model: {config.get_openai_model()}")

    st.markdown("### Storage")
    backend = config.get_store_backend()
    location = config.get_database_url() if backend == "sql" else str(config.get_data_path())
    st.caption(f"Backend: **{backend}** · {location}")

    with st.expander("⚠️ Danger zone"):
        confirm = st.checkbox("I understand this deletes every word")
        if st.button("Clear library", disabled=not confirm):
            try:
                get_item_store().clear()
            except StoreError as exc:
                st.error(f"Could not clear library: {exc}")
                return
            print("[LIBRARY] Cleared all items")
            st.success("Library cleared.")
