"""
VocabFlow - Main App

Streamlit UI for the spaced-repetition vocabulary library.
"""

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state


st.set_page_config(
    page_title="VocabFlow",
    page_icon="📚",
    layout="centered"
)

ensure_session_state()


def main():
    """Main app entry point."""
    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
