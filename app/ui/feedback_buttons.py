"""
Outcome Button UI

Renders the Forgot / Remembered buttons shown after the answer is revealed.
"""

from typing import Optional

import streamlit as st


def render_feedback_buttons(key_suffix: str = "") -> Optional[bool]:
    """
    Render review outcome buttons.

    Args:
        key_suffix: Makes widget keys unique per session step

    Returns:
        True for remembered, False for forgot, None if nothing clicked
    """
    st.markdown("**Did you remember this word?**")

    col1, col2 = st.columns(2)
    with col1:
        forgot = st.button("❌ Forgot", use_container_width=True, key=f"forgot_{key_suffix}")
    with col2:
        remembered = st.button("✅ Remembered", type="primary", use_container_width=True, key=f"remembered_{key_suffix}")

    if remembered:
        return True
    if forgot:
        return False
    return None
