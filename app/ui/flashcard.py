"""
Flashcard UI Component

Renders the review card: the word on the front, meaning and context on
the back.
"""

from __future__ import annotations

from html import escape

import streamlit as st

from app.ui.flashcard_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    MASTERY_BADGE_COLORS,
    REVIEW_BACK_STYLE,
    REVIEW_FRONT_STYLE,
    UNKNOWN_BADGE_COLORS,
    FlashcardStyle,
)
from vocabflow.schemas import VocabItem


def mastery_badge_html(level) -> str:
    """Small coloured pill showing the mastery level."""
    label = getattr(level, "value", level)
    bg, fg = MASTERY_BADGE_COLORS.get(label, UNKNOWN_BADGE_COLORS)
    return (
        f'<span style="background: {bg}; color: {fg}; font-size: 0.7em; '
        'padding: 2px 8px; border-radius: 999px; text-transform: uppercase; '
        f'letter-spacing: 0.05em;">{escape(str(label))}</span>'
    )


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    detail: str = "",
    corner_html: str = "",
    style: FlashcardStyle | None = None,
) -> None:
    """
    Render a flashcard.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text below the main text
        detail: Optional italic detail line (e.g. a context sentence)
        corner_html: Optional pre-built HTML for the top-right corner
        style: Style preset (defaults to the review front style)
    """
    style = style or REVIEW_FRONT_STYLE

    corner = ""
    if corner_html:
        corner = f'<div style="position: absolute; top: 15px; right: 20px; font-size: {style.corner_font_size};">{corner_html}</div>'

    main_html = (
        f'<h1 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        f'font-weight: {style.main_weight}; margin: 0; text-align: center; '
        'line-height: 1.3; overflow-wrap: anywhere;">'
        f"{escape(main_text)}</h1>"
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
            f'font-style: {style.subtitle_style}; margin: 15px 0 0 0; text-align: center;">'
            f"{escape(subtitle)}</p>"
        )

    detail_html = ""
    if detail:
        detail_html = (
            f'<p style="font-size: {style.detail_font_size}; color: {style.detail_color}; '
            'font-style: italic; margin: 12px 0 0 0; text-align: center;">'
            f"&ldquo;{escape(detail)}&rdquo;</p>"
        )

    html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner}{main_html}{subtitle_html}{detail_html}</div>'
    )

    st.markdown(html, unsafe_allow_html=True)


def render_card_front(item: VocabItem) -> None:
    """Word only; the answer stays hidden."""
    render_flashcard(
        main_text=item.word,
        corner_html=mastery_badge_html(item.mastery_level),
        style=REVIEW_FRONT_STYLE,
    )


def render_card_back(item: VocabItem) -> None:
    """Word with meaning and context sentence."""
    render_flashcard(
        main_text=item.word,
        subtitle=item.user_meaning or "No meaning recorded",
        detail=item.context_sentence,
        corner_html=mastery_badge_html(item.mastery_level),
        style=REVIEW_BACK_STYLE,
    )
