"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "240px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"


# ---- Mastery Badge Colors ----

MASTERY_BADGE_COLORS = {
    "New": ("#dbeafe", "#1d4ed8"),
    "Learning": ("#fef9c3", "#a16207"),
    "Mastered": ("#d1fae5", "#047857"),
}
UNKNOWN_BADGE_COLORS = ("#f4f4f5", "#52525b")


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = "3em"
    main_color: str = "#1f1f1f"
    main_weight: str = "bold"
    subtitle_font_size: str = "1.1em"
    subtitle_color: str = "#444"
    subtitle_style: str = "normal"
    detail_font_size: str = "0.95em"
    detail_color: str = "#666"
    corner_font_size: str = "0.8em"
    corner_color: str = "#888"
    bg_color: str = FRONT_BG_COLOR


# ---- Review Presets ----

REVIEW_FRONT_STYLE = FlashcardStyle(bg_color=FRONT_BG_COLOR)

REVIEW_BACK_STYLE = FlashcardStyle(
    main_font_size="2.4em",
    bg_color=BACK_BG_COLOR,
)
