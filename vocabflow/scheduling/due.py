"""
Due-Set Calculator

Decides which items need review right now.

An item is due when the time elapsed since its last review exceeds the
interval for its mastery level:
- New: 1 day
- Learning: 3 days
- Mastered: 7 days

The comparison is strict: an item reviewed exactly one interval ago is not
due yet. Items with an unrecognized mastery level are always due, so no
item silently drops out of review.

Pure functions only (no store access, no caching). Call again whenever a
new session starts.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Optional

from vocabflow.constants import REVIEW_INTERVALS
from vocabflow.schemas import MasteryLevel, VocabItem


def _as_level(value) -> Optional[MasteryLevel]:
    try:
        return MasteryLevel(value)
    except ValueError:
        return None


def review_interval(mastery_level) -> Optional[timedelta]:
    """
    Get the review interval for a mastery level.

    Args:
        mastery_level: MasteryLevel or its string value

    Returns:
        Interval as timedelta, or None for unknown levels
    """
    level = _as_level(mastery_level)
    if level is None:
        return None
    return REVIEW_INTERVALS[level]


def is_due(item: VocabItem, now: datetime) -> bool:
    """
    Check whether an item is due for review.

    Args:
        item: Vocabulary item
        now: Current time (timezone-aware)

    Returns:
        True if elapsed time since last review exceeds the interval
    """
    interval = review_interval(item.mastery_level)
    if interval is None:
        return True
    return now - item.last_reviewed > interval


def get_due_items(items: Iterable[VocabItem], now: datetime) -> list[VocabItem]:
    """
    Filter a collection down to its due items, keeping input order.

    Args:
        items: Full item collection
        now: Current time

    Returns:
        List of due items
    """
    return [item for item in items if is_due(item, now)]


def next_due_at(item: VocabItem) -> Optional[datetime]:
    """
    Earliest time at which the item counts as due.

    Strictly after this instant the item is due. None for unknown levels
    (those are due at any time).
    """
    interval = review_interval(item.mastery_level)
    if interval is None:
        return None
    return item.last_reviewed + interval
