"""
Mastery Transition Engine

Maps (current mastery level, review outcome) to the next mastery level.

| current  | remembered | forgot   |
|----------|------------|----------|
| New      | Learning   | Learning |
| Learning | Mastered   | Learning |
| Mastered | Mastered   | Learning |

Success advances at most one step. Failure always lands on Learning: a
forgotten word never falls back to New and never stays Mastered.
"""

from __future__ import annotations

from vocabflow.schemas import MasteryLevel


_ON_SUCCESS = {
    MasteryLevel.NEW: MasteryLevel.LEARNING,
    MasteryLevel.LEARNING: MasteryLevel.MASTERED,
    MasteryLevel.MASTERED: MasteryLevel.MASTERED,
}


def next_mastery_level(current, remembered: bool) -> MasteryLevel:
    """
    Compute the mastery level after a review.

    Args:
        current: Current MasteryLevel (or its string value). Unknown
            values are treated as New.
        remembered: True if the learner recalled the item

    Returns:
        Next MasteryLevel
    """
    if not remembered:
        return MasteryLevel.LEARNING

    try:
        level = MasteryLevel(current)
    except ValueError:
        level = MasteryLevel.NEW

    return _ON_SUCCESS[level]
