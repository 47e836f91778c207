"""
Scheduling - three-tier mastery model

Pure functions deciding when items are due and how review outcomes move
them between mastery levels.

Quick start:
    from vocabflow import scheduling

    due = scheduling.get_due_items(store.get_all(), clock.now())
    level = scheduling.next_mastery_level(item.mastery_level, remembered=True)
"""

from vocabflow.scheduling.due import (
    get_due_items,
    is_due,
    next_due_at,
    review_interval,
)
from vocabflow.scheduling.mastery import next_mastery_level


__all__ = [
    "get_due_items",
    "is_due",
    "next_due_at",
    "review_interval",
    "next_mastery_level",
]
