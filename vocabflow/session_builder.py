"""
Session Builder - compose review sessions from the due set.

Two composition modes:
1. Full queue: every due item, oldest review first
2. Daily quota: a random sample of DAILY_QUOTA_SIZE due items

The due set is computed once, when the session is created. The resulting
ReviewSession never looks at the store's collection again.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterable, Optional

from vocabflow import config
from vocabflow.clock import Clock, default_clock
from vocabflow.errors import SessionUnavailableError
from vocabflow.review_session import ReviewSession
from vocabflow.scheduling import get_due_items
from vocabflow.schemas import VocabItem
from vocabflow.store.base import ItemStore


class SessionMode(str, Enum):
    FULL_QUEUE = "full_queue"
    DAILY_QUOTA = "daily_quota"


def build_full_queue(items: Iterable[VocabItem], now) -> list[VocabItem]:
    """
    All due items ordered by ascending last_reviewed (stalest first).

    Ties keep store order.
    """
    due = get_due_items(items, now)
    return sorted(due, key=lambda item: item.last_reviewed)


def build_daily_quota(
    items: Iterable[VocabItem],
    now,
    size: int,
    rng: Optional[random.Random] = None
) -> list[VocabItem]:
    """
    Uniform random sample of due items, without replacement.

    Args:
        items: Full item collection
        now: Current time
        size: Target number of items; fewer if fewer are due
        rng: Optional random generator (for reproducible sampling)

    Returns:
        Sampled items in random order (empty if nothing is due)
    """
    if size < 1:
        raise ValueError(f"Quota size must be at least 1, got {size}")

    due = get_due_items(items, now)
    if not due:
        return []

    sample_size = min(size, len(due))
    return (rng or random).sample(due, sample_size)


def is_mode_available(mode: SessionMode, items: Iterable[VocabItem], now) -> bool:
    """
    Check whether a mode can start a session.

    The full queue is always available (it may complete immediately); the
    daily quota needs at least one due item.
    """
    if SessionMode(mode) == SessionMode.DAILY_QUOTA:
        return bool(get_due_items(items, now))
    return True


def create_session(
    store: ItemStore,
    mode: SessionMode = SessionMode.FULL_QUEUE,
    clock: Optional[Clock] = None,
    size: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> ReviewSession:
    """
    Compose a review session from the store's current due set.

    Args:
        store: Item Store to read from and write outcomes to
        mode: Composition mode
        clock: Time source (defaults to system time)
        size: Daily quota size (defaults to DAILY_QUOTA_SIZE config)
        rng: Optional random generator for the daily quota

    Returns:
        ReviewSession (already COMPLETE if the full queue is empty)

    Raises:
        SessionUnavailableError: Daily quota requested with nothing due
    """
    clock = clock or default_clock()
    mode = SessionMode(mode)
    now = clock.now()
    items = store.get_all()

    if mode == SessionMode.DAILY_QUOTA:
        quota = size if size is not None else config.get_daily_quota_size()
        queue = build_daily_quota(items, now, quota, rng=rng)
        if not queue:
            raise SessionUnavailableError("Nothing is due for review right now.")
    else:
        queue = build_full_queue(items, now)

    print(f"[SESSION] Created {mode.value} session with {len(queue)} of {len(items)} items")
    return ReviewSession(queue, store, clock)
