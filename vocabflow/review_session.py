"""
Review Session - walk a fixed queue of items one step at a time.

State machine:
- AWAITING_REVEAL: current item's answer is hidden
- REVEALED: answer shown, an outcome can be recorded
- COMPLETE: terminal, nothing left to review

Every outcome is written to the store before the session advances. If the
stored item cannot be read or the write fails, the session stays on the
same item (still REVEALED), so the caller can retry. Abandoning a session is just dropping the object:
outcomes already recorded are kept, nothing else is written.

The queue is fixed at construction. Later store changes never reorder or
filter it.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from vocabflow.clock import Clock, default_clock
from vocabflow.errors import SessionStateError
from vocabflow.scheduling import next_mastery_level
from vocabflow.schemas import VocabItem
from vocabflow.store.base import ItemStore


class SessionState(str, Enum):
    AWAITING_REVEAL = "awaiting_reveal"
    REVEALED = "revealed"
    COMPLETE = "complete"


class ReviewSession:
    """
    One bounded walk through a composed queue of due items.

    Args:
        items: Queue in review order (copied; the session never re-queries)
        store: Item Store receiving each outcome
        clock: Time source for `last_reviewed` (defaults to system time)
    """

    def __init__(
        self,
        items: Iterable[VocabItem],
        store: ItemStore,
        clock: Optional[Clock] = None,
    ):
        self._items: tuple[VocabItem, ...] = tuple(item.model_copy(deep=True) for item in items)
        self._store = store
        self._clock = clock or default_clock()
        self._position = 0
        self._state = SessionState.AWAITING_REVEAL if self._items else SessionState.COMPLETE
        self.reviewed_count = 0
        self.remembered_count = 0

    # ---- Queries ----

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def items(self) -> tuple[VocabItem, ...]:
        return self._items

    @property
    def position(self) -> int:
        return self._position

    @property
    def total(self) -> int:
        return len(self._items)

    @property
    def remaining(self) -> int:
        return self.total - self._position

    @property
    def is_complete(self) -> bool:
        return self._state == SessionState.COMPLETE

    @property
    def is_revealed(self) -> bool:
        return self._state == SessionState.REVEALED

    @property
    def current_item(self) -> Optional[VocabItem]:
        """Item under review, or None once the session is complete."""
        if self.is_complete:
            return None
        return self._items[self._position]

    @property
    def accuracy(self) -> Optional[float]:
        """Fraction of recorded outcomes that were remembered."""
        if self.reviewed_count == 0:
            return None
        return self.remembered_count / self.reviewed_count

    # ---- Transitions ----

    def reveal(self) -> None:
        """
        Show the current item's answer.

        Calling it again while revealed changes nothing.

        Raises:
            SessionStateError: If the session is complete
        """
        if self._state == SessionState.COMPLETE:
            raise SessionStateError("Cannot reveal: session is complete")
        self._state = SessionState.REVEALED

    def record_outcome(self, remembered: bool) -> VocabItem:
        """
        Record whether the learner remembered the current item.

        Steps:
        1. Compute the next mastery level from the stored item
        2. Persist it with last_reviewed = now
        3. Advance to the next item (or complete)

        Args:
            remembered: True for "remembered", False for "forgot"

        Returns:
            The item as persisted (the queued copy if it was deleted meanwhile)

        Raises:
            SessionStateError: If the answer has not been revealed
            StoreReadError: If the stored item could not be read; the session
                does not advance
            StoreWriteError: If persisting failed; the session does not advance
        """
        if self._state != SessionState.REVEALED:
            raise SessionStateError(
                f"Cannot record an outcome in state '{self._state.value}', reveal the answer first"
            )

        queued = self._items[self._position]
        stored = self._store.get(queued.id)

        if stored is None:
            # Deleted during the session: do not resurrect it
            print(f"[SESSION] Item {queued.id} ({queued.word!r}) no longer in store, skipping write")
            updated = queued
        else:
            now = self._clock.now()
            updated = stored.model_copy(update={
                "mastery_level": next_mastery_level(stored.mastery_level, remembered),
                "last_reviewed": max(now, stored.created_at),
            })
            self._store.upsert(updated)

        self.reviewed_count += 1
        if remembered:
            self.remembered_count += 1

        self._position += 1
        if self._position >= len(self._items):
            self._state = SessionState.COMPLETE
        else:
            self._state = SessionState.AWAITING_REVEAL

        return updated

    def __repr__(self):
        return f"<ReviewSession({self._position}/{self.total}, {self._state.value})>"
