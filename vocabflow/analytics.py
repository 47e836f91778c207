"""
Library analytics: counts and day-indexed series for the Stats page.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

import pandas as pd

from vocabflow.constants import FORECAST_DAYS
from vocabflow.library import mastery_counts
from vocabflow.scheduling import get_due_items, next_due_at
from vocabflow.schemas import VocabItem


@dataclass(frozen=True)
class LibrarySummary:
    """
    Precomputed metrics and series for the library.
    """
    total: int
    due_now: int
    by_mastery: dict[str, int]
    added_per_day: pd.Series
    due_forecast: pd.Series


def _utc_series(values: Sequence[datetime]) -> pd.Series:
    # Fixed ns resolution so reindexing against date_range lines up
    return pd.to_datetime(pd.Series(list(values), dtype="object"), utc=True).dt.as_unit("ns")


def compute_added_per_day(items: Sequence[VocabItem]) -> pd.Series:
    """
    Items created per UTC day, on a dense day index from first to last.
    """
    if not items:
        return pd.Series(dtype="int64", name="added")

    created_days = _utc_series([item.created_at for item in items]).dt.floor("D")
    day_index = pd.date_range(start=created_days.min(), end=created_days.max(), freq="D", unit="ns")
    counts = created_days.value_counts().reindex(day_index, fill_value=0)
    return counts.astype("int64").rename("added")


def compute_due_forecast(
    items: Sequence[VocabItem],
    now: datetime,
    days: int = FORECAST_DAYS
) -> pd.Series:
    """
    Number of items becoming due on each of the next `days` UTC days.

    Items already due (including unknown mastery levels) count on day 0.
    Items due after the window are left out.
    """
    now_ts = pd.Timestamp(now).tz_convert("UTC")
    day_index = pd.date_range(start=now_ts.floor("D"), periods=days, freq="D", unit="ns")

    if not items:
        return pd.Series(0, index=day_index, dtype="int64", name="due")

    due_times = _utc_series([next_due_at(item) or now for item in items])
    due_times = due_times.where(due_times > now_ts, now_ts)
    counts = due_times.dt.floor("D").value_counts().reindex(day_index, fill_value=0)
    return counts.astype("int64").rename("due")


def build_library_summary(items: Sequence[VocabItem], now: datetime) -> LibrarySummary:
    """
    Build all values needed by the Stats page.
    """
    items = list(items)
    return LibrarySummary(
        total=len(items),
        due_now=len(get_due_items(items, now)),
        by_mastery=mastery_counts(items),
        added_per_day=compute_added_per_day(items),
        due_forecast=compute_due_forecast(items, now),
    )
