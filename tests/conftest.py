"""
Pytest configuration and shared fixtures.
"""
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from vocabflow.clock import FixedClock
from vocabflow.schemas import MasteryLevel, VocabItem
from vocabflow.store import MemoryItemStore


NOW = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    """Clock pinned at NOW; tests advance it explicitly."""
    return FixedClock(NOW)


@pytest.fixture
def make_item():
    """
    Factory for VocabItems.

    `reviewed_ago` sets last_reviewed relative to NOW; created_at defaults
    to the same instant so the item is valid.
    """
    counter = {"n": 0}

    def _make(
        word=None,
        mastery=MasteryLevel.NEW,
        reviewed_ago=timedelta(days=2),
        created_ago=None,
        item_id=None,
        **fields,
    ):
        counter["n"] += 1
        last_reviewed = NOW - reviewed_ago
        created_at = NOW - created_ago if created_ago is not None else last_reviewed
        return VocabItem(
            id=item_id or f"item-{counter['n']}",
            word=word or f"word{counter['n']}",
            created_at=created_at,
            last_reviewed=last_reviewed,
            mastery_level=mastery,
            **fields,
        )

    return _make


@pytest.fixture
def store():
    return MemoryItemStore()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep tests independent of a developer's .env."""
    for name in (
        "TEST_MODE",
        "VOCABFLOW_STORE",
        "VOCABFLOW_DATA_PATH",
        "DATABASE_URL",
        "DAILY_QUOTA_SIZE",
        "OPENAI_API_KEY",
        "OPENAI_MODEL",
    ):
        monkeypatch.delenv(name, raising=False)
