"""
Tests for library analytics.
"""
from datetime import timedelta

from vocabflow.analytics import build_library_summary, compute_added_per_day, compute_due_forecast
from vocabflow.schemas import MasteryLevel


def test_added_per_day_dense_index(make_item):
    items = [
        make_item(reviewed_ago=timedelta(days=3)),
        make_item(reviewed_ago=timedelta(days=3, hours=1)),
        make_item(reviewed_ago=timedelta(days=1)),
    ]

    series = compute_added_per_day(items)

    assert series.tolist() == [2, 0, 1]


def test_added_per_day_empty():
    assert compute_added_per_day([]).empty


def test_due_forecast(make_item, now):
    items = [
        # Overdue: counted today
        make_item(mastery=MasteryLevel.NEW, reviewed_ago=timedelta(days=4)),
        # Unknown level: counted today
        make_item(mastery="Expert"),
        # Learning reviewed yesterday: due in two days
        make_item(mastery=MasteryLevel.LEARNING, reviewed_ago=timedelta(days=1)),
        # Mastered reviewed today: due outside a 5-day window
        make_item(mastery=MasteryLevel.MASTERED, reviewed_ago=timedelta(hours=1)),
    ]

    series = compute_due_forecast(items, now, days=5)

    assert series.tolist() == [2, 0, 1, 0, 0]


def test_due_forecast_empty(now):
    assert compute_due_forecast([], now, days=3).tolist() == [0, 0, 0]


def test_library_summary(make_item, now):
    items = [
        make_item(mastery=MasteryLevel.NEW, reviewed_ago=timedelta(days=2)),
        make_item(mastery=MasteryLevel.LEARNING, reviewed_ago=timedelta(days=1)),
    ]

    summary = build_library_summary(items, now)

    assert summary.total == 2
    assert summary.due_now == 1
    assert summary.by_mastery == {"New": 1, "Learning": 1, "Mastered": 0}
    assert len(summary.due_forecast) == 7
