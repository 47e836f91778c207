"""
Tests for the review session state machine.
"""
from datetime import timedelta

import pytest

from vocabflow.errors import SessionStateError, StoreReadError, StoreWriteError
from vocabflow.library import edit_item
from vocabflow.review_session import ReviewSession, SessionState
from vocabflow.scheduling import get_due_items
from vocabflow.schemas import MasteryLevel
from vocabflow.session_builder import create_session
from vocabflow.store import JsonItemStore, MemoryItemStore


class FlakyStore(MemoryItemStore):
    """Memory store whose writes fail while `fail_writes` is set."""

    def __init__(self, items=None):
        super().__init__(items)
        self.fail_writes = False

    def upsert(self, item):
        if self.fail_writes:
            raise StoreWriteError("disk full")
        super().upsert(item)


class TestTransitions:
    def test_starts_awaiting_reveal(self, make_item, store, clock):
        session = ReviewSession([make_item()], store, clock)
        assert session.state == SessionState.AWAITING_REVEAL
        assert session.position == 0

    def test_reveal_is_idempotent(self, make_item, store, clock):
        session = ReviewSession([make_item()], store, clock)
        session.reveal()
        session.reveal()
        assert session.state == SessionState.REVEALED
        assert session.position == 0

    def test_outcome_before_reveal_rejected(self, make_item, store, clock):
        item = make_item()
        store.upsert(item)
        session = ReviewSession([item], store, clock)

        with pytest.raises(SessionStateError):
            session.record_outcome(True)

        assert store.get(item.id).mastery_level == MasteryLevel.NEW
        assert session.state == SessionState.AWAITING_REVEAL

    def test_complete_rejects_everything(self, store, clock):
        session = ReviewSession([], store, clock)
        assert session.is_complete
        with pytest.raises(SessionStateError):
            session.reveal()
        with pytest.raises(SessionStateError):
            session.record_outcome(False)

    def test_walks_queue_to_completion(self, make_item, store, clock):
        items = [make_item(), make_item()]
        for item in items:
            store.upsert(item)
        session = ReviewSession(items, store, clock)

        session.reveal()
        session.record_outcome(True)
        assert session.state == SessionState.AWAITING_REVEAL
        assert session.current_item.id == items[1].id

        session.reveal()
        session.record_outcome(False)
        assert session.is_complete
        assert session.current_item is None
        assert session.reviewed_count == 2
        assert session.remembered_count == 1
        assert session.accuracy == 0.5


class TestPersistence:
    def test_new_item_remembered_becomes_learning(self, make_item, clock):
        item = make_item(word="serendipity", mastery=MasteryLevel.NEW, reviewed_ago=timedelta(days=2))
        store = MemoryItemStore([item])

        session = create_session(store, clock=clock)
        session.reveal()
        updated = session.record_outcome(remembered=True)

        stored = store.get(item.id)
        assert updated == stored
        assert stored.mastery_level == MasteryLevel.LEARNING
        assert stored.last_reviewed == clock.now()
        assert session.is_complete
        assert get_due_items(store.get_all(), clock.now()) == []

    def test_forgot_mastered_drops_to_learning(self, make_item, clock):
        item = make_item(mastery=MasteryLevel.MASTERED, reviewed_ago=timedelta(days=8))
        store = MemoryItemStore([item])

        session = create_session(store, clock=clock)
        session.reveal()
        session.record_outcome(remembered=False)

        assert store.get(item.id).mastery_level == MasteryLevel.LEARNING

    def test_outcome_written_before_advancing(self, make_item, clock):
        a, b = make_item(), make_item()
        store = MemoryItemStore([a, b])
        session = ReviewSession([a, b], store, clock)

        session.reveal()
        session.record_outcome(True)

        # Abandoning now keeps the first outcome and leaves the second untouched
        assert store.get(a.id).mastery_level == MasteryLevel.LEARNING
        assert store.get(b.id).mastery_level == MasteryLevel.NEW
        assert store.get(b.id).last_reviewed == b.last_reviewed

    def test_write_failure_holds_position(self, make_item, clock):
        item = make_item()
        store = FlakyStore([item])
        session = ReviewSession([item], store, clock)
        session.reveal()

        store.fail_writes = True
        with pytest.raises(StoreWriteError):
            session.record_outcome(True)

        assert session.state == SessionState.REVEALED
        assert session.position == 0
        assert session.reviewed_count == 0
        assert store.get(item.id).mastery_level == MasteryLevel.NEW

        store.fail_writes = False
        session.record_outcome(True)
        assert session.is_complete
        assert store.get(item.id).mastery_level == MasteryLevel.LEARNING

    def test_item_deleted_mid_session_is_not_resurrected(self, make_item, clock):
        a, b = make_item(), make_item()
        store = MemoryItemStore([a, b])
        session = ReviewSession([a, b], store, clock)

        store.delete(a.id)
        session.reveal()
        session.record_outcome(True)

        assert store.get(a.id) is None
        assert store.count() == 1
        assert session.current_item.id == b.id

    def test_content_edits_during_session_are_kept(self, make_item, clock):
        item = make_item(word="ephemeral", user_meaning="short")
        store = MemoryItemStore([item])
        session = ReviewSession([item], store, clock)

        store.upsert(edit_item(item, user_meaning="lasting a very short time"))
        session.reveal()
        session.record_outcome(True)

        stored = store.get(item.id)
        assert stored.user_meaning == "lasting a very short time"
        assert stored.mastery_level == MasteryLevel.LEARNING

    def test_last_reviewed_never_before_created_at(self, make_item, clock):
        # Created "in the future" relative to a lagging clock
        item = make_item(reviewed_ago=-timedelta(hours=1))
        store = MemoryItemStore([item])
        session = ReviewSession([item], store, clock)

        session.reveal()
        updated = session.record_outcome(False)

        assert updated.last_reviewed == item.created_at

    def test_unknown_level_reviewed_becomes_learning(self, make_item, clock):
        item = make_item(mastery="Expert")
        store = MemoryItemStore([item])
        session = create_session(store, clock=clock)

        session.reveal()
        session.record_outcome(True)

        assert store.get(item.id).mastery_level == MasteryLevel.LEARNING

    def test_session_copies_are_isolated(self, make_item, clock):
        item = make_item()
        store = MemoryItemStore([item])
        session = ReviewSession([item], store, clock)
        session.reveal()
        session.record_outcome(True)

        assert session.items[0].mastery_level == MasteryLevel.NEW


class TestReadFailure:
    def test_unreadable_store_holds_position(self, make_item, clock, tmp_path, monkeypatch):
        item = make_item()
        store = JsonItemStore(tmp_path / "data.json")
        store.upsert(item)
        session = ReviewSession([item], store, clock)
        session.reveal()

        def fail(*args, **kwargs):
            raise OSError("device not ready")

        with monkeypatch.context() as patch:
            patch.setattr("pathlib.Path.read_text", fail)
            with pytest.raises(StoreReadError):
                session.record_outcome(True)

        assert session.state == SessionState.REVEALED
        assert session.position == 0
        assert session.reviewed_count == 0

        session.record_outcome(True)
        assert session.is_complete
        assert store.get(item.id).mastery_level == MasteryLevel.LEARNING

    def test_data_corrupted_mid_session_is_not_treated_as_deleted(self, make_item, clock, tmp_path):
        path = tmp_path / "data.json"
        item = make_item()
        store = JsonItemStore(path)
        store.upsert(item)
        session = ReviewSession([item], store, clock)
        session.reveal()

        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StoreReadError):
            session.record_outcome(False)
        assert session.state == SessionState.REVEALED
        assert session.position == 0
