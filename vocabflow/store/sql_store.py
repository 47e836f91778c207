"""
SQL Item Store backed by SQLAlchemy.

Rows are read newest-first (descending seq). A row that fails validation
makes the whole collection load as empty, same as a corrupt JSON file.
Looking up that row with `get` raises StoreReadError instead of
reporting it as missing.
"""

from __future__ import annotations

import json
from datetime import timezone
from typing import Optional

from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from vocabflow.errors import StoreReadError, StoreWriteError
from vocabflow.schemas import VocabItem
from vocabflow.store import database
from vocabflow.store.base import ItemStore, LoadResult, parse_records
from vocabflow.store.models import VocabItemRecord


def _row_to_record(row: VocabItemRecord) -> dict:
    return {
        "id": row.id,
        "word": row.word,
        "userMeaning": row.user_meaning,
        "contextSentence": row.context_sentence,
        "notes": row.notes,
        "collocations": json.loads(row.collocations or "[]"),
        "dictionaryData": json.loads(row.dictionary_data) if row.dictionary_data else None,
        "createdAt": row.created_at,
        "lastReviewed": row.last_reviewed,
        "masteryLevel": row.mastery_level,
    }


def _apply_item(row: VocabItemRecord, item: VocabItem) -> None:
    record = item.to_record()
    row.word = item.word
    row.user_meaning = item.user_meaning
    row.context_sentence = item.context_sentence
    row.notes = item.notes
    row.collocations = json.dumps(record["collocations"], ensure_ascii=False)
    row.dictionary_data = (
        json.dumps(record["dictionaryData"], ensure_ascii=False)
        if record["dictionaryData"] is not None else None
    )
    # SQLite drops tzinfo, so always store UTC
    row.created_at = item.created_at.astimezone(timezone.utc)
    row.last_reviewed = item.last_reviewed.astimezone(timezone.utc)
    row.mastery_level = record["masteryLevel"]


class SqlItemStore(ItemStore):
    """
    Item Store persisted in a relational database.

    Args:
        engine: SQLAlchemy engine (defaults to the DATABASE_URL engine)
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine or database.get_engine()
        database.init_db(self.engine)
        self._session_factory = database.get_session_factory(self.engine)

    def load(self) -> LoadResult:
        session = self._session_factory()
        try:
            rows = session.query(VocabItemRecord).order_by(VocabItemRecord.seq.desc()).all()
            records = [_row_to_record(row) for row in rows]
        except json.JSONDecodeError as exc:
            return self._recovered(f"Invalid JSON column in vocab_items: {exc}")
        except SQLAlchemyError as exc:
            raise StoreReadError(f"Could not read vocab_items: {exc}") from exc
        finally:
            session.close()

        try:
            items = parse_records(records)
        except ValueError as exc:
            return self._recovered(f"Invalid row in vocab_items: {exc}")

        return LoadResult(items=items)

    def get(self, item_id: str) -> Optional[VocabItem]:
        session = self._session_factory()
        try:
            row = session.get(VocabItemRecord, item_id)
            if row is None:
                return None
            record = _row_to_record(row)
        except json.JSONDecodeError as exc:
            print(f"[ITEM STORE] Invalid JSON column for item {item_id}: {exc}")
            raise StoreReadError(f"Invalid JSON column for item {item_id}: {exc}") from exc
        except SQLAlchemyError as exc:
            raise StoreReadError(f"Could not read item {item_id}: {exc}") from exc
        finally:
            session.close()

        try:
            return VocabItem.model_validate(record)
        except ValidationError as exc:
            print(f"[ITEM STORE] Invalid row for item {item_id}: {exc}")
            raise StoreReadError(f"Invalid row for item {item_id}: {exc.error_count()} validation error(s)") from exc

    def upsert(self, item: VocabItem) -> None:
        session = self._session_factory()
        try:
            row = session.get(VocabItemRecord, item.id)
            if row is None:
                max_seq = session.query(func.max(VocabItemRecord.seq)).scalar()
                row = VocabItemRecord(id=item.id, seq=(max_seq or 0) + 1)
                session.add(row)
            _apply_item(row, item)
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise StoreWriteError(f"Could not save item {item.id}: {exc}") from exc
        finally:
            session.close()

    def delete(self, item_id: str) -> None:
        session = self._session_factory()
        try:
            session.query(VocabItemRecord).filter(VocabItemRecord.id == item_id).delete()
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise StoreWriteError(f"Could not delete item {item_id}: {exc}") from exc
        finally:
            session.close()

    def clear(self) -> None:
        session = self._session_factory()
        try:
            session.query(VocabItemRecord).delete()
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise StoreWriteError(f"Could not clear vocab_items: {exc}") from exc
        finally:
            session.close()

    def _recovered(self, error: str) -> LoadResult:
        print(f"[ITEM STORE] {error}. Treating the collection as empty.")
        return LoadResult(items=[], recovered=True, error=error)
