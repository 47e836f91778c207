"""
Tests for the SQL Item Store (in-memory SQLite).
"""
from datetime import timedelta

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from vocabflow.errors import StoreReadError, StoreWriteError
from vocabflow.schemas import DictionaryData, DictionaryMeaning, MasteryLevel
from vocabflow.store import SqlItemStore
from vocabflow.store.database import reset_db


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(engine):
    return SqlItemStore(engine)


def test_empty_database(sql_store):
    result = sql_store.load()
    assert result.items == []
    assert not result.recovered


def test_round_trip(sql_store, make_item):
    item = make_item(
        word="liminal",
        mastery=MasteryLevel.MASTERED,
        collocations=["liminal space"],
        dictionary_data=DictionaryData(
            phonetic="/ˈlɪm.ɪ.nəl/",
            audio_url="https://example.com/liminal.mp3",
            meanings=[DictionaryMeaning(part_of_speech="adjective", definition="at a threshold")],
        ),
    )
    sql_store.upsert(item)

    loaded = sql_store.get(item.id)

    assert loaded == item
    assert loaded.created_at.utcoffset() == timedelta(0)


def test_newest_first_and_replace_in_place(sql_store, make_item):
    a, b = make_item(word="a"), make_item(word="b")
    sql_store.upsert(a)
    sql_store.upsert(b)
    sql_store.upsert(a.model_copy(update={"mastery_level": MasteryLevel.LEARNING}))

    items = sql_store.get_all()

    assert [i.word for i in items] == ["b", "a"]
    assert items[1].mastery_level == MasteryLevel.LEARNING


def test_get_missing(sql_store):
    assert sql_store.get("nope") is None


def test_delete_and_clear(sql_store, make_item):
    a, b = make_item(), make_item()
    sql_store.upsert(a)
    sql_store.upsert(b)

    sql_store.delete(a.id)
    assert [i.id for i in sql_store.get_all()] == [b.id]

    sql_store.clear()
    assert sql_store.count() == 0


def test_corrupt_json_column_loads_empty(sql_store, engine, make_item):
    sql_store.upsert(make_item())
    with engine.begin() as conn:
        conn.execute(text("UPDATE vocab_items SET collocations = '{broken'"))

    result = sql_store.load()

    assert result.recovered
    assert result.items == []


def test_invalid_row_loads_empty(sql_store, engine, make_item):
    sql_store.upsert(make_item())
    with engine.begin() as conn:
        conn.execute(text("UPDATE vocab_items SET word = ''"))

    assert sql_store.load().recovered


def test_get_with_corrupt_json_column_raises(sql_store, engine, make_item):
    item = make_item()
    sql_store.upsert(item)
    with engine.begin() as conn:
        conn.execute(text("UPDATE vocab_items SET dictionary_data = '{broken'"))

    with pytest.raises(StoreReadError):
        sql_store.get(item.id)


def test_get_with_invalid_row_raises(sql_store, engine, make_item):
    item = make_item()
    sql_store.upsert(item)
    with engine.begin() as conn:
        conn.execute(text("UPDATE vocab_items SET word = ''"))

    with pytest.raises(StoreReadError):
        sql_store.get(item.id)


def test_write_failure_raises(sql_store, make_item, monkeypatch):
    def fail(self):
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr("sqlalchemy.orm.Session.commit", fail)

    with pytest.raises(StoreWriteError):
        sql_store.upsert(make_item())


def test_reset_db(sql_store, engine, make_item):
    sql_store.upsert(make_item())
    reset_db(engine)
    assert sql_store.count() == 0
