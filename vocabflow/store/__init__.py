"""
Item Store - authoritative collection of vocabulary items.

Backends:
- MemoryItemStore: process memory (tests, scratch sessions)
- JsonItemStore: one JSON file (default)
- SqlItemStore: SQLAlchemy database (VOCABFLOW_STORE=sql)

Quick start:
    from vocabflow.store import get_store

    store = get_store()
    store.upsert(item)
    items = store.get_all()
"""

from __future__ import annotations

from typing import Optional

from vocabflow import config
from vocabflow.store.base import ItemStore, LoadResult, MemoryItemStore
from vocabflow.store.json_store import JsonItemStore
from vocabflow.store.sql_store import SqlItemStore


# Global store (reused across requests)
_store: Optional[ItemStore] = None


def get_store() -> ItemStore:
    """
    Get the process-wide Item Store selected by VOCABFLOW_STORE.

    Created on first use and reused afterwards.
    """
    global _store

    if _store is not None:
        return _store

    backend = config.get_store_backend()
    if backend == "sql":
        _store = SqlItemStore()
    else:
        _store = JsonItemStore(config.get_data_path())

    print(f"[ITEM STORE] Using {backend} backend")
    return _store


def reset_store() -> None:
    """Forget the cached store so the next get_store() re-reads configuration."""
    global _store
    _store = None


__all__ = [
    "ItemStore",
    "LoadResult",
    "MemoryItemStore",
    "JsonItemStore",
    "SqlItemStore",
    "get_store",
    "reset_store",
]
