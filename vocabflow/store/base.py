"""
Item Store interface and in-memory backend.

The store holds the authoritative set of vocabulary items. Order is
newest-first: a new id is inserted at the front, an existing id is
replaced in place.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Optional

from pydantic import ValidationError

from vocabflow.errors import StoreReadError
from vocabflow.schemas import VocabItem


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of reading the stored collection.

    `recovered` is True when stored data was unreadable and the collection
    was treated as empty; `error` then describes what was wrong.
    """
    items: list[VocabItem] = field(default_factory=list)
    recovered: bool = False
    error: Optional[str] = None


def parse_records(records: Iterable[dict]) -> list[VocabItem]:
    """
    Validate raw records into VocabItems.

    Raises:
        ValueError: If any record fails validation
    """
    items: list[VocabItem] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"Record {index} is not an object")
        try:
            item = VocabItem.model_validate(record)
        except ValidationError as exc:
            raise ValueError(f"Record {index} is invalid: {exc.error_count()} validation error(s)") from exc
        if item.id in seen:
            print(f"[ITEM STORE] Duplicate id {item.id} at record {index}, keeping the first copy")
            continue
        seen.add(item.id)
        items.append(item)
    return items


def insert_or_replace(items: list[VocabItem], item: VocabItem) -> list[VocabItem]:
    """Return a new list with `item` replacing its id, or prepended if unseen."""
    updated = list(items)
    for index, existing in enumerate(updated):
        if existing.id == item.id:
            updated[index] = item
            return updated
    updated.insert(0, item)
    return updated


class ItemStore(ABC):
    """
    Abstract Item Store.

    Subclasses implement load/upsert/delete/clear. Reads return copies, so
    callers can never mutate stored state by accident.
    """

    @abstractmethod
    def load(self) -> LoadResult:
        """Read the whole collection, recovering from corrupt data."""

    @abstractmethod
    def upsert(self, item: VocabItem) -> None:
        """Insert if the id is unseen, else replace the stored record."""

    @abstractmethod
    def delete(self, item_id: str) -> None:
        """Remove an item. Unknown ids are ignored."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every item."""

    def get_all(self) -> list[VocabItem]:
        return self.load().items

    def get(self, item_id: str) -> Optional[VocabItem]:
        """
        Look up one item. None means the item is not stored.

        Raises:
            StoreReadError: If the stored data could not be read, so a
                missing item can never be confused with unreadable data
        """
        result = self.load()
        if result.recovered:
            raise StoreReadError(f"Cannot look up item {item_id}: {result.error}")
        for item in result.items:
            if item.id == item_id:
                return item
        return None

    def count(self) -> int:
        return len(self.get_all())


class MemoryItemStore(ItemStore):
    """Item Store kept in process memory."""

    def __init__(self, items: Optional[Iterable[VocabItem]] = None):
        self._items: list[VocabItem] = [item.model_copy(deep=True) for item in (items or [])]

    def load(self) -> LoadResult:
        return LoadResult(items=[item.model_copy(deep=True) for item in self._items])

    def upsert(self, item: VocabItem) -> None:
        self._items = insert_or_replace(self._items, item.model_copy(deep=True))

    def delete(self, item_id: str) -> None:
        self._items = [item for item in self._items if item.id != item_id]

    def clear(self) -> None:
        self._items = []
