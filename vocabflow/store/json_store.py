"""
JSON file Item Store.

The whole collection is one JSON array of records (camelCase keys, ISO
timestamps), newest first. Corrupt files (bad encoding, bad JSON, invalid
records) are treated as an empty collection and reported through
LoadResult. An I/O failure while reading raises StoreReadError instead,
so a transient error never looks like an empty library.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Union

from vocabflow.errors import StoreReadError, StoreWriteError
from vocabflow.schemas import VocabItem
from vocabflow.store.base import ItemStore, LoadResult, insert_or_replace, parse_records


class JsonItemStore(ItemStore):
    """
    Item Store persisted to a single JSON file.

    Args:
        path: Location of the data file (created on first write)
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> LoadResult:
        if not self.path.exists():
            return LoadResult()

        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            return self._recovered(f"Invalid UTF-8 in {self.path}: {exc}")
        except OSError as exc:
            print(f"[ITEM STORE] Could not read {self.path}: {exc}")
            raise StoreReadError(f"Could not read {self.path}: {exc}") from exc

        if not raw.strip():
            return LoadResult()

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as exc:
            return self._recovered(f"Invalid JSON in {self.path}: {exc}")

        if not isinstance(records, list):
            return self._recovered(f"Expected a JSON array in {self.path}, got {type(records).__name__}")

        try:
            items = parse_records(records)
        except ValueError as exc:
            return self._recovered(f"Invalid record in {self.path}: {exc}")

        return LoadResult(items=items)

    def upsert(self, item: VocabItem) -> None:
        self._write(insert_or_replace(self.get_all(), item))

    def delete(self, item_id: str) -> None:
        items = self.get_all()
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) != len(items):
            self._write(remaining)

    def clear(self) -> None:
        self._write([])

    # ---- Internals ----

    def _recovered(self, error: str) -> LoadResult:
        print(f"[ITEM STORE] {error}. Treating the collection as empty.")
        return LoadResult(items=[], recovered=True, error=error)

    def _write(self, items: list[VocabItem]) -> None:
        """Write atomically: temp file in the same directory, then replace."""
        payload = json.dumps([item.to_record() for item in items], ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                dir=self.path.parent,
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.remove(tmp_name)
                raise
        except OSError as exc:
            raise StoreWriteError(f"Could not write {self.path}: {exc}") from exc
