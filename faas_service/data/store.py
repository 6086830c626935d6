"""Shared in-memory document store."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Callable

from faas_service.lib.ids import KeyGenerator
from faas_service.lib.rwlock import ReadWriteLock

_MISSING = object()


@dataclass(frozen=True)
class StoredRecord:
    """A key together with a private copy of its document."""

    key: str
    value: Any


@dataclass(frozen=True)
class StorePage:
    """Slice of the store plus the store size observed with it."""

    items: list[StoredRecord] = field(default_factory=list)
    total: int = 0


class DataStore:
    """Keyed mapping from record key to an opaque JSON document.

    Reads (``get``, ``list``, ``len``) share the lock; writes (``put``,
    ``delete``) hold it exclusively. Documents are copied on the way in and on
    the way out, so callers never alias stored state.
    """

    def __init__(self, key_factory: Callable[[], str] | None = None) -> None:
        self._records: dict[str, Any] = {}
        self._lock = ReadWriteLock()
        self._key_factory = key_factory or KeyGenerator()

    def put(self, value: Any, key: str | None = None) -> str:
        """Insert or replace a document and return the key it was stored under."""

        document = copy.deepcopy(value)
        with self._lock.write():
            if key is None:
                key = self._key_factory()
                while key in self._records:
                    key = self._key_factory()
            self._records[key] = document
        return key

    def get(self, key: str) -> StoredRecord | None:
        with self._lock.read():
            value = self._records.get(key, _MISSING)
        if value is _MISSING:
            return None
        # Stored documents are replaced wholesale, never mutated in place
        return StoredRecord(key=key, value=copy.deepcopy(value))

    def delete(self, key: str) -> bool:
        with self._lock.write():
            return self._records.pop(key, _MISSING) is not _MISSING

    def list(self, offset: int = 0, limit: int = 10) -> StorePage:
        """Return up to ``limit`` records starting at ``offset`` in insertion order."""

        with self._lock.read():
            total = len(self._records)
            window = list(islice(self._records.items(), offset, offset + limit))
        items = [StoredRecord(key=key, value=copy.deepcopy(value)) for key, value in window]
        return StorePage(items=items, total=total)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._records)
