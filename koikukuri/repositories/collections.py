"""Typed record operations layered on the JSON document store."""
from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Mapping, Optional

from koikukuri.domain.records import as_text, clean_updates, new_id, normalize_fields
from koikukuri.repositories.json_storage import JsonDocumentStore

logger = logging.getLogger(__name__)


class CollectionRepository:
    """
    List-shaped document (events, news) addressed by record id.

    Mutations run load -> modify -> save under the store's per-document lock,
    so concurrent handlers in this process cannot lose each other's updates.
    Separate processes writing the same data root are not coordinated.
    """

    def __init__(
        self,
        store: JsonDocumentStore,
        name: str,
        fields: tuple[str, ...],
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        store.path_for(name)  # rejects invalid names early
        self.store = store
        self.name = name
        self.fields = fields
        self._new_id = id_factory

    def list(self) -> list[dict]:
        records = self.store.load(self.name, [])
        if not isinstance(records, list):
            logger.warning("Document %s is not a list; using an empty collection", self.name)
            return []
        return records

    def find_by_id(self, record_id: str) -> Optional[dict]:
        for record in self.list():
            if isinstance(record, dict) and record.get("id") == record_id:
                return record
        return None

    def add(self, fields: Mapping[str, Any] | None) -> dict:
        with self.store.lock_for(self.name):
            records = self.list()
            record = {"id": self._new_id(), **normalize_fields(fields, self.fields)}
            records.append(record)
            self.store.save(self.name, records)
        logger.info("Added %s record %s", self.name, record["id"])
        return record

    def update_by_id(
        self,
        record_id: str,
        fields: Mapping[str, Any] | None,
        extra: Optional[Callable[[dict], Mapping[str, Any]]] = None,
    ) -> Optional[dict]:
        """Merge provided fields into the record; fields not provided keep their value.

        ``extra`` is called with the current record only once it has been found,
        still under the document lock, and its result is merged last.
        Returns the updated record, or None when no record has ``record_id``.
        """
        with self.store.lock_for(self.name):
            records = self.list()
            index = next(
                (i for i, r in enumerate(records) if isinstance(r, dict) and r.get("id") == record_id),
                None,
            )
            if index is None:
                return None
            updates = dict(fields or {})
            if extra is not None:
                updates.update(extra(records[index]))
            merged = {**records[index], **clean_updates(updates, self.fields)}
            for name in self.fields:
                merged[name] = as_text(merged.get(name))
            records[index] = merged
            self.store.save(self.name, records)
        logger.info("Updated %s record %s", self.name, record_id)
        return merged

    def remove_by_id(self, record_id: str) -> bool:
        """Drop the record with ``record_id``. Returns False when nothing matched."""
        with self.store.lock_for(self.name):
            records = self.list()
            remaining = [r for r in records if not (isinstance(r, dict) and r.get("id") == record_id)]
            self.store.save(self.name, remaining)
        removed = len(remaining) != len(records)
        if removed:
            logger.info("Removed %s record %s", self.name, record_id)
        return removed


class SingletonRepository:
    """One-record document (home). Always yields a dict with every default key."""

    def __init__(self, store: JsonDocumentStore, name: str, default: Mapping[str, Any]) -> None:
        store.path_for(name)  # rejects invalid names early
        self.store = store
        self.name = name
        self.default = dict(default)

    def get(self) -> dict:
        record = self.store.load(self.name, self.default)
        if not isinstance(record, dict):
            logger.warning("Document %s is not an object; using defaults", self.name)
            return copy.deepcopy(self.default)
        for key, value in self.default.items():
            record.setdefault(key, copy.deepcopy(value))
        return record

    def set_field(self, field: str, value: Any) -> dict:
        with self.store.lock_for(self.name):
            record = self.get()
            record[field] = as_text(value)
            self.store.save(self.name, record)
        logger.info("Set %s.%s", self.name, field)
        return record
