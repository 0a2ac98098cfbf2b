"""Record shapes and identifier rules for the site collections."""
from __future__ import annotations

import threading
import time
from typing import Any, Iterable, Mapping

EVENT_FIELDS = ("title", "summary", "date", "url", "thumbnail")
NEWS_FIELDS = ("title", "summary", "publishedAt")
HOME_DEFAULT = {"heroImage": ""}


def as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def normalize_fields(fields: Mapping[str, Any] | None, names: Iterable[str]) -> dict:
    """Return every declared field as a string; absent or None becomes ""."""
    fields = fields or {}
    return {name: as_text(fields.get(name)) for name in names}


def clean_updates(fields: Mapping[str, Any] | None, names: Iterable[str]) -> dict:
    """Keep only declared fields that were actually provided, as strings."""
    fields = fields or {}
    return {name: as_text(fields[name]) for name in names if name in fields}


class MillisecondIds:
    """Issue decimal millisecond timestamps, never repeating within a process."""

    def __init__(self, clock=time.time) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_ms(self) -> int:
        with self._lock:
            now = int(self._clock() * 1000)
            if now <= self._last:
                now = self._last + 1
            self._last = now
            return now

    def __call__(self) -> str:
        return str(self.next_ms())


new_id = MillisecondIds()
