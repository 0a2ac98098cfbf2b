"""Read-time ordering for the public pages."""
from __future__ import annotations

from typing import Iterable


def _sort_key(record, field: str) -> str:
    value = record.get(field) if isinstance(record, dict) else None
    return value if isinstance(value, str) else ("" if value is None else str(value))


def sort_desc(records: Iterable[dict], field: str) -> list[dict]:
    """
    Return a new list ordered by ``field`` descending, compared as plain strings.

    Missing values count as "" and therefore come last. This is only a date
    ordering for zero padded ISO dates (YYYY-MM-DD); the input is not mutated.
    """
    return sorted(records, key=lambda record: _sort_key(record, field), reverse=True)
