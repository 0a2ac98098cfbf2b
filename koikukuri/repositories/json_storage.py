"""
JSON document store.

Each logical document name maps 1:1 to ``<root>/<name>.json``. Reads never
raise: a missing or unreadable document yields the caller's default. Writes
overwrite the whole file and let I/O errors propagate.
"""

from __future__ import annotations

import copy
import json
import logging
import re
import threading
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DOCUMENT_NAME = re.compile(r"[A-Za-z0-9_-]+")


class JsonDocumentStore:
    """Load/save named JSON values under a fixed storage root."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def path_for(self, name: str) -> Path:
        if not DOCUMENT_NAME.fullmatch(name or ""):
            raise ValueError(f"invalid document name: {name!r}")
        return self.root / f"{name}.json"

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def load(self, name: str, default: Any) -> Any:
        path = self.path_for(name)
        if not path.exists():
            return copy.deepcopy(default)
        try:
            text = path.read_text(encoding="utf-8")
            value = json.loads(text) if text.strip() else None
        except (OSError, ValueError, RecursionError) as exc:
            logger.warning("Failed to read JSON document %s (%s): %s", name, path, exc)
            return copy.deepcopy(default)
        if value is None:
            return copy.deepcopy(default)
        return value

    def save(self, name: str, value: Any) -> None:
        path = self.path_for(name)
        path.write_text(json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8")

    def ensure(self, name: str, default: Any) -> bool:
        """Write ``default`` if the document does not exist yet. Returns True when seeded."""
        if self.exists(name):
            return False
        self.save(name, default)
        logger.info("Seeded document %s", name)
        return True

    def lock_for(self, name: str) -> threading.Lock:
        """Per-document lock guarding load -> mutate -> save sequences."""
        with self._locks_guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.Lock()
            return lock
