"""Store uploaded files under the public uploads directory and hand back their URL."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from koikukuri.domain.records import MillisecondIds

logger = logging.getLogger(__name__)

_UNSAFE_BASE = re.compile(r"[^A-Za-z0-9_-]")
_UNSAFE_EXT = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True)
class Upload:
    """Incoming file payload, detached from the web framework."""

    filename: str
    data: bytes


def safe_filename(original_name: str, stamp: int) -> str:
    """
    Build ``<stamp>-<base><ext>`` from a client supplied name.

    Directory parts are dropped and every character outside ``[A-Za-z0-9_-]``
    is removed from the base name, so the result can never escape the uploads
    directory. The extension keeps its dot and loses anything non-alphanumeric.
    """
    name = (original_name or "").replace("\\", "/").rsplit("/", 1)[-1]
    base, ext = os.path.splitext(name)
    safe_base = _UNSAFE_BASE.sub("", base)
    safe_ext = _UNSAFE_EXT.sub("", ext[1:])
    return f"{stamp}-{safe_base}" + (f".{safe_ext}" if safe_ext else "")


class UploadBinder:
    """Write upload bytes to disk and return a public reference path."""

    def __init__(
        self,
        uploads_dir: Path | str,
        url_prefix: str,
        stamp: Optional[Callable[[], int]] = None,
    ) -> None:
        self.uploads_dir = Path(uploads_dir)
        self.url_prefix = "/" + url_prefix.strip("/")
        self._stamp = stamp or MillisecondIds().next_ms
        self.uploads_dir.mkdir(parents=True, exist_ok=True)

    def store(self, upload: Upload) -> str:
        filename = safe_filename(upload.filename, self._stamp())
        dest = self.uploads_dir / filename
        dest.write_bytes(upload.data)
        logger.info("Stored upload %s (%d bytes)", filename, len(upload.data))
        return f"{self.url_prefix}/{filename}"
