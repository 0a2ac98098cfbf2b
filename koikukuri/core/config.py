"""
Configuration helpers for the site backend.

Exposes a frozen Settings object that reads environment variables (storage
paths, static mount, server address) so routers/services do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    site_title: str
    data_dir: Path
    public_dir: Path
    public_mount: str
    uploads_subdir: str
    templates_dir: Path
    host: str
    port: int
    log_level: str

    @property
    def uploads_dir(self) -> Path:
        return self.public_dir / self.uploads_subdir

    @property
    def uploads_url(self) -> str:
        return f"{self.public_mount}/{self.uploads_subdir}"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(name: str, default: Path) -> Path:
        value = (os.getenv(name) or "").strip()
        return Path(value).expanduser() if value else default

    mount = "/" + (os.getenv("PUBLIC_MOUNT") or "/public").strip().strip("/")
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        site_title=os.getenv("SITE_TITLE", "Koi-Kukuri Meta-Life"),
        data_dir=_path("DATA_DIR", PROJECT_ROOT / "data"),
        public_dir=_path("PUBLIC_DIR", PROJECT_ROOT / "public"),
        public_mount=mount.rstrip("/") or "/public",
        uploads_subdir=(os.getenv("UPLOADS_SUBDIR") or "uploads").strip().strip("/") or "uploads",
        templates_dir=_path("TEMPLATES_DIR", PROJECT_ROOT / "templates"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
