#!/usr/bin/env python3
"""
Run the site with uvicorn.

Usage:
  python scripts/serve.py [--host 0.0.0.0] [--port 3000] [--reload]
"""
from __future__ import annotations

import argparse
import sys

import uvicorn

from koikukuri.core.config import get_settings
from koikukuri.core.logger import setup_logger


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Serve the Koi-Kukuri site")
    ap.add_argument("--host", default=settings.host, help=f"bind address (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"TCP port (default: {settings.port})")
    ap.add_argument("--reload", action="store_true", help="reload on code changes (dev)")
    args = ap.parse_args()

    logger = setup_logger("koikukuri", settings.log_level)
    logger.info("%s running at http://%s:%s", settings.site_title, args.host, args.port)
    uvicorn.run(
        "koikukuri.app_factory:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:  # pragma: no cover - CLI
        sys.exit(0)
