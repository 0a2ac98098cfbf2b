"""ASGI entry point: ``uvicorn koikukuri.app_factory:app``."""
from koikukuri.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
