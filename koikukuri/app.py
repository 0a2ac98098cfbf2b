from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from koikukuri.core.config import Settings, get_settings
from koikukuri.core.logger import setup_logger
from koikukuri.routers import admin as admin_router
from koikukuri.routers import public as public_router
from koikukuri.services.site_service import SiteService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the site: seed the data root, mount the public directory, include routers."""
    settings = settings or get_settings()
    setup_logger("koikukuri", settings.log_level)

    site = SiteService.from_settings(settings)

    app = FastAPI(title=settings.site_title)
    app.state.settings = settings
    app.state.site = site
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))
    app.state.templates.env.globals["site_title"] = settings.site_title

    app.mount(settings.public_mount, StaticFiles(directory=str(settings.public_dir)), name="public")
    app.include_router(public_router.router)
    app.include_router(admin_router.router)

    logger.info("Data root %s, uploads served from %s", settings.data_dir, settings.uploads_url)
    return app
