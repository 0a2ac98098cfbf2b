from __future__ import annotations

from fastapi import Request

from koikukuri.services.site_service import SiteService


def site_service(request: Request) -> SiteService:
    site = getattr(getattr(request.app, "state", None), "site", None)
    if site is None:
        raise RuntimeError("SiteService not configured")
    return site


def templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")
