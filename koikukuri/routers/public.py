from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from koikukuri.routers.deps import site_service, templates

router = APIRouter(prefix="", tags=["public"])


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    context = {"request": request, **site_service(request).public_view()}
    return templates(request).TemplateResponse(request, "index.html", context)
