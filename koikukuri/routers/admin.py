"""
Admin routes: create/update/delete events and news, swap the hero image.

Every POST answers with a 303 back to the matching section of /admin; a missing
record id is not reported.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, RedirectResponse

from koikukuri.routers.deps import site_service, templates
from koikukuri.services.uploads import Upload

router = APIRouter(prefix="/admin", tags=["admin"])


def _back(section: str) -> RedirectResponse:
    return RedirectResponse(f"/admin#{section}", status_code=303)


async def _read_upload(file: UploadFile | None) -> Optional[Upload]:
    # Browsers send an empty part with no filename for an untouched file input.
    if file is None or not file.filename:
        return None
    data = await file.read()
    return Upload(filename=file.filename, data=data)


@router.get("", response_class=HTMLResponse)
def admin_home(request: Request):
    context = {"request": request, **site_service(request).admin_view()}
    return templates(request).TemplateResponse(request, "admin.html", context)


# -------------------------- events --------------------------
@router.post("/events")
async def create_event(
    request: Request,
    title: str = Form(""),
    summary: str = Form(""),
    date: str = Form(""),
    url: str = Form(""),
    thumbnail: UploadFile | None = File(None),
):
    upload = await _read_upload(thumbnail)
    fields = {"title": title, "summary": summary, "date": date, "url": url}
    await run_in_threadpool(site_service(request).create_event, fields, upload)
    return _back("events")


@router.post("/events/{event_id}/update")
async def update_event(
    event_id: str,
    request: Request,
    title: str = Form(""),
    summary: str = Form(""),
    date: str = Form(""),
    url: str = Form(""),
    thumbnail: UploadFile | None = File(None),
):
    upload = await _read_upload(thumbnail)
    fields = {"title": title, "summary": summary, "date": date, "url": url}
    await run_in_threadpool(site_service(request).update_event, event_id, fields, upload)
    return _back("events")


@router.post("/events/{event_id}/delete")
def delete_event(event_id: str, request: Request):
    site_service(request).delete_event(event_id)
    return _back("events")


# -------------------------- news --------------------------
@router.post("/news")
def create_news(
    request: Request,
    title: str = Form(""),
    summary: str = Form(""),
    publishedAt: str = Form(""),
):
    site_service(request).create_news({"title": title, "summary": summary, "publishedAt": publishedAt})
    return _back("news")


@router.post("/news/{news_id}/update")
def update_news(
    news_id: str,
    request: Request,
    title: str = Form(""),
    summary: str = Form(""),
    publishedAt: str = Form(""),
):
    site_service(request).update_news(news_id, {"title": title, "summary": summary, "publishedAt": publishedAt})
    return _back("news")


@router.post("/news/{news_id}/delete")
def delete_news(news_id: str, request: Request):
    site_service(request).delete_news(news_id)
    return _back("news")


# -------------------------- home --------------------------
@router.post("/home-image")
async def upload_hero_image(request: Request, heroImage: UploadFile | None = File(None)):
    upload = await _read_upload(heroImage)
    await run_in_threadpool(site_service(request).set_hero_image, upload)
    return _back("home")


@router.post("/home-image/delete")
def delete_hero_image(request: Request):
    site_service(request).clear_hero_image()
    return _back("home")
