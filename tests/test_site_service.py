"""
Site use cases wired to a temporary data root and uploads directory.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from koikukuri.repositories.json_storage import JsonDocumentStore  # noqa: E402
from koikukuri.services.site_service import SiteService  # noqa: E402
from koikukuri.services.uploads import Upload, UploadBinder  # noqa: E402


@pytest.fixture()
def site(tmp_path):
    store = JsonDocumentStore(tmp_path / "data")
    uploads = UploadBinder(tmp_path / "public" / "uploads", "/public/uploads")
    return SiteService(store, uploads)


def test_seeds_default_documents(site, tmp_path):
    data = tmp_path / "data"
    assert (data / "events.json").read_text(encoding="utf-8") == "[]"
    assert (data / "news.json").read_text(encoding="utf-8") == "[]"
    assert site.store.load("home", None) == {"heroImage": ""}


def test_seeding_keeps_existing_documents(tmp_path):
    store = JsonDocumentStore(tmp_path / "data")
    store.save("events", [{"id": "1", "title": "kept"}])
    SiteService(store, UploadBinder(tmp_path / "uploads", "/public/uploads"))
    assert store.load("events", []) == [{"id": "1", "title": "kept"}]


def test_event_lifecycle(site):
    assert site.events.list() == []
    event = site.create_event({"title": "Fair", "date": "2024-05-01"})
    assert event["id"]
    assert (event["summary"], event["url"], event["thumbnail"]) == ("", "", "")
    assert site.events.list() == [event]

    updated = site.update_event(event["id"], {"title": "Fair (updated)"})
    assert updated["id"] == event["id"]
    assert updated["title"] == "Fair (updated)"
    assert updated["thumbnail"] == ""

    assert site.delete_event(event["id"]) is True
    assert site.events.list() == []


def test_thumbnail_fallback_and_replacement(site, tmp_path):
    event = site.create_event({"title": "Fair"}, Upload("first.png", b"1"))
    first_ref = event["thumbnail"]
    assert first_ref.startswith("/public/uploads/") and first_ref.endswith("-first.png")

    kept = site.update_event(event["id"], {"title": "Fair", "thumbnail": ""})
    assert kept["thumbnail"] == first_ref

    replaced = site.update_event(event["id"], {"title": "Fair"}, Upload("second.png", b"2"))
    assert replaced["thumbnail"].endswith("-second.png")
    # the old file is left in place
    assert (tmp_path / "public" / "uploads" / first_ref.rsplit("/", 1)[-1]).exists()


def test_update_missing_event_writes_no_upload(site, tmp_path):
    assert site.update_event("nope", {"title": "x"}, Upload("x.png", b"x")) is None
    assert list((tmp_path / "public" / "uploads").iterdir()) == []


def test_news_lifecycle(site):
    item = site.create_news({"title": "Opening", "publishedAt": "2024-04-01"})
    assert item["summary"] == ""
    assert site.update_news(item["id"], {"title": "Opening!", "summary": "", "publishedAt": "2024-04-02"})["title"] == "Opening!"
    assert site.update_news("missing", {"title": "x"}) is None
    assert site.delete_news(item["id"]) is True
    assert site.delete_news(item["id"]) is False
    assert site.news.list() == []


def test_hero_image_set_and_clear(site, tmp_path):
    assert site.set_hero_image(None) == {"heroImage": ""}
    home = site.set_hero_image(Upload("hero image.jpg", b"jpg"))
    assert home["heroImage"].endswith("-heroimage.jpg")
    stored = tmp_path / "public" / "uploads" / home["heroImage"].rsplit("/", 1)[-1]
    assert site.clear_hero_image() == {"heroImage": ""}
    assert stored.exists()


def test_public_view_is_sorted_admin_view_is_not(site):
    site.create_event({"title": "old", "date": "2023-12-31"})
    site.create_event({"title": "undated"})
    site.create_event({"title": "new", "date": "2024-01-01"})
    site.create_news({"title": "n1", "publishedAt": "2024-01-01"})
    site.create_news({"title": "n2", "publishedAt": "2024-02-01"})

    public = site.public_view()
    assert [e["title"] for e in public["events"]] == ["new", "old", "undated"]
    assert [n["title"] for n in public["news"]] == ["n2", "n1"]
    assert public["home"] == {"heroImage": ""}

    admin = site.admin_view()
    assert [e["title"] for e in admin["events"]] == ["old", "undated", "new"]


def test_thumbnail_is_written_under_events_lock(site, monkeypatch):
    event = site.create_event({"title": "Fair"})
    real_store = site.uploads.store
    held = []

    def store_and_check(upload):
        held.append(site.store.lock_for("events").locked())
        return real_store(upload)

    monkeypatch.setattr(site.uploads, "store", store_and_check)
    updated = site.update_event(event["id"], {"title": "Fair"}, Upload("a.png", b"1"))
    assert held == [True]
    assert updated["thumbnail"].endswith("-a.png")
