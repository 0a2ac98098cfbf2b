"""Site use cases: public/admin views and the admin mutations."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from koikukuri.core.config import Settings
from koikukuri.domain.records import EVENT_FIELDS, HOME_DEFAULT, NEWS_FIELDS
from koikukuri.repositories.collections import CollectionRepository, SingletonRepository
from koikukuri.repositories.json_storage import JsonDocumentStore
from koikukuri.services.presentation import sort_desc
from koikukuri.services.uploads import Upload, UploadBinder

logger = logging.getLogger(__name__)

EVENTS = "events"
NEWS = "news"
HOME = "home"


class SiteService:
    """Owns the document store for one data root and exposes the site operations."""

    def __init__(self, store: JsonDocumentStore, uploads: UploadBinder) -> None:
        self.store = store
        self.uploads = uploads
        self.events = CollectionRepository(store, EVENTS, EVENT_FIELDS)
        self.news = CollectionRepository(store, NEWS, NEWS_FIELDS)
        self.home = SingletonRepository(store, HOME, HOME_DEFAULT)
        self.seed()

    @classmethod
    def from_settings(cls, settings: Settings) -> "SiteService":
        settings.public_dir.mkdir(parents=True, exist_ok=True)
        store = JsonDocumentStore(settings.data_dir)
        uploads = UploadBinder(settings.uploads_dir, settings.uploads_url)
        return cls(store, uploads)

    def seed(self) -> None:
        self.store.ensure(EVENTS, [])
        self.store.ensure(NEWS, [])
        self.store.ensure(HOME, dict(HOME_DEFAULT))

    # -------------------------- views --------------------------
    def public_view(self) -> dict:
        return {
            "events": sort_desc(self.events.list(), "date"),
            "news": sort_desc(self.news.list(), "publishedAt"),
            "home": self.home.get(),
        }

    def admin_view(self) -> dict:
        return {
            "events": self.events.list(),
            "news": self.news.list(),
            "home": self.home.get(),
        }

    # -------------------------- events --------------------------
    def _with_thumbnail(self, fields: Mapping[str, Any], upload: Optional[Upload]) -> dict:
        values = dict(fields)
        values.pop("thumbnail", None)
        if upload is not None:
            values["thumbnail"] = self.uploads.store(upload)
        return values

    def create_event(self, fields: Mapping[str, Any], upload: Optional[Upload] = None) -> dict:
        return self.events.add(self._with_thumbnail(fields, upload))

    def update_event(
        self, event_id: str, fields: Mapping[str, Any], upload: Optional[Upload] = None
    ) -> Optional[dict]:
        values = self._with_thumbnail(fields, None)
        if upload is None:
            return self.events.update_by_id(event_id, values)
        # The file is only written once the record is found, under the events lock.
        return self.events.update_by_id(
            event_id, values, extra=lambda current: {"thumbnail": self.uploads.store(upload)}
        )

    def delete_event(self, event_id: str) -> bool:
        return self.events.remove_by_id(event_id)

    # -------------------------- news --------------------------
    def create_news(self, fields: Mapping[str, Any]) -> dict:
        return self.news.add(fields)

    def update_news(self, news_id: str, fields: Mapping[str, Any]) -> Optional[dict]:
        return self.news.update_by_id(news_id, fields)

    def delete_news(self, news_id: str) -> bool:
        return self.news.remove_by_id(news_id)

    # -------------------------- home --------------------------
    def set_hero_image(self, upload: Optional[Upload]) -> dict:
        if upload is None:
            return self.home.get()
        return self.home.set_field("heroImage", self.uploads.store(upload))

    def clear_hero_image(self) -> dict:
        # The previous file stays in the uploads directory.
        return self.home.set_field("heroImage", "")
