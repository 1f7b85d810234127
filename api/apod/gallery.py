"""Primary fetch with archive fallback.

The APOD API answers in one round trip but is rate limited (DEMO_KEY allows
a handful of calls per hour). Scraping costs 1 + N round trips and has no
limit, so it only runs when the API fails or returns no images.
"""
import logging
from typing import List, Optional, Protocol

import requests

from .errors import FetchError
from .ingest.apod_api import ApodApiClient
from .ingest.archive import ArchiveScraper, NoiseFilter
from .ingest.proxy import ProxyFetcher
from .models import GalleryState, Item, LOADING_MESSAGE
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

class GalleryView(Protocol):
    def loading(self) -> None: ...
    def show_items(self, items: List[Item]) -> None: ...
    def show_message(self, message: str) -> None: ...
    def done(self) -> None: ...

class ApodGallery:
    def __init__(self, api: ApodApiClient, archive: ArchiveScraper):
        self.api = api
        self.archive = archive

    @classmethod
    def from_settings(cls, cfg: Settings = default_settings, session=None) -> "ApodGallery":
        session = session or requests.Session()
        api = ApodApiClient(cfg.NASA_API_KEY, cfg.APOD_API_URL, session=session, timeout=cfg.HTTP_TIMEOUT)
        fetcher = ProxyFetcher(session, proxy_url=cfg.PROXY_URL, timeout=cfg.HTTP_TIMEOUT,
                               user_agent=cfg.USER_AGENT)
        archive = ArchiveScraper(fetcher, cfg.APOD_ARCHIVE_INDEX_URL, cfg.APOD_ARCHIVE_BASE_URL,
                                 NoiseFilter(cfg.NOISE_IMAGE_MARKERS))
        return cls(api, archive)

    def _primary(self, count: int) -> List[Item]:
        try:
            return self.api.fetch(count)
        except FetchError as e:
            logger.warning("%s", e)
            return []

    def fetch(self, count: int, view: Optional[GalleryView] = None) -> GalleryState:
        """Run one fetch-and-render cycle and return its outcome."""
        if view:
            view.loading()
        try:
            images = self._primary(count)
            if images:
                state = GalleryState.from_items(images, "api")
                logger.info("NASA APOD: %d items from API", len(images))
            else:
                logger.warning("Falling back to archive scraping (API error or no images).")
                archive_items = self.archive.fetch(count)
                if archive_items:
                    state = GalleryState.from_items(archive_items, "archive")
                else:
                    state = GalleryState.empty()

            if view:
                if state.items:
                    view.show_items(state.items)
                else:
                    view.show_message(state.message)
            return state
        except Exception:
            logger.exception("Error fetching APOD (API + archive fallback)")
            state = GalleryState.error()
            if view:
                view.show_message(state.message)
            return state
        finally:
            if view:
                view.done()

class LogView:
    """GalleryView that reports progress through the logger; used by the CLI."""

    def loading(self) -> None:
        logger.info(LOADING_MESSAGE)

    def show_items(self, items: List[Item]) -> None:
        for it in items:
            logger.info("%s  %s  %s", it.date or "----------", it.title, it.image_url)

    def show_message(self, message: str) -> None:
        logger.warning(message)

    def done(self) -> None:
        pass
