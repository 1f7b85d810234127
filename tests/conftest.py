import pytest
import requests

from apod.gallery import ApodGallery
from apod.ingest.apod_api import ApodApiClient
from apod.ingest.archive import ArchiveScraper, NoiseFilter
from apod.ingest.proxy import ProxyFetcher

API_URL = "https://api.nasa.gov/planetary/apod"
INDEX_URL = "https://apod.nasa.gov/apod/archivepixFull.html"
BASE_URL = "https://apod.nasa.gov/apod/"

LONG_TEXT = "A spiral galaxy seen nearly face-on from a dark site in the southern sky."


class FakeResponse:
    def __init__(self, status_code=200, text="", payload=None):
        self.status_code = status_code
        self.text = text
        self._payload = payload

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """requests.Session stand-in answering from a url -> response/exception map."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, params=None, timeout=None, headers=None):
        self.calls.append((url, params))
        r = self.routes.get(url)
        if r is None:
            return FakeResponse(404, "Not Found")
        if isinstance(r, Exception):
            raise r
        return r

    def urls(self):
        return [u for u, _ in self.calls]


def listing_html(*hrefs):
    links = "\n".join(f'<a href="{h}">{h}</a><br>' for h in hrefs)
    return f"<html><body><h1>APOD Archive</h1>{links}</body></html>"


def daily_html(img_src="image/2301/galaxy.jpg", title="Spiral Galaxy", paragraphs=(LONG_TEXT,), head_title="APOD"):
    img = f'<a href="{img_src}"><img src="{img_src}" style="max-width:100%"></a>' if img_src is not None else ""
    bold = f"<b> {title} </b>" if title else ""
    paras = "\n".join(f"<p>{p}</p>" for p in paragraphs)
    return (f"<html><head><title>{head_title}</title></head><body>"
            f"<center><h1>Astronomy Picture of the Day</h1>{img}</center>"
            f"<center>{bold}</center>{paras}</body></html>")


def api_entry(n, media_type="image"):
    return {
        "date": f"2023-01-{n:02d}",
        "title": f"Entry {n}",
        "url": f"https://apod.nasa.gov/apod/image/2301/entry{n}_1024.jpg",
        "hdurl": f"https://apod.nasa.gov/apod/image/2301/entry{n}.jpg",
        "media_type": media_type,
        "explanation": f"Explanation for entry {n}.",
    }


def build_gallery(session):
    api = ApodApiClient("TEST_KEY", API_URL, session=session)
    archive = ArchiveScraper(ProxyFetcher(session), INDEX_URL, BASE_URL, NoiseFilter())
    return ApodGallery(api, archive)


@pytest.fixture
def archive_routes():
    """Listing with three daily pages; the middle one has no image."""
    return {
        INDEX_URL: FakeResponse(200, listing_html("ap230101.html", "ap230102.html", "ap230103.html")),
        BASE_URL + "ap230103.html": FakeResponse(200, daily_html(title="Third")),
        BASE_URL + "ap230102.html": FakeResponse(200, daily_html(img_src=None, title="Second")),
        BASE_URL + "ap230101.html": FakeResponse(200, daily_html(title="First")),
    }


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
