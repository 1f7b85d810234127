import logging
from typing import Any, Dict, List

import requests

from ..errors import ApiError
from ..models import Item, PLACEHOLDER_TITLE

logger = logging.getLogger(__name__)

API = "https://api.nasa.gov/planetary/apod"

def _as_entries(data: Any) -> List[Dict[str, Any]]:
    # count=1 and date queries answer with a bare object
    entries = data if isinstance(data, list) else [data]
    return [e for e in entries if isinstance(e, dict)]

def normalize_entry(d: Dict[str, Any]) -> Item:
    return Item(
        image_url=d.get("url") or d.get("hdurl") or "",
        title=d.get("title") or PLACEHOLDER_TITLE,
        date=d.get("date") or "",
        explanation=d.get("explanation") or "",
        hd_url=d.get("hdurl") or "",
        media_type=d.get("media_type") or "",
    )

def image_items(data: Any) -> List[Item]:
    """Keep image-typed entries that carry a usable URL, in API order."""
    out = []
    for d in _as_entries(data):
        if d.get("media_type") != "image":
            continue
        it = normalize_entry(d)
        if it.renderable:
            out.append(it)
    return out

class ApodApiClient:
    def __init__(self, api_key: str, endpoint: str = API, session=None, timeout: float = 30.0):
        self.api_key = api_key
        self.endpoint = endpoint
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch(self, count: int) -> List[Item]:
        """
        Request `count` random entries and return the image ones.

        Raises ApiError on a non-success status, a transport failure or a
        payload that is not JSON. An empty list means the API answered but
        had no images (e.g. only videos).
        """
        params = {"api_key": self.api_key, "count": count}
        try:
            r = self.session.get(self.endpoint, params=params, timeout=self.timeout,
                                 headers={"Accept": "application/json"})
        except requests.RequestException as e:
            raise ApiError(f"NASA API request failed: {e}", url=self.endpoint) from e
        if not r.ok:
            raise ApiError(f"NASA API responded with status {r.status_code}",
                           url=self.endpoint, status_code=r.status_code)
        try:
            data = r.json()
        except ValueError as e:
            raise ApiError("NASA API returned a non-JSON body", url=self.endpoint,
                           status_code=r.status_code) from e

        items = image_items(data)
        logger.debug("NASA API: %d entries, %d images", len(_as_entries(data)), len(items))
        return items
