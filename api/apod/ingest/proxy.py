import logging
from urllib.parse import quote

import requests

from ..errors import FetchError

logger = logging.getLogger(__name__)

class ProxyFetcher:
    """
    Fetch the raw text body of a URL, optionally through a pass-through proxy.

    - `proxy_url` is a prefix the URL-encoded target is appended to
      (AllOrigins style: "https://api.allorigins.win/raw?url=").
    - An empty `proxy_url` fetches the target directly.
    - Any transport error or non-2xx status raises FetchError.
    """

    def __init__(self, session=None, proxy_url: str = "", timeout: float = 30.0, user_agent: str | None = None):
        self.session = session or requests.Session()
        self.proxy_url = proxy_url or ""
        self.timeout = timeout
        self.headers = {"Accept": "text/html,application/xhtml+xml,*/*;q=0.8"}
        if user_agent:
            self.headers["User-Agent"] = user_agent

    def target_for(self, url: str) -> str:
        if not self.proxy_url:
            return url
        return f"{self.proxy_url}{quote(url, safe='')}"

    def __call__(self, url: str) -> str:
        target = self.target_for(url)
        try:
            r = self.session.get(target, timeout=self.timeout, headers=self.headers)
        except requests.RequestException as e:
            raise FetchError(f"Proxy fetch failed: {e}", url=url) from e
        if not r.ok:
            raise FetchError(f"Proxy fetch failed: {r.status_code}", url=url, status_code=r.status_code)
        logger.debug("fetched %s (%d chars)", url, len(r.text))
        return r.text
