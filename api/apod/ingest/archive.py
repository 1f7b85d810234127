import logging
import re
from typing import Callable, Iterable, List, Optional
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

from ..models import Item, PLACEHOLDER_TITLE

logger = logging.getLogger(__name__)

ARCHIVE_INDEX_URL = "https://apod.nasa.gov/apod/archivepixFull.html"
ARCHIVE_BASE_URL = "https://apod.nasa.gov/apod/"

DAILY_HREF_RE = re.compile(r"ap\d+\.html", re.ASCII)
DAILY_FILENAME_RE = re.compile(r"^ap(\d{2})(\d{2})(\d{2})\.html$", re.ASCII)

# Paragraphs this short are captions or navigation, not the explanation
MIN_EXPLANATION_CHARS = 30

DEFAULT_NOISE_MARKERS = ("logo", "icon", "spacer")

class NoiseFilter:
    """
    Heuristic for site-chrome images (logos, icons, spacers).

    Matches when any marker is a case-insensitive substring of the image src.
    The marker list is a guess about the archive's markup; override it through
    settings.NOISE_IMAGE_MARKERS rather than editing the parser.
    """

    def __init__(self, markers: Iterable[str] = DEFAULT_NOISE_MARKERS):
        self.markers = tuple(m for m in markers if m)
        self._re = (re.compile("|".join(re.escape(m) for m in self.markers), re.IGNORECASE)
                    if self.markers else None)

    def __call__(self, src: str) -> bool:
        if not self._re:
            return False
        return bool(self._re.search(src or ""))

def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")

def parse_archive_list(html: str, base_url: str = ARCHIVE_BASE_URL) -> List[str]:
    """Absolute daily page URLs from an archive listing, newest first."""
    seen = set()
    hrefs = []
    for a in _soup(html).find_all("a"):
        h = a.get("href")
        if not h or not DAILY_HREF_RE.fullmatch(h):
            continue
        if h in seen:
            continue
        seen.add(h)
        hrefs.append(h)
    # The listing runs oldest first
    hrefs.reverse()
    return [urljoin(base_url, h) for h in hrefs]

def date_from_page_url(page_url: str) -> str:
    try:
        filename = urlsplit(page_url).path.rsplit("/", 1)[-1]
        m = DAILY_FILENAME_RE.match(filename)
        if not m:
            return ""
        yy, mm, dd = m.groups()
        year = f"20{yy}" if int(yy) < 50 else f"19{yy}"
        return f"{year}-{mm}-{dd}"
    except Exception:
        logger.debug("could not derive date from %r", page_url, exc_info=True)
        return ""

def _pick_image(soup: BeautifulSoup, is_noise: Callable[[str], bool]):
    imgs = soup.find_all("img")
    for img in imgs:
        src = img.get("src") or ""
        if src and not is_noise(src):
            return img
    return imgs[0] if imgs else None

def _resolve(src: str, page_url: str) -> str:
    src = (src or "").strip()
    if not src:
        return ""
    url = urljoin(page_url, src)
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        return ""
    return url

def _title(soup: BeautifulSoup) -> str:
    b = soup.find("b")
    title = b.get_text().strip() if b else ""
    if not title and soup.title:
        title = soup.title.get_text().strip()
    return title or PLACEHOLDER_TITLE

def _explanation(soup: BeautifulSoup) -> str:
    paragraphs = (p.get_text().strip() for p in soup.find_all("p"))
    return "\n\n".join(t for t in paragraphs if len(t) > MIN_EXPLANATION_CHARS)

def parse_daily_page(html: str, page_url: str, is_noise: Optional[Callable[[str], bool]] = None) -> Optional[Item]:
    """
    Extract an Item from one daily page.

    Returns None when the page has no image, or when the chosen image has no
    src that resolves to an absolute http(s) URL.
    """
    soup = _soup(html)
    img = _pick_image(soup, is_noise or NoiseFilter())
    if img is None:
        return None

    image_url = _resolve(img.get("src"), page_url)
    if not image_url:
        return None

    return Item(
        image_url=image_url,
        title=_title(soup),
        date=date_from_page_url(page_url),
        explanation=_explanation(soup),
    )

class ArchiveScraper:
    """Scrape the N most recent daily pages, one request at a time."""

    def __init__(self, fetch_text: Callable[[str], str], index_url: str = ARCHIVE_INDEX_URL,
                 base_url: str = ARCHIVE_BASE_URL, noise_filter: Optional[NoiseFilter] = None):
        self.fetch_text = fetch_text
        self.index_url = index_url
        self.base_url = base_url
        self.noise_filter = noise_filter or NoiseFilter()

    def fetch(self, count: int) -> List[Item]:
        if count <= 0:
            return []
        try:
            html = self.fetch_text(self.index_url)
            daily_urls = parse_archive_list(html, self.base_url)[:count]
        except Exception as e:
            logger.error("Archive fetch failed: %s", e)
            return []

        results: List[Item] = []
        for url in daily_urls:
            try:
                page_html = self.fetch_text(url)
                item = parse_daily_page(page_html, url, self.noise_filter)
            except Exception as e:
                # One bad page must not cost the rest of the batch
                logger.warning("Failed to fetch/parse daily page %s: %s", url, e)
                continue
            if item and item.renderable:
                results.append(item)
            else:
                logger.info("No usable image on %s, skipping", url)
        logger.info("Archive: %d/%d daily pages yielded items", len(results), len(daily_urls))
        return results
