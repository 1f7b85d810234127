from dataclasses import dataclass, field

PLACEHOLDER_TITLE = "NASA APOD"

LOADING_MESSAGE = "Loading Space Images..."
EMPTY_MESSAGE = "No image results returned from archive."
ERROR_MESSAGE = "Error loading images."

@dataclass
class Item:
    image_url: str
    title: str = PLACEHOLDER_TITLE
    date: str = ""          # YYYY-MM-DD or empty
    explanation: str = ""
    hd_url: str = ""
    media_type: str = "image"

    @property
    def renderable(self) -> bool:
        return bool(self.image_url)

@dataclass
class GalleryState:
    items: list[Item] = field(default_factory=list)
    source: str = ""        # api/archive
    status: str = "ok"      # ok/empty/error
    message: str = ""

    @classmethod
    def from_items(cls, items: list[Item], source: str) -> "GalleryState":
        return cls(items=list(items), source=source)

    @classmethod
    def empty(cls, source: str = "archive") -> "GalleryState":
        return cls(source=source, status="empty", message=EMPTY_MESSAGE)

    @classmethod
    def error(cls) -> "GalleryState":
        return cls(status="error", message=ERROR_MESSAGE)

@dataclass
class DetailView:
    """State of the detail modal: the item on display, or none when closed."""
    item: Item | None = None

    @property
    def is_open(self) -> bool:
        return self.item is not None

    @property
    def image_src(self) -> str:
        if not self.item:
            return ""
        return self.item.hd_url or self.item.image_url or ""

    @property
    def alt(self) -> str:
        if not self.item:
            return ""
        return self.item.title or PLACEHOLDER_TITLE

    @classmethod
    def open(cls, item: Item) -> "DetailView":
        return cls(item=item)

    def close(self) -> "DetailView":
        # closed modal carries no image src
        return DetailView()
