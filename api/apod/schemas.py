from pydantic import BaseModel
from typing import List

from .models import GalleryState, Item

class ItemOut(BaseModel):
    image_url: str
    title: str
    date: str
    explanation: str
    hd_url: str
    media_type: str

    @classmethod
    def from_item(cls, item: Item) -> "ItemOut":
        return cls(
            image_url=item.image_url,
            title=item.title,
            date=item.date,
            explanation=item.explanation,
            hd_url=item.hd_url,
            media_type=item.media_type,
        )

class GalleryResponse(BaseModel):
    items: List[ItemOut]
    count: int
    source: str
    status: str
    message: str

    @classmethod
    def from_state(cls, state: GalleryState) -> "GalleryResponse":
        return cls(
            items=[ItemOut.from_item(i) for i in state.items],
            count=len(state.items),
            source=state.source,
            status=state.status,
            message=state.message,
        )
