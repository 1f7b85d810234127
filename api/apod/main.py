from fastapi import FastAPI, Depends, Query
from fastapi.responses import HTMLResponse
from datetime import datetime, timezone
import requests
from .gallery import ApodGallery
from .logs import configure_logging
from .models import LOADING_MESSAGE
from .schemas import GalleryResponse
from .settings import settings
from .templates import render, gallery_context

app = FastAPI(title="APOD Gallery")

MAX_COUNT = 100  # APOD API rejects larger count values

def get_gallery():
    # Fresh session per cycle, nothing carries over between requests
    session = requests.Session()
    try:
        yield ApodGallery.from_settings(settings, session=session)
    finally:
        session.close()

def count_param(count: int | None = Query(None, ge=1, le=MAX_COUNT)) -> int:
    return count or settings.DEFAULT_COUNT

@app.on_event("startup")
def startup_event():
    configure_logging(settings.LOG_LEVEL)

@app.get("/", response_class=HTMLResponse)
def home():
    return render("index.html", {"count": settings.DEFAULT_COUNT, "loading_message": LOADING_MESSAGE})

# Sync handlers: each cycle runs in the threadpool
@app.get("/gallery", response_class=HTMLResponse)
def gallery_page(count: int = Depends(count_param), gallery: ApodGallery = Depends(get_gallery)):
    state = gallery.fetch(count)
    return render("gallery.html", gallery_context(state, count))

@app.get("/api/items", response_model=GalleryResponse)
def gallery_items(count: int = Depends(count_param), gallery: ApodGallery = Depends(get_gallery)):
    state = gallery.fetch(count)
    return GalleryResponse.from_state(state)

@app.get("/healthz")
def healthz():
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}
