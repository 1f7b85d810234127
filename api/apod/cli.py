import argparse
import json
import logging
from pathlib import Path

from .gallery import ApodGallery, LogView
from .logs import configure_logging
from .schemas import GalleryResponse
from .settings import settings
from .templates import render_text, gallery_context

logger = logging.getLogger(__name__)

def cmd_build(args) -> int:
    gallery = ApodGallery.from_settings(settings)
    state = gallery.fetch(args.count, LogView())
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_text("gallery.html", gallery_context(state, args.count)), encoding="utf-8")
    logger.info("Wrote %s (%d items, source=%s)", out, len(state.items), state.source or "-")
    return 0 if state.status == "ok" else 1

def cmd_fetch(args) -> int:
    gallery = ApodGallery.from_settings(settings)
    state = gallery.fetch(args.count)
    print(json.dumps(GalleryResponse.from_state(state).model_dump(), ensure_ascii=False, indent=2))
    return 0 if state.status == "ok" else 1

def cmd_serve(args) -> int:
    import uvicorn
    uvicorn.run("apod.main:app", host=args.host, port=args.port)
    return 0

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="apod-gallery", description="NASA APOD gallery")
    ap.add_argument("--log-level", default=settings.LOG_LEVEL)
    sub = ap.add_subparsers(dest="command", required=True)

    b = sub.add_parser("build", help="write a static gallery page")
    b.add_argument("--count", type=int, default=settings.DEFAULT_COUNT)
    b.add_argument("--out", default="site/index.html")
    b.set_defaults(func=cmd_build)

    f = sub.add_parser("fetch", help="print one fetch cycle as JSON")
    f.add_argument("--count", type=int, default=settings.DEFAULT_COUNT)
    f.set_defaults(func=cmd_fetch)

    s = sub.add_parser("serve", help="run the web gallery")
    s.add_argument("--host", default=settings.API_HOST)
    s.add_argument("--port", type=int, default=settings.API_PORT)
    s.set_defaults(func=cmd_serve)
    return ap

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
