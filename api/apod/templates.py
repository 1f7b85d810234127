from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape
import pathlib

from .models import DetailView, GalleryState, LOADING_MESSAGE

env = Environment(
    loader=FileSystemLoader(str(pathlib.Path(__file__).parent / "templates")),
    autoescape=select_autoescape()
)

def render_text(name: str, ctx: dict) -> str:
    tmpl = env.get_template(name)
    return tmpl.render(**ctx)

def render(name: str, ctx: dict) -> HTMLResponse:
    return HTMLResponse(render_text(name, ctx))

def gallery_context(state: GalleryState, count: int) -> dict:
    return {
        "state": state,
        "count": count,
        "details": [DetailView.open(it) for it in state.items],
        "loading_message": LOADING_MESSAGE,
    }
