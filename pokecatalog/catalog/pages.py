"""
Frontend HTML routes.

Serves the Jinja2 page and the HTMX fragments that make up the viewer.

Routes:
    GET /                 → index.html (filter sidebar + card grid)
    GET /partials/grid    → partials/grid.html (HTMX swap target for filters)
    GET /partials/card    → partials/card.html (one card, loaded on its own)

Each card placeholder in the grid requests its own fragment, so detail
records are resolved independently and a failing card never affects
its neighbours.
"""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, Response
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .card import CardView, ItemCard
from .panel import ListPanel
from .type_colors import filter_table, type_color


router = APIRouter(tags=["frontend"])

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["type_color"] = type_color
templates.env.globals["filters"] = filter_table()
templates.env.globals["empty_view"] = CardView.empty()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(request: Request) -> HTMLResponse:
    """Main page: mount the panel and render sidebar and grid."""
    panel = ListPanel()
    panel.mount()
    return templates.TemplateResponse(request, "index.html", {"panel": panel})


@router.get("/partials/grid", response_class=HTMLResponse, include_in_schema=False)
def grid_partial(
    request: Request,
    category: Optional[str] = Query(default=None, description="Type filter"),
) -> Response:
    """Grid for one type, or the full catalogue when no type is given.

    A failed fetch answers 204 so HTMX leaves the current grid in place.
    """
    panel = ListPanel()
    if category:
        try:
            replaced = panel.select_filter(category)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    else:
        panel.mount()
        replaced = panel.clear_filter()
    if not replaced:
        return Response(status_code=204)
    return templates.TemplateResponse(request, "partials/grid.html", {"panel": panel})


@router.get("/partials/card", response_class=HTMLResponse, include_in_schema=False)
def card_partial(
    request: Request,
    name: str = Query(default=""),
    url: str = Query(default=""),
) -> HTMLResponse:
    card = ItemCard(name=name)
    card.bind(url)
    return templates.TemplateResponse(
        request, "partials/card.html", {"card": card, "view": card.view}
    )
