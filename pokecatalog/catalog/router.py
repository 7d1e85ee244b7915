"""
Route definitions for the catalogue JSON API.

Endpoints under /api/catalog:
- GET  /types                : the fixed type checklist with colors
- GET  /types/{category}     : first members of one type
- GET  /pokemon              : the whole catalogue (one page)
- GET  /pokemon/details?url= : one resolved card
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Query

from . import pokeapi_service
from .card import CardState, ItemCard
from .panel import ListPanel
from .schemas import CardPayload, CatalogPage, FilterCategory, ListEntry
from .type_colors import filter_table


router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("/types", response_model=List[FilterCategory])
def list_types() -> List[FilterCategory]:
    return [FilterCategory(**row) for row in filter_table()]


@router.get("/types/{category}", response_model=List[ListEntry])
def list_type_members(category: str) -> List[ListEntry]:
    """Return the members of ``category``, capped like the sidebar filter."""
    panel = ListPanel()
    try:
        replaced = panel.select_filter(category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not replaced:
        raise HTTPException(status_code=502, detail="PokeAPI type lookup failed")
    return panel.displayed


@router.get("/pokemon", response_model=CatalogPage)
def get_catalog() -> CatalogPage:
    page = pokeapi_service.fetch_catalog()
    if page is None:
        raise HTTPException(status_code=502, detail="Failed to load Pokemon")
    return page


@router.get("/pokemon/details", response_model=CardPayload)
def get_details(
    url: str = Query(default="", description="Detail URL from a catalogue entry"),
    name: str = Query(default="", description="Entry name, echoed when unresolved"),
) -> CardPayload:
    """Resolve one entry the same way a card does.

    An empty ``url`` yields the empty state.  A failed lookup is a 502
    so JSON clients can tell it apart from a loaded record.
    """
    card = ItemCard(name=name)
    card.bind(url)
    if card.state is CardState.FAILED:
        raise HTTPException(status_code=502, detail="Error loading Pokemon details")
    return card.payload()
