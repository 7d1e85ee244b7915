"""
Catalog package for the Pokémon viewer.

This package contains the PokeAPI client, the card and panel view
models, and the routes that expose them: HTML pages and HTMX fragments
for the browser, plus a small JSON API under ``/api/catalog``.
"""

from .pages import router as pages_router  # noqa: F401
from .router import router as catalog_router  # noqa: F401
