"""
PokeAPI integration for the catalogue.  This module exposes three
request functions:

* ``fetch_catalog()``: the full list of Pokémon as one oversized page
  of ``(name, url)`` entries.

* ``fetch_details()``: the detail record behind one entry's URL
  (pokedex number, sprite and types).

* ``fetch_by_category()``: the members of one elemental type.

Each call performs exactly one GET.  Nothing is cached or retried.
Any failure (connectivity, non-2xx status, undecodable body, or a
payload missing the fields the viewer needs) is logged and turned into
``None``; callers never see an exception from this module.  Only the
Python standard library is used for HTTP requests.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..config import settings
from .schemas import CatalogPage, CategoryPage, DetailRecord


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _http_get_json(url: str) -> Optional[dict]:
    """Perform an HTTP GET and return parsed JSON or ``None`` on failure.

    A User-Agent and Accept header are always sent.  Network errors,
    non-2xx statuses and malformed bodies are logged and ``None`` is
    returned.
    """
    try:
        request = urllib.request.Request(
            url,
            headers={
                'User-Agent': settings.USER_AGENT,
                'Accept': 'application/json',
            },
        )
        with urllib.request.urlopen(request, timeout=settings.REQUEST_TIMEOUT) as response:
            if not 200 <= response.status < 300:
                logger.warning(
                    "PokeAPI request to %s returned status %s", url, response.status
                )
                return None
            data = response.read().decode('utf-8', errors='ignore')
            return json.loads(data)
    except urllib.error.HTTPError as exc:
        logger.error("PokeAPI request to %s returned status %s", url, exc.code)
        return None
    except (OSError, http.client.HTTPException, ValueError) as exc:
        logger.error("Error fetching %s: %s", url, exc)
        return None


def _parse(model: Type[ModelT], data: Optional[dict], url: str) -> Optional[ModelT]:
    """Validate a decoded body into ``model``; ``None`` when fields are missing."""
    if data is None:
        return None
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.error(
            "Unexpected payload from %s (%s): %d validation error(s)",
            url, model.__name__, exc.error_count(),
        )
        return None


def _base_url() -> str:
    return settings.POKEAPI_BASE_URL.rstrip('/')


def catalog_url() -> str:
    params = {'limit': settings.CATALOG_LIMIT, 'offset': 0}
    return f"{_base_url()}/pokemon/?{urllib.parse.urlencode(params)}"


def category_url(category: str) -> str:
    return f"{_base_url()}/type/{urllib.parse.quote(category.strip(), safe='')}"


def is_detail_url(url: str) -> bool:
    """True when ``url`` points inside the configured API.

    Card URLs come from the browser, so only URLs on the API host and
    under its base path are fetched.
    """
    base = urllib.parse.urlsplit(_base_url())
    target = urllib.parse.urlsplit(url or '')
    if target.scheme not in ('http', 'https'):
        return False
    if (target.scheme, target.netloc) != (base.scheme, base.netloc):
        return False
    return target.path.startswith(base.path.rstrip('/') + '/')


def fetch_catalog() -> Optional[CatalogPage]:
    """Return the whole catalogue as a single page, or ``None`` on failure."""
    url = catalog_url()
    page = _parse(CatalogPage, _http_get_json(url), url)
    if page is not None:
        logger.info("Fetched catalogue: %d entries", len(page.results))
    return page


def fetch_details(url: str) -> Optional[DetailRecord]:
    """Return the detail record at ``url``, or ``None`` on failure."""
    return _parse(DetailRecord, _http_get_json(url), url)


def fetch_by_category(category: str) -> Optional[CategoryPage]:
    """Return the members of one type, or ``None`` on failure."""
    url = category_url(category)
    return _parse(CategoryPage, _http_get_json(url), url)
