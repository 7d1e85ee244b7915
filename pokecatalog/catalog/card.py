"""
Item card view model.

An ``ItemCard`` is bound to one ``(name, url)`` pair and resolves the
detail record behind the URL.  Its state is held in a single immutable
``CardView`` so the template never sees a contradictory combination of
flags (a record together with an error, for example).

Every bind bumps a generation counter.  A fetch result is applied only
if no newer bind happened while it was in flight, so a slow response
for an old URL cannot overwrite the record of the current one.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from . import pokeapi_service
from .schemas import CardPayload, DetailRecord
from .type_colors import type_color


logger = logging.getLogger(__name__)

DetailFetcher = Callable[[str], Optional[DetailRecord]]


class CardState(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class CardView:
    state: CardState
    record: Optional[DetailRecord] = None

    def __post_init__(self) -> None:
        if (self.state is CardState.LOADED) != (self.record is not None):
            raise ValueError(f"card state {self.state.value} does not match record")

    @classmethod
    def empty(cls) -> "CardView":
        return cls(CardState.EMPTY)

    @classmethod
    def loading(cls) -> "CardView":
        return cls(CardState.LOADING)

    @classmethod
    def loaded(cls, record: DetailRecord) -> "CardView":
        return cls(CardState.LOADED, record)

    @classmethod
    def failed(cls) -> "CardView":
        return cls(CardState.FAILED)


class ItemCard:
    """One catalogue card.

    ``bind()`` performs the fetch synchronously in the calling thread;
    the lock only guards the state swap, never the request itself.
    """

    def __init__(self, name: str = "", fetch: Optional[DetailFetcher] = None) -> None:
        self.name = name
        self._fetch = fetch or pokeapi_service.fetch_details
        self._url = ""
        self._generation = 0
        self._view = CardView.empty()
        self._lock = threading.Lock()

    @property
    def url(self) -> str:
        return self._url

    @property
    def view(self) -> CardView:
        return self._view

    @property
    def state(self) -> CardState:
        return self._view.state

    @property
    def generation(self) -> int:
        return self._generation

    def bind(self, url: str) -> CardView:
        """Bind the card to ``url`` and resolve it.

        Re-binding the current URL is a no-op.  An empty URL returns the
        card to the empty state without any request.
        """
        url = (url or "").strip()
        with self._lock:
            if url == self._url and self._view.state is not CardState.EMPTY:
                return self._view
            self._url = url
            self._generation += 1
            generation = self._generation
            if not url:
                self._view = CardView.empty()
                return self._view
            self._view = CardView.loading()

        view = self._resolve(url)

        with self._lock:
            if generation != self._generation:
                logger.debug(
                    "Discarding stale result for %s (generation %d, current %d)",
                    url, generation, self._generation,
                )
                return self._view
            self._view = view
            return self._view

    def _resolve(self, url: str) -> CardView:
        if not pokeapi_service.is_detail_url(url):
            logger.warning("Refusing to fetch details outside the API: %s", url)
            return CardView.failed()
        try:
            record = self._fetch(url)
        except Exception as exc:
            logger.error("Error loading Pokemon details from %s: %s", url, exc)
            return CardView.failed()
        if record is None:
            return CardView.failed()
        return CardView.loaded(record)

    def payload(self) -> CardPayload:
        record = self._view.record
        if record is None:
            return CardPayload(state=self.state.value, name=self.name, url=self._url)
        return CardPayload(
            state=self.state.value,
            name=record.name,
            url=self._url,
            id=record.id,
            sprite_url=record.sprite_url,
            types=record.type_names,
            colors=[type_color(name) for name in record.type_names],
        )
