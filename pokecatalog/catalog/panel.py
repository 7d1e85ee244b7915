"""
List/filter panel view model.

The panel owns the master list fetched on mount, the list currently
displayed, and the checked state of the fixed type checklist.  Only
one filter is ever checked.  A failed re-filter is logged but leaves
the displayed list untouched and shows nothing to the user, while a
failed initial load puts the panel in an error state with a message.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional

from ..config import settings
from . import pokeapi_service
from .schemas import CatalogPage, CategoryPage, ListEntry
from .type_colors import FILTER_CATEGORIES, is_filter_category


logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load Pokemon"
LOAD_ERROR_MESSAGE = "Error loading Pokemon"


class PanelState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class ListPanel:
    def __init__(
        self,
        fetch_catalog: Optional[Callable[[], Optional[CatalogPage]]] = None,
        fetch_by_category: Optional[Callable[[str], Optional[CategoryPage]]] = None,
        filter_limit: Optional[int] = None,
    ) -> None:
        self._fetch_catalog = fetch_catalog or pokeapi_service.fetch_catalog
        self._fetch_by_category = fetch_by_category or pokeapi_service.fetch_by_category
        self.filter_limit = filter_limit if filter_limit is not None else settings.FILTER_LIMIT

        self.state = PanelState.LOADING
        self.error = ""
        self.entries: List[ListEntry] = []
        self.displayed: List[ListEntry] = []
        self.checked: Dict[str, bool] = {value: False for value, _ in FILTER_CATEGORIES}

    @property
    def selected(self) -> Optional[str]:
        return next((value for value, on in self.checked.items() if on), None)

    def mount(self) -> PanelState:
        """Load the full catalogue into both the master and displayed lists."""
        self.state = PanelState.LOADING
        self.error = ""
        try:
            page = self._fetch_catalog()
        except Exception as exc:
            logger.error("Error loading Pokemon: %s", exc)
            self.error = LOAD_ERROR_MESSAGE
            self.state = PanelState.FAILED
            return self.state

        if page is None:
            self.error = LOAD_FAILED_MESSAGE
            self.state = PanelState.FAILED
            return self.state

        self.entries = list(page.results)
        self.displayed = self.entries
        self.state = PanelState.READY
        return self.state

    def select_filter(self, category: str) -> bool:
        """Check ``category`` alone and display its first members.

        Returns ``True`` when the displayed list was replaced.  On a
        failed fetch the previous list stays as it was.
        """
        if not is_filter_category(category):
            raise ValueError(f"Unknown type filter: {category!r}")
        if self.state is PanelState.FAILED:
            return False

        for value in self.checked:
            self.checked[value] = False
        self.checked[category] = True

        previous_state = self.state
        self.state = PanelState.LOADING
        try:
            page = self._fetch_by_category(category)
        except Exception as exc:
            logger.error("Filter error for %s: %s", category, exc)
            page = None

        if page is None:
            logger.warning("Type filter %s failed; keeping %d displayed entries",
                           category, len(self.displayed))
            self.state = previous_state
            return False

        self.displayed = page.entries()[: self.filter_limit]
        self.state = PanelState.READY
        return True

    def clear_filter(self) -> bool:
        """Uncheck every filter and show the master list again."""
        for value in self.checked:
            self.checked[value] = False
        if self.state is not PanelState.READY:
            return False
        self.displayed = self.entries
        return True
