"""Filtered country list state.

The controller is owned by a single event loop. Every mutator is synchronous
and notifies the subscribed listener exactly once, even when the visible
sequence did not change. Readers call :meth:`visible_count` before each pass
and must not keep indices across a notification.
"""

import logging
from typing import Callable, Iterable

from country_search.models.country import Country
from country_search.services.country_loader import CountryLoader, LoadResult

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class CountryListController:
    def __init__(self):
        self._all: tuple[Country, ...] = ()
        self._filtered: tuple[Country, ...] = ()
        self._query = ""
        self._search_active = False
        self._listener: Listener | None = None

    @property
    def all_countries(self) -> tuple[Country, ...]:
        return self._all

    @property
    def filtered_countries(self) -> tuple[Country, ...]:
        return self._filtered

    @property
    def query(self) -> str:
        return self._query

    @property
    def search_active(self) -> bool:
        return self._search_active

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register the single listener, replacing any previous one.

        Returns a callable that removes ``listener`` if it is still the
        registered one.
        """
        self._listener = listener

        def unsubscribe() -> None:
            if self._listener is listener:
                self._listener = None

        return unsubscribe

    def set_countries(self, countries: Iterable[Country]) -> None:
        self._all = tuple(countries)
        self._changed()

    def set_search_active(self, active: bool) -> None:
        self._search_active = bool(active)
        self._changed()

    def set_query(self, text: str) -> None:
        self._query = text.lower()
        self._changed()

    def update_search(self, text: str) -> None:
        """Apply a search bar edit: any text turns search mode on."""
        self.set_search_active(bool(text))
        self.set_query(text)

    def visible_count(self) -> int:
        return len(self._visible())

    def visible_item(self, index: int) -> Country:
        visible = self._visible()
        if not 0 <= index < len(visible):
            raise IndexError(f"Index {index} out of range for {len(visible)} visible countries")
        return visible[index]

    def apply_load_result(self, result: LoadResult) -> bool:
        """Install a successful load; keep the current state on failure."""
        if not result.ok:
            logger.warning("Keeping %d countries after failed %s load: %s",
                           len(self._all), result.error.kind, result.error)
            return False
        self.set_countries(result.countries)
        return True

    async def refresh(self, loader: CountryLoader) -> LoadResult:
        # The await is the only suspension point; the result is applied on
        # the loop that called refresh().
        result = await loader.load()
        self.apply_load_result(result)
        return result

    def _visible(self) -> tuple[Country, ...]:
        return self._filtered if self._search_active else self._all

    def _changed(self) -> None:
        if self._query:
            self._filtered = tuple(c for c in self._all if c.matches(self._query))
        else:
            self._filtered = ()
        if self._listener is not None:
            self._listener()


controller = CountryListController()
