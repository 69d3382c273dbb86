from collections.abc import Callable
from typing import Protocol

from loguru import logger

from pokescroll.exceptions import CatalogError
from pokescroll.models import Item
from pokescroll.services.browse_state import BrowseState


class PageSource(Protocol):
    async def fetch_page(self, page: int, limit: int) -> list[Item]: ...


class PageFetcher:
    """Loads one page at a time into a ``BrowseState``.

    ``state.in_flight`` is set before the request goes out and cleared in a
    ``finally`` block, so it is false again after success, failure or
    cancellation. Catalog failures are logged and swallowed: the accumulated
    list stays as it was and the page is not retried.
    """

    def __init__(
        self,
        source: PageSource,
        state: BrowseState,
        *,
        page_size: int = 20,
        stop_on_empty_page: bool = True,
        on_change: Callable[[], None] | None = None,
    ):
        self.source = source
        self.state = state
        self.page_size = page_size
        self.stop_on_empty_page = stop_on_empty_page
        self._on_change = on_change
        self._last_page = 0

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def fetch(self, page: int) -> list[Item]:
        """Fetch ``page`` and append its items, returning what was appended."""
        if self.state.in_flight:
            logger.debug(f"Ignoring fetch for page {page}: another page is in flight")
            return []
        if page <= self._last_page:
            logger.debug(f"Ignoring fetch for page {page}: already requested up to page {self._last_page}")
            return []

        self._last_page = page
        self.state.begin_fetch()
        try:
            self._notify()
            items = await self.source.fetch_page(page, self.page_size)
            self.state.append_page(items)
            if not items and self.stop_on_empty_page:
                logger.info(f"Page {page} came back empty, no further pages will be requested")
                self.state.mark_exhausted()
            logger.info(f"Loaded page {page}: {len(items)} items, {len(self.state.items)} total")
            return items
        except CatalogError as e:
            logger.warning(f"Failed to fetch page {page}: {e}")
            return []
        finally:
            self.state.end_fetch()
            self._notify()
