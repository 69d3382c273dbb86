"""State container for the paginated catalog view.

The browse widget owns one ``BrowseState`` for the lifetime of its mount and
changes it only through the methods below.
"""

from dataclasses import dataclass, field

from pokescroll.models import Item
from pokescroll.services.search_filter import filter_items


@dataclass
class BrowseState:
    items: list[Item] = field(default_factory=list)
    page: int = 1
    in_flight: bool = False
    query: str = ""
    exhausted: bool = False

    def begin_fetch(self) -> None:
        if self.in_flight:
            raise RuntimeError("A page fetch is already in flight")
        self.in_flight = True

    def end_fetch(self) -> None:
        self.in_flight = False

    def append_page(self, items: list[Item]) -> None:
        """Append a page in arrival order. Duplicates are kept."""
        self.items.extend(items)

    def mark_exhausted(self) -> None:
        self.exhausted = True

    def advance_page(self) -> int:
        self.page += 1
        return self.page

    def set_query(self, query: str) -> None:
        self.query = query

    @property
    def filtered(self) -> list[Item]:
        return filter_items(self.items, self.query)
