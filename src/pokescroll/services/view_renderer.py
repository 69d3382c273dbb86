"""Pick what the catalog area shows for a given state."""

from dataclasses import dataclass
from enum import Enum

from pokescroll.models import Item


class ViewMode(Enum):
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class EmptyMessage:
    title: str
    detail: str
    hint: str = "Try adjusting your search"


@dataclass(frozen=True)
class ViewModel:
    mode: ViewMode
    items: tuple[Item, ...] = ()
    show_loading: bool = False
    show_scroll_hint: bool = False
    show_end_hint: bool = False
    empty_message: EmptyMessage | None = None

    @property
    def has_sentinel(self) -> bool:
        return self.mode is ViewMode.POPULATED


def build_empty_message(query: str, has_data: bool) -> EmptyMessage | None:
    # Nothing is shown until at least one page has arrived
    if not has_data:
        return None
    detail = f'No results for "{query}"' if query else "No Pokémon available"
    return EmptyMessage(title="No Pokémon Found", detail=detail)


def select_view(
    filtered: list[Item],
    *,
    in_flight: bool,
    query: str,
    total: int,
    exhausted: bool = False,
) -> ViewModel:
    if not filtered and not in_flight:
        return ViewModel(mode=ViewMode.EMPTY, empty_message=build_empty_message(query, total > 0))

    idle_with_items = not in_flight and bool(filtered)
    return ViewModel(
        mode=ViewMode.POPULATED,
        items=tuple(filtered),
        show_loading=in_flight,
        show_scroll_hint=idle_with_items and not exhausted,
        show_end_hint=idle_with_items and exhausted,
    )
