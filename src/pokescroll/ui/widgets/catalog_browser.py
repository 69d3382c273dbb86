import asyncio

from loguru import logger
from rich.text import Text
from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Vertical, VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Input, LoadingIndicator, Static

from pokescroll.services.browse_state import BrowseState
from pokescroll.services.page_fetcher import PageFetcher, PageSource
from pokescroll.services.scroll_trigger import ScrollTrigger
from pokescroll.services.view_renderer import ViewMode, ViewModel, select_view
from pokescroll.ui.constants import PAGE_SIZE, SCROLL_MARGIN_ROWS
from pokescroll.ui.widgets.item_card import ItemCard

SCROLL_HINT = "Scroll down to load more Pokémon  ↓"
END_HINT = "You have seen every Pokémon"


class CatalogBrowser(Static):
    """Searchable, infinitely scrolling grid of catalog items.

    Owns the browse state for as long as it is mounted: the accumulated
    items, the page counter, the in-flight gate and the search query.
    """

    BINDINGS = [
        Binding("slash", "focus_search", "Search"),
        Binding("escape", "clear_search", "Clear search"),
    ]

    is_loading: bool = reactive(False)

    class PageLoaded(Message):
        """Message sent after a page fetch finishes, successful or not."""

        def __init__(self, page: int, total: int) -> None:
            super().__init__()
            self.page = page
            self.total = total

    def __init__(
        self,
        source: PageSource,
        *,
        page_size: int = PAGE_SIZE,
        scroll_margin: int = SCROLL_MARGIN_ROWS,
        stop_on_empty_page: bool = True,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.state = BrowseState()
        self._fetcher = PageFetcher(
            source,
            self.state,
            page_size=page_size,
            stop_on_empty_page=stop_on_empty_page,
            on_change=self._on_fetch_state_changed,
        )
        self._trigger = ScrollTrigger(self.state, margin=scroll_margin)
        self._view: ViewModel = select_view([], in_flight=False, query="", total=0)
        self._rendered: list = []
        self._render_lock = asyncio.Lock()

    def compose(self) -> ComposeResult:
        with Vertical(id="catalog-container"):
            yield Input(placeholder="Search Pokémon by name...", id="search-input")
            with VerticalScroll(id="catalog-scroll"):
                yield Static("", id="catalog-empty")
                yield Grid(id="catalog-grid")
                yield LoadingIndicator(id="catalog-loading")
                yield Static("Loading more Pokémon...", id="catalog-loading-text")
                yield Static(SCROLL_HINT, id="catalog-hint")

    def on_mount(self) -> None:
        """Subscribe to scrolling and load the first page."""
        scroll = self.query_one("#catalog-scroll", VerticalScroll)
        self.watch(scroll, "scroll_y", self._on_scroll_changed, init=False)
        self._apply_view()
        self._load_page(self.state.page)

    def on_unmount(self) -> None:
        self._trigger.release()

    def on_resize(self) -> None:
        self.call_after_refresh(self._check_sentinel)

    # Reactive watchers
    def watch_is_loading(self, is_loading: bool) -> None:
        self._apply_view()

    # Event handlers
    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search-input":
            return
        self.state.set_query(event.value)
        await self._render_items()
        self.call_after_refresh(self._check_sentinel)

    # Actions
    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    def action_clear_search(self) -> None:
        """Clear the query and hand focus back to the list."""
        self.query_one("#search-input", Input).value = ""
        self.query_one("#catalog-scroll", VerticalScroll).focus()

    # Fetching
    @work(group="page-fetch")
    async def _load_page(self, page: int) -> None:
        await self._fetcher.fetch(page)
        if self._trigger.released:
            logger.debug(f"Discarding page {page}: catalog view is gone")
            return
        await self._render_items()
        self.post_message(self.PageLoaded(page, len(self.state.items)))
        # Re-check after layout so a short list keeps filling the viewport
        self.call_after_refresh(self._check_sentinel)

    def _on_fetch_state_changed(self) -> None:
        if self._trigger.released:
            return
        self._trigger.rearm()
        self.is_loading = self.state.in_flight

    # Scroll trigger
    def _on_scroll_changed(self, _scroll_y: float) -> None:
        self._check_sentinel()

    def _check_sentinel(self) -> None:
        if self._trigger.released:
            return
        visible = False
        if self._view.has_sentinel:
            scroll = self.query_one("#catalog-scroll", VerticalScroll)
            visible = ScrollTrigger.sentinel_visible(scroll.scroll_y, scroll.max_scroll_y, self._trigger.margin)
        if self._trigger.observe(visible):
            self._load_page(self.state.page)

    # Rendering
    def _apply_view(self) -> ViewModel:
        """Recompute the display state and toggle the non-grid widgets."""
        view = select_view(
            self.state.filtered,
            in_flight=self.state.in_flight,
            query=self.state.query,
            total=len(self.state.items),
            exhausted=self.state.exhausted,
        )
        self._view = view
        if self._trigger.released:
            return view

        empty = self.query_one("#catalog-empty", Static)
        grid = self.query_one("#catalog-grid", Grid)
        loading = self.query_one("#catalog-loading", LoadingIndicator)
        loading_text = self.query_one("#catalog-loading-text", Static)
        hint = self.query_one("#catalog-hint", Static)

        message = view.empty_message
        empty.display = view.mode is ViewMode.EMPTY and message is not None
        if message is not None:
            empty.update(Text(f"🔍\n{message.title}\n{message.detail}\n{message.hint}"))

        grid.display = view.mode is ViewMode.POPULATED
        loading.display = view.show_loading
        loading_text.display = view.show_loading
        hint.display = view.show_scroll_hint or view.show_end_hint
        hint.update(END_HINT if view.show_end_hint else SCROLL_HINT)
        return view

    async def _render_items(self) -> None:
        """Bring the grid in line with the filtered view.

        Appended pages only mount the new cards; a changed query rebuilds.
        """
        async with self._render_lock:
            view = self._apply_view()
            grid = self.query_one("#catalog-grid", Grid)
            items = list(view.items)
            rendered = self._rendered

            if items[: len(rendered)] == rendered:
                new_items = items[len(rendered) :]
                if new_items:
                    await grid.mount_all([ItemCard(item) for item in new_items])
            else:
                await grid.remove_children()
                if items:
                    await grid.mount_all([ItemCard(item) for item in items])
            self._rendered = items

    # Utility methods
    @property
    def rendered_names(self) -> list[str]:
        """Names of the cards currently in the grid, in display order."""
        return [card.item_name for card in self.query(ItemCard)]
