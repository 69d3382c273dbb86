from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer

from pokescroll.config import PokescrollConfig
from pokescroll.services.page_fetcher import PageSource
from pokescroll.ui.constants import SIDE_PANEL_LEFT, SIDE_PANEL_RIGHT
from pokescroll.ui.widgets.carousel import Carousel, TopBanners
from pokescroll.ui.widgets.catalog_browser import CatalogBrowser
from pokescroll.ui.widgets.side_panel import SidePanel
from pokescroll.ui.widgets.title_bar import TitleBar


class MainScreen(Screen):
    """Main screen: banner strip on top, catalog between two side panels."""

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("left_square_bracket", "carousel_prev", "Prev banner"),
        Binding("right_square_bracket", "carousel_next", "Next banner"),
        # Jumps past the last slide are ignored by the carousel
        *[Binding(str(n), f"carousel_jump({n - 1})", f"Banner {n}", show=False) for n in range(1, 10)],
        Binding("h", "help", "Help", show=False),
    ]

    def __init__(self, config: PokescrollConfig, source: PageSource, **kwargs):
        super().__init__(**kwargs)
        self.config = config
        self.source = source

    def compose(self) -> ComposeResult:
        """Create the layout for the main screen."""
        with Container(id="main-container"):
            yield TitleBar(self.config.api_base_url, id="title-bar")
            with Horizontal(id="top-strip"):
                yield Carousel(
                    interval=self.config.carousel_interval,
                    reset_on_navigate=self.config.carousel_reset_on_navigate,
                    id="carousel",
                )
                yield TopBanners(id="top-banners")
            with Horizontal(id="content-container"):
                yield SidePanel(SIDE_PANEL_LEFT, id="left-panel", classes="side-panel")
                yield CatalogBrowser(
                    self.source,
                    page_size=self.config.page_size,
                    scroll_margin=self.config.scroll_margin,
                    stop_on_empty_page=self.config.stop_on_empty_page,
                    id="catalog-browser",
                )
                yield SidePanel(SIDE_PANEL_RIGHT, id="right-panel", classes="side-panel")

            yield Footer(id="main-footer", show_command_palette=False)

    def on_mount(self) -> None:
        """Called when the screen is mounted. Focus the catalog so bindings work."""
        self.query_one("#catalog-scroll", VerticalScroll).focus()

    def on_catalog_browser_page_loaded(self, message: CatalogBrowser.PageLoaded) -> None:
        """Keep the title bar progress in step with the catalog"""
        self.query_one("#title-bar", TitleBar).set_progress(message.total, message.page)

    def action_carousel_prev(self) -> None:
        self.query_one("#carousel", Carousel).show_prev()

    def action_carousel_next(self) -> None:
        self.query_one("#carousel", Carousel).show_next()

    def action_carousel_jump(self, index: int) -> None:
        self.query_one("#carousel", Carousel).go_to(index)

    def action_help(self) -> None:
        """Show help information"""
        self.notify(
            "Help: type to search, '/' to focus search, 'esc' to clear it, '[' and ']' to flip banners, "
            "'1'-'9' to jump to a banner, 'q' to quit.",
            severity="information",
        )
