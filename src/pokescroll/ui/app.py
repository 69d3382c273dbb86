"""Main Pokescroll application."""

from textual.app import App
from textual.binding import Binding

from pokescroll.config import PokescrollConfig
from pokescroll.gateways.catalog import CatalogClient
from pokescroll.services.page_fetcher import PageSource
from pokescroll.ui.screens.main_screen import MainScreen


class PokescrollApp(App):
    """Pokémon catalog browser."""

    TITLE = "Pokédex"
    CSS_PATH = "app.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        config: PokescrollConfig | None = None,
        source: PageSource | None = None,
        **kwargs,
    ):
        """Initialize the app.

        Args:
            config: Settings; defaults are used when omitted.
            source: Where pages come from. A ``CatalogClient`` for
                ``config.api_base_url`` is created (and closed on exit) when
                omitted.
        """
        super().__init__(**kwargs)
        self.config = config or PokescrollConfig()
        self._owns_source = source is None
        self.source = source or CatalogClient(self.config.api_base_url, timeout=self.config.request_timeout)

    def on_mount(self) -> None:
        """Called when app starts."""
        self.theme = self.config.theme
        self.push_screen(MainScreen(self.config, self.source))

    async def on_unmount(self) -> None:
        if self._owns_source:
            await self.source.aclose()
