from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static


class TitleBar(Static):
    """Title bar showing the data source and load progress"""

    def __init__(self, api_base_url: str, **kwargs):
        super().__init__(**kwargs)
        self._api_base_url = api_base_url

    def compose(self) -> ComposeResult:
        with Horizontal(id="title-bar-container"):
            yield Static("Pokédex", id="title")
            with Horizontal(id="status-container"):
                yield Static("●", id="connected-indicator")
                yield Static(f"api: {self._api_base_url}", id="api-info")
                yield Static("", id="load-status")

    def set_progress(self, total: int, page: int) -> None:
        """Show how many items are loaded and the latest page requested."""
        status = self.query_one("#load-status", Static)
        status.update(f"{total} loaded · page {page}")
