from textual.app import ComposeResult
from textual.widgets import Label, Static

from pokescroll.ui.constants import Banner
from pokescroll.ui.utils import resolve_image


class SidePanel(Static):
    """Static decorative panel beside the catalog"""

    def __init__(self, banner: Banner, **kwargs):
        super().__init__(**kwargs)
        self.banner = banner

    def compose(self) -> ComposeResult:
        yield Label(self.banner.title, classes="panel-title")
        yield Label(resolve_image(self.banner.image), classes="panel-image", markup=False)
