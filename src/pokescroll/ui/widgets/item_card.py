from rich.style import Style
from rich.text import Text
from textual.app import ComposeResult
from textual.widgets import Label, Static

from pokescroll.models import Item
from pokescroll.ui.utils import (
    format_display_name,
    format_height,
    format_type_badges,
    format_weight,
    resolve_image,
)


class ItemCard(Static):
    """Card for a single catalog item"""

    def __init__(self, item: Item):
        super().__init__(classes="item-card")
        self.item = item

    def compose(self) -> ComposeResult:
        image = resolve_image(self.item.image)
        yield Label(format_display_name(self.item.name), classes="item-name", markup=False)
        yield Label(format_type_badges(self.item.types), classes="item-types")
        yield Label(
            f"Height {format_height(self.item.height)}  Weight {format_weight(self.item.weight)}",
            classes="item-meta",
            markup=False,
        )
        yield Label(Text("artwork ↗", style=Style(link=image)), classes="item-image")

    @property
    def item_name(self) -> str:
        return self.item.name
