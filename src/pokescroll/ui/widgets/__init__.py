from .carousel import Carousel, TopBanners
from .catalog_browser import CatalogBrowser
from .item_card import ItemCard
from .side_panel import SidePanel
from .title_bar import TitleBar

__all__ = ["Carousel", "CatalogBrowser", "ItemCard", "SidePanel", "TitleBar", "TopBanners"]
