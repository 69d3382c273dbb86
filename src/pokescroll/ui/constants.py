from typing import NamedTuple


class Banner(NamedTuple):
    title: str
    image: str


# Pagination constants
PAGE_SIZE = 20  # Items requested per page

# Infinite scroll constants
SCROLL_MARGIN_ROWS = 4  # Treat the end of the list as visible this many rows early

# Carousel constants
CAROUSEL_INTERVAL_SECONDS = 3.0
CAROUSEL_SLIDES = (
    Banner("Gotta Catch 'Em All", "/banners/carousel1.jpg"),
    Banner("Starters of Kanto", "/banners/carousel2.jpg"),
    Banner("Legendary Encounters", "/banners/carousel3.jpg"),
)
TOP_BANNERS = (
    Banner("Daily Featured", "/banners/banner1.jpg"),
    Banner("Type Matchups", "/banners/banner2.jpg"),
)
SIDE_PANEL_LEFT = Banner("Left Panel", "/side-panels/left.jpg")
SIDE_PANEL_RIGHT = Banner("Right Panel", "/side-panels/right.jpg")

FALLBACK_IMAGE = "https://via.placeholder.com/128x128?text=Pokemon"

TYPE_COLORS = {
    "grass": "green",
    "poison": "magenta",
    "fire": "red",
    "water": "blue",
    "electric": "yellow",
    "flying": "purple",
}
DEFAULT_TYPE_COLOR = "grey50"
