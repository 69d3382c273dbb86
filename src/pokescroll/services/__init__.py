from .browse_state import BrowseState
from .carousel import CarouselState
from .page_fetcher import PageFetcher
from .scroll_trigger import ScrollTrigger, TriggerPhase
from .search_filter import filter_items
from .view_renderer import EmptyMessage, ViewMode, ViewModel, select_view

__all__ = [
    "BrowseState",
    "CarouselState",
    "EmptyMessage",
    "PageFetcher",
    "ScrollTrigger",
    "TriggerPhase",
    "ViewMode",
    "ViewModel",
    "filter_items",
    "select_view",
]
