from enum import Enum

from loguru import logger

from pokescroll.services.browse_state import BrowseState

DEFAULT_SCROLL_MARGIN = 4


class TriggerPhase(Enum):
    IDLE = "idle"
    ARMED = "armed"
    FIRING = "firing"


class ScrollTrigger:
    """Advances the page counter when the end of the list comes into view.

    The sentinel is the end of the scrolled content. It counts as visible
    once the viewport is within ``margin`` rows of it, so the next page is
    requested slightly before the user reaches the bottom.

    After firing the trigger stays latched in ``FIRING`` until ``rearm`` is
    called, which the owner does whenever the in-flight state changes. This
    keeps a burst of scroll events from advancing the counter more than once
    before the fetch it started has taken the in-flight gate.
    """

    def __init__(self, state: BrowseState, margin: int = DEFAULT_SCROLL_MARGIN):
        self.state = state
        self.margin = margin
        self.phase = TriggerPhase.IDLE
        self._released = False

    @staticmethod
    def sentinel_visible(scroll_y: float, max_scroll_y: float, margin: int) -> bool:
        return max_scroll_y - scroll_y <= margin

    @property
    def released(self) -> bool:
        return self._released

    def observe(self, visible: bool) -> bool:
        """Feed one visibility observation; return True if the page advanced."""
        if self._released or self.phase is TriggerPhase.FIRING:
            return False

        if not visible or self.state.in_flight or self.state.exhausted:
            self.phase = TriggerPhase.IDLE
            return False

        self.phase = TriggerPhase.ARMED
        page = self.state.advance_page()
        self.phase = TriggerPhase.FIRING
        logger.debug(f"Sentinel visible, advancing to page {page}")
        return True

    def rearm(self) -> None:
        if not self._released:
            self.phase = TriggerPhase.IDLE

    def release(self) -> None:
        self._released = True
        self.phase = TriggerPhase.IDLE
