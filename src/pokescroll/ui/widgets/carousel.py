from collections.abc import Sequence

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Button, Label, Static

from pokescroll.services.carousel import CarouselState
from pokescroll.ui.constants import CAROUSEL_INTERVAL_SECONDS, CAROUSEL_SLIDES, TOP_BANNERS, Banner
from pokescroll.ui.utils import format_slide_dots, resolve_image


class Carousel(Static):
    """Rotating banner with previous/next buttons and a slide counter.

    The rotation timer runs for as long as the widget is mounted. Manual
    navigation restarts it when ``reset_on_navigate`` is set, so a chosen
    slide stays up for a full interval; otherwise the next tick simply
    advances from wherever the user left it.
    """

    index: int = reactive(0)

    def __init__(
        self,
        slides: Sequence[Banner] = CAROUSEL_SLIDES,
        *,
        interval: float = CAROUSEL_INTERVAL_SECONDS,
        reset_on_navigate: bool = True,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._state = CarouselState(list(slides))
        self._interval = interval
        self._reset_on_navigate = reset_on_navigate
        self._timer: Timer | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="carousel-frame"):
            yield Label("", id="carousel-counter")
            with Horizontal(id="carousel-body"):
                yield Button("‹", id="carousel-prev", classes="carousel-nav")
                yield Static("", id="carousel-slide", markup=False)
                yield Button("›", id="carousel-next", classes="carousel-nav")
            yield Label("", id="carousel-dots")

    def on_mount(self) -> None:
        self._timer = self.set_interval(self._interval, self._on_tick)
        self._render_slide()

    def on_unmount(self) -> None:
        timer = self._timer
        self._timer = None
        if timer is not None:
            timer.stop()

    def watch_index(self, index: int) -> None:
        self._render_slide()

    @property
    def slide_count(self) -> int:
        return self._state.count

    @property
    def current_slide(self) -> Banner | None:
        return self._state.current

    def show_next(self) -> None:
        self.index = self._state.next()
        self._restart_timer()

    def show_prev(self) -> None:
        self.index = self._state.prev()
        self._restart_timer()

    def go_to(self, index: int) -> None:
        self.index = self._state.go_to(index)
        self._restart_timer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "carousel-prev":
            self.show_prev()
        elif event.button.id == "carousel-next":
            self.show_next()

    def _on_tick(self) -> None:
        self.index = self._state.tick()

    def _restart_timer(self) -> None:
        if self._reset_on_navigate and self._timer is not None:
            self._timer.reset()

    def _render_slide(self) -> None:
        if self._timer is None:
            return
        slide = self._state.current
        counter = self.query_one("#carousel-counter", Label)
        body = self.query_one("#carousel-slide", Static)
        dots = self.query_one("#carousel-dots", Label)
        if slide is None:
            counter.update("0 / 0")
            body.update("")
            dots.update("")
            return
        counter.update(f"{self._state.index + 1} / {self._state.count}")
        body.update(f"{slide.title}\n{resolve_image(slide.image)}")
        dots.update(format_slide_dots(self._state.index, self._state.count))


class TopBanners(Static):
    """Two fixed banners beside the carousel"""

    def __init__(self, banners: Sequence[Banner] = TOP_BANNERS, **kwargs):
        super().__init__(**kwargs)
        self._banners = list(banners)

    def compose(self) -> ComposeResult:
        for banner in self._banners:
            yield Static(f"{banner.title}\n{resolve_image(banner.image)}", classes="top-banner", markup=False)
