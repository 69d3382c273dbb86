import pytest

from pokescroll.services.carousel import CarouselState


@pytest.fixture
def carousel():
    return CarouselState(["a", "b", "c"])


class TestCarouselState:
    def test_tick_wraps_around(self, carousel):
        assert [carousel.tick() for _ in range(4)] == [1, 2, 0, 1]

    def test_prev_wraps_to_last(self, carousel):
        assert carousel.prev() == 2
        assert carousel.current == "c"

    def test_go_to_jumps(self, carousel):
        assert carousel.go_to(2) == 2

    def test_go_to_out_of_range_is_ignored(self, carousel):
        carousel.go_to(1)
        assert carousel.go_to(7) == 1
        assert carousel.go_to(-1) == 1

    def test_empty_carousel_has_no_current(self):
        empty = CarouselState([])
        assert empty.tick() == 0
        assert empty.prev() == 0
        assert empty.current is None
