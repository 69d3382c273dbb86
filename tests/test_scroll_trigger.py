import pytest

from pokescroll.services.page_fetcher import PageFetcher
from pokescroll.services.scroll_trigger import ScrollTrigger, TriggerPhase
from pokescroll.services.search_filter import filter_items
from tests.helpers import FakeSource, names


class TestSentinelVisibility:
    def test_visible_within_margin(self):
        assert ScrollTrigger.sentinel_visible(96, 100, 4)

    def test_hidden_beyond_margin(self):
        assert not ScrollTrigger.sentinel_visible(90, 100, 4)

    def test_short_content_is_always_visible(self):
        assert ScrollTrigger.sentinel_visible(0, 0, 0)


class TestScrollTrigger:
    def test_fires_when_visible_and_idle(self, state):
        trigger = ScrollTrigger(state)

        assert trigger.observe(True) is True
        assert state.page == 2
        assert trigger.phase is TriggerPhase.FIRING

    def test_not_visible_does_nothing(self, state):
        trigger = ScrollTrigger(state)

        assert trigger.observe(False) is False
        assert state.page == 1
        assert trigger.phase is TriggerPhase.IDLE

    def test_no_fire_while_in_flight(self, state):
        trigger = ScrollTrigger(state)
        state.begin_fetch()

        for _ in range(5):
            assert trigger.observe(True) is False

        assert state.page == 1

    def test_latched_until_rearmed(self, state):
        trigger = ScrollTrigger(state)
        trigger.observe(True)

        assert trigger.observe(True) is False
        assert state.page == 2

        trigger.rearm()
        assert trigger.observe(True) is True
        assert state.page == 3

    def test_no_fire_once_exhausted(self, state):
        trigger = ScrollTrigger(state)
        state.mark_exhausted()

        assert trigger.observe(True) is False
        assert state.page == 1

    def test_released_trigger_never_fires(self, state):
        trigger = ScrollTrigger(state)
        trigger.release()
        trigger.rearm()

        assert trigger.observe(True) is False
        assert trigger.released


class TestInfiniteScrollScenarios:
    @pytest.mark.asyncio
    async def test_mount_then_scroll_loads_two_pages(self, state):
        source = FakeSource(last_page=10)
        fetcher = PageFetcher(source, state, page_size=20, on_change=lambda: trigger.rearm())
        trigger = ScrollTrigger(state)

        await fetcher.fetch(state.page)
        assert len(state.items) == 20
        assert len(filter_items(state.items, "")) == 20

        assert trigger.observe(True)
        await fetcher.fetch(state.page)

        assert state.page == 2
        assert names(state.items) == [f"item-{i}" for i in range(1, 41)]
        assert names(filter_items(state.items, "item-1")) == ["item-1"] + [f"item-{i}" for i in range(10, 20)]

    @pytest.mark.asyncio
    async def test_failed_page_is_skipped(self, state, network_error):
        source = FakeSource(last_page=10, failing={3: network_error})
        fetcher = PageFetcher(source, state, on_change=lambda: trigger.rearm())
        trigger = ScrollTrigger(state)
        await fetcher.fetch(state.page)
        trigger.observe(True)
        await fetcher.fetch(state.page)

        trigger.observe(True)
        await fetcher.fetch(state.page)

        assert state.page == 3
        assert len(state.items) == 40
        assert state.in_flight is False

        assert trigger.observe(True)
        assert state.page == 4
        await fetcher.fetch(state.page)
        assert names(state.items)[40] == "item-61"
