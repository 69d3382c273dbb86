"""Test doubles shared across the suite."""

import asyncio
from collections.abc import Callable

import httpx

from pokescroll.exceptions import CatalogError
from pokescroll.models import Item
from pokescroll.services.browse_state import BrowseState


def make_item(name: str, types: tuple[str, ...] = ("normal",)) -> Item:
    return Item(name=name, image=f"https://img.example/{name}.png", types=types, height=7, weight=69)


def make_items(start: int, count: int, prefix: str = "item-") -> list[Item]:
    return [make_item(f"{prefix}{i}") for i in range(start, start + count)]


def names(items) -> list[str]:
    return [item.name for item in items]


class FakeSource:
    """Page source serving fixed pages of ``limit`` items.

    Pages listed in ``failing`` raise; pages past ``last_page`` are empty.
    ``gate`` holds every fetch open until it is set.
    """

    def __init__(
        self,
        last_page: int = 2,
        failing: dict[int, CatalogError] | None = None,
        gate: asyncio.Event | None = None,
    ):
        self.last_page = last_page
        self.failing = failing or {}
        self.gate = gate
        self.calls: list[tuple[int, int]] = []
        self.observed_in_flight: list[bool] = []
        self.state: BrowseState | None = None

    async def fetch_page(self, page: int, limit: int) -> list[Item]:
        self.calls.append((page, limit))
        if self.state is not None:
            self.observed_in_flight.append(self.state.in_flight)
        if self.gate is not None:
            await self.gate.wait()
        if page in self.failing:
            raise self.failing[page]
        if page > self.last_page:
            return []
        return make_items((page - 1) * limit + 1, limit)

    @property
    def pages_requested(self) -> list[int]:
        return [page for page, _ in self.calls]


def mock_async_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
