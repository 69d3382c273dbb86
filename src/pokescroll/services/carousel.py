from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class CarouselState(Generic[T]):
    """Index over a fixed list of slides that wraps in both directions."""

    slides: Sequence[T]
    index: int = 0

    @property
    def count(self) -> int:
        return len(self.slides)

    @property
    def current(self) -> T | None:
        if 0 <= self.index < len(self.slides):
            return self.slides[self.index]
        return None

    def tick(self) -> int:
        """Advance on the rotation timer."""
        return self.next()

    def next(self) -> int:
        if self.slides:
            self.index = (self.index + 1) % len(self.slides)
        return self.index

    def prev(self) -> int:
        if self.slides:
            self.index = (self.index - 1 + len(self.slides)) % len(self.slides)
        return self.index

    def go_to(self, index: int) -> int:
        """Jump to ``index``; out-of-range requests are ignored."""
        if 0 <= index < len(self.slides):
            self.index = index
        return self.index
