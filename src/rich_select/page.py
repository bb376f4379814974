"""Page descriptors handed to the rendering backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ListOption(Generic[T]):
    """An option paired with its logical index in the filtered list."""

    index: int
    value: T

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Page(Generic[T]):
    """What the backend needs to draw the option list.

    Attributes:
        first: The page starts at logical index 0.
        last: The page reaches the end of the filtered list.
        items: Fetched options tagged with their logical index.
        cursor: Position of the highlighted option within ``items``, or None.
        total: Number of options matching the filter.
    """

    first: bool
    last: bool
    items: tuple[ListOption[T], ...]
    cursor: int | None
    total: int

    @property
    def above(self) -> int:
        """Options hidden above the page."""
        if not self.items:
            return 0
        return self.items[0].index

    @property
    def below(self) -> int:
        """Options hidden below the page."""
        if not self.items:
            return 0
        return max(self.total - self.items[-1].index - 1, 0)


def build_page(
    options: Sequence[T],
    offset: int,
    window_length: int,
    cursor_index: int,
    total_length: int,
) -> Page[T]:
    """Project the engine's window state into a Page."""
    local = cursor_index - offset
    return Page(
        first=offset == 0,
        last=offset + window_length >= total_length,
        items=tuple(ListOption(offset + i, option) for i, option in enumerate(options)),
        cursor=local if 0 <= local < len(options) else None,
        total=total_length,
    )
