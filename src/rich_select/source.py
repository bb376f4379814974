"""Option sources: where the select prompt gets its options from.

A source only has to answer one question: "for this filter text, which
options sit in [offset, offset + limit), and how many match in total?".
That lets a prompt page over lists that are never fully built in memory.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")

logger = logging.getLogger(__name__)


@runtime_checkable
class OptionSource(Protocol[T]):
    """Windowed, filterable provider of options.

    Implementations must be deterministic for a fixed
    (filter_text, offset, limit) within one prompt session, return at most
    ``limit`` items, and return no items when ``offset >= total``.
    """

    def fetch(self, filter_text: str, offset: int, limit: int) -> tuple[Sequence[T], int]:
        """Return (items in the requested window, total matching count)."""
        ...


def contains_filter(filter_text: str, option: object) -> bool:
    """Case-insensitive substring match on the option's string form."""
    return filter_text.lower() in str(option).lower()


class ListOptionSource(Generic[T]):
    """In-memory source over a fixed list of options.

    The filtered list is cached per filter text, so moving the cursor
    (which refetches with the same text) does not rescan every option.

    Args:
        options: All options, in display order.
        filter: Predicate ``(filter_text, option) -> bool``; defaults to
            case-insensitive substring matching.
    """

    def __init__(
        self,
        options: Sequence[T],
        filter: Callable[[str, T], bool] | None = None,
    ):
        self.options = list(options)
        self.filter = filter or contains_filter
        self._cached_text: str | None = None
        self._cached_matches: list[T] = []

    def _matches(self, filter_text: str) -> list[T]:
        if filter_text != self._cached_text:
            if filter_text:
                self._cached_matches = [o for o in self.options if self.filter(filter_text, o)]
            else:
                self._cached_matches = self.options
            self._cached_text = filter_text
            logger.debug(f"Filter {filter_text!r} matched {len(self._cached_matches)} options")
        return self._cached_matches

    def fetch(self, filter_text: str, offset: int, limit: int) -> tuple[list[T], int]:
        matches = self._matches(filter_text)
        return matches[offset : offset + limit], len(matches)


class CallableOptionSource(Generic[T]):
    """Adapt a plain function to the OptionSource protocol.

    Example:
        def numbers(text, offset, limit):
            total = 1_000_000
            end = min(offset + limit, total)
            return [f"item {i}" for i in range(offset, end)], total

        source = CallableOptionSource(numbers)
    """

    def __init__(self, fetch: Callable[[str, int, int], tuple[Sequence[T], int]]):
        self._fetch = fetch

    def fetch(self, filter_text: str, offset: int, limit: int) -> tuple[Sequence[T], int]:
        return self._fetch(filter_text, offset, limit)
