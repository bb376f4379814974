"""Windowed selection engine.

The engine tracks a cursor over a logical option list that is only ever
partly materialized: it keeps one window of options (``page_size`` long)
fetched from an OptionSource, and refetches that window after every action
that may change it.

Keyboard behavior (via rich_select.actions.decode):
    - Up/Down, Ctrl+P/Ctrl+N (j/k in vim mode): move one option, wrapping
    - PageUp/PageDown: move one page, wrapping
    - Home/End: jump to the first/last option
    - Anything else: edit the filter text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from .actions import Action, FilterInput, SelectAction
from .config import SelectConfig
from .errors import OptionSourceError
from .page import ListOption, Page, build_page
from .source import OptionSource
from .text_input import InputActionResult, TextInput

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


class ActionResult(str, Enum):
    """Whether handling an action requires a redraw."""

    CLEAN = "clean"
    NEEDS_REDRAW = "needs_redraw"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_input(cls, result: InputActionResult) -> ActionResult:
        if result is InputActionResult.UNCHANGED:
            return cls.CLEAN
        return cls.NEEDS_REDRAW


@dataclass
class Window:
    """Which part of the logical list is materialized and highlighted.

    Attributes:
        offset: Logical index of the first fetched option.
        window_length: Number of options requested per fetch.
        total_length: Options matching the filter, as last reported by the source.
        cursor_index: Logical index of the highlighted option.
    """

    offset: int
    window_length: int
    total_length: int = 0
    cursor_index: int = 0


class SelectionEngine(Generic[T]):
    """Cursor, viewport and refetch logic for a filterable option list.

    Args:
        source: Provider of option windows.
        config: Prompt settings (page size, starting cursor and filter text).

    Call setup() once before reading pages; it performs the initial fetch.
    """

    def __init__(self, source: OptionSource[T], config: SelectConfig):
        self.source = source
        self.config = config
        self.input = TextInput(config.starting_filter_text or "")
        self._window = Window(
            offset=config.starting_cursor,
            window_length=config.page_size,
            cursor_index=config.starting_cursor,
        )
        self._options: list[T] = []

    # -- read access -------------------------------------------------------

    @property
    def cursor_index(self) -> int:
        return self._window.cursor_index

    @property
    def offset(self) -> int:
        return self._window.offset

    @property
    def total_length(self) -> int:
        return self._window.total_length

    @property
    def window_length(self) -> int:
        return self._window.window_length

    @property
    def options(self) -> tuple[T, ...]:
        """Snapshot of the fetched window."""
        return tuple(self._options)

    @property
    def filter_text(self) -> str:
        return self.input.content

    # -- cursor ------------------------------------------------------------

    def _derive_offset(self, new_index: int) -> int:
        window = self._window
        return min(
            window.cursor_index,
            max(window.total_length - window.window_length, 0),
            max(new_index - window.window_length // 2, 0),
        )

    def set_cursor(self, new_index: int) -> ActionResult:
        """Highlight a logical index and re-center the viewport around it."""
        if new_index == self._window.cursor_index:
            return ActionResult.CLEAN

        self._window.cursor_index = new_index
        self._window.offset = self._derive_offset(new_index)
        return ActionResult.NEEDS_REDRAW

    def move_cursor(self, direction: Direction, quantity: int = 1, wrap: bool = True) -> ActionResult:
        """Move the cursor by ``quantity`` options.

        With ``wrap`` the cursor wraps around both ends of the list;
        without it the cursor stops at the first/last option.
        """
        total = self._window.total_length
        if total == 0:
            return ActionResult.CLEAN

        cursor = self._window.cursor_index
        if wrap:
            quantity %= total
            if direction is Direction.UP:
                new_index = (cursor + total - quantity) % total
            else:
                new_index = (cursor + quantity) % total
        elif direction is Direction.UP:
            new_index = max(cursor - quantity, 0)
        else:
            new_index = min(cursor + quantity, total - 1)

        return self.set_cursor(new_index)

    def move_to_start(self) -> ActionResult:
        if self._window.total_length == 0:
            return ActionResult.CLEAN
        return self.set_cursor(0)

    def move_to_end(self) -> ActionResult:
        if self._window.total_length == 0:
            return ActionResult.CLEAN
        return self.set_cursor(self._window.total_length - 1)

    # -- fetching ----------------------------------------------------------

    def _fetch(self) -> None:
        window = self._window
        filter_text = self.input.content
        try:
            items, total = self.source.fetch(filter_text, window.offset, window.window_length)
            items = list(items)
            total = int(total)
        except OptionSourceError:
            raise
        except Exception as e:
            raise OptionSourceError(f"Option source failed: {e}") from e

        if total < 0:
            logger.warning(f"Option source reported a negative total ({total})")
            raise OptionSourceError(f"Option source reported a negative total: {total}")
        if len(items) > window.window_length:
            logger.warning(
                f"Option source returned {len(items)} options for a window of {window.window_length}"
            )
            raise OptionSourceError(
                f"Option source returned {len(items)} options, limit was {window.window_length}"
            )

        available = max(total - window.offset, 0)
        if len(items) > available:
            logger.warning(
                f"Option source returned {len(items)} options at offset {window.offset} of {total}"
            )
            raise OptionSourceError(
                f"Option source returned {len(items)} options past the end of {total} matches"
            )

        logger.debug(
            f"Fetched {len(items)}/{total} options for {filter_text!r} at offset {window.offset}"
        )
        self._options = items
        window.total_length = total

    def refetch(self) -> None:
        """Re-materialize the window for the current filter text and offset.

        The cursor is then clamped into the fetched window and the list
        bounds, which matters when a new filter shrinks the result set
        under the cursor. If that moves the offset, the window is fetched
        again at the new offset.
        """
        self._fetch()
        window = self._window
        fetched_offset = window.offset

        if window.total_length == 0:
            window.cursor_index = 0
            window.offset = 0
            return

        window.cursor_index = min(
            max(window.cursor_index, window.offset),
            window.offset + window.window_length - 1,
            window.total_length - 1,
        )
        window.offset = self._derive_offset(window.cursor_index)

        if window.offset != fetched_offset:
            logger.debug(f"Offset moved {fetched_offset} -> {window.offset}, fetching again")
            self._fetch()

    def setup(self) -> None:
        """Initial fetch; must run before the first page is built."""
        self.refetch()

    # -- actions -----------------------------------------------------------

    def handle(self, action: SelectAction) -> ActionResult:
        """Apply one decoded action."""
        if isinstance(action, FilterInput):
            result = self.input.handle(action.action)
            if result is InputActionResult.CONTENT_CHANGED:
                self.refetch()
            return ActionResult.from_input(result)

        if action is Action.MOVE_UP:
            result = self.move_cursor(Direction.UP, 1)
        elif action is Action.MOVE_DOWN:
            result = self.move_cursor(Direction.DOWN, 1)
        elif action is Action.PAGE_UP:
            result = self.move_cursor(Direction.UP, self._window.window_length)
        elif action is Action.PAGE_DOWN:
            result = self.move_cursor(Direction.DOWN, self._window.window_length)
        elif action is Action.MOVE_TO_START:
            result = self.move_to_start()
        elif action is Action.MOVE_TO_END:
            result = self.move_to_end()
        else:
            raise ValueError(f"Unknown action: {action!r}")

        self.refetch()
        return result

    # -- output ------------------------------------------------------------

    def highlighted_index(self) -> int | None:
        """Index of the highlighted option within the fetched window, if any."""
        local = self._window.cursor_index - self._window.offset
        if 0 <= local < len(self._options):
            return local
        return None

    def has_answer_highlighted(self) -> bool:
        return self.highlighted_index() is not None

    def submit(self) -> ListOption[T] | None:
        """Take the highlighted option out of the window.

        Returns:
            The option with its logical index, or None when nothing is
            highlighted (empty list or cursor outside the fetched window).
        """
        local = self.highlighted_index()
        if local is None:
            return None
        value = self._options.pop(local)
        return ListOption(self._window.cursor_index, value)

    def page(self) -> Page[T]:
        window = self._window
        return build_page(
            self._options,
            window.offset,
            window.window_length,
            window.cursor_index,
            window.total_length,
        )
