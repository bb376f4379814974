"""Interactive select prompt using Rich.Live.

Example:
    from rich_select import ListOptionSource, SelectPrompt

    prompt = SelectPrompt(
        "Pick a fruit:",
        ListOptionSource(["apple", "banana", "cherry"]),
        page_size=5,
    )
    answer = prompt.show()  # ListOption(index=1, value="banana") or None
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import readchar
from rich.console import Console
from rich.live import Live
from rich.markup import escape

from .actions import decode
from .config import SelectConfig
from .engine import ActionResult, SelectionEngine
from .keys import is_enter, is_escape, parse_key
from .page import ListOption
from .render import RichBackend, SelectBackend
from .source import OptionSource
from .themes import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)

DEFAULT_HELP_MESSAGE = "↑↓ to move, enter to select, type to filter"


class SelectPrompt:
    """Filterable single-choice prompt over a windowed option source.

    Keyboard controls:
        - Up/Down, Ctrl+P/Ctrl+N (j/k in vim mode): Navigate, wrapping around
        - PageUp/PageDown, Home/End: Jump by page / to either end
        - Typing, Backspace, Left/Right: Edit the filter text
        - Enter: Submit the highlighted option
        - Esc or Ctrl+C: Cancel

    Args:
        message: Question shown in front of the filter input.
        source: Provider of options (see rich_select.source).
        vim_mode: Bind j/k to down/up.
        page_size: Options shown per page.
        starting_cursor: Logical index highlighted initially.
        starting_filter_text: Initial filter text.
        help_message: Hint under the list; None hides it.
        formatter: Turns an option value into display text.
        console: Rich Console for output (auto-created if not provided).
        theme: Visual theme for styling.
        read_key: Callable returning the next raw key (default: readchar.readkey).

    Raises:
        ValueError: If page_size < 1 or starting_cursor < 0.
    """

    def __init__(
        self,
        message: str,
        source: OptionSource,
        *,
        vim_mode: bool = False,
        page_size: int = 7,
        starting_cursor: int = 0,
        starting_filter_text: str | None = None,
        help_message: str | None = DEFAULT_HELP_MESSAGE,
        formatter: Callable[[Any], str] = str,
        console: Console | None = None,
        theme: Theme | None = None,
        read_key: Callable[[], str] | None = None,
    ):
        self.message = message
        self.config = SelectConfig(
            vim_mode=vim_mode,
            page_size=page_size,
            starting_cursor=starting_cursor,
            starting_filter_text=starting_filter_text,
        )
        self.help_message = help_message
        self.formatter = formatter
        self.console = console or Console()
        self.theme = theme or DEFAULT_THEME
        self.engine: SelectionEngine = SelectionEngine(source, self.config)
        self.backend = RichBackend(self.theme, formatter)
        self._read_key = read_key or readchar.readkey

    def render(self, backend: SelectBackend) -> None:
        """Run one render pass against a backend."""
        backend.render_select_prompt(self.message, self.engine.input)
        backend.render_options(self.engine.page())
        if self.help_message is not None:
            backend.render_help_message(self.help_message)

    def _frame(self):
        self.render(self.backend)
        return self.backend.frame()

    def format_answer(self, answer: ListOption) -> str:
        return self.formatter(answer.value)

    def _print_answer(self, answer: ListOption) -> None:
        color = self.theme.answer_color
        marker = f"[bold {self.theme.prompt_color}]{self.theme.prompt_icon}[/bold {self.theme.prompt_color}]"
        self.console.print(
            f"{marker} [bold]{escape(self.message)}[/bold] "
            f"[{color}]{escape(self.format_answer(answer))}[/{color}]"
        )

    def show(self) -> ListOption | None:
        """Display the prompt and block until the user submits or cancels.

        Returns:
            The chosen option with its logical index, or None if cancelled.

        Raises:
            OptionSourceError: If the option source fails.
        """
        self.engine.setup()
        answer = None

        with Live(self._frame(), console=self.console, refresh_per_second=20, transient=True) as live:
            while True:
                try:
                    key = parse_key(self._read_key())
                except KeyboardInterrupt:
                    logger.debug("Prompt interrupted")
                    break

                if is_escape(key):
                    logger.debug("Prompt cancelled")
                    break

                if is_enter(key):
                    if not self.engine.has_answer_highlighted():
                        continue
                    answer = self.engine.submit()
                    break

                action = decode(key, self.config)
                if action is None:
                    continue

                if self.engine.handle(action) is ActionResult.NEEDS_REDRAW:
                    live.update(self._frame())

        if answer is not None:
            self._print_answer(answer)
        return answer
