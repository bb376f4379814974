"""Rendering backends for the select prompt.

A render pass calls, in order, render_select_prompt, render_options and
(when a help message is set) render_help_message. RichBackend collects
those into Rich markup lines and frame() wraps them in a Panel for
Rich.Live to display.
"""

from __future__ import annotations

from typing import Protocol

from rich.markup import escape
from rich.panel import Panel

from .page import Page
from .text_input import TextInput
from .themes import DEFAULT_THEME, Theme


class SelectBackend(Protocol):
    """Drawing surface for the select prompt."""

    def render_select_prompt(self, message: str, text_input: TextInput) -> None: ...

    def render_options(self, page: Page) -> None: ...

    def render_help_message(self, text: str) -> None: ...


class RichBackend:
    """Builds a Rich Panel from the three render calls.

    Args:
        theme: Visual theme for styling.
        formatter: Turns an option value into display text (default: str).
    """

    def __init__(self, theme: Theme | None = None, formatter=str):
        self.theme = theme or DEFAULT_THEME
        self.formatter = formatter
        self._lines: list[str] = []

    def _dim(self, text: str) -> str:
        return f"[{self.theme.dim_color}]{text}[/{self.theme.dim_color}]"

    def render_select_prompt(self, message: str, text_input: TextInput) -> None:
        theme = self.theme
        content = text_input.content
        cursor = text_input.cursor
        before = escape(content[:cursor])
        after = escape(content[cursor:])
        marker = f"[bold {theme.prompt_color}]{theme.prompt_icon}[/bold {theme.prompt_color}]"
        self._lines.append(
            f"{marker} [bold]{escape(message)}[/bold] {before}{theme.text_cursor_icon}{after}"
        )

    def render_options(self, page: Page) -> None:
        theme = self.theme

        if not page.items:
            self._lines.append(self._dim(f"  {theme.empty_message}"))
            return

        if not page.first and page.above:
            self._lines.append(self._dim(f"  {theme.scroll_up_icon} {page.above} more above"))

        for i, option in enumerate(page.items):
            label = escape(self.formatter(option.value))
            if i == page.cursor:
                self._lines.append(
                    f"[{theme.selected_color}]{theme.cursor_icon} {label}[/{theme.selected_color}]"
                )
            else:
                self._lines.append(f"  {label}")

        if not page.last and page.below:
            self._lines.append(self._dim(f"  {theme.scroll_down_icon} {page.below} more below"))

    def render_help_message(self, text: str) -> None:
        self._lines.append("")
        self._lines.append(self._dim(escape(f"[{text}]")))

    def frame(self) -> Panel:
        """Wrap the lines of the last render pass in a Panel and reset."""
        content = "\n".join(self._lines)
        self._lines = []
        return Panel(
            content,
            border_style=self.theme.border_color,
            width=self.theme.panel_width,
        )
