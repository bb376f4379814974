"""Tests for the Rich rendering backend."""

from __future__ import annotations

from rich_select.page import build_page
from rich_select.render import RichBackend
from rich_select.text_input import EditKind, InputAction, TextInput
from rich_select.themes import Theme


def _draw(console, backend):
    console.print(backend.frame())
    return console.file.getvalue()


def test_render_pass_draws_prompt_options_and_help(console):
    backend = RichBackend()
    backend.render_select_prompt("Pick one:", TextInput("it"))
    backend.render_options(
        build_page(["item 0", "item 1", "item 2"], 0, 3, cursor_index=1, total_length=10)
    )
    backend.render_help_message("↑↓ to move")

    output = _draw(console, backend)

    assert "? Pick one: it█" in output
    assert "› item 1" in output
    assert "  item 0" in output
    assert "↓ 7 more below" in output
    assert "more above" not in output
    assert "[↑↓ to move]" in output


def test_text_cursor_is_drawn_inside_filter_text(console):
    text = TextInput("abc")
    text.handle(InputAction(EditKind.MOVE_LEFT))
    backend = RichBackend()
    backend.render_select_prompt("Q", text)

    assert "? Q ab█c" in _draw(console, backend)


def test_scroll_hints_in_the_middle(console):
    backend = RichBackend()
    backend.render_options(build_page(["e", "f", "g"], 4, 3, cursor_index=5, total_length=10))

    output = _draw(console, backend)
    assert "↑ 4 more above" in output
    assert "↓ 3 more below" in output


def test_empty_page_shows_empty_message(console):
    backend = RichBackend(Theme(empty_message="Nothing here"))
    backend.render_options(build_page([], 0, 3, cursor_index=0, total_length=0))

    assert "Nothing here" in _draw(console, backend)


def test_option_text_is_not_parsed_as_markup(console):
    backend = RichBackend()
    backend.render_options(build_page(["[bold]x[/bold]"], 0, 3, cursor_index=0, total_length=1))

    assert "[bold]x[/bold]" in _draw(console, backend)


def test_formatter_controls_option_labels(console):
    backend = RichBackend(formatter=lambda value: f"#{value}")
    backend.render_options(build_page([7, 8], 0, 3, cursor_index=0, total_length=2))

    output = _draw(console, backend)
    assert "› #7" in output
    assert "#8" in output


def test_frame_resets_lines(console):
    backend = RichBackend()
    backend.render_help_message("first")
    backend.frame()
    backend.render_help_message("second")

    output = _draw(console, backend)
    assert "second" in output
    assert "first" not in output
