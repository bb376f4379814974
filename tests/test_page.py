"""Tests for page descriptor construction."""

from __future__ import annotations

from rich_select.page import ListOption, build_page


def test_first_page():
    page = build_page(["a", "b", "c"], offset=0, window_length=3, cursor_index=1, total_length=10)
    assert page.first
    assert not page.last
    assert page.items == (ListOption(0, "a"), ListOption(1, "b"), ListOption(2, "c"))
    assert page.cursor == 1
    assert page.total == 10
    assert page.above == 0
    assert page.below == 7


def test_middle_page_tags_logical_indexes():
    page = build_page(["e", "f", "g"], offset=4, window_length=3, cursor_index=6, total_length=10)
    assert not page.first
    assert not page.last
    assert [option.index for option in page.items] == [4, 5, 6]
    assert page.cursor == 2
    assert page.above == 4
    assert page.below == 3


def test_short_last_page():
    page = build_page(["i", "j"], offset=8, window_length=3, cursor_index=9, total_length=10)
    assert page.last
    assert page.cursor == 1
    assert page.below == 0


def test_cursor_outside_slice_is_absent():
    page = build_page(["a"], offset=0, window_length=3, cursor_index=2, total_length=1)
    assert page.cursor is None


def test_empty_page():
    page = build_page([], offset=0, window_length=3, cursor_index=0, total_length=0)
    assert page.first
    assert page.last
    assert page.items == ()
    assert page.cursor is None
    assert page.above == 0
    assert page.below == 0


def test_list_option_str_uses_value():
    assert str(ListOption(3, 42)) == "42"
