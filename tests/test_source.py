"""Tests for option sources."""

from __future__ import annotations

from rich_select.source import CallableOptionSource, ListOptionSource, OptionSource, contains_filter


def test_list_source_windows_and_totals():
    source = ListOptionSource(["apple", "banana", "cherry", "date"])
    assert source.fetch("", 0, 2) == (["apple", "banana"], 4)
    assert source.fetch("", 3, 2) == (["date"], 4)
    assert source.fetch("", 10, 2) == ([], 4)


def test_list_source_default_filter_is_case_insensitive():
    source = ListOptionSource(["Apple", "banana", "PINEAPPLE"])
    assert source.fetch("apple", 0, 10) == (["Apple", "PINEAPPLE"], 2)


def test_list_source_custom_filter():
    source = ListOptionSource(range(20), filter=lambda text, n: n % int(text) == 0)
    items, total = source.fetch("5", 1, 2)
    assert items == [5, 10]
    assert total == 4


def test_list_source_filters_once_per_text():
    seen = []

    def counting_filter(text, option):
        seen.append(option)
        return True

    source = ListOptionSource(["a", "b", "c"], filter=counting_filter)
    source.fetch("x", 0, 1)
    source.fetch("x", 1, 1)
    source.fetch("x", 2, 1)
    assert len(seen) == 3

    source.fetch("y", 0, 1)
    assert len(seen) == 6


def test_contains_filter_uses_string_form():
    assert contains_filter("42", 1042)
    assert not contains_filter("x", 1042)


def test_sources_satisfy_protocol():
    assert isinstance(ListOptionSource([]), OptionSource)
    assert isinstance(CallableOptionSource(lambda text, offset, limit: ([], 0)), OptionSource)


def test_callable_source_passes_arguments_through():
    calls = []

    def fetch(text, offset, limit):
        calls.append((text, offset, limit))
        return ["x"], 1

    source = CallableOptionSource(fetch)
    assert source.fetch("q", 3, 5) == (["x"], 1)
    assert calls == [("q", 3, 5)]
