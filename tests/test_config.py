"""Tests for SelectConfig."""

from __future__ import annotations

import dataclasses

import pytest

from rich_select.config import SelectConfig


def test_defaults():
    config = SelectConfig()
    assert config.vim_mode is False
    assert config.page_size == 7
    assert config.starting_cursor == 0
    assert config.starting_filter_text is None


def test_config_is_immutable():
    config = SelectConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.page_size = 3


@pytest.mark.parametrize("page_size", [0, -1])
def test_page_size_must_be_positive(page_size):
    with pytest.raises(ValueError, match="page_size"):
        SelectConfig(page_size=page_size)


def test_starting_cursor_must_not_be_negative():
    with pytest.raises(ValueError, match="starting_cursor"):
        SelectConfig(starting_cursor=-1)
