"""Tests for key-to-action decoding."""

from __future__ import annotations

import readchar

from rich_select.actions import Action, FilterInput, decode
from rich_select.config import SelectConfig
from rich_select.keys import parse_key
from rich_select.text_input import EditKind, InputAction

PLAIN = SelectConfig()
VIM = SelectConfig(vim_mode=True)


def _decode(raw, config=PLAIN):
    return decode(parse_key(raw), config)


def test_arrow_and_emacs_navigation():
    assert _decode(readchar.key.UP) is Action.MOVE_UP
    assert _decode("\x10") is Action.MOVE_UP  # Ctrl+P
    assert _decode(readchar.key.DOWN) is Action.MOVE_DOWN
    assert _decode("\x0e") is Action.MOVE_DOWN  # Ctrl+N


def test_page_and_jump_keys():
    assert _decode(readchar.key.PAGE_UP) is Action.PAGE_UP
    assert _decode(readchar.key.PAGE_DOWN) is Action.PAGE_DOWN
    assert _decode(readchar.key.HOME) is Action.MOVE_TO_START
    assert _decode(readchar.key.END) is Action.MOVE_TO_END


def test_vim_keys_win_over_filter_input():
    assert _decode("j", VIM) is Action.MOVE_DOWN
    assert _decode("k", VIM) is Action.MOVE_UP


def test_vim_keys_type_when_vim_mode_is_off():
    assert _decode("j") == FilterInput(InputAction.write("j"))
    assert _decode("k") == FilterInput(InputAction.write("k"))


def test_vim_mode_keeps_other_bindings():
    assert _decode(readchar.key.UP, VIM) is Action.MOVE_UP
    assert _decode("J", VIM) == FilterInput(InputAction.write("J"))


def test_modified_navigation_keys_fall_through():
    # Ctrl+Up is not navigation and the filter input has no use for it
    assert _decode("\x1b[1;5A") is None
    # Ctrl+Left is a filter edit
    assert _decode("\x1b[1;5D") == FilterInput(InputAction(EditKind.MOVE_WORD_LEFT))


def test_other_control_letters_go_to_filter_input():
    assert _decode("\x17") == FilterInput(InputAction(EditKind.DELETE_WORD_LEFT))
    assert _decode("\x02") is None  # Ctrl+B


def test_unknown_keys_decode_to_nothing():
    assert _decode("\x1b[99~") is None
    assert _decode("\x1bp") is None  # Alt+P
