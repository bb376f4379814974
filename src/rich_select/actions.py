"""Key-to-action decoding for the select prompt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .config import SelectConfig
from .keys import Key, KeyCode, Modifiers
from .text_input import InputAction


class Action(str, Enum):
    """Navigation actions on the option list."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    MOVE_TO_START = "move_to_start"
    MOVE_TO_END = "move_to_end"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FilterInput:
    """An edit forwarded to the filter text input."""

    action: InputAction


SelectAction = Union[Action, FilterInput]

_VIM_KEYS = {
    "k": Action.MOVE_UP,
    "j": Action.MOVE_DOWN,
}

_NAVIGATION_KEYS = {
    KeyCode.UP: Action.MOVE_UP,
    KeyCode.DOWN: Action.MOVE_DOWN,
    KeyCode.PAGE_UP: Action.PAGE_UP,
    KeyCode.PAGE_DOWN: Action.PAGE_DOWN,
    KeyCode.HOME: Action.MOVE_TO_START,
    KeyCode.END: Action.MOVE_TO_END,
}

_CONTROL_KEYS = {
    "p": Action.MOVE_UP,
    "n": Action.MOVE_DOWN,
}


def decode(key: Key, config: SelectConfig) -> SelectAction | None:
    """Map a key press to a select action.

    Vim bindings (when enabled) win over everything else, so "j" moves the
    cursor instead of typing into the filter. Keys that are neither
    navigation nor a filter edit decode to None and should be ignored.
    """
    if config.vim_mode and key.code is KeyCode.CHAR and key.modifiers == Modifiers.NONE:
        action = _VIM_KEYS.get(key.char)
        if action is not None:
            return action

    if key.modifiers == Modifiers.NONE and key.code in _NAVIGATION_KEYS:
        return _NAVIGATION_KEYS[key.code]

    if key.code is KeyCode.CHAR and key.modifiers == Modifiers.CONTROL and key.char in _CONTROL_KEYS:
        return _CONTROL_KEYS[key.char]

    edit = InputAction.from_key(key)
    if edit is None:
        return None
    return FilterInput(edit)
