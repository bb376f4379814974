"""Keyboard input model for rich_select.

readchar hands us raw strings ("\\x1b[A", "\\x10", "k", ...). parse_key turns
them into Key values so the decoders can match on a key code plus an exact
modifier set instead of comparing escape sequences inline.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, Flag

import readchar


class KeyCode(str, Enum):
    """Base key, independent of modifiers."""

    CHAR = "char"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    BACKSPACE = "backspace"
    DELETE = "delete"
    ENTER = "enter"
    ESCAPE = "escape"
    TAB = "tab"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class Modifiers(Flag):
    """Modifier bitmask, laid out like the xterm CSI modifier parameter."""

    NONE = 0
    SHIFT = 1
    ALT = 2
    CONTROL = 4


@dataclass(frozen=True)
class Key:
    """A decoded key press.

    Attributes:
        code: Base key.
        char: The character for CHAR keys (lowercase letter for Control+letter).
        modifiers: Exact set of modifiers held.
        raw: The string readchar returned.
    """

    code: KeyCode
    char: str | None = None
    modifiers: Modifiers = Modifiers.NONE
    raw: str = ""

    def is_char(self, char: str, modifiers: Modifiers = Modifiers.NONE) -> bool:
        """Check for a character key with exactly these modifiers."""
        return self.code is KeyCode.CHAR and self.char == char and self.modifiers == modifiers


_NAMED_KEYS: dict[str, KeyCode] = {
    readchar.key.UP: KeyCode.UP,
    readchar.key.DOWN: KeyCode.DOWN,
    readchar.key.LEFT: KeyCode.LEFT,
    readchar.key.RIGHT: KeyCode.RIGHT,
    readchar.key.PAGE_UP: KeyCode.PAGE_UP,
    readchar.key.PAGE_DOWN: KeyCode.PAGE_DOWN,
    readchar.key.HOME: KeyCode.HOME,
    readchar.key.END: KeyCode.END,
    readchar.key.SUPR: KeyCode.DELETE,
    readchar.key.BACKSPACE: KeyCode.BACKSPACE,
    readchar.key.ENTER: KeyCode.ENTER,
    readchar.key.ESC: KeyCode.ESCAPE,
    readchar.key.TAB: KeyCode.TAB,
    # Terminal variations
    "\x1b[1~": KeyCode.HOME,
    "\x1bOH": KeyCode.HOME,
    "\x1b[4~": KeyCode.END,
    "\x1bOF": KeyCode.END,
    "\x7f": KeyCode.BACKSPACE,
    "\b": KeyCode.BACKSPACE,
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "\x1b\x1b": KeyCode.ESCAPE,
}

# ESC [ 1 ; <modifier> <final>, e.g. Ctrl+Left is "\x1b[1;5D"
_MODIFIED_CSI = re.compile(r"^\x1b\[1;([2-8])([ABCDHF])$")
_CSI_FINALS = {
    "A": KeyCode.UP,
    "B": KeyCode.DOWN,
    "C": KeyCode.RIGHT,
    "D": KeyCode.LEFT,
    "H": KeyCode.HOME,
    "F": KeyCode.END,
}


def parse_key(raw: str) -> Key:
    """Translate a readchar key string into a Key."""
    if raw in _NAMED_KEYS:
        return Key(_NAMED_KEYS[raw], raw=raw)

    match = _MODIFIED_CSI.match(raw)
    if match:
        modifiers = Modifiers(int(match.group(1)) - 1)
        return Key(_CSI_FINALS[match.group(2)], modifiers=modifiers, raw=raw)

    if len(raw) == 1:
        code = ord(raw)
        if 1 <= code <= 26:
            return Key(KeyCode.CHAR, char=chr(code + 96), modifiers=Modifiers.CONTROL, raw=raw)
        if raw.isprintable():
            return Key(KeyCode.CHAR, char=raw, raw=raw)

    if len(raw) == 2 and raw[0] == "\x1b" and raw[1].isprintable():
        return Key(KeyCode.CHAR, char=raw[1], modifiers=Modifiers.ALT, raw=raw)

    return Key(KeyCode.UNKNOWN, raw=raw)


def is_enter(key: Key) -> bool:
    """Check if key is Enter/Return."""
    return key.code is KeyCode.ENTER and key.modifiers == Modifiers.NONE


def is_escape(key: Key) -> bool:
    """Check if key is Escape."""
    return key.code is KeyCode.ESCAPE
