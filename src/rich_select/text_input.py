"""Single-line text input used as the filter box.

TextInput owns the text buffer and its own cursor. The selection engine only
talks to it through TextInput.handle and TextInput.content.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .keys import Key, KeyCode, Modifiers


class EditKind(str, Enum):
    """Kinds of edits the filter input understands."""

    WRITE = "write"
    DELETE_LEFT = "delete_left"
    DELETE_RIGHT = "delete_right"
    DELETE_WORD_LEFT = "delete_word_left"
    CLEAR = "clear"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_WORD_LEFT = "move_word_left"
    MOVE_WORD_RIGHT = "move_word_right"
    MOVE_LINE_START = "move_line_start"
    MOVE_LINE_END = "move_line_end"

    def __str__(self) -> str:
        return self.value


class InputActionResult(str, Enum):
    """What an edit did to the input."""

    CONTENT_CHANGED = "content_changed"
    POSITION_CHANGED = "position_changed"
    UNCHANGED = "unchanged"

    def __str__(self) -> str:
        return self.value


_CONTROL_EDITS = {
    "w": EditKind.DELETE_WORD_LEFT,
    "u": EditKind.CLEAR,
    "a": EditKind.MOVE_LINE_START,
    "e": EditKind.MOVE_LINE_END,
}

_PLAIN_EDITS = {
    KeyCode.BACKSPACE: EditKind.DELETE_LEFT,
    KeyCode.DELETE: EditKind.DELETE_RIGHT,
    KeyCode.LEFT: EditKind.MOVE_LEFT,
    KeyCode.RIGHT: EditKind.MOVE_RIGHT,
}

_WORD_MOVES = {
    KeyCode.LEFT: EditKind.MOVE_WORD_LEFT,
    KeyCode.RIGHT: EditKind.MOVE_WORD_RIGHT,
}


@dataclass(frozen=True)
class InputAction:
    """One edit on the filter input.

    Attributes:
        kind: The edit to perform.
        char: Character to insert (WRITE only).
    """

    kind: EditKind
    char: str | None = None

    @classmethod
    def write(cls, char: str) -> InputAction:
        return cls(EditKind.WRITE, char=char)

    @classmethod
    def from_key(cls, key: Key) -> InputAction | None:
        """Map a key to an edit, or None if the input has no use for it."""
        if key.code is KeyCode.CHAR:
            if key.modifiers in (Modifiers.NONE, Modifiers.SHIFT) and key.char.isprintable():
                return cls.write(key.char)
            if key.modifiers == Modifiers.CONTROL and key.char in _CONTROL_EDITS:
                return cls(_CONTROL_EDITS[key.char])
            if key.modifiers == Modifiers.ALT and key.char in ("b", "f"):
                return cls(EditKind.MOVE_WORD_LEFT if key.char == "b" else EditKind.MOVE_WORD_RIGHT)
            return None

        if key.modifiers == Modifiers.NONE and key.code in _PLAIN_EDITS:
            return cls(_PLAIN_EDITS[key.code])

        if key.modifiers in (Modifiers.CONTROL, Modifiers.ALT) and key.code in _WORD_MOVES:
            return cls(_WORD_MOVES[key.code])

        return None


class TextInput:
    """Editable single-line buffer with a cursor.

    The cursor is a character index in ``[0, len(content)]``.
    """

    def __init__(self, content: str = ""):
        self._content = content
        self.cursor = len(content)

    @property
    def content(self) -> str:
        return self._content

    def _word_left(self) -> int:
        pos = self.cursor
        while pos > 0 and self._content[pos - 1].isspace():
            pos -= 1
        while pos > 0 and not self._content[pos - 1].isspace():
            pos -= 1
        return pos

    def _word_right(self) -> int:
        pos = self.cursor
        end = len(self._content)
        while pos < end and self._content[pos].isspace():
            pos += 1
        while pos < end and not self._content[pos].isspace():
            pos += 1
        return pos

    def _move_to(self, position: int) -> InputActionResult:
        if position == self.cursor:
            return InputActionResult.UNCHANGED
        self.cursor = position
        return InputActionResult.POSITION_CHANGED

    def _delete(self, start: int, end: int) -> InputActionResult:
        if start == end:
            return InputActionResult.UNCHANGED
        self._content = self._content[:start] + self._content[end:]
        self.cursor = start
        return InputActionResult.CONTENT_CHANGED

    def handle(self, action: InputAction) -> InputActionResult:
        """Apply an edit and report what changed."""
        kind = action.kind

        if kind is EditKind.WRITE:
            self._content = self._content[: self.cursor] + action.char + self._content[self.cursor :]
            self.cursor += len(action.char)
            return InputActionResult.CONTENT_CHANGED
        if kind is EditKind.DELETE_LEFT:
            return self._delete(max(self.cursor - 1, 0), self.cursor)
        if kind is EditKind.DELETE_RIGHT:
            return self._delete(self.cursor, min(self.cursor + 1, len(self._content)))
        if kind is EditKind.DELETE_WORD_LEFT:
            return self._delete(self._word_left(), self.cursor)
        if kind is EditKind.CLEAR:
            return self._delete(0, len(self._content))
        if kind is EditKind.MOVE_LEFT:
            return self._move_to(max(self.cursor - 1, 0))
        if kind is EditKind.MOVE_RIGHT:
            return self._move_to(min(self.cursor + 1, len(self._content)))
        if kind is EditKind.MOVE_WORD_LEFT:
            return self._move_to(self._word_left())
        if kind is EditKind.MOVE_WORD_RIGHT:
            return self._move_to(self._word_right())
        if kind is EditKind.MOVE_LINE_START:
            return self._move_to(0)
        if kind is EditKind.MOVE_LINE_END:
            return self._move_to(len(self._content))

        raise ValueError(f"Unknown edit kind: {kind}")
