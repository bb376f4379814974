"""Rich.Live-based filterable select prompt.

Lets the user filter and pick one option from a list that may be too large
to build in memory: options are fetched one window at a time from an
OptionSource.

Example:
    from rich_select import ListOptionSource, SelectPrompt

    prompt = SelectPrompt(
        "Pick a fruit:",
        ListOptionSource(["apple", "banana", "cherry"]),
        vim_mode=True,
    )
    answer = prompt.show()  # ListOption(index=..., value="banana") or None
"""

from .actions import Action, FilterInput, SelectAction, decode
from .config import SelectConfig
from .engine import ActionResult, Direction, SelectionEngine, Window
from .errors import OptionSourceError, SelectError
from .keys import Key, KeyCode, Modifiers, is_enter, is_escape, parse_key
from .page import ListOption, Page, build_page
from .prompt import DEFAULT_HELP_MESSAGE, SelectPrompt
from .render import RichBackend, SelectBackend
from .source import CallableOptionSource, ListOptionSource, OptionSource, contains_filter
from .text_input import EditKind, InputAction, InputActionResult, TextInput
from .themes import DEFAULT_THEME, Theme

__all__ = [
    # Main classes
    "SelectPrompt",
    "SelectionEngine",
    "SelectConfig",
    "DEFAULT_HELP_MESSAGE",
    # Option sources
    "OptionSource",
    "ListOptionSource",
    "CallableOptionSource",
    "contains_filter",
    # Engine state
    "Window",
    "Direction",
    "ActionResult",
    "ListOption",
    "Page",
    "build_page",
    # Actions and keys
    "Action",
    "FilterInput",
    "SelectAction",
    "decode",
    "Key",
    "KeyCode",
    "Modifiers",
    "parse_key",
    "is_enter",
    "is_escape",
    # Filter input
    "TextInput",
    "InputAction",
    "InputActionResult",
    "EditKind",
    # Rendering
    "SelectBackend",
    "RichBackend",
    "Theme",
    "DEFAULT_THEME",
    # Errors
    "SelectError",
    "OptionSourceError",
]
