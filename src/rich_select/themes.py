"""Configurable themes for the select prompt renderer.

The Theme dataclass holds the visual elements (colors, icons, layout)
used by RichBackend.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Visual theme for the select prompt.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").

    Attributes:
        prompt_color: Color for the "?" prompt marker.
        selected_color: Color for the cursor indicator and highlighted option.
        answer_color: Color for the submitted answer.
        dim_color: Color for help text, counters and scroll hints.
        border_color: Color for the panel border.

        prompt_icon: Marker in front of the message.
        cursor_icon: Character shown next to the highlighted option.
        text_cursor_icon: Block drawn at the filter input cursor.
        scroll_up_icon: Character indicating more options above.
        scroll_down_icon: Character indicating more options below.

        panel_width: Fixed width of the prompt panel (None = console width).
        empty_message: Text shown when no option matches the filter.
    """

    # Colors
    prompt_color: str = "green"
    selected_color: str = "cyan"
    answer_color: str = "cyan"
    dim_color: str = "dim"
    border_color: str = "cyan"

    # Icons
    prompt_icon: str = "?"
    cursor_icon: str = "›"
    text_cursor_icon: str = "█"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"

    # Layout
    panel_width: int | None = 100
    empty_message: str = "No matching options"


# Default theme used when none is specified
DEFAULT_THEME = Theme()
