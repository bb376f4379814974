"""Per-prompt configuration for rich_select."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectConfig:
    """Immutable settings for one select prompt.

    Attributes:
        vim_mode: Bind j/k to down/up ahead of filter input.
        page_size: Number of options materialized and shown per page.
        starting_cursor: Logical index highlighted when the prompt opens.
        starting_filter_text: Text pre-filled in the filter box.
    """

    vim_mode: bool = False
    page_size: int = 7
    starting_cursor: int = 0
    starting_filter_text: str | None = None

    def __post_init__(self):
        if self.page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {self.page_size}")
        if self.starting_cursor < 0:
            raise ValueError(f"starting_cursor must not be negative, got {self.starting_cursor}")
