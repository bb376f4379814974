"""Command-line entry point: pick one line from a file or a generated range."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from .errors import OptionSourceError
from .prompt import SelectPrompt
from .source import CallableOptionSource, ListOptionSource


def range_source(count: int) -> CallableOptionSource[str]:
    """Source of ``item 0`` .. ``item count-1`` that never builds the full list.

    Filtering is by substring; without filter text only the requested window
    is generated. Matches are kept for the last filter text so moving the
    cursor does not rescan the range.
    """
    cache: dict[str, list[int]] = {}

    def fetch(filter_text: str, offset: int, limit: int) -> tuple[list[str], int]:
        if not filter_text:
            end = min(offset + limit, count)
            return [f"item {i}" for i in range(offset, end)], count

        if filter_text not in cache:
            cache.clear()
            cache[filter_text] = [i for i in range(count) if filter_text in f"item {i}"]
        matches = cache[filter_text]
        return [f"item {i}" for i in matches[offset : offset + limit]], len(matches)

    return CallableOptionSource(fetch)


def read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rich-select",
        description="Interactively pick one option from a filterable list",
    )
    parser.add_argument("file", nargs="?", help="File with one option per line")
    parser.add_argument("--count", type=int, help="Choose from COUNT generated options instead")
    parser.add_argument("--message", default="Select an option:", help="Prompt message")
    parser.add_argument("--vim", action="store_true", help="Enable j/k navigation")
    parser.add_argument("--page-size", type=int, default=7, help="Options shown per page")
    parser.add_argument("--filter", default=None, help="Initial filter text")
    parser.add_argument("--debug", action="store_true", help="Log fetches to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if args.count is not None:
        if args.count < 0:
            parser.error("--count must not be negative")
        source = range_source(args.count)
    elif args.file:
        try:
            source = ListOptionSource(read_lines(args.file))
        except OSError as e:
            parser.error(f"cannot read {args.file}: {e}")
    else:
        parser.error("either FILE or --count is required")

    try:
        prompt = SelectPrompt(
            args.message,
            source,
            vim_mode=args.vim,
            page_size=args.page_size,
            starting_filter_text=args.filter,
            console=Console(stderr=True),
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        answer = prompt.show()
    except OptionSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if answer is None:
        return 1

    print(prompt.format_answer(answer))
    return 0


if __name__ == "__main__":
    sys.exit(main())
