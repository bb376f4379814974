"""Pytest fixtures for rich-select tests."""

import io

import pytest
from rich.console import Console

from rich_select import ListOptionSource, SelectConfig, SelectionEngine


class RecordingSource:
    """Wraps a source and records every fetch call."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def fetch(self, filter_text, offset, limit):
        self.calls.append((filter_text, offset, limit))
        return self.inner.fetch(filter_text, offset, limit)


@pytest.fixture
def recording_source():
    """Factory: RecordingSource over a list of options."""
    def _create(options, **kwargs):
        return RecordingSource(ListOptionSource(options, **kwargs))

    return _create


@pytest.fixture
def make_engine():
    """Factory for set-up engines over a list of options."""
    def _create(options, page_size=3, starting_cursor=0, **config):
        source = options if hasattr(options, "fetch") else ListOptionSource(options)
        engine = SelectionEngine(
            source,
            SelectConfig(page_size=page_size, starting_cursor=starting_cursor, **config),
        )
        engine.setup()
        return engine

    return _create


@pytest.fixture
def console():
    """Non-terminal Rich console writing to a buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)


@pytest.fixture
def key_feed():
    """Factory: read_key callable returning the given raw keys in order."""
    def _create(*keys):
        pending = list(keys)

        def read_key():
            if not pending:
                raise AssertionError("prompt read more keys than the test provided")
            key = pending.pop(0)
            if isinstance(key, type) and issubclass(key, BaseException):
                raise key()
            return key

        return read_key

    return _create
