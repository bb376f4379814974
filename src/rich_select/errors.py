"""Exception types raised by rich_select."""


class SelectError(Exception):
    """Base class for rich_select errors."""


class OptionSourceError(SelectError):
    """The option source failed or broke its fetch contract.

    Raised out of the engine (and out of SelectPrompt.show) as a hard
    failure of the whole prompt. The original exception, if any, is
    chained as ``__cause__``.
    """
