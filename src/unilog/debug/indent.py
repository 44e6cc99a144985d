"""Nesting depth used to indent DEBUG lines.

The depth is kept in a ContextVar, so every thread and every asyncio task
sees its own value and concurrent scopes never skew each other's output.
"""

from contextvars import ContextVar

from unilog.constants import SPACES_PER_LEVEL

_num_spaces: ContextVar[int] = ContextVar("unilog_indent", default=0)


class Indent:
    """Indentation, in spaces, prepended to DEBUG lines.

    push() and pop() must be paired; an unpaired pop() makes the value
    negative, which renders as no indentation.
    """

    @staticmethod
    def push() -> None:
        _num_spaces.set(_num_spaces.get() + SPACES_PER_LEVEL)

    @staticmethod
    def pop() -> None:
        _num_spaces.set(_num_spaces.get() - SPACES_PER_LEVEL)

    @staticmethod
    def get_indent() -> int:
        """Return the current indentation as a number of spaces."""
        return _num_spaces.get()

    @staticmethod
    def reset() -> None:
        _num_spaces.set(0)
