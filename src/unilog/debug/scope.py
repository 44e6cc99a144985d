"""Entry/exit tracing for code regions.

Scope logs "Entering X." when a region starts and "Leaving X. Took N ms"
when it ends, indenting everything logged in between by one level:

    >>> with Scope("load_catalog"):
    ...     logger.debug("reading files")

or for a whole function:

    >>> @log_function
    ... def load_catalog(): ...

Messages go through the standard logging channel, so they reach whichever
sink is installed on it (normally the unilog Logger).
"""

import functools
import logging
import os
import time
from collections.abc import Callable
from types import TracebackType
from typing import ParamSpec, TypeVar

from unilog.constants import ENV_NO_LOG_FUNCTION
from unilog.debug.indent import Indent

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


class Scope:
    """Context manager tracing entry, exit and duration of a region."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        self._start = 0.0

    def __enter__(self) -> "Scope":
        logger.debug("Entering %s.", self.identifier)
        self._start = time.perf_counter()
        Indent.push()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        Indent.pop()
        elapsed_ms = int((time.perf_counter() - self._start) * 1000)
        logger.debug("Leaving %s. Took %d ms", self.identifier, elapsed_ms)


def log_function(func: Callable[P, R]) -> Callable[P, R]:
    """Wrap func in a Scope named after its qualified name.

    Setting UNILOG_NO_LOG_FUNCTION before decoration returns func as is.
    """
    if os.getenv(ENV_NO_LOG_FUNCTION):
        return func

    identifier = f"{func.__module__}.{func.__qualname__}"

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        with Scope(identifier):
            return func(*args, **kwargs)

    return wrapper
