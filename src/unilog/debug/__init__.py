"""Debugging helpers: indentation tracking and scoped entry/exit tracing."""

from unilog.debug.indent import Indent
from unilog.debug.scope import Scope, log_function

__all__ = [
    "Indent",
    "Scope",
    "log_function",
]
