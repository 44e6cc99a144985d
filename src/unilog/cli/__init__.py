"""Command-line interface for unilog."""

from unilog.cli.parser import CLIParser
from unilog.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
