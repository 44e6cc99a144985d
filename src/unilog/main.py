"""Main CLI entry point for unilog."""

import sys

from unilog.cli import CLIRunner


def main() -> None:
    """Run the CLI application and exit with its status code."""
    try:
        sys.exit(CLIRunner().run())
    except KeyboardInterrupt:
        sys.exit(1)


if __name__ == "__main__":
    main()
