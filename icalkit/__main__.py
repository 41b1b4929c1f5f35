"""Entry point for `python -m icalkit` and the ``icalkit`` console script."""

import asyncio
import sys

from icalkit.cli import main_entry


def main() -> None:
    """Run the CLI and exit with its status code."""
    try:
        exit_code = asyncio.run(main_entry())
    except KeyboardInterrupt:
        print("Operation cancelled by user", file=sys.stderr)
        sys.exit(130)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
