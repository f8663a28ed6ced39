#!/usr/bin/env python3
"""Main entry point for the shwords tool."""

import sys
from shwords.commands import main as commands_main


def main() -> None:
    try:
        commands_main()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
