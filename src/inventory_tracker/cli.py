#!/usr/bin/env python3
"""
Command-line interface for Inventory Tracker
"""
import sys
import argparse
from typing import List, Optional

from . import __version__
from .inventory import DEFAULT_CAPACITY, Inventory
from .session import InventorySession


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def run_session(capacity: int = DEFAULT_CAPACITY) -> int:
    """Run an interactive session on the console."""
    session = InventorySession(Inventory(capacity))
    try:
        return session.run()
    except KeyboardInterrupt:
        print("\n\n👋 Session stopped")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser_cli = argparse.ArgumentParser(
        prog='inventory-tracker',
        description="Inventory Tracker - Track stock items from an interactive menu",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Start a session with room for {DEFAULT_CAPACITY} items
  inventory-tracker

  # Start a session limited to 10 items
  inventory-tracker --capacity 10
        """
    )
    parser_cli.add_argument('--capacity', '-c', type=positive_int, default=DEFAULT_CAPACITY,
                            help=f'Maximum number of items (default: {DEFAULT_CAPACITY})')
    parser_cli.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser_cli.parse_args(argv)

    return run_session(args.capacity)


if __name__ == '__main__':
    sys.exit(main())
