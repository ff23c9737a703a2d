#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py leaderboard [--file PATH] [--highlight N]
    python main.py check-config [--file PATH]
    python main.py submit SECONDS NAME [--file PATH]
"""
import argparse
import logging
import sys

from sweeper import ConfigError, Leaderboard, load_config
from sweeper.config import DEFAULT_CONFIG_PATH, DEFAULT_LEADERBOARD_PATH


def show_leaderboard(args: argparse.Namespace) -> int:
    """Print the persisted standings."""
    leaderboard = Leaderboard(args.file)
    if args.highlight is not None and args.highlight < 1:
        print(f"Invalid place: {args.highlight} (places start at 1)", file=sys.stderr)
        return 1
    highlight = args.highlight - 1 if args.highlight is not None else None
    standings = leaderboard.standings(highlight_rank=highlight)

    print("LEADERBOARD")
    if not standings:
        print("  (no times recorded)")
        return 0
    for standing in standings:
        print(standing)
    return 0


def check_config(args: argparse.Namespace) -> int:
    """Load and describe a board configuration file."""
    try:
        config = load_config(args.file)
    except ConfigError as error:
        print(f"Invalid configuration: {error}", file=sys.stderr)
        return 1

    density = config.mine_count / config.total_cells
    print(
        f"Board: {config.columns}x{config.rows} with {config.mine_count} mines "
        f"({density:.1%} density)"
    )
    return 0


def submit(args: argparse.Namespace) -> int:
    """Record a completion time and report its rank."""
    leaderboard = Leaderboard(args.file)
    try:
        rank = leaderboard.submit(args.seconds, args.name)
    except ValueError as error:
        print(f"Could not submit: {error}", file=sys.stderr)
        return 1

    if rank is None:
        print("Not ranked")
    else:
        print(f"Ranked #{rank + 1}")
    return 0


def main(argv=None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Board configuration and leaderboard tools"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Leaderboard command
    leaderboard_parser = subparsers.add_parser(
        "leaderboard", help="Show the leaderboard"
    )
    leaderboard_parser.add_argument(
        "--file", default=str(DEFAULT_LEADERBOARD_PATH), help="Leaderboard file"
    )
    leaderboard_parser.add_argument(
        "--highlight", type=int, default=None, help="1-based place to mark"
    )

    # Check config command
    config_parser = subparsers.add_parser(
        "check-config", help="Validate a board configuration file"
    )
    config_parser.add_argument(
        "--file", default=str(DEFAULT_CONFIG_PATH), help="Configuration file"
    )

    # Submit command
    submit_parser = subparsers.add_parser("submit", help="Record a time")
    submit_parser.add_argument("seconds", type=int, help="Completion time")
    submit_parser.add_argument("name", help="Player name")
    submit_parser.add_argument(
        "--file", default=str(DEFAULT_LEADERBOARD_PATH), help="Leaderboard file"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "leaderboard":
        return show_leaderboard(args)
    if args.command == "check-config":
        return check_config(args)
    if args.command == "submit":
        return submit(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
