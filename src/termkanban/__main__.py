"""CLI entry point for termkanban."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="termkanban",
        description="Three-column kanban board for the terminal",
    )
    parser.add_argument(
        "--board-file",
        type=Path,
        default=None,
        help="JSON file holding the board (default: board.json)",
    )
    parser.add_argument(
        "--backup-file",
        type=Path,
        default=None,
        help="JSON file written by the backup key (default: backup_kanban.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings, letting explicit CLI args override other sources."""
    settings_kwargs: dict = {}
    if args.board_file:
        settings_kwargs["board_file"] = args.board_file
    if args.backup_file:
        settings_kwargs["backup_file"] = args.backup_file
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main() -> None:
    """Main entry point."""
    settings = build_settings(parse_args())

    setup_logging(settings.verbose, settings.log_file, settings.board_file)

    # Import here so --help/--version stay fast
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
