"""Command-line entry point.

Usage:
    rankboard path/to/play_log.csv

Prints the top players as CSV on stdout. Diagnostics go to stderr.
Exit codes: 0 on success, 1 on any leaderboard error, 2 on usage errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rankboard.config import load_config
from rankboard.core.errors import LeaderboardError
from rankboard.pipeline import run

logger = logging.getLogger("rankboard")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rankboard",
        description=(
            "Reads a CSV play log (create_timestamp, player_id, score) "
            "and prints the top 10 players by mean score."
        ),
    )
    parser.add_argument("csv_file_path", type=Path, help="Path to CSV file")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
    except LeaderboardError as e:
        configure_logging("WARNING")
        logger.error(e.message)
        return 1

    configure_logging(config.log_level)

    try:
        run(args.csv_file_path, sys.stdout, config)
    except LeaderboardError as e:
        logger.error(e.message)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
