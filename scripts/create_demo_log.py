#!/usr/bin/env python3
"""Create a deterministic demo play log.

Usage:
    python scripts/create_demo_log.py [output_path]

Writes create_timestamp,player_id,score rows for a fixed set of players,
including a few deliberate ties so the ranking output shows shared ranks.
"""

from __future__ import annotations

import csv
import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# Constants
DEMO_LOG_PATH = PROJECT_ROOT / "demo_assets" / "play_log.csv"
DEMO_SEED = 42
DEMO_PLAYER_COUNT = 25
DEMO_RECORD_COUNT = 400
DEMO_START = datetime(2021, 1, 1, 12, 0)


def create_demo_log(path: Path = DEMO_LOG_PATH) -> Path:
    """Write the demo play log.

    Args:
        path: Destination CSV path. Parent directories are created.

    Returns:
        Path to the written file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    rng = random.Random(DEMO_SEED)
    players = [f"player{i:04d}" for i in range(1, DEMO_PLAYER_COUNT + 1)]

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(["create_timestamp", "player_id", "score"])

        for i in range(DEMO_RECORD_COUNT):
            timestamp = DEMO_START + timedelta(minutes=i)
            writer.writerow(
                [
                    timestamp.strftime("%Y/%m/%d %H:%M"),
                    rng.choice(players),
                    rng.randint(0, 10000),
                ]
            )

        # Two extra players tied on the same single score
        for player_id in ("player9998", "player9999"):
            timestamp = DEMO_START + timedelta(minutes=DEMO_RECORD_COUNT)
            writer.writerow([timestamp.strftime("%Y/%m/%d %H:%M"), player_id, 9000])

    return path


def main() -> int:
    """Create the demo log and print its path."""
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEMO_LOG_PATH
    print(f"Creating demo play log at {path}...")
    create_demo_log(path)
    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
