#!/usr/bin/env python3
"""Smoke test the leaderboard on the demo play log.

Usage:
    python scripts/create_demo_log.py
    python scripts/smoke_demo.py

Checks:
1. Demo log exists
2. Pipeline runs without error
3. Output header is exact
4. Ranks are competition ranks over descending scores
5. Output is identical across two runs
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from rankboard.core.errors import LeaderboardError  # noqa: E402
from rankboard.pipeline import run  # noqa: E402

DEMO_LOG_PATH = PROJECT_ROOT / "demo_assets" / "play_log.csv"
EXPECTED_HEADER = "rank,player_id,mean_score"


def check_ranks(lines: list[str]) -> bool:
    """Verify ranks against scores for data lines."""
    rows = [line.split(",") for line in lines]
    scores = [int(row[2]) for row in rows]
    for (rank, player_id, _), score in zip(rows, scores):
        expected = 1 + sum(1 for other in scores if other > score)
        if int(rank) != expected:
            print(f"  FAIL: {player_id} has rank {rank}, expected {expected}")
            return False
    if scores != sorted(scores, reverse=True):
        print("  FAIL: scores are not in descending order")
        return False
    print(f"  OK: {len(rows)} rows with consistent ranks")
    return True


def main() -> int:
    """Run smoke checks.

    Returns:
        0 if all checks pass, 1 otherwise.
    """
    print("=" * 60)
    print("Rankboard Smoke Test")
    print("=" * 60)

    print("\n[1/4] Checking demo log...")
    if not DEMO_LOG_PATH.exists():
        print(f"  FAIL: {DEMO_LOG_PATH} not found")
        print("Run 'python scripts/create_demo_log.py' first!")
        return 1
    print(f"  OK: {DEMO_LOG_PATH}")

    print("\n[2/4] Running pipeline...")
    first = io.StringIO()
    try:
        run(DEMO_LOG_PATH, first)
    except LeaderboardError as e:
        print(f"  FAIL: {e.message}")
        return 1
    print("  OK")

    lines = first.getvalue().splitlines()
    checks_failed = 0

    print("\n[3/4] Checking header and ranks...")
    if lines[0] != EXPECTED_HEADER:
        print(f"  FAIL: header is {lines[0]!r}")
        checks_failed += 1
    elif not check_ranks(lines[1:]):
        checks_failed += 1

    print("\n[4/4] Checking idempotence...")
    second = io.StringIO()
    run(DEMO_LOG_PATH, second)
    if second.getvalue() != first.getvalue():
        print("  FAIL: output differs between runs")
        checks_failed += 1
    else:
        print("  OK: identical output")

    print("\n" + "=" * 60)
    if checks_failed == 0:
        print("RESULT: ALL PASSED")
        print("=" * 60)
        print(first.getvalue(), end="")
        return 0
    print(f"RESULT: {checks_failed} failed")
    print("=" * 60)
    return 1


if __name__ == "__main__":
    sys.exit(main())
