"""Shared pytest fixtures for rankboard tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_log(tmp_path: Path):
    """Factory writing a play log CSV into tmp_path and returning its path."""

    def _write(content: str, name: str = "play_log.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_pairs() -> list[tuple[str, int]]:
    """A:(30,2)->15, B:(40,2)->20, C:(15,1)->15."""
    return [("A", 10), ("A", 20), ("B", 20), ("B", 20), ("C", 15)]
