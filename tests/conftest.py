"""Pytest configuration and fixtures."""

from collections import deque

import pytest

from maze_game.config import get_settings
from maze_game.core import MazeGrid


# Hand-authored 5x5 layout used across tests
SIMPLE_LAYOUT = """5 5
#####
#P  #
# # #
#  E#
#####"""


def reachable_from(grid: MazeGrid, start: tuple[int, int]) -> set[tuple[int, int]]:
    """All cells reachable from start through non-wall cells."""
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in [(x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)]:
            if (nx, ny) not in seen and grid.is_valid_move(nx, ny):
                seen.add((nx, ny))
                queue.append((nx, ny))
    return seen


@pytest.fixture
def generated_grid() -> MazeGrid:
    """A seeded 15x15 generated maze."""
    grid = MazeGrid(15, 15, seed=1234)
    grid.generate()
    return grid


@pytest.fixture
def simple_grid() -> MazeGrid:
    """A grid loaded from SIMPLE_LAYOUT."""
    grid = MazeGrid(5, 5)
    assert grid.load_from_layout(SIMPLE_LAYOUT)
    return grid


@pytest.fixture
def layout_file(tmp_path):
    """SIMPLE_LAYOUT written to a temporary file."""
    path = tmp_path / "simple.txt"
    path.write_text(SIMPLE_LAYOUT)
    return path


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from MAZE_* variables and the settings cache."""
    for name in ["WIDTH", "HEIGHT", "SEED", "LAYOUT_FILE", "LOG_LEVEL", "DEBUG"]:
        monkeypatch.delenv(f"MAZE_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
