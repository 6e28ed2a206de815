# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "models", "utils" and "main" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def easy_puzzle():
    return [
        [7, 8, 0, 4, 0, 0, 1, 2, 0],
        [6, 0, 0, 0, 7, 5, 0, 0, 9],
        [0, 0, 0, 6, 0, 1, 0, 7, 8],
        [0, 0, 7, 0, 4, 0, 2, 6, 0],
        [0, 0, 1, 0, 5, 0, 9, 3, 0],
        [9, 0, 4, 0, 6, 0, 0, 0, 5],
        [0, 7, 0, 3, 0, 0, 0, 1, 2],
        [1, 2, 0, 0, 0, 7, 4, 0, 0],
        [0, 4, 9, 2, 0, 6, 0, 0, 7],
    ]


@pytest.fixture
def solved_grid():
    # Shifted-row construction, a valid complete Sudoku
    return [[(3 * (r % 3) + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


@pytest.fixture
def dead_end_grid():
    # Row 0 is missing 1 and 9; column 8 already holds both, so (0,8) can never be filled
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [0, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[4][8] = 9
    grid[5][8] = 1
    return grid
