"""Built-in puzzles and the 81-character puzzle string format."""

from models.sudoku_solver import CELLS, SIZE, GridFormatError, normalize_grid

# Shown when the app starts
DEFAULT_PUZZLE = [
    [8, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 3, 6, 0, 0, 0, 0, 0],
    [0, 7, 0, 0, 9, 0, 2, 0, 0],
    [0, 5, 0, 0, 0, 7, 0, 0, 0],
    [0, 0, 0, 0, 4, 5, 7, 0, 0],
    [0, 0, 0, 1, 0, 0, 0, 3, 0],
    [0, 0, 1, 0, 0, 0, 0, 6, 8],
    [0, 0, 8, 5, 0, 0, 0, 1, 0],
    [0, 9, 0, 0, 0, 0, 4, 0, 0],
]

# Loaded by the reset control
RESET_PUZZLE = [
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

EMPTY_CHARS = ".0"


def empty_grid():
    return [[0] * SIZE for _ in range(SIZE)]


def default_puzzle():
    return [row[:] for row in DEFAULT_PUZZLE]


def reset_puzzle():
    return [row[:] for row in RESET_PUZZLE]


def parse_puzzle(text):
    """Parse 81 cells written row by row; '.' or '0' marks an empty cell.

    Whitespace and the separators '|', '-', '+' are ignored so a pretty
    printed board can be pasted back in.
    """
    cells = [ch for ch in text if not ch.isspace() and ch not in "|-+"]
    if len(cells) != CELLS:
        raise GridFormatError(f"Expected {CELLS} cells, got {len(cells)}")

    values = []
    for i, ch in enumerate(cells):
        if ch in EMPTY_CHARS:
            values.append(0)
        elif ch in "123456789":
            values.append(int(ch))
        else:
            raise GridFormatError(f"Invalid character {ch!r} at cell {i}")

    return [values[i:i + SIZE] for i in range(0, CELLS, SIZE)]


def format_puzzle(grid):
    grid = normalize_grid(grid)
    return "".join(str(num) if num else "." for row in grid for num in row)


def set_cell(grid, row, col, digit):
    """Return a copy of grid with (row, col) set to digit (0 clears the cell)."""
    if not (0 <= row < SIZE and 0 <= col < SIZE and 0 <= digit <= SIZE):
        raise GridFormatError("Use row,col,digit with values 0-8 for row/col and 0-9 for digit")
    updated = normalize_grid(grid)
    updated[row][col] = digit
    return updated
