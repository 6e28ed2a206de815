import logging
import numbers
import time
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SIZE = 9
BOX = 3
CELLS = SIZE * SIZE

PLACE = "place"
BACKTRACK = "backtrack"


class SudokuError(Exception):
    """Base class for every rejection the solver can report."""

    reason = "error"


class GridFormatError(SudokuError, ValueError):
    reason = "malformed-grid"


class InvalidInitialGridError(SudokuError):
    """Pre-filled cells already break row, column or box uniqueness."""

    reason = "invalid-initial-grid"

    def __init__(self, conflicts):
        self.conflicts = list(conflicts)
        cells = ", ".join(f"({r},{c})" for r, c in self.conflicts)
        super().__init__(f"Invalid initial grid, conflicting cells: {cells}")


class UnsolvableError(SudokuError):
    reason = "no-solution"

    def __init__(self, steps=0):
        self.steps = steps
        super().__init__(f"No solution exists for the given Sudoku ({steps} steps tried)")


class SolveCancelledError(SudokuError):
    reason = "cancelled"

    def __init__(self, steps=0):
        self.steps = steps
        super().__init__(f"Solve cancelled after {steps} steps")


@dataclass(frozen=True)
class SolveStep:
    """One observable mutation of the grid during search.

    ``grid`` is a snapshot taken right after the mutation, so observers can
    keep it around without it changing under them.
    """

    index: int
    action: str
    row: int
    col: int
    value: int
    grid: tuple

    @property
    def position(self):
        return self.row, self.col

    def as_lists(self):
        return [list(row) for row in self.grid]


def normalize_grid(grid):
    """Copy any 9x9 nested sequence (lists, tuples, numpy array) into lists of ints."""
    try:
        rows = [list(row) for row in grid]
    except TypeError as exc:
        raise GridFormatError("Grid must be a 9x9 sequence of rows") from exc

    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise GridFormatError("Grid must have exactly 9 rows of 9 cells")

    normalized = []
    for i, row in enumerate(rows):
        out = []
        for j, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise GridFormatError(f"Cell ({i},{j}) is not an integer: {value!r}")
            if not 0 <= value <= SIZE:
                raise GridFormatError(f"Cell ({i},{j}) out of range 0-9: {value}")
            out.append(int(value))
        normalized.append(out)
    return normalized


def snapshot(grid):
    return tuple(tuple(row) for row in grid)


class SudokuSolver:
    """Backtracking solver that reports every placement and backtrack.

    Cells are visited in row-major order and candidates are tried 1 to 9, so
    the same puzzle always produces the same step sequence and solution.

    on_step: callable receiving each SolveStep as it happens.
    step_delay: seconds to pause after each step (0 disables the pause).
    cancel_event: anything with ``is_set()`` (e.g. threading.Event); checked
        after every step.
    """

    def __init__(self, step_delay=0.0, on_step=None, cancel_event=None):
        if step_delay < 0:
            raise ValueError("step_delay must be >= 0")
        self.step_delay = step_delay
        self.on_step = on_step
        self.cancel_event = cancel_event

    @staticmethod
    def is_valid(grid, row, col, num):
        """Check if num can sit at (row, col), ignoring the cell itself"""
        # Check row and column
        for i in range(SIZE):
            if i != col and grid[row][i] == num:
                return False
            if i != row and grid[i][col] == num:
                return False

        # Check 3x3 box
        start_row = (row // BOX) * BOX
        start_col = (col // BOX) * BOX

        for i in range(start_row, start_row + BOX):
            for j in range(start_col, start_col + BOX):
                if (i != row or j != col) and grid[i][j] == num:
                    return False

        return True

    def find_conflicts(self, grid):
        """List pre-filled cells that clash with another cell, row-major"""
        conflicts = []
        for i in range(SIZE):
            for j in range(SIZE):
                num = grid[i][j]
                if num != 0 and not self.is_valid(grid, i, j, num):
                    conflicts.append((i, j))
        return conflicts

    def is_valid_sudoku(self, grid):
        """Check if the current grid state is valid"""
        return not self.find_conflicts(grid)

    def is_solved(self, grid):
        if any(num == 0 for row in grid for num in row):
            return False
        return self.is_valid_sudoku(grid)

    def prepare(self, grid):
        """Return a private working copy of grid, rejecting bad input early."""
        work = normalize_grid(grid)
        conflicts = self.find_conflicts(work)
        if conflicts:
            raise InvalidInitialGridError(conflicts)
        return work

    def iter_steps(self, grid):
        """Yield a SolveStep per placement/backtrack; return the solved grid.

        The caller's grid is never modified. The solved grid is the
        generator's return value (``StopIteration.value``).
        """
        work = self.prepare(grid)
        return (yield from self._search(work))

    def solve(self, grid):
        """Solve grid, pausing and notifying on_step after each step.

        Raises InvalidInitialGridError, UnsolvableError or
        SolveCancelledError; the input grid is left untouched in every case.
        """
        logger.info("Solving puzzle with %d givens", _count_givens(grid))
        started = time.perf_counter()
        steps = self.iter_steps(grid)
        count = 0
        try:
            while True:
                step = next(steps)
                count = step.index
                if self.on_step is not None:
                    self.on_step(step)
                if self.step_delay > 0:
                    time.sleep(self.step_delay)
                if self.cancel_event is not None and self.cancel_event.is_set():
                    steps.close()
                    raise SolveCancelledError(count)
        except StopIteration as done:
            solution = done.value
        except SudokuError as exc:
            logger.warning("Solve rejected (%s): %s", exc.reason, exc)
            raise

        logger.info("Solved in %d steps (%.3fs)", count, time.perf_counter() - started)
        return solution

    def _search(self, grid):
        # Each frame is [cell index, next candidate to try]; only empty
        # cells get a frame. Cells after the top frame are always cleared.
        stack = [[self._next_empty(grid, 0), 1]]
        count = 0

        while stack:
            frame = stack[-1]
            pos = frame[0]
            if pos == CELLS:
                return grid

            row, col = divmod(pos, SIZE)
            if grid[row][col] != 0:
                # Child frame failed, undo this cell's placement
                removed = grid[row][col]
                grid[row][col] = 0
                count += 1
                logger.debug("Backtrack (%d,%d) from %d", row, col, removed)
                yield SolveStep(count, BACKTRACK, row, col, removed, snapshot(grid))

            for num in range(frame[1], SIZE + 1):
                if self.is_valid(grid, row, col, num):
                    grid[row][col] = num
                    frame[1] = num + 1
                    count += 1
                    logger.debug("Place %d at (%d,%d)", num, row, col)
                    yield SolveStep(count, PLACE, row, col, num, snapshot(grid))
                    stack.append([self._next_empty(grid, pos + 1), 1])
                    break
            else:
                stack.pop()

        raise UnsolvableError(count)

    @staticmethod
    def _next_empty(grid, start):
        for pos in range(start, CELLS):
            row, col = divmod(pos, SIZE)
            if grid[row][col] == 0:
                return pos
        return CELLS


def _count_givens(grid):
    try:
        return sum(1 for row in grid for num in row if num)
    except TypeError:
        return 0
