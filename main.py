import argparse
import logging
import sys
import threading

import cv2

from config import AppConfig
from models.presets import default_puzzle, empty_grid, parse_puzzle, reset_puzzle, set_cell
from models.sudoku_solver import (
    GridFormatError, InvalidInitialGridError, SolveCancelledError, SudokuError,
    SudokuSolver, UnsolvableError
)
from utils.board_rendering import add_status_band, format_grid, render_board

QUIT_KEYS = (ord('q'), 27)

INSTRUCTIONS = [
    "SPACE solve | 'e' edit | 'r' reset | 'c' clear | 'q' quit",
]


class SudokuApp:
    def __init__(self, config=None, grid=None):
        self.config = config or AppConfig()
        self.grid = grid if grid is not None else default_puzzle()
        self.givens = None
        self.status = "Press SPACE to solve"
        self.cancel_event = None
        self.steps_seen = 0

    def run(self):
        print("Sudoku Solver Started!")
        print("Controls:")
        print("  SPACE - Solve the board step by step")
        print("  'e' - Edit cells from the console")
        print("  'r' - Reset to the preset puzzle")
        print("  'c' - Clear the board")
        print("  'q' - Quit (also stops a running solve)")

        cv2.namedWindow(self.config.window_name)
        while True:
            self.show()
            key = cv2.waitKey(30) & 0xFF

            if key == ord(' '):
                self.solve_board()
            elif key == ord('e'):
                self.edit_cells()
            elif key == ord('r'):
                self.reset_board()
            elif key == ord('c'):
                self.clear_board()
            elif key in QUIT_KEYS:
                break

        cv2.destroyAllWindows()

    def render(self, grid=None, current=None):
        cfg = self.config
        board = render_board(
            self.grid if grid is None else grid,
            givens=self.givens,
            current=current,
            cell_size=cfg.cell_size,
            given_color=cfg.given_color,
            solved_color=cfg.solved_color,
            current_color=cfg.current_color,
        )
        return add_status_band(board, INSTRUCTIONS + [self.status])

    def show(self, grid=None, current=None):
        cv2.imshow(self.config.window_name, self.render(grid, current))

    def solve_board(self):
        """Animate the backtracking search on the current board"""
        print("Solving Sudoku...")
        self.givens = [row[:] for row in self.grid]
        self.cancel_event = threading.Event()
        self.steps_seen = 0
        self.status = "Solving... press 'q' to stop"
        solver = SudokuSolver(on_step=self.on_step, cancel_event=self.cancel_event)

        try:
            self.grid = solver.solve(self.grid)
        except InvalidInitialGridError as exc:
            self.report("Invalid initial grid.")
            print(f"Conflicting cells: {exc.conflicts}")
        except UnsolvableError:
            self.report("No solution exists for the given Sudoku.")
        except SolveCancelledError as exc:
            self.report(f"Solve stopped after {exc.steps} steps.")
        else:
            self.report(f"Sudoku solved in {self.steps_seen} steps!")
            print(format_grid(self.grid, "Solution:"))
        finally:
            self.cancel_event = None

    def on_step(self, step):
        """Repaint each step and let the window breathe between them"""
        self.steps_seen = step.index
        if step.index % self.config.render_every:
            return
        self.show(step.grid, step.position)
        key = cv2.waitKey(max(1, self.config.step_delay_ms)) & 0xFF
        if key in QUIT_KEYS:
            self.cancel_event.set()

    def report(self, message):
        self.status = message
        print(message)

    def edit_cells(self):
        """Read corrections from the console"""
        print(format_grid(self.grid, "Current Grid:"))
        print("Enter corrections in format: row,col,digit (e.g., 0,1,5); digit 0 clears")
        print("Press Enter to finish")

        while True:
            correction = input("Enter correction (or press Enter to continue): ").strip()
            if not correction:
                break

            try:
                row, col, digit = map(int, correction.split(','))
                self.grid = set_cell(self.grid, row, col, digit)
            except ValueError as exc:
                # GridFormatError is a ValueError too
                print(exc if isinstance(exc, GridFormatError) else "Invalid format. Use: row,col,digit")
                continue

            print(f"Set cell [{row},{col}] to {digit}")
            self.show()
            cv2.waitKey(1)

    def reset_board(self):
        self.grid = reset_puzzle()
        self.givens = None
        self.status = "Board reset"
        print("Board reset!")

    def clear_board(self):
        self.grid = empty_grid()
        self.givens = None
        self.status = "Board cleared"
        print("Board cleared!")


def run_headless(config, grid):
    """Solve in the terminal; returns a process exit code"""
    print(format_grid(grid, "Puzzle:"))
    solver = SudokuSolver(step_delay=config.step_delay)

    try:
        solution = solver.solve(grid)
    except SudokuError as exc:
        print(f"\n{exc} [{exc.reason}]")
        return 1

    print()
    print(format_grid(solution, "Solution:"))
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Step-by-step Sudoku solver")
    parser.add_argument("--headless", action="store_true",
                        help="solve in the terminal instead of opening a window")
    parser.add_argument("--puzzle", default=None,
                        help="81 cells row by row, '.' or '0' for empty")
    parser.add_argument("--delay", type=int, default=None,
                        help="pause between solver steps in milliseconds")
    parser.add_argument("--render-every", type=int, default=1,
                        help="repaint the board every N steps")
    parser.add_argument("--cell-size", type=int, default=50)
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config = AppConfig.from_args(args)
        grid = parse_puzzle(args.puzzle) if args.puzzle else default_puzzle()
    except ValueError as exc:
        print(f"Error: {exc}")
        return 2

    logging.basicConfig(level=config.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if config.headless:
        return run_headless(config, grid)

    app = SudokuApp(config, grid)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
