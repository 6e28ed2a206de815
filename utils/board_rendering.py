import cv2
import numpy as np

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def render_board(grid, givens=None, current=None, cell_size=50,
                 given_color=(255, 0, 0), solved_color=(0, 150, 0),
                 current_color=(120, 220, 255)):
    """Draw grid as a BGR image.

    Digits that are also set in givens are drawn in given_color, the rest in
    solved_color; without givens every digit counts as given. current is a
    (row, col) cell to highlight.
    """
    size = cell_size * 9
    board = np.full((size, size, 3), 255, dtype=np.uint8)

    # Highlight the cell being tried
    if current is not None:
        row, col = current
        cv2.rectangle(board, (col * cell_size, row * cell_size),
                      ((col + 1) * cell_size, (row + 1) * cell_size),
                      current_color, -1)

    # Draw grid lines
    for i in range(10):
        thickness = 3 if i % 3 == 0 else 1
        cv2.line(board, (i * cell_size, 0), (i * cell_size, size), BLACK, thickness)
        cv2.line(board, (0, i * cell_size), (size, i * cell_size), BLACK, thickness)

    # Draw numbers
    scale = cell_size / 62.5
    for i in range(9):
        for j in range(9):
            digit = grid[i][j]
            if digit == 0:
                continue
            x = j * cell_size + cell_size // 2
            y = i * cell_size + cell_size // 2
            is_given = givens is None or givens[i][j] != 0
            color = given_color if is_given else solved_color
            cv2.putText(board, str(digit), (x - cell_size // 5, y + cell_size // 5),
                        cv2.FONT_HERSHEY_SIMPLEX, scale, color, 2)

    return board


def add_status_band(board, lines, line_height=26):
    """Stack a white band with text lines above the board"""
    band = np.full((line_height * len(lines) + 10, board.shape[1], 3), 255, dtype=np.uint8)
    for n, text in enumerate(lines):
        cv2.putText(band, text, (10, line_height * (n + 1)),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.55, BLACK, 1)
    return np.vstack([band, board])


def format_grid(grid, title="Grid:"):
    """Format grid as text with box separators"""
    lines = [title]
    for i, row in enumerate(grid):
        if i % 3 == 0 and i != 0:
            lines.append("------+-------+------")

        row_str = ""
        for j, cell in enumerate(row):
            if j % 3 == 0 and j != 0:
                row_str += "| "
            row_str += str(cell if cell != 0 else '.') + " "

        lines.append(row_str.rstrip())
    return "\n".join(lines)
