import numpy as np

from utils.puzzle_utils import square_size_of

# ANSI Colors
RED = '\033[91m'   # conflict
BLUE = '\033[94m'  # filled in by the solver
RESET = '\033[0m'


def _as_rows(grid):
    # accepts a SudokuBoard, a numpy array or a list of rows
    if hasattr(grid, "to_rows"):
        return grid.to_rows()
    return [[int(v) for v in row] for row in grid]


def get_conflict_mask(grid, square_size=None):
    """
    Mask of cells (True = violation) whose value repeats in their row, column or square.
    """
    grid = np.asarray(_as_rows(grid))
    n = grid.shape[0]
    if square_size is None:
        square_size = square_size_of(n)
    conflict_mask = np.zeros((n, n), dtype=bool)

    for r in range(n):
        for c in range(n):
            val = grid[r, c]
            if val == 0: continue

            if np.sum(grid[r, :] == val) > 1:
                conflict_mask[r, c] = True
            if np.sum(grid[:, c] == val) > 1:
                conflict_mask[r, c] = True
            br, bc = r // square_size, c // square_size
            box = grid[br*square_size:(br+1)*square_size, bc*square_size:(bc+1)*square_size]
            if np.sum(box == val) > 1:
                conflict_mask[r, c] = True

    return conflict_mask


def render_board(grid, square_size=None, original=None, color=False):
    """
    Boxed text rendering of a grid. Pure function: returns the text, prints nothing.

    A dash line comes before every square_size-th row and after the last one,
    '|' before every square_size-th column and after the last one.
    Each value is followed by one space, a blank cell is two spaces.

    color: wrap conflicting values in red and values missing from `original` in blue.
    """
    rows = _as_rows(grid)
    n = len(rows)
    if square_size is None:
        square_size = square_size_of(n)

    original_rows = _as_rows(original) if original is not None else None
    conflicts = get_conflict_mask(rows, square_size) if color else None
    separator = "-" * (1 + 2 * n + square_size)

    lines = []
    for r in range(n):
        if r % square_size == 0:
            lines.append(separator)
        row_str = ""
        for c in range(n):
            if c % square_size == 0:
                row_str += "|"

            val = rows[r][c]
            if val == 0:
                row_str += "  "
                continue

            if color and conflicts[r, c]:
                row_str += f"{RED}{val}{RESET} "
            elif color and original_rows is not None and original_rows[r][c] == 0:
                row_str += f"{BLUE}{val}{RESET} "
            else:
                row_str += f"{val} "
        lines.append(row_str + "|")
    lines.append(separator)

    return "\n".join(lines)


def print_sudoku(grid, original=None, color=True):
    """
    original: the puzzle before solving (givens are assumed correct)
    grid: the board to show
    """
    print(render_board(grid, original=original, color=color))

    if original is None:
        return

    if np.any(get_conflict_mask(grid)):
        print(f"{RED}⚠️  DETECTED ERRORS: Sudoku rules are violated!{RESET}" if color
              else "⚠️  DETECTED ERRORS: Sudoku rules are violated!")
    else:
        print(f"{BLUE}✅ Perfect Solution!{RESET}" if color else "✅ Perfect Solution!")
