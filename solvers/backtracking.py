import sys
import time

from models.exceptions import SolverTimeout

METHODS = ('recursive', 'iterative')


def candidate_values(board, index):
    """
    Values (ascending) that the cell at `index` could legally hold right now:
    1..N minus whatever its row, column and square already contain.
    Recomputed from the board on every call.
    """
    cell = board[index]
    used = board.values_in_row(cell) | board.values_in_column(cell) | board.values_in_square(cell)
    return [num for num in range(1, board.size + 1) if num not in used]


def _enter(deadline, steps):
    if steps is not None:
        steps[0] += 1
    if deadline is not None and time.monotonic() > deadline:
        raise SolverTimeout("Search exceeded its deadline.")


def solve(board, index=0, deadline=None, steps=None):
    """
    Depth-first search over the cells in index order, mutating `board` in place.

    Args:
        board: SudokuBoard, assignments for cells [0, index) are already committed
        index: first cell still to complete
        deadline: time.monotonic() value after which SolverTimeout is raised
        steps: [int] list shared between calls, counts visited nodes

    Returns True on the first complete assignment, False once every branch
    from `index` is exhausted (the cell at `index` is left at 0).
    """
    _enter(deadline, steps)

    # Base case: every cell got a value that was legal when it was placed
    if index == len(board):
        return True

    # Given cell - keep it and move on
    if board[index].value != 0:
        return solve(board, index + 1, deadline, steps)

    for num in candidate_values(board, index):
        board.set_value(index, num)

        if solve(board, index + 1, deadline, steps):
            return True

        board.set_value(index, 0)  # Backtrack

    return False


def solve_iterative(board, deadline=None, steps=None):
    """
    Same search as solve(), driven by an explicit stack of
    (index, remaining candidates) frames instead of the call stack.
    Frames exist only for blank cells.
    """
    total = len(board)
    stack = []
    index = 0

    while True:
        _enter(deadline, steps)

        while index < total and board[index].value != 0:
            index += 1
        if index == total:
            return True

        stack.append((index, iter(candidate_values(board, index))))

        # Advance the deepest frame that still has a candidate, undoing the rest
        while stack:
            frame_index, remaining = stack[-1]
            num = next(remaining, None)
            if num is not None:
                board.set_value(frame_index, num)
                index = frame_index + 1
                break
            board.set_value(frame_index, 0)
            stack.pop()
        else:
            return False


def solve_board(board, method='recursive', timeout=0.0, steps=None):
    """
    Main entry point.

    method: 'recursive' or 'iterative'. The recursive driver needs one frame
        per cell, so it switches to the iterative one when the board would not
        fit under the interpreter's recursion limit.
    timeout: seconds, 0 = no limit. SolverTimeout is raised when exceeded and
        the board is then left partially filled.
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method '{method}', expected one of {METHODS}.")

    deadline = time.monotonic() + timeout if timeout > 0 else None

    if method == 'recursive' and len(board) + 100 < sys.getrecursionlimit():
        return solve(board, 0, deadline, steps)
    return solve_iterative(board, deadline, steps)
