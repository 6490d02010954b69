import math
import re

from models.exceptions import InvalidPuzzle

BLANK_CHARS = ".0"
_RENDERED_CELL = re.compile(r"(\d+) |  ")


def square_size_of(n):
    """
    Side length S of a sub-square for an N x N grid (N = S * S).
    Raises InvalidPuzzle when N is not a perfect square.
    """
    square_size = math.isqrt(n) if n > 0 else 0
    if square_size == 0 or square_size * square_size != n:
        raise InvalidPuzzle(f"Grid size {n} is not a perfect square (4, 9, 16, ...).")
    return square_size


def square_index(row, col, square_size):
    return square_size * (row // square_size) + (col // square_size)


def get_group_indices(square_size):
    """
    Static constraint groups for an N x N grid (N = square_size ** 2).
    Cells are indexed 0 to N*N - 1 (row-major).
    Returns (rows, cols, squares): each a list of N lists of cell indices.
    """
    n = square_size * square_size
    rows = [[] for _ in range(n)]
    cols = [[] for _ in range(n)]
    squares = [[] for _ in range(n)]

    for i in range(n * n):
        row, col = divmod(i, n)
        rows[row].append(i)
        cols[col].append(i)
        squares[square_index(row, col, square_size)].append(i)

    return rows, cols, squares


def _parse_token(token, row, col):
    try:
        return int(token)
    except ValueError:
        raise InvalidPuzzle(f"Cell ({row + 1},{col + 1}) is not a number: '{token}'") from None


def _parse_compact(token):
    n = math.isqrt(len(token))
    if n * n != len(token) or n > 9:
        raise InvalidPuzzle(
            f"Compact puzzle must hold N*N digits with N <= 9, got {len(token)} characters."
        )

    rows = []
    for r in range(n):
        row = []
        for c in range(n):
            ch = token[r * n + c]
            if ch in BLANK_CHARS:
                row.append(0)
            elif ch.isdigit():
                row.append(int(ch))
            else:
                raise InvalidPuzzle(f"Cell ({r + 1},{c + 1}) is not a number: '{ch}'")
        rows.append(row)
    return rows


def parse_puzzle(text):
    """
    Parse a puzzle string into a list of rows.

    Two formats are accepted:
      - "0 5 0 2;0 0 6 7;..."  rows separated by ';' (or newlines),
        values separated by whitespace, 0 = blank
      - "800000000003600..."  one token of N*N digits (N <= 9), '.' or 0 = blank

    Only the syntax is checked here; shape and value ranges are checked
    when a SudokuBoard is built from the rows.
    """
    text = text.strip()
    if not text:
        raise InvalidPuzzle("Puzzle string is empty.")

    if ";" not in text and len(text.split()) == 1:
        return _parse_compact(text)

    separator = ";" if ";" in text else "\n"
    groups = text.split(separator)
    # tolerate a trailing separator
    if groups and not groups[-1].strip():
        groups.pop()

    rows = []
    for r, group in enumerate(groups):
        rows.append([_parse_token(token, r, c) for c, token in enumerate(group.split())])
    return rows


def to_puzzle_string(rows):
    """Inverse of parse_puzzle for the ';'-separated format."""
    return ";".join(" ".join(str(v) for v in row) for row in rows)


def to_compact_string(rows):
    """Inverse of parse_puzzle for the compact digit format (N <= 9 only)."""
    if len(rows) > 9:
        raise InvalidPuzzle(f"Compact format only supports N <= 9, got N = {len(rows)}.")
    return "".join(str(v) for row in rows for v in row)


def parse_rendered(text):
    """
    Read the numeric content of a grid produced by render_board back into rows.
    Separator lines are skipped and blank cells come back as 0.
    """
    rows = []
    for line in text.splitlines():
        if "|" not in line:
            continue
        body = line.replace("|", "")
        rows.append([int(v) if v else 0 for v in _RENDERED_CELL.findall(body)])
    return rows
