"""
Board model: the flattened cell collection plus the square size.

Owns no search logic. The solver mutates cells only through set_value.
"""
from dataclasses import dataclass, replace

import numpy as np

from models.exceptions import InconsistentPuzzle, InvalidPuzzle
from utils.puzzle_utils import (
    get_group_indices,
    parse_puzzle,
    square_index,
    square_size_of,
    to_puzzle_string,
)
from utils.visualize import render_board


@dataclass(frozen=True)
class Cell:
    value: int   # 0 = unassigned, otherwise 1..N
    row: int
    col: int
    square: int  # sub-square index, row-major by block position


class SudokuBoard:
    """
    N x N board (N = square_size ** 2) stored as N*N cells in row-major order
    (index = row * N + col).

    Construction validates the input and the givens, so a board that exists
    is always well formed and free of clashes.
    """

    def __init__(self, rows, square_size=None):
        rows = [list(row) for row in rows]
        n = self._check_shape(rows)
        if square_size is None:
            square_size = square_size_of(n)
        elif isinstance(square_size, bool) or not isinstance(square_size, (int, np.integer)):
            raise InvalidPuzzle(f"Square size must be an integer, got {square_size!r}.")
        elif square_size < 1 or square_size * square_size != n:
            raise InvalidPuzzle(
                f"Square size {square_size} does not match a {n}x{n} grid."
            )

        self._square_size = int(square_size)
        self.cells = []
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                    raise InvalidPuzzle(
                        f"Invalid value at ({r + 1},{c + 1}): {value!r} (not an integer)."
                    )
                if value < 0 or value > n:
                    raise InvalidPuzzle(
                        f"Invalid value at ({r + 1},{c + 1}): {value} (allowed: 0..{n})."
                    )
                self.cells.append(Cell(int(value), r, c, square_index(r, c, self._square_size)))

        # Group membership is static, only the values change
        self._rows, self._cols, self._squares = get_group_indices(self._square_size)

        conflicts = self.find_conflicts()
        if conflicts:
            a, b = conflicts[0]
            cell = self.cells[a]
            raise InconsistentPuzzle(
                f"Conflict: value {cell.value} appears twice "
                f"(cells {self._label(a)} and {self._label(b)}).",
                indices=(a, b),
            )

    @staticmethod
    def _check_shape(rows):
        n = len(rows)
        if n == 0:
            raise InvalidPuzzle("Puzzle has no rows.")
        for r, row in enumerate(rows):
            if len(row) != n:
                raise InvalidPuzzle(
                    f"Row {r + 1} has {len(row)} values, expected {n} (board must be N x N)."
                )
        return n

    @classmethod
    def from_string(cls, text, square_size=None):
        return cls(parse_puzzle(text), square_size=square_size)

    @classmethod
    def from_array(cls, grid):
        return cls(np.asarray(grid).tolist())

    def _label(self, index):
        cell = self.cells[index]
        return f"({cell.row + 1},{cell.col + 1})"

    @property
    def square_size(self):
        """S, side of a sub-square. Fixed at construction."""
        return self._square_size

    @property
    def size(self):
        """N, the number of rows (and of values)."""
        return self.square_size * self.square_size

    def __len__(self):
        return len(self.cells)

    def __getitem__(self, index):
        return self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    def __eq__(self, other):
        if not isinstance(other, SudokuBoard):
            return NotImplemented
        return self.square_size == other.square_size and self.to_rows() == other.to_rows()

    def __repr__(self):
        return f"SudokuBoard({self.size}x{self.size}, blanks={self.count_blanks()})"

    # ------------------------------------------------------------------
    # Constraint queries
    # ------------------------------------------------------------------
    def _values(self, indices):
        return {self.cells[i].value for i in indices if self.cells[i].value > 0}

    def values_in_row(self, cell):
        """All nonzero values in the row of `cell`."""
        return self._values(self._rows[cell.row])

    def values_in_column(self, cell):
        """All nonzero values in the column of `cell`."""
        return self._values(self._cols[cell.col])

    def values_in_square(self, cell):
        """All nonzero values in the sub-square of `cell`."""
        return self._values(self._squares[cell.square])

    def find_conflicts(self):
        """
        Pairs (i, j), i < j, of cells holding the same nonzero value inside a
        shared row, column or square. Each pair is reported once.
        """
        conflicts = []
        seen_pairs = set()
        for groups in (self._rows, self._cols, self._squares):
            for group in groups:
                first_seen = {}
                for i in group:
                    value = self.cells[i].value
                    if value == 0:
                        continue
                    if value in first_seen:
                        pair = (first_seen[value], i)
                        if pair not in seen_pairs:
                            seen_pairs.add(pair)
                            conflicts.append(pair)
                    else:
                        first_seen[value] = i
        return conflicts

    def count_blanks(self):
        return sum(1 for cell in self.cells if cell.value == 0)

    def is_complete(self):
        return all(cell.value != 0 for cell in self.cells)

    def is_solved(self):
        return self.is_complete() and not self.find_conflicts()

    # ------------------------------------------------------------------
    # Mutation (solver only)
    # ------------------------------------------------------------------
    def set_value(self, index, value):
        if index < 0 or index >= len(self.cells):
            raise IndexError(f"Cell index {index} out of range 0..{len(self.cells) - 1}.")
        if value < 0 or value > self.size:
            raise ValueError(f"Value {value} out of range 0..{self.size}.")
        # cells are frozen, swap in an updated one
        self.cells[index] = replace(self.cells[index], value=value)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def to_rows(self):
        n = self.size
        return [[cell.value for cell in self.cells[r * n:(r + 1) * n]] for r in range(n)]

    def to_array(self):
        return np.array(self.to_rows(), dtype=int)

    def to_string(self):
        return to_puzzle_string(self.to_rows())

    def copy(self):
        return SudokuBoard(self.to_rows(), square_size=self.square_size)

    def render(self):
        """Boxed text grid of the current values (see utils.visualize.render_board)."""
        return render_board(self.to_rows(), self.square_size)
