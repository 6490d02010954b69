import itertools

import numpy as np
import pytest


def pattern_rows(square_size):
    """A complete valid grid built from the usual shifted-row pattern."""
    n = square_size * square_size
    return [[(square_size * (r % square_size) + r // square_size + c) % n + 1 for c in range(n)]
            for r in range(n)]


def is_valid_grid(rows, square_size):
    grid = np.asarray(rows)
    n = square_size * square_size
    if grid.shape != (n, n) or np.any(grid == 0):
        return False
    full = set(range(1, n + 1))
    for i in range(n):
        if set(grid[i, :]) != full or set(grid[:, i]) != full:
            return False
    for br in range(square_size):
        for bc in range(square_size):
            box = grid[br*square_size:(br+1)*square_size, bc*square_size:(bc+1)*square_size]
            if set(box.flatten()) != full:
                return False
    return True


def _given_domain(rows, square_size, r, c):
    # values not excluded by the givens alone
    n = square_size * square_size
    br, bc = r // square_size * square_size, c // square_size * square_size
    used = set(rows[r]) | {rows[i][c] for i in range(n)}
    used |= {rows[i][j] for i in range(br, br + square_size) for j in range(bc, bc + square_size)}
    return [v for v in range(1, n + 1) if v not in used]


def brute_force_solutions(rows, square_size):
    """Every valid completion, by trying all value combinations for the blanks."""
    n = square_size * square_size
    blanks = [(r, c) for r in range(n) for c in range(n) if rows[r][c] == 0]
    domains = [_given_domain(rows, square_size, r, c) for r, c in blanks]
    found = []
    for values in itertools.product(*domains):
        grid = [row[:] for row in rows]
        for (r, c), v in zip(blanks, values):
            grid[r][c] = v
        if is_valid_grid(grid, square_size):
            found.append(grid)
    return found


@pytest.fixture
def solved_rows():
    return pattern_rows(3)


@pytest.fixture
def valid_grid():
    return is_valid_grid


@pytest.fixture
def brute_force():
    return brute_force_solutions
