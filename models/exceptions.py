"""Exception hierarchy for puzzle loading and solving.

Everything raised on purpose by the board model, the parsers and the solver
inherits from :class:`PuzzleError`, so callers can catch one base class.
An unsolvable puzzle is *not* an error: the solver simply returns ``False``.
"""


class PuzzleError(Exception):
    """Base exception for all puzzle operations."""


class InvalidPuzzle(PuzzleError, ValueError):
    """Raised when puzzle input is malformed.

    Examples include non-numeric tokens, rows of unequal length, a grid
    size that is not a perfect square, or a value outside ``0..N``.
    """


class InconsistentPuzzle(PuzzleError):
    """Raised when two given values clash in a row, column or square."""

    def __init__(self, message, indices=None):
        super().__init__(message)
        self.indices = indices


class SolverTimeout(PuzzleError):
    """Raised when a search runs past its deadline.

    Kept separate from an unsolvable result so callers can tell
    "gave up" apart from "no solution exists".
    """
