import numpy as np

from data.samples import EASY, SMALL
from models.board import SudokuBoard
from solvers.backtracking import solve_board
from utils.puzzle_utils import parse_rendered
from utils.visualize import BLUE, RED, get_conflict_mask, print_sudoku, render_board


def test_render_small_board_exactly():
    board = SudokuBoard.from_string(SMALL)
    assert board.render() == "\n".join([
        "-----------",
        "|1   |  4 |",
        "|  4 |1   |",
        "-----------",
        "|2   |  3 |",
        "|  3 |2   |",
        "-----------",
    ])


def test_render_easy_board_top_block():
    lines = SudokuBoard.from_string(EASY).render().split("\n")
    assert lines[:5] == [
        "----------------------",
        "|  5   |2     |      |",
        "|      |    6 |7 9 3 |",
        "|4   7 |8   9 |  5 6 |",
        "----------------------",
    ]
    assert lines[-1] == "----------------------"
    # 3 block separators + closing line + 9 rows
    assert len(lines) == 13


def test_every_line_has_separator_width():
    for square_size in (2, 3):
        n = square_size * square_size
        text = render_board([[0] * n for _ in range(n)], square_size)
        assert {len(line) for line in text.split("\n")} == {1 + 2 * n + square_size}


def test_render_round_trip_after_solving():
    board = SudokuBoard.from_string(EASY)
    assert parse_rendered(board.render()) == board.to_rows()
    assert solve_board(board)
    assert parse_rendered(board.render()) == board.to_rows()


def test_conflict_mask_marks_clashing_cells():
    grid = np.zeros((4, 4), dtype=int)
    grid[0, 0] = 2
    grid[0, 3] = 2
    grid[2, 2] = 1
    mask = get_conflict_mask(grid)
    assert mask[0, 0] and mask[0, 3]
    assert mask.sum() == 2


def test_color_render_highlights_filled_and_conflicting_cells():
    original = SudokuBoard.from_string(SMALL)
    solved = original.copy()
    assert solve_board(solved)
    text = render_board(solved, original=original, color=True)
    assert BLUE in text
    assert RED not in text

    rows = [[1, 1, 0, 0], [0] * 4, [0] * 4, [0] * 4]
    assert RED in render_board(rows, color=True)


def test_print_sudoku_reports_status(capsys):
    original = SudokuBoard.from_string(SMALL)
    solved = original.copy()
    solve_board(solved)

    print_sudoku(solved, original=original, color=False)
    out = capsys.readouterr().out
    assert "|1 2 |3 4 |" in out
    assert "Perfect Solution" in out

    print_sudoku(original, color=False)
    out = capsys.readouterr().out
    assert "Perfect Solution" not in out
