import argparse
import sys
import time

from data.samples import DEFAULT_SAMPLE, SAMPLE_PUZZLES
from models.board import SudokuBoard
from models.exceptions import PuzzleError, SolverTimeout
from solvers.backtracking import METHODS, solve_board
from utils.visualize import print_sudoku


def build_parser():
    parser = argparse.ArgumentParser(description='Backtracking Sudoku solver')
    parser.add_argument('--input', type=str, default=None,
                        help='Puzzle string: "0 5 0 2 ...;0 0 0 ..." or 81 digits (0 = blank)')
    parser.add_argument('--sample', choices=sorted(SAMPLE_PUZZLES), default=DEFAULT_SAMPLE,
                        help='Built-in puzzle used when --input is not given')
    parser.add_argument('--square-size', type=int, default=None,
                        help='Sub-square side (3 for 9x9). Derived from the input when omitted')
    parser.add_argument('--method', choices=METHODS, default='recursive')
    parser.add_argument('--timeout', type=float, default=0.0, help='Seconds, 0 = no limit')
    parser.add_argument('--no-color', action='store_true', help='Plain output without ANSI colors')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    puzzle = args.input if args.input is not None else SAMPLE_PUZZLES[args.sample]
    color = not args.no_color

    # 1. Load
    try:
        board = SudokuBoard.from_string(puzzle, square_size=args.square_size)
    except PuzzleError as e:
        print(f"❌ Invalid puzzle: {e}")
        return 2

    original = board.copy()
    print(f"🧩 Puzzle ({board.size}x{board.size}, {board.count_blanks()} blanks):")
    print_sudoku(board, color=color)

    # 2. Solve
    start_time = time.time()
    try:
        success = solve_board(board, method=args.method, timeout=args.timeout)
    except SolverTimeout:
        print(f"\n⏰ Gave up after {time.time() - start_time:.4f} sec (timeout {args.timeout} sec).")
        return 1
    elapsed = time.time() - start_time

    # 3. Visualization
    if success:
        print(f"\n🎉 Solved in {elapsed:.4f} sec!")
        print_sudoku(board, original=original, color=color)
        return 0

    print(f"\n💀 No solution exists ({elapsed:.4f} sec).")
    return 1


if __name__ == "__main__":
    sys.exit(main())
