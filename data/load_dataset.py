import os

import pandas as pd

from models.board import SudokuBoard


class SudokuDataset:
    """
    Puzzle/solution pairs from a CSV with 'quizzes' and 'solutions' columns
    (compact 81-digit strings, 0 = blank), e.g. the Kaggle 1M sudoku dump.
    """

    def __init__(self, csv_path, limit=None):
        self.csv_path = csv_path
        if csv_path and os.path.exists(csv_path):
            # Read as strings so leading zeros survive
            self.df = pd.read_csv(csv_path, dtype=str, nrows=limit)
        else:
            raise FileNotFoundError(f"CSV file not found at {csv_path}")

        missing = {'quizzes', 'solutions'} - set(self.df.columns)
        if missing:
            raise ValueError(f"CSV {csv_path} is missing columns: {sorted(missing)}")

    def __len__(self):
        return len(self.df)

    def __getitem__(self, idx):
        row = self.df.iloc[idx]
        return row['quizzes'], row['solutions']

    def board(self, idx):
        quiz_str, _ = self[idx]
        return SudokuBoard.from_string(quiz_str)

    def solution(self, idx):
        _, sol_str = self[idx]
        return SudokuBoard.from_string(sol_str)
