"""Fixed sample puzzles in the ';'-separated row format."""

EASY = ("0 5 0 2 0 0 0 0 0;0 0 0 0 0 6 7 9 3;4 0 7 8 0 9 0 5 6;"
        "3 7 0 0 6 2 4 8 5;6 9 5 0 0 0 1 2 7;8 0 4 5 7 0 0 0 0;"
        "0 6 0 0 8 4 0 3 1;7 8 0 0 0 0 0 4 0;1 0 9 0 0 3 5 0 8")

MEDIUM = ("0 0 0 0 4 9 0 7 6;0 0 0 7 0 0 0 4 8;0 7 3 0 0 0 0 0 2;"
          "0 6 0 8 9 2 0 0 3;3 8 4 1 5 0 6 2 0;5 0 2 6 0 0 1 8 0;"
          "7 4 0 3 6 0 0 0 0;6 1 9 0 0 0 0 0 0;0 0 0 9 7 0 0 0 4")

HARD = ("1 0 7 8 5 0 4 0 0;0 0 0 0 0 6 0 0 5;0 6 0 0 0 0 0 0 8;"
        "0 0 0 3 9 7 0 0 0;0 5 6 0 0 0 2 9 0;0 0 0 6 2 5 0 0 0;"
        "8 0 0 0 0 0 0 3 0;4 0 0 7 0 0 0 0 0;0 0 2 0 4 8 5 0 7")

# 4x4 (square size 2) with a unique solution
SMALL = "1 0 0 4;0 4 1 0;2 0 0 3;0 3 2 0"

SAMPLE_PUZZLES = {
    'easy': EASY,
    'medium': MEDIUM,
    'hard': HARD,
    'small': SMALL,
}

DEFAULT_SAMPLE = 'easy'
