import pytest

import main
from experiments import evaluate


def test_solves_builtin_sample(capsys):
    assert main.main(['--sample', 'small', '--no-color']) == 0
    out = capsys.readouterr().out
    assert "🧩 Puzzle (4x4, 8 blanks)" in out
    assert "🎉 Solved" in out
    assert "|1 2 |3 4 |" in out


def test_iterative_method_from_input(capsys):
    assert main.main(['--input', '1..4.41.2..3.32.', '--method', 'iterative', '--no-color']) == 0
    assert "Perfect Solution" in capsys.readouterr().out


def test_unsolvable_input_exits_one(capsys):
    assert main.main(['--input', '1 2 3 0;3 0 0 4;2 1 4 3;4 3 2 1', '--no-color']) == 1
    assert "No solution exists" in capsys.readouterr().out


@pytest.mark.parametrize("puzzle", [
    '1 1 0 0;0 0 0 0;0 0 0 0;0 0 0 0',
    '1 x 0 0;0 0 0 0;0 0 0 0;0 0 0 0',
    '1 0 0;0 0 0;0 0 0',
])
def test_bad_input_exits_two(puzzle, capsys):
    assert main.main(['--input', puzzle]) == 2
    assert "❌ Invalid puzzle" in capsys.readouterr().out


def test_square_size_mismatch_exits_two(capsys):
    assert main.main(['--sample', 'easy', '--square-size', '2']) == 2


def test_unknown_sample_is_an_argparse_error():
    with pytest.raises(SystemExit):
        main.main(['--sample', 'impossible'])


def test_benchmark_on_dataset(tmp_path, solved_rows, capsys):
    solution = "".join(str(v) for row in solved_rows for v in row)
    quiz = "00" + solution[2:]
    csv_path = tmp_path / "sudoku.csv"
    csv_path.write_text(f"quizzes,solutions\n{quiz},{solution}\n")
    output = tmp_path / "chart.png"

    assert evaluate.main(['--csv', str(csv_path), '--samples', '5', '--output', str(output)]) == 0
    assert output.exists()
    assert "📊 Final Benchmark Results" in capsys.readouterr().out


def test_benchmark_results_per_method():
    cases = evaluate.load_cases()
    small = [case for case in cases if case[0] == 'small']
    results = evaluate.evaluate_benchmark(small)
    assert set(results) == {'recursive', 'iterative'}
    assert results['recursive']['accuracy'] == 100.0
    assert results['iterative']['accuracy'] == 100.0


def test_benchmark_missing_csv(tmp_path, capsys):
    assert evaluate.main(['--csv', str(tmp_path / 'missing.csv')]) == 1


def test_benchmark_header_only_csv(tmp_path, capsys):
    csv_path = tmp_path / "empty.csv"
    csv_path.write_text("quizzes,solutions\n")
    assert evaluate.load_cases(str(csv_path)) == []
    assert evaluate.main(['--csv', str(csv_path), '--output', str(tmp_path / 'chart.png')]) == 1
    assert "No puzzles to benchmark" in capsys.readouterr().out
    assert not (tmp_path / 'chart.png').exists()
