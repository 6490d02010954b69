import sys
import os
import time
import argparse

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from tqdm import tqdm

# Project root
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from data.load_dataset import SudokuDataset
from data.samples import SAMPLE_PUZZLES
from models.board import SudokuBoard
from models.exceptions import SolverTimeout
from solvers.backtracking import METHODS, solve_board

DEFAULT_OUTPUT = 'benchmark_result.png'


# -------------------------------------------------------------------------
# 1. Visualization
# -------------------------------------------------------------------------
def save_performance_graph(results, save_path=DEFAULT_OUTPUT):
    labels = list(results)
    times = [results[m]['avg_time'] for m in labels]
    accs = [results[m]['accuracy'] for m in labels]

    fig, ax1 = plt.subplots(figsize=(10, 6))

    color = 'tab:blue'
    ax1.set_xlabel('Search Driver')
    ax1.set_ylabel('Avg Time (sec)', color=color)
    bars = ax1.bar(labels, times, color=color, alpha=0.6, label='Time')
    ax1.tick_params(axis='y', labelcolor=color)

    for bar in bars:
        height = bar.get_height()
        ax1.text(bar.get_x() + bar.get_width()/2., height,
                 f'{height:.4f}s', ha='center', va='bottom')

    ax2 = ax1.twinx()
    color = 'tab:red'
    ax2.set_ylabel('Solved (%)', color=color)
    ax2.plot(labels, accs, color=color, marker='o', linewidth=2, label='Solved')
    ax2.tick_params(axis='y', labelcolor=color)
    ax2.set_ylim(0, 110)

    for i, acc in enumerate(accs):
        ax2.text(i, acc + 2, f'{acc:.1f}%', ha='center', color='red', fontweight='bold')

    plt.title('Backtracking Benchmark: recursive vs iterative')
    fig.tight_layout()
    plt.savefig(save_path)
    plt.close(fig)
    print(f"🖼️  Saved chart to {save_path}")


# -------------------------------------------------------------------------
# 2. Evaluation Logic
# -------------------------------------------------------------------------
def load_cases(csv_path=None, num_samples=100, seed=0):
    """[(name, puzzle_str, expected_rows or None), ...]"""
    if csv_path is None:
        return [(name, puzzle, None) for name, puzzle in SAMPLE_PUZZLES.items()]

    dataset = SudokuDataset(csv_path)
    if len(dataset) == 0:
        return []
    rng = np.random.default_rng(seed)
    indices = rng.choice(len(dataset), size=min(len(dataset), num_samples), replace=False)
    cases = []
    for idx in indices:
        quiz, solution = dataset[int(idx)]
        cases.append((f'#{idx}', quiz, SudokuBoard.from_string(solution).to_rows()))
    return cases


def evaluate_benchmark(cases, timeout=0.0):
    stats = {m: {'solved': 0, 'time': 0.0, 'steps': 0} for m in METHODS}

    print(f"🔍 Benchmarking on {len(cases)} puzzles...")

    for name, puzzle, expected in tqdm(cases, desc="Running Benchmark"):
        for method in METHODS:
            board = SudokuBoard.from_string(puzzle)
            steps = [0]
            start = time.time()
            try:
                success = solve_board(board, method=method, timeout=timeout, steps=steps)
            except SolverTimeout:
                success = False
            stats[method]['time'] += time.time() - start
            stats[method]['steps'] += steps[0]

            if success and board.is_solved() and (expected is None or board.to_rows() == expected):
                stats[method]['solved'] += 1

    results = {}
    for method, s in stats.items():
        results[method] = {
            'accuracy': s['solved'] / len(cases) * 100,
            'avg_time': s['time'] / len(cases),
            'avg_steps': s['steps'] / len(cases),
        }

    print("\n" + "="*55)
    print("📊 Final Benchmark Results")
    print("="*55)
    print(f"{'Method':<12} | {'Solved':<9} | {'Avg Time':<12} | {'Avg Steps':<10}")
    print("-" * 55)
    for method, r in results.items():
        print(f"{method:<12} | {r['accuracy']:>7.2f}% | {r['avg_time']:>10.5f}s | {r['avg_steps']:>10.1f}")
    print("="*55)

    return results


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', type=str, default=None,
                        help="CSV with 'quizzes'/'solutions' columns; built-in samples when omitted")
    parser.add_argument('--samples', type=int, default=100)
    parser.add_argument('--timeout', type=float, default=0.0, help='Per-puzzle seconds, 0 = no limit')
    parser.add_argument('--output', type=str, default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    try:
        cases = load_cases(args.csv, args.samples)
    except FileNotFoundError as e:
        print(f"❌ {e}")
        return 1

    if not cases:
        print("❌ No puzzles to benchmark")
        return 1

    results = evaluate_benchmark(cases, timeout=args.timeout)
    save_performance_graph(results, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
