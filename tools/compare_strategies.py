"""
Diagnostic script comparing every registered strategy on the same puzzles.
Prints solutions found, states explored, graph size, time and memory per run.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.diagnostics import measure
from src.puzzle_loader import list_puzzles, load_puzzle
from src.sudoku import ResourceExceeded, get_strategy_names, run_strategy

# BFS on loosely constrained puzzles can run for a very long time
TIMEOUT_SEC = 30.0
MAX_STATES = 2_000_000


def compare(puzzle_path: Path):
    """Run all strategies on one puzzle and print a row per strategy."""
    print(f"\n{'='*78}")
    print(f"Puzzle: {puzzle_path.name}")
    print(f"{'='*78}")

    board = load_puzzle(puzzle_path)
    print(f"Empty cells: {board.heuristic()}")
    print(f"{'strategy':>10} {'found':>6} {'states':>10} {'vertices':>10} "
          f"{'edges':>10} {'ms':>10} {'mem KB':>8}")

    for name in get_strategy_names():
        try:
            with measure(name) as usage:
                solution = run_strategy(name, board, timeout_sec=TIMEOUT_SEC,
                                        max_states=MAX_STATES)
        except ResourceExceeded as e:
            print(f"{name:>10} {'budget':>6} {e.states_explored:>10}")
            continue

        metrics = solution.metrics
        found = f"{solution.solution_count}{'*' if solution.was_cancelled else ''}"
        print(f"{name:>10} {found:>6} {metrics.states_explored:>10} "
              f"{metrics.vertex_count:>10} {metrics.edge_count:>10} "
              f"{usage.elapsed_ms:>10.1f} {usage.memory_delta_kb:>8}")


if __name__ == "__main__":
    if len(sys.argv) > 1:
        paths = [Path(p) for p in sys.argv[1:]]
    else:
        paths = list_puzzles(Path(__file__).parent.parent / "puzzles")

    if not paths:
        print("No puzzles found!")
    else:
        for path in paths:
            compare(path)
        print("\n* = stopped at the time limit")
