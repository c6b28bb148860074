"""
Sudoku Solver - Entry Point

Loads a puzzle, asks which search strategy to use (unless given on the
command line), solves it and prints the solved grid(s) with time and
memory figures.

Example:
    python main.py
    python main.py puzzles/easy.txt --strategy bfs
    python main.py puzzles/hard.txt -s hybrid --timeout 30 --debug
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.diagnostics import measure
from src.display import format_board, format_solution
from src.puzzle_loader import list_puzzles, load_puzzle
from src.settings import load_settings, puzzle_directory, remember_strategy
from src.sudoku import (
    BoardState,
    MalformedPuzzle,
    ResourceExceeded,
    Solution,
    get_strategy_info,
    get_strategy_names,
    run_strategy,
)

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1
EXIT_USAGE = 2
EXIT_STOPPED = 3


def configure_logging(debug: bool) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def _menu_choice(title: str, options: List[str]) -> Optional[int]:
    """
    Show a lettered menu and read the user's choice.

    Returns:
        Index of the chosen option, or None for an invalid answer
    """
    print(title)
    letters = "abcdefghijklmnopqrstuvwxyz"
    for letter, option in zip(letters, options):
        print(f"{letter}. {option}")
    valid = letters[:len(options)]
    answer = input(f"Enter your choice ({valid[0]}-{valid[-1]}): ").strip().lower()
    if len(answer) == 1 and answer in valid:
        return valid.index(answer)
    print("Invalid choice.")
    return None


class SolverApp:
    """
    Command line application controller.

    Resolves the puzzle and strategy from arguments, settings or menus,
    runs the search and renders the result.
    """

    def __init__(self, args: argparse.Namespace,
                 settings: Optional[Dict[str, Any]] = None):
        """
        Initialize the application.

        Args:
            args: Parsed command line arguments (override saved settings)
            settings: Loaded settings (read from config.json when omitted)
        """
        self.args = args
        self.settings: Dict[str, Any] = settings if settings is not None else load_settings()

    def choose_puzzle(self) -> Optional[Path]:
        """Puzzle path from the command line, or from the bundled puzzle menu."""
        if self.args.puzzle:
            return Path(self.args.puzzle)

        puzzles = list_puzzles(puzzle_directory(self.settings))
        if not puzzles:
            print("No puzzle given and no bundled puzzles found.")
            return None

        index = _menu_choice(
            "Choose a Sudoku puzzle to solve:",
            [p.stem.replace("_", " ").title() for p in puzzles],
        )
        return puzzles[index] if index is not None else None

    def choose_strategy(self) -> Optional[str]:
        """Strategy from the command line, or from the solving-method menu."""
        if self.args.strategy:
            remember_strategy(self.settings, self.args.strategy)
            return self.args.strategy

        info = get_strategy_info()
        saved = self.settings.get("strategy_name")
        options = [
            entry["description"] + (" [last used]" if entry["name"] == saved else "")
            for entry in info
        ]
        index = _menu_choice("\nChoose a solving method:", options)
        if index is None:
            return None

        name = info[index]["name"]
        remember_strategy(self.settings, name)
        return name

    def solve(self, board: BoardState, strategy_name: str) -> Solution:
        """Run the strategy on board, measuring time and memory."""
        timeout = self.args.timeout if self.args.timeout is not None \
            else self.settings.get("timeout_sec")
        max_states = self.args.max_states if self.args.max_states is not None \
            else self.settings.get("max_states")

        print("\nTracking memory and time usage...")
        with measure(strategy_name) as usage:
            solution = run_strategy(
                strategy_name, board, timeout_sec=timeout, max_states=max_states
            )
        print(f"Used memory: {usage.memory_before_kb} KB -> {usage.memory_after_kb} KB")
        print(f"Time taken: {usage.elapsed_ms:.2f} ms")
        return solution

    def run(self) -> int:
        """
        Run the application.

        Returns:
            Exit code
        """
        puzzle_path = self.choose_puzzle()
        if puzzle_path is None:
            return EXIT_USAGE

        try:
            board = load_puzzle(puzzle_path)
        except MalformedPuzzle as e:
            logger.error(f"Failed to load puzzle from {puzzle_path}: {e}")
            if e.conflicts:
                print(f"Conflicting cells: {e.conflicts}")
            return EXIT_USAGE

        print("\nOriginal Sudoku Puzzle:")
        print(format_board(board))

        strategy_name = self.choose_strategy()
        if strategy_name is None:
            return EXIT_USAGE

        try:
            solution = self.solve(board, strategy_name)
        except ResourceExceeded as e:
            logger.error(str(e))
            print(f"\nSearch stopped: {e}")
            return EXIT_STOPPED

        print()
        print(format_solution(solution))

        if solution.has_solution:
            return EXIT_SOLVED
        if solution.was_cancelled:
            return EXIT_STOPPED
        return EXIT_NO_SOLUTION


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Sudoku Solver - BFS, depth-limited and IDA* state-space search"
    )
    parser.add_argument(
        "puzzle",
        nargs="?",
        help="Puzzle file (9 rows of 9 numbers, or 81 digits on one line)"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Solving method (prompted for when omitted)"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=None,
        help="Stop searching after this many seconds"
    )
    parser.add_argument(
        "--max-states",
        type=int,
        default=None,
        help="Fail once the search has expanded this many states"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Initialize and run the Sudoku solver."""
    args = parse_args(argv)
    settings = load_settings()
    configure_logging(args.debug or settings.get("debug_enabled", False))

    application = SolverApp(args, settings)
    return application.run()


if __name__ == "__main__":
    sys.exit(main())
