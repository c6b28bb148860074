"""
Board State Module - Immutable 9x9 Sudoku board representation.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .errors import MalformedPuzzle

GRID_SIZE = 9
BOX_SIZE = 3
EMPTY = 0

Grid = Tuple[Tuple[int, ...], ...]
Cell = Tuple[int, int]


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state representation.

    Uses tuple-of-tuples for hashability and immutability.
    Board cells contain integers 1-9, or 0 for empty cells.

    Boards built through from_2d_list()/from_grid() are checked for shape
    and value range. Boards built by next-state generation are trusted:
    every placement has already passed is_valid().

    Attributes:
        grid: Tuple of tuples representing the board state
    """
    grid: Grid

    @classmethod
    def from_2d_list(cls, grid: Sequence[Sequence[int]],
                     strict: bool = False) -> 'BoardState':
        """
        Create BoardState from a 2D list of integers.

        Args:
            grid: 9 rows of 9 integers, 0 meaning empty
            strict: Also reject boards whose fixed cells repeat a value
                    within a row, column or box

        Returns:
            BoardState instance with immutable grid

        Raises:
            MalformedPuzzle: If the grid has the wrong shape, contains
                non-integers or values outside 0-9, or (strict) violates
                uniqueness
        """
        if len(grid) != GRID_SIZE:
            raise MalformedPuzzle(
                f"Expected {GRID_SIZE} rows, got {len(grid)}"
            )

        rows = []
        for r, row in enumerate(grid):
            if len(row) != GRID_SIZE:
                raise MalformedPuzzle(
                    f"Row {r} has {len(row)} cells, expected {GRID_SIZE}"
                )
            cells = []
            for c, value in enumerate(row):
                try:
                    number = int(value)
                except (TypeError, ValueError):
                    number = None
                # reject lossy conversions such as 5.9, True or "5"
                if number is None or isinstance(value, bool) or number != value:
                    raise MalformedPuzzle(
                        f"Cell ({r},{c}) is not an integer: {value!r}"
                    )
                if not EMPTY <= number <= GRID_SIZE:
                    raise MalformedPuzzle(
                        f"Cell ({r},{c}) out of range 0-{GRID_SIZE}: {number}"
                    )
                cells.append(number)
            rows.append(tuple(cells))

        board = cls(grid=tuple(rows))

        if strict:
            conflicts = board.find_conflicts()
            if conflicts:
                raise MalformedPuzzle(
                    f"Puzzle repeats values in {len(conflicts)} cells",
                    conflicts=conflicts,
                )

        return board

    @classmethod
    def from_grid(cls, grid: Grid, strict: bool = False) -> 'BoardState':
        """
        Create BoardState from existing grid tuple.

        Args:
            grid: Tuple of tuples representing board state
            strict: See from_2d_list()

        Returns:
            BoardState instance
        """
        return cls.from_2d_list(grid, strict=strict)

    def get_cell(self, row: int, col: int) -> Optional[int]:
        """
        Get value at specific cell position.

        Args:
            row: Row index
            col: Column index

        Returns:
            Cell value (0-9) or None if outside the board
        """
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return None

    @property
    def rows(self) -> int:
        """Get number of rows in board."""
        return len(self.grid)

    @property
    def cols(self) -> int:
        """Get number of columns in board."""
        return len(self.grid[0]) if self.rows > 0 else 0

    def empty_cells(self) -> Iterator[Cell]:
        """Yield (row, col) of every empty cell in row-major order."""
        for r, row in enumerate(self.grid):
            for c, value in enumerate(row):
                if value == EMPTY:
                    yield r, c

    def diff(self, other: 'BoardState') -> List[Cell]:
        """
        Find cells that differ between this board and another.

        Args:
            other: Another BoardState to compare against

        Returns:
            List of (row, col) tuples where cells differ
        """
        if not isinstance(other, BoardState):
            raise TypeError("Can only diff against another BoardState")

        differences = []
        for r in range(self.rows):
            for c in range(self.cols):
                if self.grid[r][c] != other.grid[r][c]:
                    differences.append((r, c))

        return differences

    def is_valid(self, row: int, col: int, num: int) -> bool:
        """
        Check whether num may be placed at (row, col).

        Returns False if num already occurs in the row, the column or the
        containing 3x3 box.
        """
        grid = self.grid
        if num in grid[row]:
            return False
        for r in range(GRID_SIZE):
            if grid[r][col] == num:
                return False
        box_row = row - row % BOX_SIZE
        box_col = col - col % BOX_SIZE
        for r in range(box_row, box_row + BOX_SIZE):
            for c in range(box_col, box_col + BOX_SIZE):
                if grid[r][c] == num:
                    return False
        return True

    def is_solved(self) -> bool:
        """True if no cell is empty."""
        return all(EMPTY not in row for row in self.grid)

    def _used_numbers(self, row: int, col: int) -> set:
        grid = self.grid
        used = set(grid[row])
        used.update(grid[r][col] for r in range(GRID_SIZE))
        box_row = row - row % BOX_SIZE
        box_col = col - col % BOX_SIZE
        for r in range(box_row, box_row + BOX_SIZE):
            used.update(grid[r][box_col:box_col + BOX_SIZE])
        return used

    def candidates(self, row: int, col: int) -> List[int]:
        """
        Values 1-9 not excluded by the cell's row, column or box.

        Args:
            row: Row index
            col: Column index

        Returns:
            Legal values in ascending order
        """
        used = self._used_numbers(row, col)
        return [num for num in range(1, GRID_SIZE + 1) if num not in used]

    def count_valid_numbers(self, row: int, col: int) -> int:
        """Branching factor if (row, col) is filled next."""
        return len(self.candidates(row, col))

    def find_conflicts(self) -> List[Cell]:
        """
        Find fixed cells that repeat a value within a row, column or box.

        Returns:
            Sorted list of (row, col) tuples involved in a duplicate
        """
        units: List[List[Cell]] = []
        for i in range(GRID_SIZE):
            units.append([(i, c) for c in range(GRID_SIZE)])
            units.append([(r, i) for r in range(GRID_SIZE)])
        for box_row in range(0, GRID_SIZE, BOX_SIZE):
            for box_col in range(0, GRID_SIZE, BOX_SIZE):
                units.append([
                    (r, c)
                    for r in range(box_row, box_row + BOX_SIZE)
                    for c in range(box_col, box_col + BOX_SIZE)
                ])

        conflicts = set()
        for unit in units:
            seen: Dict[int, List[Cell]] = {}
            for r, c in unit:
                value = self.grid[r][c]
                if value != EMPTY:
                    seen.setdefault(value, []).append((r, c))
            for cells in seen.values():
                if len(cells) > 1:
                    conflicts.update(cells)

        return sorted(conflicts)

    def is_consistent(self) -> bool:
        """True if no fixed value repeats within a row, column or box."""
        return not self.find_conflicts()

    def next_states(self, prioritize_most_constrained: bool = False) -> List['BoardState']:
        """
        Generate the boards reachable by filling one empty cell.

        Args:
            prioritize_most_constrained: Fill the cell with the fewest legal
                values instead of the first empty cell

        Returns:
            Child boards, one per legal value
        """
        if prioritize_most_constrained:
            return self.next_states_with_heuristic()
        return self.next_states_basic()

    def next_states_basic(self) -> List['BoardState']:
        """
        Fill the first empty cell (row-major) with every legal value.

        Only that one cell is expanded, which fixes the move order so the
        same configuration reached twice produces the same child.
        """
        for row, col in self.empty_cells():
            return self._children_at(row, col)
        return []

    def most_constrained_cell(self) -> Optional[Cell]:
        """
        Find the empty cell with the fewest legal values.

        Ties go to the first such cell in row-major order.

        Returns:
            (row, col) of the cell, or None if the board is full
        """
        best: Optional[Cell] = None
        best_count = GRID_SIZE + 1
        for row, col in self.empty_cells():
            count = self.count_valid_numbers(row, col)
            if count < best_count:
                best_count = count
                best = (row, col)
                if count == 0:
                    break
        return best

    def next_states_with_heuristic(self) -> List['BoardState']:
        """Fill the most constrained empty cell with every legal value."""
        target = self.most_constrained_cell()
        if target is None:
            return []
        return self._children_at(*target)

    def _children_at(self, row: int, col: int) -> List['BoardState']:
        """
        Build one child per legal value at (row, col).

        The row is copied once into a working buffer that is written,
        snapshotted and reset for each value; published children never
        share a mutable row.
        """
        children = []
        work = list(self.grid[row])
        head = self.grid[:row]
        tail = self.grid[row + 1:]
        for num in range(1, GRID_SIZE + 1):
            if self.is_valid(row, col, num):
                work[col] = num
                children.append(BoardState(grid=head + (tuple(work),) + tail))
                work[col] = EMPTY
        return children

    def heuristic(self) -> int:
        """
        Remaining empty cells.

        Every move fills exactly one cell, so this never overestimates the
        distance to a solved board.
        """
        return sum(row.count(EMPTY) for row in self.grid)

    @cached_property
    def key(self) -> str:
        """All cells concatenated in row-major order (collision free)."""
        return "".join(str(value) for row in self.grid for value in row)

    @property
    def compact_hash(self) -> int:
        """Fast integer digest of the grid; distinct boards may collide."""
        return hash(self.grid)

    def __hash__(self):
        """Enable using BoardState as dict key or in sets."""
        return hash(self.grid)

    def __eq__(self, other):
        """Enable board equality comparison."""
        if not isinstance(other, BoardState):
            return False
        return self.grid == other.grid

    def to_list(self) -> List[List[int]]:
        """
        Convert to mutable 2D list representation.

        Returns:
            2D list representation of the board
        """
        return [list(row) for row in self.grid]
