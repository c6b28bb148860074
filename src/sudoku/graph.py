"""
Search Graph Module - Adjacency bookkeeping over explored board states.

Strategies record every parent -> child transition they follow here. The
graph is never consulted for search decisions; it exists so a finished run
can report how much of the state space it touched and, at DEBUG level,
dump the transitions.
"""

from typing import Dict, List

from .board import BoardState


class SearchGraph:
    """
    Directed graph of board states using an adjacency list.

    Boards are stored once in an arena and addressed by their canonical
    string key; adjacency lists hold arena indices rather than boards.

    Example:
        graph = SearchGraph(start)
        for child in start.next_states_basic():
            graph.add_edge(start, child)
        graph.vertex_count   # 1 + number of children
    """

    def __init__(self, start: BoardState):
        """
        Initialize the graph with the starting board as its first vertex.

        Args:
            start: Initial board of the search
        """
        self._boards: List[BoardState] = []
        self._index: Dict[str, int] = {}
        self._adjacency: List[List[int]] = []
        self.add_vertex(start)

    def add_vertex(self, board: BoardState) -> int:
        """
        Add a board as a vertex; no-op if already present.

        Returns:
            Arena index of the vertex
        """
        key = board.key
        index = self._index.get(key)
        if index is None:
            index = len(self._boards)
            self._index[key] = index
            self._boards.append(board)
            self._adjacency.append([])
        return index

    def add_edge(self, from_board: BoardState, to_board: BoardState) -> None:
        """
        Record a transition. Both endpoints are created if missing.
        Duplicate edges are kept.
        """
        source = self.add_vertex(from_board)
        target = self.add_vertex(to_board)
        self._adjacency[source].append(target)

    def out_neighbors(self, board: BoardState) -> List[BoardState]:
        """
        Boards reachable by one recorded move from board.

        Returns:
            Neighbor boards in insertion order (empty if board is unknown)
        """
        index = self._index.get(board.key)
        if index is None:
            return []
        return [self._boards[i] for i in self._adjacency[index]]

    def contains(self, board: BoardState) -> bool:
        """Check if a board is a vertex of the graph."""
        return board.key in self._index

    def __contains__(self, board: BoardState) -> bool:
        return self.contains(board)

    def __len__(self) -> int:
        return len(self._boards)

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self._boards)

    @property
    def edge_count(self) -> int:
        """Number of edges (sum of neighbor-list lengths)."""
        return sum(len(neighbors) for neighbors in self._adjacency)

    def describe(self) -> str:
        """
        Render every vertex key followed by its neighbor keys.

        Intended for DEBUG logging on small searches; output grows with
        the whole explored state space.
        """
        lines = []
        for index, board in enumerate(self._boards):
            lines.append(f"Vertex {index}: {board.key}")
            for neighbor in self._adjacency[index]:
                lines.append(f"  -> {neighbor}: {self._boards[neighbor].key}")
        return "\n".join(lines)
