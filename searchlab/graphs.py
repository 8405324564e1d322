"""Undirected graphs stored as adjacency matrices, with DFS and BFS traversals."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable
from itertools import islice

INVALID_VERTEX = "Invalid vertex -1 !! Enter again !"
INVALID_WEIGHTED = "Invalid vertex or weight -1 !! Enter again !"
OUT_OF_RANGE = "Vertex out of range !! Enter again !"


class Graph:
    """An undirected graph on vertices 0..n-1; a weight of 0 means no edge."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of vertices must not be negative")
        self._matrix = [[0] * n for _ in range(n)]

    def __len__(self) -> int:
        return len(self._matrix)

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < len(self):
            raise ValueError(OUT_OF_RANGE)

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Connect u and v in both directions with the given weight."""
        self._check_vertex(u)
        self._check_vertex(v)
        self._matrix[u][v] = weight
        self._matrix[v][u] = weight

    def weight(self, u: int, v: int) -> int:
        """The weight of edge (u, v), or 0 if there is none."""
        self._check_vertex(u)
        self._check_vertex(v)
        return self._matrix[u][v]

    def neighbours(self, v: int) -> list[int]:
        """Vertices adjacent to v, in ascending order."""
        self._check_vertex(v)
        return [i for i, w in enumerate(self._matrix[v]) if w != 0]

    def adjacency_lines(self) -> list[str]:
        """One line per vertex listing its neighbours."""
        return [
            f"{v} : " + "".join(f"{u} , " for u in self.neighbours(v))
            for v in range(len(self))
        ]

    def dfs_recursive(self, source: int) -> list[int]:
        """Depth-first visiting order, descending into the lowest neighbour first."""
        self._check_vertex(source)
        visited: set[int] = set()
        order: list[int] = []

        def visit(v: int) -> None:
            order.append(v)
            visited.add(v)
            for u in self.neighbours(v):
                if u not in visited:
                    visit(u)

        visit(source)
        return order

    def dfs_iterative(self, source: int) -> list[int]:
        """Depth-first visiting order driven by an explicit stack."""
        self._check_vertex(source)
        visited: set[int] = set()
        order: list[int] = []
        stack = [source]
        while stack:
            v = stack.pop()
            if v in visited:
                continue
            visited.add(v)
            order.append(v)
            stack.extend(u for u in self.neighbours(v) if u not in visited)
        return order

    def bfs(self, source: int) -> list[int]:
        """Breadth-first visiting order."""
        self._check_vertex(source)
        visited = {source}
        order = [source]
        queue = deque([source])
        while queue:
            v = queue.popleft()
            for u in self.neighbours(v):
                if u not in visited:
                    visited.add(u)
                    order.append(u)
                    queue.append(u)
        return order


def read_edges(graph: Graph, tokens: Iterable, weighted: bool = False) -> list[str]:
    """Add edges read from tokens until an all -1 entry or the end of input.

    Entries are "u v" or, when weighted, "u v w". Rejected entries are
    skipped and their reasons returned in order.
    """
    width = 3 if weighted else 2
    values = (int(token) for token in tokens)
    rejected: list[str] = []
    while True:
        entry = tuple(islice(values, width))
        if len(entry) < width or all(x == -1 for x in entry):
            return rejected
        if -1 in entry:
            rejected.append(INVALID_WEIGHTED if weighted else INVALID_VERTEX)
            continue
        u, v, *rest = entry
        try:
            graph.add_edge(u, v, rest[0] if rest else 1)
        except ValueError:
            rejected.append(OUT_OF_RANGE)


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and print its traversals."""
    argparse.ArgumentParser(
        description="Read an undirected graph and print DFS and BFS orders."
    ).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        print("\nEnter number of vertices in the graph : ", end="")
        graph = Graph(int(next(tokens)))
        print("\nEnter edges or enter -1,-1 to stop : ", end="")
        for message in read_edges(graph, tokens):
            print("\n" + message, end="")
        for line in graph.adjacency_lines():
            print("\n" + line, end="")
        for traverse in (graph.dfs_recursive, graph.dfs_iterative, graph.bfs):
            print("\nEnter the source vertex : ", end="")
            for v in traverse(int(next(tokens))):
                print(f"\n{v} visited", end="")
    except StopIteration:
        print("\nunexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1
    print()
    return 0