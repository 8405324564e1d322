"""A* shortest paths on grids of open (0) and blocked cells."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count

Cell = tuple[int, int]

MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))

SAMPLE_GRID = (
    (0, 0, 0, 0, 1),
    (1, 1, 0, 0, 1),
    (0, 0, 0, 0, 0),
    (0, 1, 1, 0, 0),
    (0, 0, 0, 0, 0),
)


@dataclass(frozen=True)
class PathResult:
    """Cost of a path and the cells it passes through, start to goal."""

    cost: int
    path: tuple[Cell, ...]


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def is_open(grid: Sequence[Sequence[int]], cell: Cell) -> bool:
    """Whether cell lies inside the grid and is not blocked."""
    r, c = cell
    return 0 <= r < len(grid) and 0 <= c < len(grid[0]) and grid[r][c] == 0


def a_star(grid: Sequence[Sequence[int]], start: Cell, goal: Cell) -> PathResult | None:
    """Shortest four-way path from start to goal, or None if there is none."""
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    start, goal = tuple(start), tuple(goal)
    if not (0 <= start[0] < len(grid) and 0 <= start[1] < len(grid[0])):
        raise ValueError("start lies outside the grid")
    order = count()
    heap = [(manhattan(start, goal), next(order), 0, start, None)]
    parents: dict[Cell, Cell | None] = {}
    while heap:
        f, _, g, cell, parent = heappop(heap)
        if cell in parents:
            continue
        parents[cell] = parent
        if cell == goal:
            path = []
            step: Cell | None = cell
            while step is not None:
                path.append(step)
                step = parents[step]
            return PathResult(f, tuple(reversed(path)))
        for dr, dc in MOVES:
            following = (cell[0] + dr, cell[1] + dc)
            if is_open(grid, following) and following not in parents:
                heappush(
                    heap,
                    (g + 1 + manhattan(following, goal), next(order), g + 1, following, cell),
                )
    return None


def format_path(path: Sequence[Cell]) -> str:
    return "Path: " + "".join(f"({r},{c}) " for r, c in path)


def main(argv: list[str] | None = None) -> int:
    """Find a path across the built-in sample grid."""
    argparse.ArgumentParser(description="A* search on a sample grid.").parse_args(argv)
    result = a_star(SAMPLE_GRID, (0, 0), (4, 4))
    if result is None:
        print("No path found.")
    else:
        print(f"Reached goal with cost: {result.cost}")
        print(format_path(result.path))
    return 0