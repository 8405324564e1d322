"""A* search for sliding-tile puzzles with the Manhattan heuristic."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count

Board = tuple[tuple[int, ...], ...]

SIZE = 3
EXPAND = "expand"
MOVE = "move"
SOLVED = "solved"

# Moves of the blank square.
DIRECTIONS = (("Up", -1, 0), ("Down", 1, 0), ("Left", 0, -1), ("Right", 0, 1))


@dataclass(frozen=True)
class PuzzleState:
    """A board with its blank position, path cost g and heuristic h."""

    board: Board
    blank: tuple[int, int]
    g: int
    h: int

    def f(self) -> int:
        return self.g + self.h

    def key(self) -> str:
        return "".join(f"{tile} " for row in self.board for tile in row)


@dataclass(frozen=True)
class SearchEvent:
    """A step of the search: a state expanded, generated by a move, or solved."""

    kind: str
    state: PuzzleState
    direction: str | None = None


def _normalise(board: Sequence[Sequence[int]]) -> Board:
    return tuple(tuple(int(tile) for tile in row) for row in board)


def manhattan_distance(board: Sequence[Sequence[int]], goal: Sequence[Sequence[int]]) -> int:
    """Sum of distances of every non-blank tile from its goal position."""
    positions: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for x, row in enumerate(goal):
        for y, tile in enumerate(row):
            positions[tile].append((x, y))
    return sum(
        abs(i - x) + abs(j - y)
        for i, row in enumerate(board)
        for j, tile in enumerate(row)
        if tile != 0
        for x, y in positions.get(tile, ())
    )


def find_blank(board: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Position of the 0 tile."""
    for i, row in enumerate(board):
        for j, tile in enumerate(row):
            if tile == 0:
                return i, j
    raise ValueError("board has no blank tile")


def search(initial: Sequence[Sequence[int]], goal: Sequence[Sequence[int]]) -> Iterator[SearchEvent]:
    """Run A* from initial towards goal, yielding every step taken."""
    goal_board = _normalise(goal)
    board = _normalise(initial)
    shape = [len(row) for row in goal_board]
    if not goal_board or [len(row) for row in board] != shape or len(set(shape)) != 1:
        raise ValueError("boards must be rectangular and of the same shape")
    start = PuzzleState(board, find_blank(board), 0, manhattan_distance(board, goal_board))
    return _run(start, goal_board)


def _run(start: PuzzleState, goal: Board) -> Iterator[SearchEvent]:
    rows, cols = len(goal), len(goal[0])
    order = count()
    heap = [(start.f(), next(order), start)]
    seen = {start.key()}
    while heap:
        *_, current = heappop(heap)
        yield SearchEvent(EXPAND, current)
        if current.board == goal:
            yield SearchEvent(SOLVED, current)
            return
        r, c = current.blank
        for name, dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            grid = [list(row) for row in current.board]
            grid[r][c], grid[nr][nc] = grid[nr][nc], grid[r][c]
            board = _normalise(grid)
            following = PuzzleState(board, (nr, nc), current.g + 1, manhattan_distance(board, goal))
            if following.key() not in seen:
                seen.add(following.key())
                heappush(heap, (following.f(), next(order), following))
                yield SearchEvent(MOVE, following, name)


def solve(initial: Sequence[Sequence[int]], goal: Sequence[Sequence[int]]) -> PuzzleState | None:
    """The goal state reached by the search, or None if the goal is unreachable."""
    for event in search(initial, goal):
        if event.kind == SOLVED:
            return event.state
    return None


def format_board(board: Sequence[Sequence[int]]) -> str:
    return "".join("".join(f"{tile} " for tile in row) + "\n" for row in board)


def _read_board(tokens: Iterator[str]) -> list[list[int]]:
    return [[int(next(tokens)) for _ in range(SIZE)] for _ in range(SIZE)]


def main(argv: list[str] | None = None) -> int:
    """Read goal and initial 3x3 boards from standard input and trace the search."""
    argparse.ArgumentParser(description="Solve the 8-puzzle with A* search.").parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        print("Enter the goal state (3x3 grid):")
        goal = _read_board(tokens)
        print("Enter the initial state (3x3 grid):")
        initial = _read_board(tokens)
        solved = False
        for event in search(initial, goal):
            state = event.state
            if event.kind == EXPAND:
                print(f"Current state (f = {state.f()}):")
            elif event.kind == MOVE:
                print(f"Move {event.direction} (f = {state.f()}):")
            else:
                print("Solution found!")
                solved = True
            print(format_board(state.board))
    except StopIteration:
        print("unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    if not solved:
        print("No solution found.")
    return 0