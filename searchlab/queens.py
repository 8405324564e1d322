"""N-Queens solved by plain backtracking and by branch and bound."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

Solution = tuple[str, ...]


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("board size must not be negative")


def _snapshot(board: list[list[str]]) -> Solution:
    return tuple("".join(row) for row in board)


def is_safe(board: Sequence[Sequence[str]], row: int, col: int) -> bool:
    """Whether no queen above row attacks (row, col)."""
    n = len(board)
    column = any(board[i][col] == "Q" for i in range(row))
    upper_left = any(board[row - k][col - k] == "Q" for k in range(1, min(row, col) + 1))
    upper_right = any(
        board[row - k][col + k] == "Q" for k in range(1, min(row, n - 1 - col) + 1)
    )
    return not (column or upper_left or upper_right)


def solve_backtracking(n: int) -> Iterator[Solution]:
    """Every solution, found by checking each square against the queens placed."""
    _check_size(n)
    board = [["."] * n for _ in range(n)]

    def place(row: int) -> Iterator[Solution]:
        if row == n:
            yield _snapshot(board)
            return
        for col in range(n):
            if is_safe(board, row, col):
                board[row][col] = "Q"
                yield from place(row + 1)
                board[row][col] = "."

    return place(0)


def solve_branch_and_bound(n: int) -> Iterator[Solution]:
    """Every solution, pruning with sets of occupied columns and diagonals."""
    _check_size(n)
    board = [["."] * n for _ in range(n)]
    cols: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> Iterator[Solution]:
        if row == n:
            yield _snapshot(board)
            return
        for col in range(n):
            if col in cols or row + col in diagonals or row - col in anti_diagonals:
                continue
            board[row][col] = "Q"
            cols.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(row - col)
            yield from place(row + 1)
            board[row][col] = "."
            cols.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(row - col)

    return place(0)


def format_board(board: Sequence[Sequence[str]]) -> str:
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in board)


def main(argv: list[str] | None = None) -> int:
    """Read N from standard input and print every solution with both solvers."""
    argparse.ArgumentParser(description="Solve the N-Queens problem.").parse_args(argv)
    print("Enter value of N for N-Queens: ", end="")
    try:
        n = int(sys.stdin.readline())
        solvers = (
            ("Backtracking", solve_backtracking(n)),
            ("Branch and Bound", solve_branch_and_bound(n)),
        )
    except ValueError as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1
    for name, solutions in solvers:
        print(f"\n--- Solving using {name} (Row-wise) ---")
        total = 0
        for solution in solutions:
            total += 1
            print(format_board(solution))
        print(f"Total Solutions ({name}): {total}")
    return 0