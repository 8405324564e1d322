import io
import sys

import pytest

from searchlab.queens import (
    format_board,
    is_safe,
    main,
    solve_backtracking,
    solve_branch_and_bound,
)


def assert_valid(solution):
    n = len(solution)
    columns = [row.index("Q") for row in solution]
    assert all(row.count("Q") == 1 for row in solution)
    assert len(set(columns)) == n
    assert len({r + c for r, c in enumerate(columns)}) == n
    assert len({r - c for r, c in enumerate(columns)}) == n


def test_four_queens_count():
    assert len(list(solve_backtracking(4))) == 2


def test_eight_queens_count():
    assert len(list(solve_branch_and_bound(8))) == 92


@pytest.mark.parametrize("n", range(1, 7))
def test_solvers_agree(n):
    assert list(solve_backtracking(n)) == list(solve_branch_and_bound(n))


@pytest.mark.parametrize("n", [4, 5, 6])
def test_solutions_are_valid(n):
    solutions = list(solve_backtracking(n))
    assert len(set(solutions)) == len(solutions)
    for solution in solutions:
        assert_valid(solution)


def test_no_solution_for_three():
    assert list(solve_branch_and_bound(3)) == []


def test_single_square():
    assert list(solve_backtracking(1)) == [("Q",)]


def test_negative_size():
    with pytest.raises(ValueError):
        solve_backtracking(-1)
    with pytest.raises(ValueError):
        solve_branch_and_bound(-1)


def test_is_safe():
    board = [list("Q..."), list("...."), list("...."), list("....")]
    assert not is_safe(board, 1, 0)
    assert not is_safe(board, 1, 1)
    assert is_safe(board, 1, 2)
    assert not is_safe(board, 3, 3)


def test_format_board():
    assert format_board(("Q.", ".Q")) == "Q . \n. Q \n"


def test_main_totals(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Total Solutions (Backtracking): 2" in out
    assert "Total Solutions (Branch and Bound): 2" in out