"""
tests/test_backtracking.py

Тесты решателей: BacktrackingSolver и StackSolver должны вести себя одинаково.
"""

import os

import pytest

from core.board import Cell, Move
from peg_io.parser import load_board
from solutions.verify import verify_solution
from solvers import BacktrackingSolver, StackSolver, SOLVERS
from conftest import GAMES_DIR, make_board

SOLVER_CLASSES = [BacktrackingSolver, StackSolver]


def replay(board, solution):
    state = board.copy()
    for move in solution:
        state.apply(move, validate=True)
    return state


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_line_board(solver_class, line_board):
    """Ряд ●●○● решается за два хода."""
    solution = solver_class().solve(line_board)

    assert solution == [
        Move((2, 2), (2, 3), (2, 4)),
        Move((2, 5), (2, 4), (2, 3)),
    ]
    final = replay(line_board, solution)
    assert final.is_solved()
    assert final.peg_count() == 1


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_l_board_first_solution(solver_class, l_board):
    """Находится первое решение в порядке: колышки по строкам, вверх/вниз/влево/вправо."""
    solution = solver_class().solve(l_board)

    assert solution == [
        Move((2, 2), (2, 3), (2, 4)),
        Move((4, 3), (3, 3), (2, 3)),
        Move((2, 4), (2, 3), (2, 2)),
    ]
    assert verify_solution(l_board, solution)


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_already_solved(solver_class):
    """Один колышек — пустое решение, а не None."""
    solution = solver_class().solve(make_board("○●○"))
    assert solution == []


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_no_legal_moves(solver_class, stuck_board):
    """Нет ходов — None сразу, без углубления."""
    solver = solver_class()
    assert solver.solve(stuck_board) is None
    assert solver.stats.nodes_visited == 1
    assert solver.stats.max_depth == 0
    assert solver.stats.dead_ends == 1


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_plus_board_unsolvable(solver_class, plus_board):
    assert solver_class().solve(plus_board) is None


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_target_changes_solution(solver_class):
    """Цель отсекает ветку, которая без цели была бы победной."""
    free = make_board("○●●○")
    targeted = make_board("○●●○", target=(2, 2))

    assert solver_class().solve(free) == [Move((2, 3), (2, 4), (2, 5))]
    solution = solver_class().solve(targeted)
    assert solution == [Move((2, 4), (2, 3), (2, 2))]
    assert replay(targeted, solution).is_solved()


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_target_unreachable(solver_class):
    """С целью решения может не быть, хотя без цели оно есть."""
    assert solver_class().solve(make_board("○●●○")) is not None
    assert solver_class().solve(make_board("○●●○", target=(2, 3))) is None


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_deterministic(solver_class, l_board):
    """Два запуска на одинаковых досках дают одинаковый результат."""
    first = solver_class().solve(l_board.copy())
    second = solver_class().solve(l_board.copy())
    assert first == second


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_depth_bound(solver_class):
    """Глубина поиска не больше (колышков - 1)."""
    board = make_board("●●○●●", "●○●○●", "○●●●○")
    solver = solver_class()
    solver.solve(board)
    assert solver.stats.max_depth <= board.peg_count() - 1
    assert solver.stats.nodes_visited > 1


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_caller_board_unchanged(solver_class, l_board):
    """solve работает на своей копии доски."""
    original = l_board.copy()
    solver_class().solve(l_board)
    assert l_board == original


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
def test_stats(solver_class, l_board):
    solver = solver_class()
    solution = solver.solve(l_board)
    assert solver.stats.solution_length == len(solution)
    assert solver.stats.max_depth == len(solution)
    assert solver.stats.nodes_visited >= len(solution) + 1


def test_solvers_agree():
    """Рекурсивный и стековый решатели идут по одному дереву."""
    boards = [
        make_board("●●○●●", "●○●○●", "○●●●○"),
        make_board("●●●", "●○●", "●●●"),
        make_board("○●●○", target=(2, 5)),
        load_board(os.path.join(GAMES_DIR, "small.txt")),
    ]
    for board in boards:
        recursive = BacktrackingSolver()
        iterative = StackSolver()
        assert recursive.solve(board) == iterative.solve(board)
        assert recursive.stats.nodes_visited == iterative.stats.nodes_visited
        assert recursive.stats.dead_ends == iterative.stats.dead_ends
        assert recursive.stats.max_depth == iterative.stats.max_depth


def test_verbose_logs_progress(caplog):
    """verbose=True пишет прогресс в лог."""
    board = make_board("●●○●")
    solver = BacktrackingSolver(verbose=True)
    with caplog.at_level("INFO", logger="peg_solver"):
        solver.solve(board)
    assert "Moves so far 2/2" in caplog.text


def test_registry():
    assert SOLVERS == {'backtracking': BacktrackingSolver, 'stack': StackSolver}


@pytest.mark.parametrize("solver_class", SOLVER_CLASSES)
@pytest.mark.parametrize("name", ["english.txt", "english_no_center.txt"])
def test_english_board(solver_class, name):
    """Английская доска: 31 ход, последний колышек в центре если он задан."""
    board = load_board(os.path.join(GAMES_DIR, name))
    solution = solver_class().solve(board)

    assert solution is not None
    assert len(solution) == 31
    # Первый допустимый ход при обходе по строкам: (3, 5) прыгает вниз в центр
    assert solution[0] == Move((3, 5), (4, 5), (5, 5))
    final = replay(board, solution)
    assert final.peg_count() == 1
    assert verify_solution(board, solution)
    if board.target is not None:
        assert final.cell(board.target) is Cell.PEG


def test_english_board_both_solvers_agree():
    """На английской доске оба решателя находят одно и то же решение."""
    board = load_board(os.path.join(GAMES_DIR, "english.txt"))
    assert BacktrackingSolver().solve(board) == StackSolver().solve(board)
