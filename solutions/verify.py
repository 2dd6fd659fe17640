"""
solutions/verify.py

Независимая проверка решения повторным проигрыванием ходов.
"""

from typing import List

from core.board import Board, Move
from utils.error_handling import IllegalMoveError


def _is_position(pos) -> bool:
    return (isinstance(pos, tuple) and len(pos) == 2 and
            all(isinstance(x, int) for x in pos))


def _is_move_shape(move) -> bool:
    """Тройка позиций (row, col): source, jumped, destination."""
    return isinstance(move, tuple) and len(move) == 3 and all(_is_position(p) for p in move)


def verify_solution(board: Board, moves: List[Move]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход — тройка позиций (row, col);
    - каждый ход допустим в своей позиции (прыжок на одну клетку
      через соседний колышек в дырку);
    - после всех ходов доска решена: один колышек, на цели если она задана.

    Доска вызывающего не меняется.
    """
    state = board.copy()
    for move in moves:
        if not _is_move_shape(move):
            return False
        try:
            state.apply(Move(*move), validate=True)
        except IllegalMoveError:
            return False
    return state.is_solved()
