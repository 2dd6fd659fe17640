"""
tests/conftest.py

Общие доски для тестов.
"""

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board

GAMES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "games")


def make_board(*rows, target=None) -> Board:
    """Доска из строк игровой области; рамка из двух рядов точек добавляется сама."""
    width = len(rows[0]) + 4
    border = ["." * width] * 2
    lines = border + [".." + row + ".." for row in rows] + border
    return Board.from_symbols(lines, target=target)


@pytest.fixture
def line_board() -> Board:
    """
    Ряд ●●○● — решается за два хода:

      ● ● ○ ●  →  ○ ○ ● ●  →  ○ ● ○ ○
    """
    return make_board("●●○●")


@pytest.fixture
def l_board() -> Board:
    """
    Доска 3×3 с четырьмя колышками, решается за три хода:

      ● ● ○
      ○ ● ○
      ○ ● ○
    """
    return make_board("●●○", "○●○", "○●○")


@pytest.fixture
def stuck_board() -> Board:
    """Два соседних колышка без дырки в пределах прыжка."""
    return make_board("●●")


@pytest.fixture
def plus_board() -> Board:
    """
    Плюс с пустым центром — ходов нет:

        ●
      ● ○ ●
        ●
    """
    return make_board(".●.", "●○●", ".●.")
