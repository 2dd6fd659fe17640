"""
core/utils.py

Общие утилиты и константы для Peg Solitaire.
"""

from typing import Dict, List, Tuple

# Направления движения: влево, вверх, вправо, вниз
DIRECTIONS: List[Tuple[int, int]] = [(0, -1), (-1, 0), (0, 1), (1, 0)]

DIRECTION_NAMES: Dict[Tuple[int, int], str] = {
    (-1, 0): 'вверх',
    (1, 0): 'вниз',
    (0, -1): 'влево',
    (0, 1): 'вправо',
}

# Символы текстового формата
PEG = '●'              # Колышек
HOLE = '○'             # Пустое место (можно прыгнуть)
CENTER_HOLE = '◎'      # Центр (цель), в начале пустой
CENTER_PEG = '◉'       # Центр (цель), в начале с колышком
UNREACHABLE = '.'      # Недоступная клетка

# Глубина рамки из недоступных клеток
BORDER = 2


def index_to_pos(row: int, col: int) -> str:
    """Индекс (row, col) → шахматная нотация (A1, B2, ...)."""
    return f"{chr(col + ord('A'))}{row + 1}"


def grid_to_playable(row: int, col: int) -> Tuple[int, int]:
    """Координаты сетки (с рамкой) → координаты игровой области."""
    return row - BORDER, col - BORDER
