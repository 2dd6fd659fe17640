"""
core - Ядро Peg Solitaire

Доска, ходы и утилиты координат.
"""

from .board import Board, Cell, Move, Position
from .utils import (
    DIRECTIONS, DIRECTION_NAMES, BORDER,
    PEG, HOLE, CENTER_HOLE, CENTER_PEG, UNREACHABLE,
    index_to_pos, grid_to_playable
)

__all__ = [
    'Board', 'Cell', 'Move', 'Position',
    'DIRECTIONS', 'DIRECTION_NAMES', 'BORDER',
    'PEG', 'HOLE', 'CENTER_HOLE', 'CENTER_PEG', 'UNREACHABLE',
    'index_to_pos', 'grid_to_playable'
]
