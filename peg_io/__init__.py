"""
peg_io - Ввод/вывод для Peg Solitaire

Экспортирует:
- Парсинг текстового формата доски
- Текстовый вывод доски и решения
- Картинки и GIF анимация решения
"""

from .parser import parse_board, load_board, MAX_COLUMN_COUNT
from .visualizer import display_board, format_move, format_solution, iter_solution_states
from .images import render_board, create_images, create_gif

__all__ = [
    'parse_board',
    'load_board',
    'MAX_COLUMN_COUNT',
    'display_board',
    'format_move',
    'format_solution',
    'iter_solution_states',
    'render_board',
    'create_images',
    'create_gif',
]
