"""
peg_io/images.py

Вывод решения в виде картинок: PNG на каждый шаг или анимированный GIF.
"""

import os
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from core.board import Board, Cell, Move
from core.utils import BORDER, grid_to_playable
from utils.error_handling import OutputFolderError
from utils.logging import get_logger
from .visualizer import iter_solution_states

# Размер клетки в пикселях
TILE_WIDTH = 60
TILE_HEIGHT = 60

# Задержка кадра GIF в миллисекундах
FRAME_DELAY = 500

# Бесконечное повторение анимации
REPEAT_INFINITE = True

WOOD = (176, 124, 72)
GLASS = (150, 200, 235)
HOLE_COLOR = (74, 48, 26)
GLASS_SELECTED = (245, 200, 70)
HOLE_SELECTED = (110, 190, 110)
OUTLINE = (40, 30, 20)

# Отступ фишки от края клетки
PADDING = 6


def _tile_box(row: int, col: int) -> Tuple[int, int, int, int]:
    """Прямоугольник круга клетки (координаты сетки без рамки)."""
    x = col * TILE_WIDTH
    y = row * TILE_HEIGHT
    return (x + PADDING, y + PADDING,
            x + TILE_WIDTH - PADDING - 1, y + TILE_HEIGHT - PADDING - 1)


def render_board(board: Board, selected: Optional[Move] = None) -> Image.Image:
    """
    Рисует игровую область доски.

    Args:
        board: доска
        selected: ход для подсветки (колышек-источник и дырка-цель)

    Returns:
        RGB изображение (cols - 4) * TILE_WIDTH × (rows - 4) * TILE_HEIGHT
    """
    width = (board.cols - 2 * BORDER) * TILE_WIDTH
    height = (board.rows - 2 * BORDER) * TILE_HEIGHT
    image = Image.new('RGB', (width, height), WOOD)
    draw = ImageDraw.Draw(image)

    for r in range(BORDER, board.rows - BORDER):
        for c in range(BORDER, board.cols - BORDER):
            cell = board.cell((r, c))
            if cell is Cell.UNREACHABLE:
                continue
            color = GLASS if cell is Cell.PEG else HOLE_COLOR
            if selected is not None:
                if (r, c) == selected.source:
                    color = GLASS_SELECTED
                elif (r, c) == selected.destination:
                    color = HOLE_SELECTED
            draw.ellipse(_tile_box(*grid_to_playable(r, c)), fill=color, outline=OUTLINE)

    return image


def check_output_folder(output_folder: str) -> None:
    """Проверяет, что папка для вывода существует."""
    if not os.path.isdir(output_folder):
        raise OutputFolderError(f"Папка для вывода не существует: {output_folder}")


def create_images(board: Board, solution: List[Move], output_folder: str) -> List[str]:
    """
    Сохраняет каждый шаг решения в PNG: solution_001.png, solution_002.png, ...

    Returns:
        Пути созданных файлов (ходов + 1)
    """
    check_output_folder(output_folder)
    logger = get_logger()

    paths = []
    for i, (state, _) in enumerate(iter_solution_states(board, solution), 1):
        path = os.path.join(output_folder, f"solution_{i:03}.png")
        render_board(state).save(path)
        logger.info(f"Saved {path}")
        paths.append(path)
    return paths


def create_gif(board: Board, solution: List[Move], output_folder: str) -> str:
    """
    Сохраняет решение анимацией solution.gif.

    На каждый ход два кадра: позиция и позиция с подсвеченным ходом.
    Последний кадр — финальная позиция.

    Returns:
        Путь к файлу
    """
    check_output_folder(output_folder)
    logger = get_logger()

    frames: List[Image.Image] = []
    for state, move in iter_solution_states(board, solution):
        frames.append(render_board(state))
        if move is not None:
            frames.append(render_board(state, selected=move))
        logger.debug(f"Created frame {len(frames)}")

    path = os.path.join(output_folder, "solution.gif")
    options = {'save_all': True, 'append_images': frames[1:], 'duration': FRAME_DELAY}
    if REPEAT_INFINITE:
        options['loop'] = 0
    frames[0].save(path, **options)
    logger.info(f"Saved {path} ({len(frames)} frames)")
    return path
