"""
peg_io/parser.py

Чтение доски из текстового формата.

Каждая позиция — один символ:
- ● колышек
- ○ дырка
- ◎ центр, в начале пустой (цель для последнего колышка)
- ◉ центр, в начале с колышком (цель для последнего колышка)
- . недоступная клетка

Доска окружена двумя рядами точек с каждой стороны. Английская доска:

    ...........
    ...........
    ....●●●....
    ....●●●....
    ..●●●●●●●..
    ..●●●◎●●●..
    ..●●●●●●●..
    ....●●●....
    ....●●●....
    ...........
    ...........
"""

from typing import List, Optional

from core.board import Board, Cell, Position
from core.utils import CENTER_HOLE, CENTER_PEG, HOLE, PEG, UNREACHABLE
from utils.error_handling import MalformedBoardError

# Предел ширины строки с учётом перевода строки (не включительно):
# в строке доски не больше MAX_COLUMN_COUNT - 2 символов
MAX_COLUMN_COUNT = 40

SYMBOLS = {
    PEG: Cell.PEG,
    HOLE: Cell.HOLE,
    UNREACHABLE: Cell.UNREACHABLE,
    CENTER_HOLE: Cell.HOLE,
    CENTER_PEG: Cell.PEG,
}


def parse_board(text: str) -> Board:
    """
    Парсит текстовое представление доски.

    Args:
        text: строки доски, разделённые переводом строки

    Returns:
        Board; если на доске есть центр (◎ или ◉), он становится целью

    Raises:
        MalformedBoardError: неизвестный символ, второй центр,
            строки разной длины, слишком широкая доска, нарушена рамка
    """
    lines = text.replace('\r', '').rstrip('\n').split('\n')
    if not lines or not lines[0]:
        raise MalformedBoardError("Пустая доска")

    cols = len(lines[0])
    if cols + 1 >= MAX_COLUMN_COUNT:
        raise MalformedBoardError(
            f"Слишком много столбцов: {cols} (максимум {MAX_COLUMN_COUNT - 2})"
        )

    target: Optional[Position] = None
    grid: List[List[Cell]] = []

    for r, line in enumerate(lines):
        if len(line) != cols:
            raise MalformedBoardError(
                f"Строка {r + 1}: длина {len(line)}, ожидается {cols}"
            )
        row = []
        for c, ch in enumerate(line):
            cell = SYMBOLS.get(ch)
            if cell is None:
                raise MalformedBoardError(
                    f"Строка {r + 1}, столбец {c + 1}: неизвестный символ {ch!r}"
                )
            if ch in (CENTER_HOLE, CENTER_PEG):
                if target is not None:
                    raise MalformedBoardError("Центр уже задан")
                target = (r, c)
            row.append(cell)
        grid.append(row)

    return Board(grid, target)


def load_board(file_path: str) -> Board:
    """
    Читает доску из файла (UTF-8).

    Raises:
        MalformedBoardError: файл не в UTF-8 или доска невалидна
        OSError: файл не найден, это папка, нет прав на чтение
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise MalformedBoardError(f"Файл {file_path} не в кодировке UTF-8: {e}") from e
    return parse_board(text)
