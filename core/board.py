"""
core/board.py

Представление доски: прямоугольная сетка клеток с рамкой
из недоступных клеток глубиной BORDER.

Форма доски неизменна, содержимое меняется на месте ходами
apply/undo.
"""

from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .utils import (
    BORDER, DIRECTIONS, HOLE, PEG, UNREACHABLE,
)
from utils.error_handling import IllegalMoveError, MalformedBoardError

Position = Tuple[int, int]


class Cell(Enum):
    """Состояние клетки. Значение — символ для отображения."""
    PEG = PEG
    HOLE = HOLE
    UNREACHABLE = UNREACHABLE


class Move(NamedTuple):
    """Прыжок: колышек из source через jumped в destination."""
    source: Position
    jumped: Position
    destination: Position

    @property
    def direction(self) -> Tuple[int, int]:
        """Единичный вектор (dr, dc) направления прыжка."""
        return (self.jumped[0] - self.source[0], self.jumped[1] - self.source[1])


class Board:
    """
    Доска Peg Solitaire.

    Хранит сетку клеток и необязательную цель — позицию, на которой
    должен остаться последний колышек. Рамка из недоступных клеток
    позволяет проверять ходы без проверки границ.
    """
    __slots__ = ('_grid', 'rows', 'cols', 'target')

    def __init__(self, grid: Sequence[Sequence[Cell]],
                 target: Optional[Position] = None):
        rows = len(grid)
        if rows < 2 * BORDER + 1:
            raise MalformedBoardError(f"Слишком мало строк: {rows}")

        cols = len(grid[0])
        if cols < 2 * BORDER + 1:
            raise MalformedBoardError(f"Слишком мало столбцов: {cols}")

        for r, row in enumerate(grid):
            if len(row) != cols:
                raise MalformedBoardError(
                    f"Строка {r + 1}: длина {len(row)}, ожидается {cols}"
                )
            for c, cell in enumerate(row):
                if not isinstance(cell, Cell):
                    raise MalformedBoardError(f"Клетка ({r}, {c}): неизвестное значение {cell!r}")
                in_border = (r < BORDER or r >= rows - BORDER or
                             c < BORDER or c >= cols - BORDER)
                if in_border and cell is not Cell.UNREACHABLE:
                    raise MalformedBoardError(
                        f"Клетка ({r}, {c}) в рамке должна быть недоступной"
                    )

        if target is not None:
            tr, tc = target
            if not (0 <= tr < rows and 0 <= tc < cols):
                raise MalformedBoardError(f"Цель {target} вне доски")
            if grid[tr][tc] is Cell.UNREACHABLE:
                raise MalformedBoardError(f"Цель {target} — недоступная клетка")
            target = (tr, tc)

        # Копируем строки: доска владеет сеткой единолично
        self._grid: List[List[Cell]] = [list(row) for row in grid]
        self.rows = rows
        self.cols = cols
        self.target = target

    @classmethod
    def from_symbols(cls, lines: Iterable[str],
                     target: Optional[Position] = None) -> 'Board':
        """Создаёт Board из строк символов ●, ○ и '.'."""
        try:
            grid = [[Cell(ch) for ch in line] for line in lines]
        except ValueError as e:
            raise MalformedBoardError(f"Неизвестный символ: {e}") from e
        if not grid:
            raise MalformedBoardError("Пустая доска")
        return cls(grid, target)

    def copy(self) -> 'Board':
        """Независимая копия доски."""
        return Board(self._grid, self.target)

    def cell(self, pos: Position) -> Cell:
        return self._grid[pos[0]][pos[1]]

    def pegs(self) -> Iterator[Position]:
        """Позиции колышков в порядке строк (row-major)."""
        for r, row in enumerate(self._grid):
            for c, cell in enumerate(row):
                if cell is Cell.PEG:
                    yield (r, c)

    def peg_count(self) -> int:
        """Количество колышков."""
        return sum(row.count(Cell.PEG) for row in self._grid)

    def is_legal(self, move: Move) -> bool:
        """Проверка допустимости хода, включая геометрию прыжка."""
        (sr, sc), (jr, jc), (dr, dc) = move
        step = (jr - sr, jc - sc)
        if step not in DIRECTIONS or (dr, dc) != (jr + step[0], jc + step[1]):
            return False
        for r, c in move:
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                return False
        grid = self._grid
        return (
            grid[sr][sc] is Cell.PEG and
            grid[jr][jc] is Cell.PEG and
            grid[dr][dc] is Cell.HOLE
        )

    def legal_moves_from(self, cell: Position) -> Iterator[Move]:
        """
        Допустимые ходы из клетки cell.

        Не более четырёх, всегда в порядке DIRECTIONS:
        влево, вверх, вправо, вниз.
        """
        r, c = cell
        grid = self._grid
        if grid[r][c] is not Cell.PEG:
            return
        for dr, dc in DIRECTIONS:
            r1, c1 = r + dr, c + dc
            r2, c2 = r1 + dr, c1 + dc
            if grid[r1][c1] is Cell.PEG and grid[r2][c2] is Cell.HOLE:
                yield Move((r, c), (r1, c1), (r2, c2))

    def apply(self, move: Move, validate: bool = False) -> None:
        """
        Выполняет ход на месте.

        Args:
            move: ход, полученный из legal_moves_from
            validate: проверить допустимость хода перед выполнением

        Raises:
            IllegalMoveError: validate=True и ход недопустим
        """
        if validate and not self.is_legal(move):
            raise IllegalMoveError(f"Недопустимый ход: {move}")
        (sr, sc), (jr, jc), (dr, dc) = move
        grid = self._grid
        grid[sr][sc] = Cell.HOLE
        grid[jr][jc] = Cell.HOLE
        grid[dr][dc] = Cell.PEG

    def undo(self, move: Move) -> None:
        """Отменяет последний выполненный ход (строго в порядке LIFO)."""
        (sr, sc), (jr, jc), (dr, dc) = move
        grid = self._grid
        grid[sr][sc] = Cell.PEG
        grid[jr][jc] = Cell.PEG
        grid[dr][dc] = Cell.HOLE

    def is_solved(self) -> bool:
        """Остался один колышек и, если цель задана, он стоит на цели."""
        if self.peg_count() != 1:
            return False
        if self.target is None:
            return True
        return self.cell(self.target) is Cell.PEG

    def rows_as_text(self) -> List[str]:
        """Строки доски символами, рамка включена."""
        return [''.join(cell.value for cell in row) for row in self._grid]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid and self.target == other.target

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board({self.rows}x{self.cols}, {self.peg_count()} pegs, target={self.target})"
