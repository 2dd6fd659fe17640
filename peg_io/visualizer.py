"""
peg_io/visualizer.py

Текстовый вывод доски и решения.
"""

from typing import Iterator, List, Optional, Tuple

from core.board import Board, Move
from core.utils import BORDER, DIRECTION_NAMES, grid_to_playable, index_to_pos


def playable_rows(board: Board) -> List[str]:
    """Строки игровой области — доска без рамки."""
    return [line[BORDER:-BORDER] for line in board.rows_as_text()[BORDER:-BORDER]]


def display_board(board: Board) -> str:
    """
    Красиво форматирует текстовое представление доски.

    Args:
        board: доска

    Returns:
        Строка для вывода
    """
    rows = playable_rows(board)
    cols = len(rows[0]) if rows else 0
    header = "   " + " ".join(chr(c + ord('A')) for c in range(cols))
    lines = [header]

    for r, row in enumerate(rows):
        lines.append(f"{r + 1:<2} " + " ".join(row))

    return "\n".join(lines)


def format_move(move: Move) -> str:
    """Ход в нотации игровой области: 'C1 → A1 (влево)'."""
    from_str = index_to_pos(*grid_to_playable(*move.source))
    to_str = index_to_pos(*grid_to_playable(*move.destination))
    return f"{from_str} → {to_str} ({DIRECTION_NAMES[move.direction]})"


def iter_solution_states(board: Board,
                         solution: List[Move]) -> Iterator[Tuple[Board, Optional[Move]]]:
    """
    Проходит решение по шагам.

    Yields:
        (снимок доски перед ходом, ход); последним идёт
        финальная позиция с ходом None
    """
    state = board.copy()
    for move in solution:
        yield state.copy(), move
        state.apply(move, validate=True)
    yield state, None


def format_solution(board: Board, solution: Optional[List[Move]]) -> str:
    """
    Форматирует решение: доска перед каждым ходом и сам ход.

    Args:
        board: начальная позиция
        solution: список ходов или None

    Returns:
        Форматированная строка
    """
    if solution is None:
        return "❌ Решение не найдено"

    lines = [f"✅ Найдено решение за {len(solution)} ходов:"]
    for i, (state, move) in enumerate(iter_solution_states(board, solution), 1):
        lines.append("")
        lines.append(display_board(state))
        if move is not None:
            lines.append(f"  {i:2}. {format_move(move)}")
    return "\n".join(lines)
