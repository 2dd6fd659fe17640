"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional

from core.board import Board, Move
from utils.logging import get_logger

Solution = List[Move]


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    dead_ends: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Dead ends: {self.dead_ends}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели наследуют от него и реализуют метод solve().
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def solve(self, board: Board) -> Optional[Solution]:
        """
        Решает головоломку.

        Доска вызывающего не меняется: поиск идёт на одной рабочей копии.

        Args:
            board: начальная позиция

        Returns:
            Список ходов или None, если решения нет
        """
        pass

    @staticmethod
    def candidate_moves(board: Board) -> Iterator[Move]:
        """Все допустимые ходы: колышки по строкам, направления по порядку."""
        for pos in board.pegs():
            yield from board.legal_moves_from(pos)

    def _reached_depth(self, depth: int, total: int) -> None:
        """Учитывает глубину и сообщает о новом максимуме."""
        if depth > self.stats.max_depth:
            self.stats.max_depth = depth
            self._log(f"Moves so far {depth}/{total}")

    def _log(self, message: str) -> None:
        """Пишет сообщение в лог если verbose=True."""
        if self.verbose:
            get_logger().info(f"[{self.__class__.__name__}] {message}")
