"""
solvers/backtracking.py

Рекурсивный поиск в глубину с возвратом (backtracking).
"""

import time
from typing import Optional

from .base import BaseSolver, Solution, SolverStats
from core.board import Board


class BacktrackingSolver(BaseSolver):
    """
    Полный перебор в глубину.

    Особенности:
    - Одна рабочая доска на весь поиск: apply → рекурсия → undo
    - Без мемоизации
    - Без эвристик и сортировки ходов
    - Без симметрий

    Глубина рекурсии не превышает (колышков - 1).
    """

    def solve(self, board: Board) -> Optional[Solution]:
        self.stats = SolverStats()
        work = board.copy()
        self._total = board.peg_count() - 1

        self._log(f"Starting backtracking (pegs={board.peg_count()})")
        start = time.time()
        result = self._dfs(work, [])
        self.stats.time_elapsed = time.time() - start

        if result is not None:
            self.stats.solution_length = len(result)
            self._log(f"Solution found: {len(result)} moves")
        else:
            self._log("No solution found")

        self._log(f"Stats: {self.stats}")
        return result

    def _dfs(self, board: Board, path: Solution) -> Optional[Solution]:
        """
        Рекурсивный шаг.

        Args:
            board: рабочая доска (меняется на месте)
            path: ходы от начальной позиции до текущей

        Returns:
            Копия пути при победе или None
        """
        self.stats.nodes_visited += 1
        self._reached_depth(len(path), self._total)

        if board.is_solved():
            return list(path)

        for move in self.candidate_moves(board):
            board.apply(move)
            path.append(move)
            result = self._dfs(board, path)
            if result is not None:
                return result
            path.pop()
            board.undo(move)

        # Тупик: ни один ход не привёл к решению
        self.stats.dead_ends += 1
        return None
