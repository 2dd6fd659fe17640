"""
solvers/stack.py

Тот же перебор с возвратом, но на явном стеке вместо рекурсии.
Для досок, где глубина упирается в лимит рекурсии Python.
"""

import time
from typing import Iterator, List, Optional

from .base import BaseSolver, Solution, SolverStats
from core.board import Board, Move


class StackSolver(BaseSolver):
    """
    Итеративный backtracking.

    Каждый кадр стека — итератор оставшихся ходов своего уровня.
    Порядок обхода совпадает с BacktrackingSolver, поэтому
    находится то же самое решение.
    """

    def solve(self, board: Board) -> Optional[Solution]:
        self.stats = SolverStats()
        work = board.copy()
        total = board.peg_count() - 1

        self._log(f"Starting stack backtracking (pegs={board.peg_count()})")
        start = time.time()
        result = self._search(work, total)
        self.stats.time_elapsed = time.time() - start

        if result is not None:
            self.stats.solution_length = len(result)
            self._log(f"Solution found: {len(result)} moves")
        else:
            self._log("No solution found")

        self._log(f"Stats: {self.stats}")
        return result

    def _search(self, board: Board, total: int) -> Optional[Solution]:
        self.stats.nodes_visited += 1
        if board.is_solved():
            return []

        path: Solution = []
        frames: List[Iterator[Move]] = [self.candidate_moves(board)]

        while frames:
            move = next(frames[-1], None)
            if move is None:
                # Уровень исчерпан: откатываем ход, который к нему привёл
                frames.pop()
                self.stats.dead_ends += 1
                if path:
                    board.undo(path.pop())
                continue

            board.apply(move)
            path.append(move)
            self.stats.nodes_visited += 1
            self._reached_depth(len(path), total)

            if board.is_solved():
                return list(path)
            frames.append(self.candidate_moves(board))

        return None
