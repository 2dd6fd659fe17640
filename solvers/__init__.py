"""
solvers - Решатели Peg Solitaire

Экспортирует:
- BacktrackingSolver: рекурсивный перебор с возвратом
- StackSolver: тот же перебор на явном стеке
"""

from .base import BaseSolver, Solution, SolverStats
from .backtracking import BacktrackingSolver
from .stack import StackSolver

SOLVERS = {
    'backtracking': BacktrackingSolver,
    'stack': StackSolver,
}

__all__ = [
    'BaseSolver',
    'Solution',
    'SolverStats',
    'BacktrackingSolver',
    'StackSolver',
    'SOLVERS',
]
