"""
solvers - Поиск решений треугольного Peg Solitaire

Экспортирует:
- GameTreeSolver: поиск в глубину по дереву игры с возвратами
- GameNode, jump_history: узел дерева и восстановление ходов
- SearchResult, SearchStatus, SolverStats: итог и статистика поиска
"""

from .base import BaseSolver, SearchResult, SearchStatus, SolverStats
from .game_tree import EXPLORED, GameNode, jump_history
from .tree_dfs import DEFAULT_MAX_NODES, GameTreeSolver

__all__ = [
    'BaseSolver',
    'SearchResult',
    'SearchStatus',
    'SolverStats',
    'EXPLORED',
    'GameNode',
    'jump_history',
    'DEFAULT_MAX_NODES',
    'GameTreeSolver',
]
