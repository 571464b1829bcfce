"""
solvers/base.py

Базовый класс для решателей треугольной доски.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from core.board import TriangleBoard
from core.moves import Move
from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    backtracks: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Backtracks: {self.backtracks}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class SearchStatus(Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"              # дерево перебрано, решения нет
    BUDGET_EXCEEDED = "budget_exceeded"  # поиск прерван по лимиту узлов


@dataclass
class SearchResult:
    """Итог поиска. Исчерпание дерева считается обычным результатом, а не ошибкой."""
    status: SearchStatus
    moves: List[Move] = field(default_factory=list)
    stats: SolverStats = field(default_factory=SolverStats)
    final_board: Optional[TriangleBoard] = None

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def jumps(self) -> int:
        """Количество прыжков без учёта снятия первого колышка."""
        return max(len(self.moves) - 1, 0)


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели наследуют от него и реализуют метод solve().
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()

    @abstractmethod
    def solve(self, first_slot: int) -> SearchResult:
        """
        Решает головоломку.

        Args:
            first_slot: лунка, с которой снимается первый колышек

        Returns:
            SearchResult
        """
        pass

    def _log(self, message: str) -> None:
        """INFO при verbose=True, иначе DEBUG."""
        message = f"[{self.__class__.__name__}] {message}"
        if self.verbose:
            self.logger.info(message)
        else:
            self.logger.debug(message)
