"""
solvers/tree_dfs.py

Исчерпывающий поиск в глубину по дереву игры с возвратами.
Возвращает первое найденное решение в фиксированном порядке перебора.
"""

import time
from typing import Optional, Set

from .base import BaseSolver, SearchResult, SearchStatus, SolverStats
from .game_tree import GameNode, jump_history
from analysis.symmetry import canonical_mask
from core.board import TriangleBoard
from core.moves import RemoveFirst
from core.utils import is_valid_slot
from utils.error_handling import InvalidSlotError
from utils.monitoring import get_monitor, monitor_time

DEFAULT_MAX_NODES = 2_000_000


class GameTreeSolver(BaseSolver):
    """
    DFS решатель по дереву GameNode.

    Особенности:
    - Ленивое построение детей, по одному за шаг
    - Возврат к родителю, когда все ветки узла перебраны
    - Лимит на число построенных узлов
    - Опциональное мемо тупиковых позиций (с учётом симметрий);
      отсекаются только ветки без решения, поэтому ответ не меняется
    """

    def __init__(self, max_nodes: Optional[int] = DEFAULT_MAX_NODES,
                 use_memo: bool = False, use_symmetry: bool = True,
                 verbose: bool = False):
        super().__init__(verbose)
        if max_nodes is not None and max_nodes < 1:
            raise ValueError("max_nodes должен быть положительным")
        self.max_nodes = max_nodes
        self.use_memo = use_memo
        self.use_symmetry = use_symmetry
        self.dead_states: Set[int] = set()

    @monitor_time('game_tree_solve')
    def solve(self, first_slot: int) -> SearchResult:
        """
        Снимает первый колышек с лунки first_slot и ищет решение.

        Raises:
            InvalidSlotError: first_slot вне диапазона 0..14
        """
        if not is_valid_slot(first_slot):
            raise InvalidSlotError(first_slot)

        self._log(f"Starting game tree DFS (first slot={first_slot}, memo={self.use_memo})")
        root = GameNode(None, RemoveFirst(first_slot), TriangleBoard())
        return self.search(root)

    def search(self, root: GameNode) -> SearchResult:
        """Запускает обход дерева от уже построенного корня."""
        self.stats = SolverStats()
        self.dead_states.clear()
        start = time.perf_counter()

        status, node = self._walk(root)

        self.stats.time_elapsed = time.perf_counter() - start
        get_monitor().increment_counter('nodes_visited', self.stats.nodes_visited)

        if status is not SearchStatus.SOLVED:
            if status is SearchStatus.EXHAUSTED:
                self._log("Tree exhausted, no solution")
            else:
                self._log(f"Node budget of {self.max_nodes} exceeded")
            self._log(f"Stats: {self.stats}")
            return SearchResult(status, stats=self.stats)

        moves = jump_history(node)
        self.stats.solution_length = len(moves)
        self._log(f"Solution found: {len(moves) - 1} jumps")
        self._log(f"Stats: {self.stats}")
        return SearchResult(status, moves, self.stats, node.board)

    def _walk(self, root: GameNode):
        self.stats.nodes_visited = 1
        if root.is_solved:
            return SearchStatus.SOLVED, root

        skip = self._is_dead if self.use_memo else None
        node = root
        while True:
            next_node = node.next_node(skip)

            if next_node is None or next_node is node.parent:
                # Поддерево node перебрано целиком
                self.stats.backtracks += 1
                if self.use_memo:
                    self.dead_states.add(self._key(node.board.occupancy_mask()))
                if next_node is None:
                    return SearchStatus.EXHAUSTED, None
                node = next_node
                continue

            node = next_node
            self.stats.nodes_visited += 1
            if node.depth > self.stats.max_depth:
                self.stats.max_depth = node.depth

            if node.is_solved:
                return SearchStatus.SOLVED, node
            if self.max_nodes is not None and self.stats.nodes_visited >= self.max_nodes:
                return SearchStatus.BUDGET_EXCEEDED, None

    def _key(self, mask: int) -> int:
        if self.use_symmetry:
            return canonical_mask(mask)
        return mask

    def _is_dead(self, mask: int) -> bool:
        if self._key(mask) in self.dead_states:
            self.stats.nodes_pruned += 1
            return True
        return False
