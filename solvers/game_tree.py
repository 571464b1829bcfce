"""
solvers/game_tree.py

Узел дерева игры и восстановление истории ходов.

Поиск в глубину идёт без явной отмены ходов: у каждого узла своя
копия доски, поэтому подъём к родителю просто продолжает перебор
его детей с того места, где он остановился.
"""

from typing import Callable, Dict, List, Optional, Union

from core.board import TriangleBoard
from core.moves import Jump, Move

# Метка полностью перебранной ветки: ссылка на поддерево освобождается
EXPLORED = object()

Child = Union['GameNode', object, None]


def mask_after_jump(mask: int, jump: Jump) -> int:
    """Маска колышков после прыжка, без построения доски."""
    return mask ^ (1 << jump.jump_from) ^ (1 << jump.jump_over) ^ (1 << jump.jump_to)


class GameNode:
    """
    Узел дерева игры.

    children: {Jump: None | GameNode | EXPLORED}
        None: ветка ещё не исследована;
        GameNode: ветка исследуется сейчас;
        EXPLORED: ветка исчерпана или отсечена мемо.
    """
    __slots__ = ('parent', 'move', 'board', 'depth', 'children')

    def __init__(self, parent: Optional['GameNode'], move: Move, board: TriangleBoard):
        """
        Args:
            parent: родительский узел, None для корня
            move: ход, который приводит к этому узлу
            board: доска родителя (копия); ход применяется к ней здесь
        """
        # IllegalMoveError здесь означает ошибку генерации ходов
        move.apply(board)

        self.parent = parent
        self.move = move
        self.board = board
        self.depth = 0 if parent is None else parent.depth + 1

        self.children: Dict[Jump, Child] = {}
        for jump_from, jumps in board.all_legal_jumps().items():
            for jump_over, jump_to in jumps.items():
                self.children[Jump(jump_from, jump_over, jump_to)] = None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_solved(self) -> bool:
        return self.board.peg_count == 1

    @property
    def is_exhausted(self) -> bool:
        return all(child is EXPLORED for child in self.children.values())

    def pending_moves(self) -> List[Jump]:
        """Ходы, ветки которых ещё не начаты."""
        return [jump for jump, child in self.children.items() if child is None]

    def next_node(self, skip: Optional[Callable[[int], bool]] = None) -> Optional['GameNode']:
        """
        Следующий узел для обхода.

        Возвращает нового ребёнка для первой неисследованной ветки либо
        родителя, если все ветки исчерпаны. None у корня означает,
        что дерево перебрано полностью.

        Args:
            skip: предикат по маске доски ребёнка; True, если ветка заведомо
                  тупиковая и помечается перебранной без построения узла
        """
        mask = None
        for jump, child in self.children.items():
            if child is EXPLORED:
                continue
            if child is not None:
                # Обход вернулся сюда, значит поддерево ребёнка перебрано
                self.children[jump] = EXPLORED
                continue
            if skip is not None:
                if mask is None:
                    mask = self.board.occupancy_mask()
                if skip(mask_after_jump(mask, jump)):
                    self.children[jump] = EXPLORED
                    continue
            return self._init_child_node(jump)

        return self.parent

    def _init_child_node(self, jump: Jump) -> 'GameNode':
        """Создаёт ребёнка с собственной копией доски."""
        node = GameNode(self, jump, self.board.copy())
        self.children[jump] = node
        return node

    def __repr__(self) -> str:
        return f"GameNode({self.move}, depth={self.depth}, pegs={self.board.peg_count})"


def jump_history(node: GameNode) -> List[Move]:
    """
    Ходы от начала партии до узла в хронологическом порядке.

    Args:
        node: узел дерева

    Returns:
        [RemoveFirst, Jump, Jump, ...]
    """
    history = []
    while node is not None:
        history.append(node.move)
        node = node.parent
    history.reverse()
    return history
