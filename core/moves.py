"""
core/moves.py

Ходы треугольной доски: снятие первого колышка и прыжок.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple, Union

if TYPE_CHECKING:
    from .board import TriangleBoard


@dataclass(frozen=True)
class RemoveFirst:
    """Первый ход партии: снять колышек с полной доски."""
    slot: int

    def apply(self, board: 'TriangleBoard') -> None:
        board.remove_first(self.slot)

    def to_history(self) -> int:
        return self.slot

    def __str__(self) -> str:
        return f"снять {self.slot}"


@dataclass(frozen=True)
class Jump:
    """Прыжок: колышек из jump_from перепрыгивает jump_over и встаёт в jump_to."""
    jump_from: int
    jump_over: int
    jump_to: int

    def apply(self, board: 'TriangleBoard') -> None:
        board.apply_jump(self.jump_from, self.jump_over, self.jump_to)

    def to_history(self) -> Tuple[int, int, int]:
        return (self.jump_from, self.jump_over, self.jump_to)

    def __iter__(self):
        return iter(self.to_history())

    def __str__(self) -> str:
        return f"{self.jump_from} → {self.jump_to} (через {self.jump_over})"


Move = Union[RemoveFirst, Jump]
