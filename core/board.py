"""
core/board.py

Треугольная доска из 15 лунок.
"""

from typing import Dict, Iterable, List

from utils.error_handling import IllegalMoveError, InvalidSlotError
from .utils import SLOT_COUNT, TRIANGLE_JUMPS, is_valid_slot


class Slot:
    """
    Одна лунка доски.

    Номер и словарь прыжков {jump_over: jump_to} неизменны,
    меняется только наличие колышка.
    """
    __slots__ = ('_index', '_adjacency', 'occupied')

    def __init__(self, index: int, adjacency: Dict[int, int]):
        self._index = index
        self._adjacency = dict(adjacency)
        self.occupied = True

    @property
    def index(self) -> int:
        return self._index

    @property
    def adjacency(self) -> Dict[int, int]:
        return dict(self._adjacency)

    def jumps(self):
        """Пары (jump_over, jump_to) в порядке объявления."""
        return self._adjacency.items()

    def __repr__(self) -> str:
        return f"Slot({self._index}, {'peg' if self.occupied else 'hole'})"


def _check_slot(slot: int) -> None:
    if not is_valid_slot(slot):
        raise InvalidSlotError(slot)


class TriangleBoard:
    """
    Состояние доски: 15 лунок и счётчик колышков.

    peg_count обновляется вместе с каждой мутацией и всегда
    совпадает с подсчётом занятых лунок.
    """
    __slots__ = ('slots', 'peg_count')

    def __init__(self, removed: Iterable[int] = ()):
        """
        Args:
            removed: лунки, из которых колышки уже сняты
        """
        self.slots: List[Slot] = [Slot(i, jumps) for i, jumps in enumerate(TRIANGLE_JUMPS)]
        self.peg_count = SLOT_COUNT

        for slot in removed:
            _check_slot(slot)
            if not self.slots[slot].occupied:
                raise InvalidSlotError(slot, "указана повторно")
            self.slots[slot].occupied = False
            self.peg_count -= 1

    def has_peg(self, slot: int) -> bool:
        _check_slot(slot)
        return self.slots[slot].occupied

    def apply_jump(self, jump_from: int, jump_over: int, jump_to: int) -> None:
        """
        Выполняет прыжок на месте.

        При нарушении условий доска не меняется.

        Raises:
            InvalidSlotError: номер лунки вне диапазона
            IllegalMoveError: прыжка нет в топологии или нарушена занятость
        """
        for slot in (jump_from, jump_over, jump_to):
            _check_slot(slot)

        slots = self.slots
        if dict(slots[jump_from].jumps()).get(jump_over) != jump_to:
            raise IllegalMoveError(
                f"Прыжка {jump_from} → {jump_to} через {jump_over} нет на доске"
            )
        if not slots[jump_from].occupied:
            raise IllegalMoveError(f"В лунке {jump_from} нет колышка")
        if not slots[jump_over].occupied:
            raise IllegalMoveError(f"В лунке {jump_over} нет колышка")
        if slots[jump_to].occupied:
            raise IllegalMoveError(f"Лунка {jump_to} занята")

        slots[jump_from].occupied = False
        slots[jump_over].occupied = False
        slots[jump_to].occupied = True
        self.peg_count -= 1

    def remove_first(self, slot: int) -> None:
        """Первый ход партии: снимает колышек с полной доски."""
        _check_slot(slot)
        if self.peg_count != SLOT_COUNT:
            raise IllegalMoveError(
                f"Первый колышек снимается только с полной доски (колышков: {self.peg_count})"
            )
        self.slots[slot].occupied = False
        self.peg_count -= 1

    def legal_jumps_from(self, slot: int) -> Dict[int, int]:
        """
        Все возможные прыжки из лунки.

        Returns:
            {jump_over: jump_to} в порядке объявления топологии
        """
        _check_slot(slot)
        if not self.slots[slot].occupied:
            raise IllegalMoveError(f"В лунке {slot} нет колышка")

        slots = self.slots
        return {
            jump_over: jump_to
            for jump_over, jump_to in slots[slot].jumps()
            if slots[jump_over].occupied and not slots[jump_to].occupied
        }

    def all_legal_jumps(self) -> Dict[int, Dict[int, int]]:
        """Прыжки по всем занятым лункам; лунки без прыжков пропускаются."""
        result = {}
        for slot in self.slots:
            if not slot.occupied:
                continue
            jumps = self.legal_jumps_from(slot.index)
            if jumps:
                result[slot.index] = jumps
        return result

    def removed_slots(self) -> List[int]:
        return [slot.index for slot in self.slots if not slot.occupied]

    def occupied_slots(self) -> List[int]:
        return [slot.index for slot in self.slots if slot.occupied]

    def occupancy_mask(self) -> int:
        """Битовая маска: бит i установлен, если в лунке i есть колышек."""
        mask = 0
        for slot in self.slots:
            if slot.occupied:
                mask |= 1 << slot.index
        return mask

    def count_pegs_by_scan(self) -> int:
        return sum(1 for slot in self.slots if slot.occupied)

    def copy(self) -> 'TriangleBoard':
        """Независимая копия текущего состояния."""
        return TriangleBoard(removed=self.removed_slots())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriangleBoard):
            return False
        return self.occupancy_mask() == other.occupancy_mask()

    def __hash__(self) -> int:
        return hash(self.occupancy_mask())

    def __repr__(self) -> str:
        return f"TriangleBoard({self.peg_count} pegs, removed={self.removed_slots()})"
