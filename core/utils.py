"""
core/utils.py

Общие константы треугольной доски Peg Solitaire (15 лунок).

Нумерация лунок сверху вниз, слева направо:

        0
       1 2
      3 4 5
     6 7 8 9
   10 11 12 13 14
"""

from typing import Dict, List, Tuple

SLOT_COUNT = 15
ROWS = 5

# Топология прыжков: лунка -> {через какую прыгаем: куда приземляемся}
# Порядок ключей определяет порядок перебора в поиске
TRIANGLE_JUMPS: Tuple[Dict[int, int], ...] = (
    {1: 3, 2: 5},
    {3: 6, 4: 8},
    {4: 7, 5: 9},
    {4: 5, 1: 0, 6: 10, 7: 12},
    {7: 11, 8: 13},
    {2: 0, 4: 3, 8: 12, 9: 14},
    {3: 1, 7: 8},
    {4: 2, 8: 9},
    {4: 1, 7: 6},
    {5: 2, 8: 7},
    {6: 3, 11: 12},
    {7: 4, 12: 13},
    {11: 10, 7: 3, 8: 5, 13: 14},
    {12: 11, 8: 4},
    {13: 12, 9: 5},
)

# Символы для отображения
PEG = '●'       # Колышек
HOLE = '○'      # Пустая лунка

FULL_MASK = (1 << SLOT_COUNT) - 1


def is_valid_slot(slot: int) -> bool:
    """Проверяет, что номер лунки лежит в диапазоне 0..14."""
    return isinstance(slot, int) and 0 <= slot < SLOT_COUNT


def slot_to_coords(slot: int) -> Tuple[int, int]:
    """Номер лунки → (row, col), где 0 <= col <= row."""
    row = 0
    while slot > row:
        slot -= row + 1
        row += 1
    return row, slot


def coords_to_slot(row: int, col: int) -> int:
    """(row, col) → номер лунки."""
    return row * (row + 1) // 2 + col


def row_slots(row: int) -> List[int]:
    """Номера лунок в ряду row."""
    start = coords_to_slot(row, 0)
    return list(range(start, start + row + 1))


def all_jump_triples() -> List[Tuple[int, int, int]]:
    """Все тройки (from, over, to) топологии в порядке объявления."""
    return [
        (jump_from, jump_over, jump_to)
        for jump_from, jumps in enumerate(TRIANGLE_JUMPS)
        for jump_over, jump_to in jumps.items()
    ]
