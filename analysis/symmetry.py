"""
analysis/symmetry.py

Симметрии треугольной доски.

Треугольник имеет 6 симметрий: 3 поворота × 2 отражения.
Лунку (row, col) удобно описывать тремя «расстояниями до сторон»
(col, row - col, 4 - row), сумма которых всегда равна 4.
Поворот циклически сдвигает тройку, отражение меняет местами
первые две координаты.
"""

from typing import List, Tuple

from core.utils import ROWS, SLOT_COUNT, coords_to_slot, slot_to_coords

Permutation = Tuple[int, ...]


def _to_barycentric(slot: int) -> Tuple[int, int, int]:
    row, col = slot_to_coords(slot)
    return col, row - col, ROWS - 1 - row


def _from_barycentric(a: int, b: int, d: int) -> int:
    row = ROWS - 1 - d
    return coords_to_slot(row, a)


def rotate_120(slot: int) -> int:
    """Поворот на 120°."""
    a, b, d = _to_barycentric(slot)
    return _from_barycentric(b, d, a)


def reflect(slot: int) -> int:
    """Отражение относительно вертикальной оси."""
    a, b, d = _to_barycentric(slot)
    return _from_barycentric(b, a, d)


def _build_permutations() -> List[Permutation]:
    permutations = []
    current = tuple(range(SLOT_COUNT))
    for _ in range(3):
        permutations.append(current)
        permutations.append(tuple(reflect(s) for s in current))
        current = tuple(rotate_120(s) for s in current)
    return permutations


# SYMMETRIES[k][i]: куда переходит лунка i при k-й симметрии
SYMMETRIES: List[Permutation] = _build_permutations()


def transform_mask(mask: int, permutation: Permutation) -> int:
    """Применяет перестановку лунок к битовой маске колышков."""
    result = 0
    for slot in range(SLOT_COUNT):
        if mask & (1 << slot):
            result |= 1 << permutation[slot]
    return result


def canonical_mask(mask: int) -> int:
    """
    Каноническая форма позиции (минимальная маска из 6 симметрий).
    Используется как ключ для мемо тупиковых позиций.
    """
    return min(transform_mask(mask, p) for p in SYMMETRIES)


def count_symmetries(mask: int) -> int:
    """Число различных образов позиции; меньше 6 для симметричных позиций."""
    return len({transform_mask(mask, p) for p in SYMMETRIES})
