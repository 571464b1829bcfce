"""
core - Ядро треугольного Peg Solitaire

Доска, лунки, ходы и константы топологии.
"""

from .board import Slot, TriangleBoard
from .moves import Jump, Move, RemoveFirst
from .utils import (
    SLOT_COUNT, ROWS, TRIANGLE_JUMPS, FULL_MASK, PEG, HOLE,
    is_valid_slot, slot_to_coords, coords_to_slot, row_slots, all_jump_triples
)

__all__ = [
    'Slot', 'TriangleBoard',
    'Jump', 'Move', 'RemoveFirst',
    'SLOT_COUNT', 'ROWS', 'TRIANGLE_JUMPS', 'FULL_MASK', 'PEG', 'HOLE',
    'is_valid_slot', 'slot_to_coords', 'coords_to_slot', 'row_slots',
    'all_jump_triples',
]
