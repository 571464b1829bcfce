"""
analysis - Анализ позиций треугольной доски.
"""

from .symmetry import (
    SYMMETRIES, rotate_120, reflect,
    transform_mask, canonical_mask, count_symmetries
)

__all__ = [
    'SYMMETRIES', 'rotate_120', 'reflect',
    'transform_mask', 'canonical_mask', 'count_symmetries',
]
