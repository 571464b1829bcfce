"""
solutions - Проверка найденных решений.
"""

from .verify import replay, verify_solution, moves_from_history

__all__ = [
    'replay',
    'verify_solution',
    'moves_from_history',
]
