"""
peg_io - Вывод для треугольного Peg Solitaire

Экспортирует:
- Визуализация доски
- Форматирование ходов и истории
"""

from .visualizer import display_board, format_history, format_solution, format_replay

__all__ = [
    'display_board',
    'format_history',
    'format_solution',
    'format_replay',
]
