"""
peg_io/visualizer.py

Визуализация треугольной доски и решений.
"""

from typing import List, Optional, Sequence

from core.board import TriangleBoard
from core.moves import Move
from core.utils import HOLE, PEG, ROWS, row_slots


def display_board(board: TriangleBoard, show_numbers: bool = False) -> str:
    """
    Текстовое представление доски в виде треугольника.

    Args:
        board: доска
        show_numbers: выводить номера лунок вместо символов

    Returns:
        Строка для вывода
    """
    width = 2 if show_numbers else 1
    lines = []
    for row in range(ROWS):
        cells = []
        for slot in row_slots(row):
            if show_numbers:
                cells.append(f"{slot:>{width}}")
            else:
                cells.append(PEG if board.has_peg(slot) else HOLE)
        indent = " " * ((ROWS - 1 - row) * (width + 1) // 2)
        lines.append(indent + " ".join(cells))
    return "\n".join(lines)


def format_history(moves: Sequence[Move]) -> str:
    """Компактная история: [4, [11, 7, 4], [2, 4, 7], ...]."""
    parts = []
    for move in moves:
        item = move.to_history()
        if isinstance(item, int):
            parts.append(str(item))
        else:
            parts.append("[" + ", ".join(str(slot) for slot in item) + "]")
    return "[" + ", ".join(parts) + "]"


def format_solution(moves: Optional[Sequence[Move]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов или None

    Returns:
        Форматированная строка
    """
    if not moves:
        return "❌ Решение не найдено"

    lines = [f"✅ Найдено решение за {len(moves) - 1} прыжков:"]
    for i, move in enumerate(moves):
        lines.append(f"  {i:2}. {move}")
    return "\n".join(lines)


def format_replay(moves: Sequence[Move]) -> List[str]:
    """Доска после каждого хода, начиная с полной."""
    board = TriangleBoard()
    frames = [display_board(board)]
    for move in moves:
        move.apply(board)
        frames.append(f"{move}\n{display_board(board)}")
    return frames
