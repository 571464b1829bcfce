"""
solutions/verify.py

Проверка решений повторным проигрыванием ходов на новой доске.
"""

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from core.board import TriangleBoard
from core.moves import Jump, Move, RemoveFirst
from utils.error_handling import SolverError

HistoryItem = Union[int, Tuple[int, int, int]]


def replay(moves: Iterable[Move]) -> TriangleBoard:
    """
    Проигрывает ходы на полной доске.

    Raises:
        InvalidSlotError, IllegalMoveError: ход недопустим
    """
    board = TriangleBoard()
    for move in moves:
        move.apply(board)
    return board


def verify_solution(moves: Sequence[Move], expected_final: Optional[TriangleBoard] = None) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - первый ход RemoveFirst, остальные Jump;
    - каждый ход допустим на текущей доске;
    - после всех ходов остаётся ровно один колышек;
    - если задан expected_final, финальная доска должна совпасть с ним.
    """
    if not moves or not isinstance(moves[0], RemoveFirst):
        return False
    if not all(isinstance(move, Jump) for move in moves[1:]):
        return False

    try:
        board = replay(moves)
    except SolverError:
        return False

    if board.peg_count != 1:
        return False
    if expected_final is not None and board != expected_final:
        return False
    return True


def moves_from_history(history: Iterable[HistoryItem]) -> List[Move]:
    """
    Разбирает историю в компактном виде: [4, [11, 7, 4], ...].
    Целое число означает снятие первого колышка, тройка означает прыжок.
    """
    moves: List[Move] = []
    for item in history:
        if isinstance(item, int):
            moves.append(RemoveFirst(item))
        elif len(item) == 3:
            moves.append(Jump(*item))
        else:
            raise ValueError(f"Не удалось разобрать ход: {item!r}")
    return moves
