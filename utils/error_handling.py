"""
utils/error_handling.py

Исключения решателя и безопасный запуск поиска.
"""

from typing import Any

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidSlotError(SolverError):
    """Номер лунки вне диапазона 0..14 или указан повторно."""

    def __init__(self, slot, reason: str = "вне диапазона 0..14"):
        self.slot = slot
        super().__init__(f"Некорректная лунка {slot!r}: {reason}")


class IllegalMoveError(SolverError):
    """
    Ход нарушает правила доски.

    Сгенерированные решателем ходы всегда допустимы, так что это
    исключение означает ошибку в логике, а не ошибку пользователя.
    """
    pass


def safe_solve(solver, first_slot: int, default: Any = None):
    """
    Выполнение solve с логированием ошибок решателя.

    Args:
        solver: решатель
        first_slot: лунка, с которой снимается первый колышек
        default: значение при SolverError

    Returns:
        SearchResult или default
    """
    try:
        return solver.solve(first_slot)
    except SolverError as e:
        logger = get_logger()
        logger.error(f"Ошибка решателя {solver.__class__.__name__}: {str(e)}")
        return default
    except Exception as e:
        logger = get_logger()
        logger.error(
            f"Неожиданная ошибка в {solver.__class__.__name__}: {str(e)}",
            exc_info=True
        )
        raise
