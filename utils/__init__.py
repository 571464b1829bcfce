"""
utils - Логирование, ошибки и мониторинг решателя.
"""

from .logging import SolverLogger, get_logger, setup_file_logging
from .error_handling import SolverError, InvalidSlotError, IllegalMoveError, safe_solve
from .monitoring import PerformanceMonitor, get_monitor, monitor_time

__all__ = [
    'SolverLogger', 'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidSlotError', 'IllegalMoveError', 'safe_solve',
    'PerformanceMonitor', 'get_monitor', 'monitor_time',
]
