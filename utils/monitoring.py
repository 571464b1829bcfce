"""
utils/monitoring.py

Мониторинг производительности поиска.
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Any, Dict, List, Optional


class PerformanceMonitor:
    """Монитор производительности."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.counters: Dict[str, int] = defaultdict(int)

    def record_time(self, operation: str, elapsed: float):
        """Записывает время выполнения операции (в секундах)."""
        self.metrics[operation].append(elapsed)

    def increment_counter(self, counter: str, value: int = 1):
        self.counters[counter] += value

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """
        Возвращает статистику.

        Args:
            operation: имя операции (если None, возвращает общую статистику)

        Returns:
            Словарь со статистикой
        """
        if operation:
            times = self.metrics.get(operation)
            if not times:
                return {}
            return {
                'operation': operation,
                'count': len(times),
                'total': sum(times),
                'average': sum(times) / len(times),
                'min': min(times),
                'max': max(times),
                'last': times[-1],
            }

        return {
            'operations': {op: self.get_stats(op) for op in self.metrics},
            'counters': dict(self.counters),
            'total_operations': sum(len(times) for times in self.metrics.values()),
        }

    def reset(self):
        """Сбрасывает все метрики."""
        self.metrics.clear()
        self.counters.clear()


# Глобальный монитор
_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Возвращает глобальный монитор."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor


def monitor_time(operation: str):
    """
    Декоратор для мониторинга времени выполнения.

    Usage:
        @monitor_time('game_tree_solve')
        def solve(self, first_slot):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            monitor = get_monitor()
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                monitor.record_time(f"{operation}_error", time.perf_counter() - start)
                raise
            monitor.record_time(operation, time.perf_counter() - start)
            return result
        return wrapper
    return decorator
