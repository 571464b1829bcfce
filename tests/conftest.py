"""
tests/conftest.py

Общая настройка тестов.
"""

import os
import sys

import pytest

# Добавляем корень проекта в путь
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.monitoring import get_monitor  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_monitor():
    """Глобальный монитор не должен переносить метрики между тестами."""
    get_monitor().reset()
    yield
