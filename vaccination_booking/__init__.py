"""
Система записи на вакцинацию.

Хранит в памяти пользователей, прививочные центры, ежедневную вместимость
центров и записи на приём. Все операции движка бронирования выполняются
под одной общей блокировкой.
"""

from . import application, domain, infrastructure, interfaces

__version__ = "1.0.0"

__all__ = [
    "application",
    "domain",
    "infrastructure",
    "interfaces",
]
