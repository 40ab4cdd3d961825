"""
Инфраструктурный слой: хранилище в памяти, единица работы и логгер.
"""

from .loggers import ConsoleLogger
from .repositories import (
    InMemoryAppointmentRepository,
    InMemoryCapacityLedger,
    InMemoryCenterRepository,
    InMemoryUserRepository,
)
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "ConsoleLogger",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
    "InMemoryCenterRepository",
    "InMemoryCapacityLedger",
    "InMemoryAppointmentRepository",
]
