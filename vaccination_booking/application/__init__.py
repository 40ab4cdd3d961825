"""
Слой приложения: сервис бронирования, порты и результаты операций.
"""

from .interfaces import ILogger
from .repositories import (
    AppointmentRepository,
    CapacityLedger,
    CenterRepository,
    UnitOfWork,
    UserRepository,
)
from .results import EngineError, OperationResult
from .services import BookingEngine

__all__ = [
    "BookingEngine",
    "EngineError",
    "OperationResult",
    "ILogger",
    "UnitOfWork",
    "UserRepository",
    "CenterRepository",
    "CapacityLedger",
    "AppointmentRepository",
]
