"""
Доменный слой: объекты-значения, сущности и исключения.
"""

from .exceptions import (
    AppointmentNotFoundError,
    CapacityExhaustedError,
    DuplicateBookingError,
    DuplicateKeyError,
    ErrorKind,
    IneligibleError,
    InvalidInputError,
    NoBookingsError,
    NotFoundError,
    VaccinationDomainError,
)
from .models import Appointment, User, VaccinationCenter
from .value_objects import Age, CenterId, Day, DoseCount, UserId

__all__ = [
    # Объекты-значения
    "Age",
    "CenterId",
    "Day",
    "DoseCount",
    "UserId",
    # Сущности
    "Appointment",
    "User",
    "VaccinationCenter",
    # Исключения
    "ErrorKind",
    "VaccinationDomainError",
    "DuplicateKeyError",
    "InvalidInputError",
    "IneligibleError",
    "NotFoundError",
    "CapacityExhaustedError",
    "DuplicateBookingError",
    "AppointmentNotFoundError",
    "NoBookingsError",
]
