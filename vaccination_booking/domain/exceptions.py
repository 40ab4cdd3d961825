"""
Исключения доменного слоя.

Каждому виду ошибки из `ErrorKind` соответствует свой класс исключения.
Сервис приложения перехватывает `VaccinationDomainError` на своей границе
и превращает его в структурированный результат операции.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Виды ошибок движка бронирования."""

    DUPLICATE_KEY = "DuplicateKey"
    INVALID_INPUT = "InvalidInput"
    INELIGIBLE = "Ineligible"
    NOT_FOUND = "NotFound"
    CAPACITY_EXHAUSTED = "CapacityExhausted"
    DUPLICATE_BOOKING = "DuplicateBooking"
    APPOINTMENT_NOT_FOUND = "AppointmentNotFound"
    NO_BOOKINGS = "NoBookings"


class VaccinationDomainError(Exception):
    """Базовое исключение для доменных ошибок."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateKeyError(VaccinationDomainError):
    """Идентификатор уже занят."""

    kind = ErrorKind.DUPLICATE_KEY


class InvalidInputError(VaccinationDomainError):
    """Числовое поле не удалось разобрать."""

    kind = ErrorKind.INVALID_INPUT


class IneligibleError(VaccinationDomainError):
    """Пользователь не проходит по возрасту."""

    kind = ErrorKind.INELIGIBLE


class NotFoundError(VaccinationDomainError):
    """Пользователь или центр не найден."""

    kind = ErrorKind.NOT_FOUND


class CapacityExhaustedError(VaccinationDomainError):
    """На этот день не осталось доз."""

    kind = ErrorKind.CAPACITY_EXHAUSTED


class DuplicateBookingError(VaccinationDomainError):
    """Пользователь уже записан в этот центр на этот день."""

    kind = ErrorKind.DUPLICATE_BOOKING


class AppointmentNotFoundError(VaccinationDomainError):
    """Отменяемая запись не найдена."""

    kind = ErrorKind.APPOINTMENT_NOT_FOUND


class NoBookingsError(VaccinationDomainError):
    """Запрос списка записей ничего не вернул."""

    kind = ErrorKind.NO_BOOKINGS
