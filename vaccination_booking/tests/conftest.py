"""
Общие фикстуры тестов движка бронирования.
"""

import io

import pytest

from vaccination_booking.application.services import BookingEngine
from vaccination_booking.infrastructure.loggers import ConsoleLogger
from vaccination_booking.infrastructure.unit_of_work import InMemoryUnitOfWork


@pytest.fixture
def log_stream() -> io.StringIO:
    """Поток, в который пишет тестовый логгер."""
    return io.StringIO()


@pytest.fixture
def logger(log_stream: io.StringIO) -> ConsoleLogger:
    return ConsoleLogger(level="DEBUG", stream=log_stream)


@pytest.fixture
def uow(logger: ConsoleLogger) -> InMemoryUnitOfWork:
    """Фикстура, предоставляющая чистое хранилище."""
    return InMemoryUnitOfWork(logger=logger)


@pytest.fixture
def engine(uow: InMemoryUnitOfWork, logger: ConsoleLogger) -> BookingEngine:
    """Движок бронирования с пустым хранилищем."""
    return BookingEngine(uow, logger)


@pytest.fixture
def seeded_engine(engine: BookingEngine) -> BookingEngine:
    """Движок с центром C1 и двумя совершеннолетними пользователями U1, U2."""
    assert engine.register_center("KA", "Bangalore", "C1").ok
    assert engine.register_user("U1", "Alice", "F", "30", "KA", "Bangalore").ok
    assert engine.register_user("U2", "Bob", "M", "45", "KA", "Bangalore").ok
    return engine
